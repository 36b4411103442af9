"""Analysis of trained units: accuracy and robustness to noisy inputs."""

from .generalization import (
    accuracy,
    add_uniform_noise,
    noise_robustness,
)

__all__ = [
    'accuracy',
    'add_uniform_noise',
    'noise_robustness',
]
