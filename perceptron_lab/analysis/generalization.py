"""
Generalization metrics for trained units.

Provides functions for computing:
- Accuracy of a unit's decisions on a dataset
- Noise robustness (accuracy on inputs perturbed with uniform noise)
"""

import numpy as np
from typing import Dict, List, Optional

from ..core.unit import Unit
from ..datasets.dataset import Dataset


def accuracy(unit: Unit, dataset: Dataset) -> float:
    """
    Fraction of records the unit classifies correctly.

    A record counts as positive when its expected value exceeds 0.5.
    """
    correct = sum(
        unit.decide(record.input) == (record.expected > 0.5)
        for record in dataset
    )
    return correct / len(dataset)


def add_uniform_noise(
    dataset: Dataset,
    noise_level: float,
    rng: Optional[np.random.Generator] = None
) -> Dataset:
    """
    Copy of the dataset with uniform noise in [-noise_level, noise_level)
    added to every input value.
    """
    noisy = dataset.copy()
    if noise_level > 0:
        noisy.perturb_inputs(lambda r: r.uniform(-noise_level, noise_level), rng)
    return noisy


def noise_robustness(
    unit: Unit,
    dataset: Dataset,
    noise_levels: List[float],
    n_trials: int = 1,
    rng: Optional[np.random.Generator] = None
) -> Dict[str, float]:
    """
    Compute accuracy at different noise levels.

    Args:
        unit: Trained unit
        dataset: Clean evaluation data (left untouched)
        noise_levels: Noise amplitudes to test
        n_trials: Number of noisy copies to average per level
        rng: Random generator shared by all trials

    Returns:
        Dictionary mapping noise level (as string) to accuracy
    """
    if rng is None:
        rng = np.random.default_rng()

    results = {}

    for noise_level in noise_levels:
        if noise_level == 0.0:
            # No noise - just compute accuracy once
            acc = accuracy(unit, dataset)
        else:
            accs = [
                accuracy(unit, add_uniform_noise(dataset, noise_level, rng))
                for _ in range(n_trials)
            ]
            acc = np.mean(accs)

        results[str(noise_level)] = float(acc)

    return results
