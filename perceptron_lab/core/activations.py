"""
Activation functions applied to a unit's raw sum during training.

Only two are available. The identity keeps the trainer a plain delta rule;
the base-2 logistic squashes the raw sum into (0, 1) before the error is
taken.
"""

import numpy as np
from typing import Callable, Dict


def identity(x):
    """Identity activation - the raw sum is used directly."""
    return x


def logistic(x):
    """Logistic squashing of base 2: 1 / (1 + 2^-x)."""
    # Clip to avoid overflow
    x = np.clip(x, -1000, 1000)
    return 1 / (1 + np.exp2(-x))


class Activation:
    """Wrapper for an activation function with its metadata."""

    def __init__(self, name: str, func: Callable, properties: Dict):
        self.name = name
        self.func = func
        self.properties = properties

    def __call__(self, x):
        return self.func(x)

    def __repr__(self):
        return f"Activation({self.name})"


ACTIVATIONS: Dict[str, Activation] = {
    'identity': Activation(
        name='identity',
        func=identity,
        properties={
            'bounded': False,
            'range': (-np.inf, np.inf),
            'description': 'Raw weighted sum - plain delta rule',
        }
    ),
    'logistic': Activation(
        name='logistic',
        func=logistic,
        properties={
            'bounded': True,
            'range': (0, 1),
            'description': 'Base-2 logistic squashing of the weighted sum',
        }
    ),
}


def get_activation(name: str) -> Activation:
    """Get an activation function by name."""
    if name not in ACTIVATIONS:
        available = ', '.join(ACTIVATIONS.keys())
        raise ValueError(f"Unknown activation '{name}'. Available: {available}")
    return ACTIVATIONS[name]
