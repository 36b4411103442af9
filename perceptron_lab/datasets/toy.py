"""
Toy datasets for unit and network experiments.

These datasets are designed to:
1. Be small enough to follow by hand
2. Separate what a single unit can learn (AND, OR) from what it cannot (XOR)
3. Provide the sub-problems that let a two-level network reproduce XOR

Targets of the exclusive sub-problems are chosen so an exact linear fit
exists (a - b and b - a); thresholding that fit at 0.5 gives
"a and not b" and "b and not a".
"""

import numpy as np
from typing import Dict, List, Optional, Tuple

from .dataset import Dataset


Pairs = List[Tuple[List[float], float]]


def _build(pairs: Pairs, noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    dataset = Dataset(pairs)
    if noise > 0:
        rng = np.random.default_rng(seed)
        dataset.perturb_inputs(lambda r: r.normal(0, noise), rng)
    return dataset


def and_gate(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """AND truth table - linearly separable through the origin."""
    return _build([
        ([0.0, 0.0], 0.0),
        ([0.0, 1.0], 0.0),
        ([1.0, 0.0], 0.0),
        ([1.0, 1.0], 1.0),
    ], noise, seed)


def or_gate(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """OR truth table."""
    return _build([
        ([0.0, 0.0], 0.0),
        ([0.0, 1.0], 1.0),
        ([1.0, 0.0], 1.0),
        ([1.0, 1.0], 1.0),
    ], noise, seed)


def nand_gate(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """
    NAND truth table.

    Not learnable without a bias: the all-zero input always gives a raw
    sum of 0, which can never exceed the threshold.
    """
    return _build([
        ([0.0, 0.0], 1.0),
        ([0.0, 1.0], 1.0),
        ([1.0, 0.0], 1.0),
        ([1.0, 1.0], 0.0),
    ], noise, seed)


def xor_gate(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """
    Classic XOR problem - not linearly separable.

    A single unit cannot learn it; see a_and_not_b / b_and_not_a /
    or_of_exclusive for the decomposition a network can learn.
    """
    return _build([
        ([0.0, 0.0], 0.0),
        ([0.0, 1.0], 1.0),
        ([1.0, 0.0], 1.0),
        ([1.0, 1.0], 0.0),
    ], noise, seed)


def or_margin(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """OR with the single-input cases pulled away from the axes."""
    return _build([
        ([0.0, 0.0], 0.0),
        ([1.0, 0.2], 1.0),
        ([0.2, 1.0], 1.0),
        ([1.0, 1.0], 1.0),
    ], noise, seed)


def a_and_not_b(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """First XOR sub-problem: fires only for (1, 0)."""
    return _build([
        ([0.0, 0.0], 0.0),
        ([1.0, 0.0], 1.0),
        ([0.0, 1.0], -1.0),
        ([1.0, 1.0], 0.0),
    ], noise, seed)


def b_and_not_a(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """Second XOR sub-problem: fires only for (0, 1)."""
    return _build([
        ([0.0, 0.0], 0.0),
        ([1.0, 0.0], -1.0),
        ([0.0, 1.0], 1.0),
        ([1.0, 1.0], 0.0),
    ], noise, seed)


def or_of_exclusive(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """
    OR over the decisions of the two exclusive units.

    Both units never fire together, so (1, 1) is left out.
    """
    return _build([
        ([0.0, 0.0], 0.0),
        ([1.0, 0.0], 1.0),
        ([0.0, 1.0], 1.0),
    ], noise, seed)


def patterns(noise: float = 0.0, seed: Optional[int] = None) -> Dataset:
    """
    Three-feature pattern set: the middle feature decides, the outer two
    are distractors.
    """
    return _build([
        ([0.0, 0.0, 0.0], 0.0),
        ([0.0, 0.7, 0.0], 1.0),
        ([0.0, 0.8, 0.0], 1.0),
        ([1.0, 0.0, 1.0], 0.0),
        ([1.0, 0.6, 0.0], 1.0),
        ([0.0, 0.7, 1.0], 1.0),
        ([0.0, 0.0, 0.0], 0.0),
        ([1.0, 0.0, 1.0], 0.0),
        ([1.0, 1.0, 1.0], 1.0),
    ], noise, seed)


# Dataset registry
DATASETS: Dict[str, Dict] = {
    'and': {
        'function': and_gate,
        'name': 'AND',
        'description': 'AND truth table',
        'linearly_separable': True,
    },
    'or': {
        'function': or_gate,
        'name': 'OR',
        'description': 'OR truth table',
        'linearly_separable': True,
    },
    'nand': {
        'function': nand_gate,
        'name': 'NAND',
        'description': 'NAND truth table - needs a bias a unit does not have',
        'linearly_separable': False,
    },
    'xor': {
        'function': xor_gate,
        'name': 'XOR',
        'description': 'Classic XOR problem - not learnable by a single unit',
        'linearly_separable': False,
    },
    'or_margin': {
        'function': or_margin,
        'name': 'OR (margin)',
        'description': 'OR with single-input cases pulled off the axes',
        'linearly_separable': True,
    },
    'a_and_not_b': {
        'function': a_and_not_b,
        'name': 'A AND NOT B',
        'description': 'First exclusive XOR sub-problem',
        'linearly_separable': True,
    },
    'b_and_not_a': {
        'function': b_and_not_a,
        'name': 'B AND NOT A',
        'description': 'Second exclusive XOR sub-problem',
        'linearly_separable': True,
    },
    'or_of_exclusive': {
        'function': or_of_exclusive,
        'name': 'OR of exclusive units',
        'description': 'Output unit of the XOR network',
        'linearly_separable': True,
    },
    'patterns': {
        'function': patterns,
        'name': 'Patterns',
        'description': 'Three features, the middle one decides',
        'linearly_separable': True,
    },
}


def get_dataset(name: str, **kwargs) -> Dataset:
    """
    Get a dataset by name.

    Args:
        name: Dataset name
        **kwargs: noise / seed passed to the factory

    Returns:
        Dataset
    """
    if name not in DATASETS:
        available = ', '.join(DATASETS.keys())
        raise ValueError(f"Unknown dataset '{name}'. Available: {available}")

    return DATASETS[name]['function'](**kwargs)


def list_datasets() -> Dict[str, Dict]:
    """List all available datasets with their metadata."""
    return {
        name: {k: v for k, v in info.items() if k != 'function'}
        for name, info in DATASETS.items()
    }
