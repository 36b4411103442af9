"""
Perceptron Lab - linear-threshold units and small trees of them.

Shows what a single unit can learn (AND, OR) and what it cannot (XOR),
and how a two-level network of independently trained units gets XOR right.
"""

from .core import (
    Unit,
    WeightInit,
    Network,
    TrainingConfig,
    TrainingResult,
    TrainingStatus,
)
from .datasets import Dataset, get_dataset

__version__ = '0.1.0'

__all__ = [
    'Unit',
    'WeightInit',
    'Network',
    'TrainingConfig',
    'TrainingResult',
    'TrainingStatus',
    'Dataset',
    'get_dataset',
]
