"""Training data for units and networks."""

from .dataset import Dataset, Record
from .toy import (
    and_gate,
    or_gate,
    nand_gate,
    xor_gate,
    or_margin,
    a_and_not_b,
    b_and_not_a,
    or_of_exclusive,
    patterns,
    DATASETS,
    get_dataset,
    list_datasets,
)

__all__ = [
    'Dataset',
    'Record',
    'and_gate',
    'or_gate',
    'nand_gate',
    'xor_gate',
    'or_margin',
    'a_and_not_b',
    'b_and_not_a',
    'or_of_exclusive',
    'patterns',
    'DATASETS',
    'get_dataset',
    'list_datasets',
]
