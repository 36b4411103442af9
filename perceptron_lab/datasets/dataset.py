"""
Validated training data for units.

A Dataset groups input vectors with the scalar each one should produce.
All inputs share the width of the first record; anything else is rejected
when the dataset is built, never later.
"""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from ..core.errors import EmptyDataError, LengthMismatchError


@dataclass(frozen=True)
class Record:
    """One (input, expected) training pair. The input array is read-only."""
    input: np.ndarray
    expected: float


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


class Dataset:
    """
    An ordered, validated collection of training records.

    Example:
        data = Dataset([
            ([0.0, 0.0], 0.0),
            ([1.0, 1.0], 1.0),
        ])
        data.input_length  # 2
    """

    def __init__(self, pairs: Sequence[Tuple[Sequence[float], float]]):
        pairs = list(pairs)
        if not pairs or len(pairs[0][0]) == 0:
            raise EmptyDataError()

        # The first pair decides the width
        self._input_length = len(pairs[0][0])

        self._records: List[Record] = []
        for index, (values, expected) in enumerate(pairs):
            if len(values) != self._input_length:
                raise LengthMismatchError(index, len(values), self._input_length)
            self._records.append(Record(
                input=_frozen(values),
                expected=float(expected),
            ))

    @property
    def input_length(self) -> int:
        """Common width of every input vector."""
        return self._input_length

    @property
    def record_count(self) -> int:
        return len(self._records)

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    @property
    def inputs(self) -> np.ndarray:
        """Inputs stacked into shape (record_count, input_length)."""
        return np.vstack([r.input for r in self._records])

    @property
    def targets(self) -> np.ndarray:
        return np.array([r.expected for r in self._records])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __repr__(self):
        return f"Dataset(records={len(self)}, input_length={self.input_length})"

    def perturb_inputs(
        self,
        noise_fn: Callable[[np.random.Generator], float],
        rng: Optional[np.random.Generator] = None
    ) -> None:
        """
        Add noise to every input scalar, in place.

        This is the only way a dataset changes after construction; each
        record is replaced with a new read-only input array.

        Args:
            noise_fn: Called once per scalar with the random generator,
                returns the value to add
            rng: Random generator (a fresh unseeded one if omitted)
        """
        if rng is None:
            rng = np.random.default_rng()

        for index, record in enumerate(self._records):
            noisy = record.input.copy()
            for i in range(len(noisy)):
                noisy[i] += noise_fn(rng)
            self._records[index] = Record(input=_frozen(noisy), expected=record.expected)

    def copy(self) -> 'Dataset':
        """Independent copy, safe to perturb without touching this dataset."""
        return Dataset([(r.input.copy(), r.expected) for r in self._records])
