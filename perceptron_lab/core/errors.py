"""
Exception hierarchy for perceptron lab.

Validation problems (bad datasets, mismatched vector widths) are raised
eagerly and also subclass ValueError. Training failures are normally
reported through TrainingResult.status; the TrainingError classes exist
for callers that prefer TrainingResult.raise_for_status().
"""

from typing import Optional


class PerceptronError(Exception):
    """Base class for all perceptron lab errors."""


class DatasetError(PerceptronError, ValueError):
    """A dataset could not be constructed from the given pairs."""


class EmptyDataError(DatasetError):
    """No pairs were given, or the first pair has an empty input."""

    def __init__(self, message: str = "dataset needs at least one pair with a non-empty input"):
        super().__init__(message)


class LengthMismatchError(DatasetError):
    """A record's input width disagrees with the first record's."""

    def __init__(self, index: int, length: int, expected: Optional[int] = None):
        self.index = index
        self.length = length
        self.expected = expected
        msg = f"record {index} has input length {length}"
        if expected is not None:
            msg += f", expected {expected}"
        super().__init__(msg)


class InputLengthError(PerceptronError, ValueError):
    """An input vector does not match the width a unit or network was built for."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"input length {actual} does not match expected length {expected}")


class TrainingError(PerceptronError):
    """Training ended without reaching the error margin."""

    def __init__(self, err_sum: float, epochs: int, learning_rate: float):
        self.err_sum = err_sum
        self.epochs = epochs
        self.learning_rate = learning_rate
        super().__init__(
            f"{self.__class__.__name__} after {epochs} epochs "
            f"(learning_rate={learning_rate:.6f}, err_sum={err_sum:.4f})"
        )


class ErrStabilizedError(TrainingError):
    pass


class ErrRisingError(TrainingError):
    pass


class OutOfIterationsError(TrainingError):
    pass


class OscillatingError(TrainingError):
    pass


class OutOfPrecisionError(TrainingError):
    pass
