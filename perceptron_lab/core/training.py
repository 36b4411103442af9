"""
Training for single units.

Two procedures live here:
- DeltaRuleTrainer: the epoch loop. Every record nudges every weight by
  learning_rate * input * error, and the signed error of the epoch decides
  whether training converged, stalled or diverged.
- search_learning_rate: a bisection over the learning rate that uses the
  trainer's final error as its objective.

Neither raises on a failed run. Both return a TrainingResult whose status
says how training ended, together with the error that was reached, so the
caller can decide whether a "failed" unit is still usable.
"""

import math
import numpy as np
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Type

from .activations import get_activation
from .errors import (
    InputLengthError,
    TrainingError,
    ErrStabilizedError,
    ErrRisingError,
    OutOfIterationsError,
    OscillatingError,
    OutOfPrecisionError,
)

if TYPE_CHECKING:
    from .unit import Unit
    from ..datasets.dataset import Dataset


# Epoch errors are compared at this many decimal places
ERROR_PRECISION = 2


class TrainingStatus(str, Enum):
    CONVERGED = 'converged'
    ERR_STABILIZED = 'err_stabilized'
    ERR_RISING = 'err_rising'
    OUT_OF_ITERATIONS = 'out_of_iterations'
    OSCILLATING = 'oscillating'
    OUT_OF_PRECISION = 'out_of_precision'


_STATUS_ERRORS: Dict[TrainingStatus, Type[TrainingError]] = {
    TrainingStatus.ERR_STABILIZED: ErrStabilizedError,
    TrainingStatus.ERR_RISING: ErrRisingError,
    TrainingStatus.OUT_OF_ITERATIONS: OutOfIterationsError,
    TrainingStatus.OSCILLATING: OscillatingError,
    TrainingStatus.OUT_OF_PRECISION: OutOfPrecisionError,
}


@dataclass
class TrainingResult:
    """How a training run ended and the error it reached."""
    status: TrainingStatus
    err_sum: float  # Signed error of the final epoch
    epochs: int
    learning_rate: float
    history: List[float] = field(default_factory=list)  # Signed error per epoch

    @property
    def ok(self) -> bool:
        return self.status == TrainingStatus.CONVERGED

    @property
    def error(self) -> float:
        """Magnitude of the final epoch error."""
        return abs(self.err_sum)

    def raise_for_status(self) -> 'TrainingResult':
        """Raise the matching TrainingError unless training converged."""
        if not self.ok:
            raise _STATUS_ERRORS[self.status](self.err_sum, self.epochs, self.learning_rate)
        return self


@dataclass
class TrainingConfig:
    """Configuration for the delta-rule trainer."""
    learning_rate: float = 0.1
    err_max: float = 0.1  # Training converges once |err_sum| drops below this
    activation: str = 'identity'  # 'identity' or 'logistic'
    max_epochs: Optional[int] = None  # None trains until the error settles
    detect_oscillation: bool = False  # Track rises instead of stopping on the first one
    verbose: bool = False


class DeltaRuleTrainer:
    """
    Delta-rule trainer for a single unit.

    Each epoch walks the dataset in order. For every record the error is
    expected - activation(raw_sum), it is added to the epoch's signed
    err_sum, and every weight moves by learning_rate * input[y] * err.

    After each epoch:
    - |err_sum| < err_max: converged
    - rounded |err_sum| equal to the previous epoch's: err_stabilized
    - rounded |err_sum| above the previous epoch's: err_rising, or with
      detect_oscillation the rise is remembered and the run ends as
      oscillating once the error has both risen and fallen
    - max_epochs reached: out_of_iterations
    """

    def __init__(self, unit: 'Unit', config: Optional[TrainingConfig] = None):
        self.unit = unit
        self.config = config or TrainingConfig()
        self.activation = get_activation(self.config.activation)
        self.history: List[float] = []

    def train(self, dataset: 'Dataset') -> TrainingResult:
        if dataset.input_length != len(self.unit.weights):
            raise InputLengthError(len(self.unit.weights), dataset.input_length)

        lr = self.config.learning_rate
        weights = self.unit.weights
        self.history = []

        previous: Optional[float] = None
        rose = fell = False
        epoch = 0

        while True:
            err_sum = 0.0

            for record in dataset:
                raw_sum = float(np.dot(weights, record.input))
                err = record.expected - float(self.activation(raw_sum))
                err_sum += err
                weights += lr * record.input * err

            epoch += 1
            self.history.append(err_sum)

            if self.config.verbose:
                print(f"Epoch {epoch}: err_sum={err_sum:.4f}")

            if abs(err_sum) < self.config.err_max:
                return self._result(TrainingStatus.CONVERGED, err_sum, epoch)

            if not math.isfinite(err_sum):
                return self._result(TrainingStatus.ERR_RISING, err_sum, epoch)

            rounded = round(abs(err_sum), ERROR_PRECISION)
            if previous is not None:
                if rounded == previous:
                    return self._result(TrainingStatus.ERR_STABILIZED, err_sum, epoch)

                if rounded > previous:
                    if not self.config.detect_oscillation:
                        return self._result(TrainingStatus.ERR_RISING, err_sum, epoch)
                    rose = True
                else:
                    fell = True

                if rose and fell:
                    return self._result(TrainingStatus.OSCILLATING, err_sum, epoch)

            if self.config.max_epochs is not None and epoch >= self.config.max_epochs:
                return self._result(TrainingStatus.OUT_OF_ITERATIONS, err_sum, epoch)

            previous = rounded

    def _result(self, status: TrainingStatus, err_sum: float, epochs: int) -> TrainingResult:
        if self.config.verbose and status != TrainingStatus.CONVERGED:
            print(f"Training stopped: {status.value} (err_sum={err_sum:.4f})")
        return TrainingResult(
            status=status,
            err_sum=err_sum,
            epochs=epochs,
            learning_rate=self.config.learning_rate,
            history=list(self.history),
        )


def search_learning_rate(
    unit: 'Unit',
    dataset: 'Dataset',
    learning_rate_range: Tuple[float, float],
    err_max: float,
    activation: str = 'identity',
    max_epochs: Optional[int] = None,
    verbose: bool = False
) -> TrainingResult:
    """
    Search a learning rate by bisection and leave the unit trained at it.

    Candidates start at the two ends of the range. Every trial keeps training
    the same unit, so the weights build up from one trial to the next. While
    the newest candidate's error is no worse than the previous one's, the
    next candidate is the midpoint of the two. Once it gets worse, the
    previous candidate is taken as the optimum and the unit is trained once
    more at that rate.

    Args:
        unit: Unit to train (mutated in place)
        dataset: Training data
        learning_rate_range: (start, end) of the rates to search
        err_max: Convergence margin passed to every training run
        activation: Activation used by the trainer
        max_epochs: Optional epoch cap for every training run
        verbose: Print search progress

    Returns:
        Result of the final training run, or out_of_precision when the
        candidates collapse onto each other before the error gets worse
    """
    start, end = learning_rate_range
    if start <= 0 or end < start:
        raise ValueError(f"Invalid learning rate range: {start}..{end}")

    def run(rate: float) -> TrainingResult:
        config = TrainingConfig(
            learning_rate=rate,
            err_max=err_max,
            activation=activation,
            max_epochs=max_epochs,
            verbose=False,
        )
        return DeltaRuleTrainer(unit, config).train(dataset)

    # [candidate, previous]
    rates = [start, end]
    errors = [0.0, math.inf]

    while True:
        if verbose:
            print(f"Trying learning_rate={rates[0]:.6f}")

        result = run(rates[0])
        if not result.ok:
            if verbose:
                print(f"Learning error: {result.status.value}")
            if rates[0] >= end:
                return result

        # A single-point range has nothing to bisect
        if start == end:
            return result

        errors[0] = result.error
        if verbose:
            print(f"Err: {errors[0]:.6f} prev: {errors[1]:.6f}")

        if errors[0] > errors[1]:
            if verbose:
                print(f"Found optimum at {rates[1]:.6f}")
            return run(rates[1])

        midpoint = (rates[0] + rates[1]) / 2
        if midpoint == rates[0] or midpoint == rates[1]:
            if verbose:
                print(f"Learning rate search ran out of precision at {rates[0]:.6f}")
            return TrainingResult(
                status=TrainingStatus.OUT_OF_PRECISION,
                err_sum=result.err_sum,
                epochs=result.epochs,
                learning_rate=rates[0],
                history=result.history,
            )

        rates = [midpoint, rates[0]]
        errors = [0.0, errors[0]]
