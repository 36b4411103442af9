"""
Units - single linear-threshold learners.

A Unit is a vector of weights plus a decision threshold. Its response to
an input is the weighted sum together with whether that sum exceeds the
threshold. Units learn with the delta rule in training.py, either at a
fixed learning rate or through the learning rate search.
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .errors import InputLengthError
from .training import (
    DeltaRuleTrainer,
    TrainingConfig,
    TrainingResult,
    search_learning_rate,
)

if TYPE_CHECKING:
    from ..datasets.dataset import Dataset


# Decision boundary shared by every unit
THRESHOLD = 0.5


class InitMode(str, Enum):
    FIXED = 'fixed'
    SEEDED = 'seeded'
    RANDOM = 'random'


@dataclass(frozen=True)
class WeightInit:
    """
    How a unit's weights start out.

    - fixed: every weight equals the threshold, a neutral starting point
    - seeded: uniform [0, 1) from a generator seeded with `seed`
    - random: uniform [0, 1) from an unseeded (or caller-supplied) generator
    """
    mode: InitMode = InitMode.FIXED
    seed: Optional[int] = None

    def __post_init__(self):
        if self.mode == InitMode.SEEDED and self.seed is None:
            raise ValueError("Seeded weight initialization needs a seed")

    @classmethod
    def fixed(cls) -> 'WeightInit':
        return cls(InitMode.FIXED)

    @classmethod
    def seeded(cls, seed: int) -> 'WeightInit':
        return cls(InitMode.SEEDED, seed)

    @classmethod
    def random(cls) -> 'WeightInit':
        return cls(InitMode.RANDOM)

    def weights(
        self,
        size: int,
        threshold: float = THRESHOLD,
        rng: Optional[np.random.Generator] = None
    ) -> np.ndarray:
        if self.mode == InitMode.FIXED:
            return np.full(size, threshold, dtype=float)
        if self.mode == InitMode.SEEDED:
            return np.random.default_rng(self.seed).random(size)
        if rng is None:
            rng = np.random.default_rng()
        return rng.random(size)


class Unit:
    """
    A single linear-threshold learning unit.

    Example:
        unit = Unit(2)
        unit.train(or_data, learning_rate=0.1, err_max=0.3)
        raw_sum, decision = unit.response([1.0, 1.0])
    """

    def __init__(
        self,
        size: int,
        init: Optional[WeightInit] = None,
        rng: Optional[np.random.Generator] = None,
        threshold: float = THRESHOLD,
        verbose: bool = False
    ):
        if size < 1:
            raise ValueError(f"Unit size must be positive, got {size}")

        self.init = init or WeightInit.fixed()
        self.threshold = threshold
        self.weights: np.ndarray = self.init.weights(size, threshold, rng)

        if verbose and self.init.mode != InitMode.FIXED:
            print(f"Random weights: {self.weights.tolist()}")

    @property
    def size(self) -> int:
        return len(self.weights)

    def response(self, input: Sequence[float]) -> Tuple[float, bool]:
        """
        Weighted sum of the input and the decision it implies.

        Returns:
            (raw_sum, raw_sum > threshold)
        """
        x = np.asarray(input, dtype=float)
        if x.shape != self.weights.shape:
            raise InputLengthError(len(self.weights), x.size)

        raw_sum = float(np.dot(self.weights, x))
        return raw_sum, raw_sum > self.threshold

    def decide(self, input: Sequence[float]) -> bool:
        return self.response(input)[1]

    def train(
        self,
        dataset: 'Dataset',
        learning_rate: float,
        err_max: float,
        activation: str = 'identity',
        max_epochs: Optional[int] = None,
        detect_oscillation: bool = False,
        verbose: bool = False
    ) -> TrainingResult:
        """
        Train the weights in place with the delta rule.

        Args:
            dataset: Training data, input_length must equal the unit size
            learning_rate: Step size of every weight update
            err_max: Training converges once |err_sum| of an epoch is below this
            activation: 'identity' (plain delta rule) or 'logistic'
            max_epochs: Optional epoch cap, unbounded by default
            detect_oscillation: Keep training through a rising error and stop
                once it has both risen and fallen
            verbose: Print the error of every epoch

        Returns:
            TrainingResult with the final signed err_sum
        """
        config = TrainingConfig(
            learning_rate=learning_rate,
            err_max=err_max,
            activation=activation,
            max_epochs=max_epochs,
            detect_oscillation=detect_oscillation,
            verbose=verbose,
        )
        return DeltaRuleTrainer(self, config).train(dataset)

    def train_optimizer(
        self,
        dataset: 'Dataset',
        learning_rate_range: Tuple[float, float],
        err_max: float,
        activation: str = 'identity',
        max_epochs: Optional[int] = None,
        verbose: bool = False
    ) -> TrainingResult:
        """Train at the learning rate found by search_learning_rate."""
        return search_learning_rate(
            self,
            dataset,
            learning_rate_range,
            err_max,
            activation=activation,
            max_epochs=max_epochs,
            verbose=verbose,
        )

    def __repr__(self):
        weights = ', '.join(f"{w:.4f}" for w in self.weights)
        return f"Unit(weights=[{weights}], threshold={self.threshold})"
