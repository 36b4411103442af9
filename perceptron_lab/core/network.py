"""
Networks - complete trees of units, evaluated level by level.

A Network of depth d and branching factor b narrows from b^(d-1) units on
its first level to a single output unit. Every unit takes b inputs, so the
network consumes b^d values and each level's outputs are exactly the next
level's inputs.

The network never trains. Callers train each unit on its own dataset
(network[level][index].train(...)) and then check the assembled behaviour
with forward().
"""

import numpy as np
from typing import List, Optional, Sequence

from .errors import InputLengthError
from .unit import Unit, WeightInit, InitMode, THRESHOLD


class Network:
    """
    A fixed-shape narrowing tree of units.

    Example:
        network = Network(depth=2, branching_factor=2)
        network.level_sizes  # [2, 1]
        network.input_width  # 4
    """

    def __init__(
        self,
        depth: int,
        branching_factor: int,
        init: Optional[WeightInit] = None,
        rng: Optional[np.random.Generator] = None,
        verbose: bool = False
    ):
        if depth < 1:
            raise ValueError(f"Network depth must be at least 1, got {depth}")
        if branching_factor < 1:
            raise ValueError(f"Branching factor must be at least 1, got {branching_factor}")

        self.depth = depth
        self.input_length = branching_factor
        self.init = init = init or WeightInit.fixed()
        if init.mode == InitMode.SEEDED:
            # One generator for the whole tree, so seeded units still differ
            rng = np.random.default_rng(init.seed)
            init = WeightInit.random()

        self.levels: List[List[Unit]] = []
        for level in range(depth):
            n_units = branching_factor ** (depth - 1 - level)
            self.levels.append([
                Unit(branching_factor, init=init, rng=rng)
                for _ in range(n_units)
            ])

        if verbose:
            print(f"Units allocated: {self.unit_count}")

    @property
    def level_sizes(self) -> List[int]:
        return [len(level) for level in self.levels]

    @property
    def unit_count(self) -> int:
        return sum(self.level_sizes)

    @property
    def input_width(self) -> int:
        """Number of values forward() expects."""
        return self.input_length * len(self.levels[0])

    def __getitem__(self, level: int) -> List[Unit]:
        return self.levels[level]

    def __len__(self) -> int:
        return len(self.levels)

    def forward(self, input: Sequence[float], hidden_decisions: bool = False) -> np.ndarray:
        """
        Propagate an input through every level.

        Unit i of a level reads the window [i * input_length, (i + 1) * input_length)
        of the previous level's outputs.

        Args:
            input: Vector of input_width values
            hidden_decisions: Forward each hidden unit's decision (1.0 or 0.0)
                instead of its raw sum. The last level always reports raw sums.

        Returns:
            Raw sums of the last level (one value for a single output unit)
        """
        current = np.asarray(input, dtype=float)
        if current.shape != (self.input_width,):
            raise InputLengthError(self.input_width, current.size)

        last = len(self.levels) - 1
        for index, level in enumerate(self.levels):
            outputs = np.empty(len(level))
            for i, unit in enumerate(level):
                offset = i * self.input_length
                raw_sum, decision = unit.response(current[offset:offset + self.input_length])
                if hidden_decisions and index < last:
                    outputs[i] = 1.0 if decision else 0.0
                else:
                    outputs[i] = raw_sum
            current = outputs

        return current

    def decide(self, input: Sequence[float], hidden_decisions: bool = False) -> bool:
        """Boolean decision of a single-output network."""
        return bool(self.forward(input, hidden_decisions=hidden_decisions)[0] > THRESHOLD)

    def __repr__(self):
        return (f"Network(depth={self.depth}, branching_factor={self.input_length}, "
                f"level_sizes={self.level_sizes}, init={self.init.mode.value})")
