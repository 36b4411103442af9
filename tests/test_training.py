"""
Tests for activations, training results and the learning rate search.

Run with: python -m pytest tests/test_training.py -v
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from perceptron_lab.core.activations import ACTIVATIONS, get_activation, identity, logistic
from perceptron_lab.core.training import (
    DeltaRuleTrainer,
    TrainingConfig,
    TrainingResult,
    TrainingStatus,
    search_learning_rate,
)
from perceptron_lab.core.errors import (
    TrainingError,
    ErrRisingError,
    ErrStabilizedError,
    OutOfPrecisionError,
    PerceptronError,
)
from perceptron_lab.core.unit import Unit
from perceptron_lab.datasets.dataset import Dataset
from perceptron_lab.datasets.toy import patterns


class TestActivations:
    """Tests for activation functions."""

    def test_identity(self):
        assert identity(0.7) == 0.7
        assert identity(-3.0) == -3.0

    def test_logistic_values(self):
        """Test the base-2 logistic at known points."""
        assert logistic(0.0) == pytest.approx(0.5)
        assert logistic(1.0) == pytest.approx(2.0 / 3.0)
        assert logistic(-1.0) == pytest.approx(1.0 / 3.0)

    def test_logistic_extremes_are_finite(self):
        """Test large inputs saturate without overflow."""
        assert logistic(1e6) == pytest.approx(1.0)
        assert logistic(-1e6) == pytest.approx(0.0)

    def test_registry(self):
        """Test activation lookup."""
        assert set(ACTIVATIONS) == {'identity', 'logistic'}
        assert get_activation('logistic')(0.0) == pytest.approx(0.5)
        assert ACTIVATIONS['logistic'].properties['bounded'] is True

    def test_unknown_activation(self):
        with pytest.raises(ValueError):
            get_activation('tanh')


class TestTrainingResult:
    """Tests for result reporting."""

    def test_converged_result(self):
        result = TrainingResult(TrainingStatus.CONVERGED, -0.05, 4, 0.1)

        assert result.ok
        assert result.error == pytest.approx(0.05)
        assert result.raise_for_status() is result

    def test_failed_result_raises_matching_error(self):
        """Test every failure status maps onto its own exception."""
        result = TrainingResult(TrainingStatus.ERR_RISING, 0.45, 2, 0.4)

        with pytest.raises(ErrRisingError) as excinfo:
            result.raise_for_status()
        assert excinfo.value.err_sum == 0.45
        assert excinfo.value.epochs == 2
        assert excinfo.value.learning_rate == 0.4

    def test_error_hierarchy(self):
        for error in (ErrRisingError, ErrStabilizedError, OutOfPrecisionError):
            assert issubclass(error, TrainingError)
            assert issubclass(error, PerceptronError)

    def test_status_values(self):
        """Test statuses compare as plain strings."""
        assert TrainingStatus.OSCILLATING == 'oscillating'
        assert TrainingStatus('out_of_precision') is TrainingStatus.OUT_OF_PRECISION


class TestDeltaRuleTrainer:
    """Tests for the trainer used directly."""

    def test_default_config(self):
        config = TrainingConfig()

        assert config.learning_rate == 0.1
        assert config.activation == 'identity'
        assert config.max_epochs is None
        assert not config.detect_oscillation

    def test_trainer_updates_unit_in_place(self):
        """Test the trainer mutates the unit's own weight array."""
        unit = Unit(1)
        weights = unit.weights
        data = Dataset([([2.0], 2.0)])

        result = DeltaRuleTrainer(unit, TrainingConfig(learning_rate=0.25, err_max=0.1)).train(data)

        assert result.ok
        assert result.epochs == 2
        assert unit.weights is weights
        assert unit.weights[0] == pytest.approx(1.0)

    def test_history_records_every_epoch(self):
        unit = Unit(1)
        trainer = DeltaRuleTrainer(unit, TrainingConfig(learning_rate=0.25, err_max=0.1))
        trainer.train(Dataset([([2.0], 2.0)]))

        assert trainer.history == pytest.approx([1.0, 0.0])

    def test_divergence_stops(self):
        """Test an exploding error is caught as rising."""
        unit = Unit(1)
        config = TrainingConfig(learning_rate=10.0, err_max=0.1, detect_oscillation=True)
        result = DeltaRuleTrainer(unit, config).train(Dataset([([2.0], 2.0)]))

        assert result.status in (TrainingStatus.ERR_RISING, TrainingStatus.OSCILLATING)
        assert not result.ok



# (input, decision) checks on the three-feature pattern set: the first three
# vary only the deciding feature, the last three add distractor noise
PATTERN_CHECKS = [
    ([0.0, 0.7, 0.0], True),
    ([0.0, 0.5, 0.0], True),
    ([0.0, 0.2, 0.0], False),
    ([0.8, 0.7, 0.3], True),
    ([0.3, 0.5, 1.0], True),
    ([0.8, 0.2, 0.2], False),
]


class TestLearningRateSearch:
    """Tests for the bisection over learning rates."""

    def test_rate_too_large_fails(self):
        """Test a range far above the usable rates ends in a rising error."""
        unit = Unit(1)
        data = Dataset([([2.0], 2.0)])

        result = unit.train_optimizer(data, (1.0, 2.0), err_max=0.1)

        # 1.0 diverges (err 3), 1.5 diverges faster (err 45), so 1.0 is retrained
        assert result.status == TrainingStatus.ERR_RISING
        assert result.learning_rate == 1.0
        assert result.epochs == 2

    def test_trials_accumulate(self):
        """Test every trial continues from the weights the last one left."""
        unit = Unit(1)
        data = Dataset([([2.0], 2.0)])

        result = unit.train_optimizer(data, (1.0, 2.0), err_max=0.1)

        # Final run at 1.0 starts from w=23.5 left by the 1.5 trial:
        # 23.5 -> -66.5 -> 203.5
        assert result.err_sum == pytest.approx(135.0)
        assert unit.weights[0] == pytest.approx(203.5)

    def test_failure_at_range_end_is_returned(self):
        """Test a failing run at the top of the range ends the search."""
        unit = Unit(1)
        result = unit.train_optimizer(Dataset([([2.0], 2.0)]), (1.0, 1.0), err_max=0.1)

        assert result.status == TrainingStatus.ERR_RISING
        assert result.learning_rate == 1.0

    def test_single_point_range(self):
        """Test a one-point range reports its own training run."""
        unit = Unit(1)
        result = search_learning_rate(unit, Dataset([([2.0], 2.0)]), (0.25, 0.25), err_max=0.1)

        assert result.status == TrainingStatus.CONVERGED
        assert result.learning_rate == 0.25
        assert result.err_sum == 0.0
        assert unit.weights[0] == pytest.approx(1.0)

    def test_out_of_precision(self):
        """Test the search gives up once candidates can no longer be split."""
        unit = Unit(1)
        result = unit.train_optimizer(Dataset([([1.0], 0.5)]), (0.1, 0.2), err_max=0.1)

        assert result.status == TrainingStatus.OUT_OF_PRECISION
        assert result.err_sum == 0.0
        assert 0.1 <= result.learning_rate <= 0.2
        with pytest.raises(OutOfPrecisionError):
            result.raise_for_status()

    @pytest.mark.parametrize('bounds', [(0.0, 1.0), (-0.1, 0.2), (0.3, 0.1)])
    def test_invalid_range(self, bounds):
        with pytest.raises(ValueError):
            Unit(1).train_optimizer(Dataset([([1.0], 0.5)]), bounds, err_max=0.1)

    def test_complex_patterns(self):
        """
        Shows how repeated training on the same data with a nearing
        learning rate strengthens pattern recognition.
        """
        data = patterns()
        unit = Unit(data.input_length)

        result = unit.train_optimizer(data, (0.005, 0.3), err_max=0.3)
        assert result.ok
        assert result.learning_rate == pytest.approx(0.1525)

        unit.train(data, learning_rate=0.055, err_max=0.3)

        for values, expected in PATTERN_CHECKS:
            assert unit.decide(values) == expected, values

    def test_single_training_misses_patterns(self):
        """Counterpart of test_complex_patterns: one run at 0.055 is not enough."""
        data = patterns()
        unit = Unit(data.input_length)

        result = unit.train(data, learning_rate=0.055, err_max=0.3)
        assert result.ok
        assert result.epochs == 2

        # Clean inputs with the deciding feature set are still rejected
        assert [unit.decide(values) for values, _ in PATTERN_CHECKS] == [
            False, False, False, True, True, False
        ]

    def test_verbose_search(self, capsys):
        data = patterns()
        Unit(data.input_length).train_optimizer(data, (0.005, 0.3), err_max=0.3, verbose=True)

        out = capsys.readouterr().out
        assert 'Trying learning_rate=' in out
        assert 'Found optimum at 0.152500' in out
