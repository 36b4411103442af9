"""
Tests for generalization metrics and plots.

Run with: python -m pytest tests/test_analysis.py -v
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from perceptron_lab.analysis.generalization import (
    accuracy,
    add_uniform_noise,
    noise_robustness,
)
from perceptron_lab.core.unit import Unit
from perceptron_lab.datasets.toy import or_margin, patterns, xor_gate


@pytest.fixture
def or_unit():
    """Unit trained on the OR margin set."""
    unit = Unit(2)
    result = unit.train(or_margin(), learning_rate=0.1, err_max=0.3)
    assert result.ok
    return unit


class TestAccuracy:
    """Tests for decision accuracy."""

    def test_trained_or(self, or_unit):
        assert accuracy(or_unit, or_margin()) == 1.0

    def test_untrained_xor(self):
        """Test fixed weights get (0,0) right and (1,1) wrong on XOR."""
        # Raw sums 0.0, 0.5, 0.5, 1.0 -> only (0,0) is decided correctly
        assert accuracy(Unit(2), xor_gate()) == pytest.approx(0.25)


class TestNoise:
    """Tests for noise injection and robustness."""

    def test_add_uniform_noise_copies(self):
        """Test the source dataset is left untouched."""
        data = or_margin()
        clean = data.inputs.copy()

        noisy = add_uniform_noise(data, 0.2, np.random.default_rng(0))

        np.testing.assert_array_equal(data.inputs, clean)
        assert not np.array_equal(noisy.inputs, clean)
        assert np.all(np.abs(noisy.inputs - clean) <= 0.2)
        np.testing.assert_array_equal(noisy.targets, data.targets)

    def test_zero_noise_is_identity(self):
        data = patterns()
        noisy = add_uniform_noise(data, 0.0)

        np.testing.assert_array_equal(noisy.inputs, data.inputs)

    def test_noise_robustness(self, or_unit):
        """Test robustness keys, clean accuracy and bounds."""
        data = or_margin()
        clean = data.inputs.copy()

        results = noise_robustness(
            or_unit, data, [0.0, 0.1, 0.5], n_trials=5, rng=np.random.default_rng(42)
        )

        assert list(results) == ['0.0', '0.1', '0.5']
        assert results['0.0'] == 1.0
        assert all(0.0 <= acc <= 1.0 for acc in results.values())
        np.testing.assert_array_equal(data.inputs, clean)

    def test_noise_robustness_is_reproducible(self, or_unit):
        data = or_margin()

        a = noise_robustness(or_unit, data, [0.3], n_trials=10, rng=np.random.default_rng(1))
        b = noise_robustness(or_unit, data, [0.3], n_trials=10, rng=np.random.default_rng(1))

        assert a == b


class TestPlots:
    """Tests for matplotlib output."""

    def test_error_history(self, tmp_path):
        from perceptron_lab.visualization.plots import plot_error_history, save_figure

        result = Unit(2).train(or_margin(), learning_rate=0.1, err_max=0.3)
        path = tmp_path / 'history.png'
        save_figure(plot_error_history(result), str(path))

        assert path.exists()

    def test_decision_boundary(self, or_unit, tmp_path):
        from perceptron_lab.visualization.plots import plot_decision_boundary, save_figure

        path = tmp_path / 'boundary.png'
        save_figure(plot_decision_boundary(or_unit, or_margin()), str(path))

        assert path.exists()

    def test_decision_boundary_needs_two_inputs(self):
        from perceptron_lab.visualization.plots import plot_decision_boundary

        data = patterns()
        with pytest.raises(ValueError):
            plot_decision_boundary(Unit(3), data)
