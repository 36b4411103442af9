"""Visualization utilities for units and their training runs."""

from .plots import (
    plot_decision_boundary,
    plot_error_history,
    save_figure,
)

__all__ = [
    'plot_decision_boundary',
    'plot_error_history',
    'save_figure',
]
