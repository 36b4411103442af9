"""
Matplotlib-based visualization for units.

These functions create static plots for analysis and documentation.
"""

import numpy as np
from typing import Optional, Tuple

# Matplotlib imports with non-GUI backend
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap

from ..core.unit import Unit
from ..core.training import TrainingResult
from ..datasets.dataset import Dataset


# Custom colormaps
DECISION_CMAP = LinearSegmentedColormap.from_list(
    'decision', ['#3498db', '#ecf0f1', '#e74c3c']
)


def plot_decision_boundary(
    unit: Unit,
    dataset: Dataset,
    x_range: Tuple[float, float] = (-0.5, 1.5),
    y_range: Tuple[float, float] = (-0.5, 1.5),
    resolution: int = 100,
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 6),
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Plot the raw sum surface and decision boundary of a two-input unit.

    Args:
        unit: Trained unit with two weights
        dataset: Training data to overlay
        x_range: Range for x-axis
        y_range: Range for y-axis
        resolution: Grid resolution
        title: Plot title
        figsize: Figure size
        ax: Existing axes to plot on

    Returns:
        matplotlib Figure
    """
    if unit.size != 2 or dataset.input_length != 2:
        raise ValueError("Decision boundaries can only be drawn for two inputs")

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    # Create mesh grid
    xx, yy = np.meshgrid(
        np.linspace(x_range[0], x_range[1], resolution),
        np.linspace(y_range[0], y_range[1], resolution)
    )
    grid = np.c_[xx.ravel(), yy.ravel()]
    raw = (grid @ unit.weights).reshape(xx.shape)

    contour = ax.contourf(xx, yy, raw, levels=50, cmap=DECISION_CMAP, alpha=0.8)
    plt.colorbar(contour, ax=ax, label='raw sum')

    # Decision boundary line
    ax.contour(xx, yy, raw, levels=[unit.threshold], colors='black', linewidths=2)

    X = dataset.inputs
    y = dataset.targets > 0.5
    ax.scatter(X[:, 0], X[:, 1], c=y, cmap='RdBu', edgecolors='white',
               s=80, linewidths=1, zorder=10)

    ax.set_xlim(x_range)
    ax.set_ylim(y_range)
    ax.set_xlabel('x₁')
    ax.set_ylabel('x₂')
    ax.set_title(title or f'Decision boundary (threshold {unit.threshold})')
    ax.set_aspect('equal')

    return fig


def plot_error_history(
    result: TrainingResult,
    figsize: Tuple[int, int] = (10, 4),
    title: Optional[str] = None
) -> plt.Figure:
    """
    Plot the epoch errors of a training run.

    Left: signed err_sum per epoch. Right: its magnitude on a log scale.
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    epochs = range(1, len(result.history) + 1)
    history = np.array(result.history)

    ax1.plot(epochs, history, 'b-o', linewidth=2, markersize=3)
    ax1.axhline(y=0, color='gray', linewidth=0.5)
    ax1.set_xlabel('Epoch')
    ax1.set_ylabel('err_sum')
    ax1.set_title('Signed epoch error')
    ax1.grid(True, alpha=0.3)

    magnitude = np.abs(history)
    ax2.plot(epochs, np.where(magnitude > 0, magnitude, np.nan), 'r-o', linewidth=2, markersize=3)
    ax2.set_xlabel('Epoch')
    ax2.set_ylabel('|err_sum|')
    ax2.set_title('Error magnitude')
    ax2.grid(True, alpha=0.3)
    ax2.set_yscale('log')

    fig.suptitle(title or f'{result.status.value} at learning_rate={result.learning_rate:.4f}')

    plt.tight_layout()
    return fig


def save_figure(fig: plt.Figure, path: str, dpi: int = 150) -> None:
    """Save a figure to disk and release it."""
    fig.savefig(path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
