"""Rendering of domain-coloring images for complex functions."""

from typing import Callable, List, Optional, Tuple
from dataclasses import dataclass
import warnings
import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from .value import Complex, Number
from .coloring import ColorSink, domain_color, domain_color_grid
from .analysis import sample_grid
from .functions import get_function


# Set matplotlib style for publication-quality plots
plt.style.use('seaborn-v0_8-whitegrid')
sns.set_palette("husl")


@dataclass
class PlotConfig:
    """Configuration for plot styling."""
    figsize: Tuple[int, int] = (8, 8)
    dpi: int = 150
    save_format: str = 'png'
    font_size: int = 12
    title_size: int = 14
    label_size: int = 10


def _evaluate(
    fn: Callable[[Complex], Number],
    xlim: Tuple[float, float],
    ylim: Tuple[float, float],
    resolution: int
) -> List[List[Complex]]:
    grid = sample_grid(xlim, ylim, resolution)
    return [[Complex.from_complex(complex(fn(z))) for z in row] for row in grid]


def render_domain_coloring(
    fn: Callable[[Complex], Number],
    sink: ColorSink,
    xlim: Tuple[float, float] = (-2.0, 2.0),
    ylim: Tuple[float, float] = (-2.0, 2.0),
    resolution: int = 100
) -> None:
    """Push the domain color of fn at each grid point into a sink.

    Row 0 corresponds to ylim[0].

    Args:
        fn: Complex function
        sink: Callable receiving (row, col, (r, g, b))
        xlim: Real axis limits
        ylim: Imaginary axis limits
        resolution: Grid resolution
    """
    for row, values in enumerate(_evaluate(fn, xlim, ylim, resolution)):
        for col, w in enumerate(values):
            sink(row, col, domain_color(w))


def domain_coloring_image(
    fn: Callable[[Complex], Number],
    xlim: Tuple[float, float] = (-2.0, 2.0),
    ylim: Tuple[float, float] = (-2.0, 2.0),
    resolution: int = 100
) -> np.ndarray:
    """Compute a domain-coloring RGB image of fn.

    Pixels where fn is not finite are painted black.

    Args:
        fn: Complex function
        xlim: Real axis limits
        ylim: Imaginary axis limits
        resolution: Grid resolution

    Returns:
        Array of shape (resolution, resolution, 3) with values in [0, 1]
    """
    values = _evaluate(fn, xlim, ylim, resolution)
    W = np.array([[complex(w) for w in row] for row in values], dtype=np.complex128)
    rgb = np.asarray(domain_color_grid(W))

    non_finite = ~np.all(np.isfinite(rgb), axis=-1)
    if np.any(non_finite):
        warnings.warn(f"{int(np.sum(non_finite))} pixels are not finite", RuntimeWarning)
        rgb = np.where(non_finite[..., None], 0.0, rgb)
    return rgb


def plot_domain_coloring(
    fn: Callable[[Complex], Number],
    title: str = '',
    xlim: Tuple[float, float] = (-2.0, 2.0),
    ylim: Tuple[float, float] = (-2.0, 2.0),
    resolution: int = 200,
    config: PlotConfig = PlotConfig(),
    save_path: Optional[str] = None
) -> plt.Figure:
    """Plot the domain coloring of a complex function.

    Args:
        fn: Complex function
        title: Plot title
        xlim: Real axis limits
        ylim: Imaginary axis limits
        resolution: Grid resolution
        config: Plot configuration
        save_path: Path to save figure

    Returns:
        Matplotlib figure
    """
    img = domain_coloring_image(fn, xlim, ylim, resolution)

    fig, ax = plt.subplots(figsize=config.figsize, dpi=config.dpi)
    ax.imshow(img, extent=[xlim[0], xlim[1], ylim[0], ylim[1]], origin='lower', aspect='equal')
    ax.set_title(f'Domain coloring of {title}' if title else 'Domain coloring',
                 fontsize=config.title_size)
    ax.set_xlabel('Re(z)', fontsize=config.label_size)
    ax.set_ylabel('Im(z)', fontsize=config.label_size)
    ax.grid(False)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, format=config.save_format, dpi=config.dpi, bbox_inches='tight')

    return fig


def plot_function_gallery(
    names: List[str],
    xlim: Tuple[float, float] = (-2.0, 2.0),
    ylim: Tuple[float, float] = (-2.0, 2.0),
    resolution: int = 100,
    config: PlotConfig = PlotConfig(),
    save_path: Optional[str] = None
) -> plt.Figure:
    """Plot domain colorings of several library functions side by side.

    Args:
        names: Function names from the function registry
        xlim: Real axis limits
        ylim: Imaginary axis limits
        resolution: Grid resolution per panel
        config: Plot configuration
        save_path: Path to save figure

    Returns:
        Matplotlib figure

    Raises:
        ValueError: If names is empty
    """
    if not names:
        raise ValueError("names must contain at least one function")
    n = len(names)
    cols = min(4, n)
    rows = (n + cols - 1) // cols

    fig, axes = plt.subplots(rows, cols, figsize=(cols * 4, rows * 4), dpi=config.dpi)
    axes = np.atleast_1d(axes).flatten()

    for ax, name in zip(axes, names):
        img = domain_coloring_image(get_function(name), xlim, ylim, resolution)
        ax.imshow(img, extent=[xlim[0], xlim[1], ylim[0], ylim[1]], origin='lower', aspect='equal')
        ax.set_title(name, fontsize=config.label_size)
        ax.grid(False)

    # Hide unused subplots
    for ax in axes[n:]:
        ax.set_visible(False)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, format=config.save_format, dpi=config.dpi, bbox_inches='tight')

    return fig
