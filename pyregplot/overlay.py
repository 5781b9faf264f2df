"""
Feature/label scatter plots, with or without a fitted line.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from ._io import default_path, write_canvas
from ._renderers import RendererBase, get_renderer
from ._utils import as_scalar, check_paired
from .config import DEFAULT_CONFIG, PlotConfig

MODEL_PLOT_FILENAME = "model_plot.png"


def render_model_fit(
    xs: Sequence[float],
    ys: Sequence[float],
    weight: Union[float, Sequence[float]],
    bias: float,
    x_label: str,
    y_label: str,
    output_path: Optional[Union[str, Path]] = None,
    renderer: Union[str, RendererBase, None] = None,
    config: Optional[PlotConfig] = None,
) -> Path:
    """
    Plot (feature, label) points and the fitted line ``y = weight * x + bias``.

    The line is sampled at the data's own x values, so it spans exactly
    the data's domain.

    Parameters
    ----------
    xs, ys : sequence of float
        Feature and label values
    weight : float or one-element sequence
        Learned slope (a weights vector of a one-feature model is accepted)
    bias : float
        Learned intercept
    x_label, y_label : str
        Feature and label names
    output_path : str or Path, optional
        Image path (default: ``plot/model_plot.png``)
    renderer : str or RendererBase, optional
        Renderer name or instance (default: matplotlib)
    config : PlotConfig, optional
        Figure size and styling

    Returns
    -------
    Path
        Written image file

    Raises
    ------
    LengthMismatchError
        If xs and ys differ in length
    EmptyInputError
        If there are no points
    PlotWriteError
        If the image cannot be written
    """
    xs, ys = check_paired(xs, ys, 'feature values', 'label values')
    slope = as_scalar(weight, 'weight')
    intercept = as_scalar(bias, 'bias')

    config = config or DEFAULT_CONFIG
    renderer = get_renderer(renderer, config=config)
    if output_path is None:
        output_path = default_path(MODEL_PLOT_FILENAME, config)

    canvas = renderer.new_canvas(*config.model_figsize, config.dpi)
    region = renderer.add_region(canvas, 0.0, 0.0, 1.0, 1.0)
    renderer.draw_scatter_with_line(region, xs, ys, slope, intercept,
                                    x_label, y_label, title="Model Plot")
    return write_canvas(renderer, canvas, output_path)


def render_data(
    xs: Sequence[float],
    ys: Sequence[float],
    feature: str,
    label: str,
    output_path: Optional[Union[str, Path]] = None,
    renderer: Union[str, RendererBase, None] = None,
    config: Optional[PlotConfig] = None,
) -> Path:
    """
    Plot raw (feature, label) points before any model is fitted.

    Default output is ``plot/data_<feature>_<label>.png``.
    """
    config = config or DEFAULT_CONFIG
    renderer = get_renderer(renderer, config=config)
    if output_path is None:
        output_path = default_path(f"data_{feature}_{label}.png", config)

    canvas = renderer.new_canvas(*config.model_figsize, config.dpi)
    region = renderer.add_region(canvas, 0.0, 0.0, 1.0, 1.0)
    renderer.draw_scatter(region, xs, ys, feature, label, title="Data Plot")
    return write_canvas(renderer, canvas, output_path)


__all__ = ['render_model_fit', 'render_data', 'MODEL_PLOT_FILENAME']
