"""
Presentation settings.

All rendering constants live in one immutable object that is passed
explicitly to the render functions.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class PlotConfig:
    """
    Rendering configuration.

    Attributes
    ----------
    output_dir : str
        Directory (relative to the working directory) for default output paths
    tile_size : float
        Edge length of one pair-grid panel, in inches
    bucket_count : int
        Histogram bin count
    dpi : int
        Raster resolution
    model_figsize : tuple of float
        Figure size of the model overlay and data plots, in inches
    metrics_figsize : tuple of float
        Figure size of the metrics comparison chart, in inches
    marker_size : float
        Scatter marker area for pair-grid panels (points^2)
    overlay_marker_size : float
        Scatter marker area for the model overlay (points^2)
    line_width : float
        Width of fitted and metric lines, in points
    point_color, hist_color, fit_line_color : str
        Colors for scatter points, histogram bars and the fitted line
    metric_palette : tuple of str
        Colors assigned to metric series in rendering order
    """
    output_dir: str = "plot"
    tile_size: float = 4.0
    bucket_count: int = 16
    dpi: int = 100
    model_figsize: Tuple[float, float] = (8.0, 4.0)
    metrics_figsize: Tuple[float, float] = (10.0, 5.0)
    marker_size: float = 8.0
    overlay_marker_size: float = 18.0
    line_width: float = 2.0
    point_color: str = "#0000ff"
    hist_color: str = "#6496c8"
    fit_line_color: str = "#e41a1c"
    metric_palette: Tuple[str, ...] = field(default=(
        "#ff0000", "#00ff00", "#0000ff",
        "#ff7f0e", "#9467bd", "#8c564b", "#e377c2", "#7f7f7f",
        "#bcbd22", "#17becf",
    ))

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.bucket_count < 1:
            raise ValueError(f"bucket_count must be >= 1, got {self.bucket_count}")
        if self.dpi < 1:
            raise ValueError(f"dpi must be >= 1, got {self.dpi}")
        if not self.metric_palette:
            raise ValueError("metric_palette must not be empty")

    def replace(self, **changes) -> "PlotConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


DEFAULT_CONFIG = PlotConfig()
