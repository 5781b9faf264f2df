"""
Matplotlib renderer.

Draws onto ``matplotlib.figure.Figure`` objects with the Agg canvas, so no
pyplot state is shared between calls.
"""

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from ..config import DEFAULT_CONFIG, PlotConfig
from .base import (
    HistogramPanel,
    LineChartPanel,
    RendererBase,
    ScatterPanel,
    ScatterWithLinePanel,
)

# Inner margins of a region, as fractions of the region
_MARGIN_LEFT = 0.15
_MARGIN_BOTTOM = 0.13
_MARGIN_RIGHT = 0.05
_MARGIN_TOP = 0.10


class MatplotlibRenderer(RendererBase):
    """
    Renderer producing raster images through Matplotlib's Agg backend.

    Parameters
    ----------
    config : PlotConfig, optional
        Marker sizes, colors and line widths
    """

    name = "matplotlib"

    def __init__(self, config: PlotConfig = None):
        self.config = config or DEFAULT_CONFIG

    def new_canvas(self, width: float, height: float, dpi: int) -> Figure:
        fig = Figure(figsize=(width, height), dpi=dpi)
        FigureCanvasAgg(fig)
        return fig

    def add_region(self, canvas: Figure, left: float, bottom: float,
                   width: float, height: float):
        rect = [
            left + _MARGIN_LEFT * width,
            bottom + _MARGIN_BOTTOM * height,
            width * (1 - _MARGIN_LEFT - _MARGIN_RIGHT),
            height * (1 - _MARGIN_BOTTOM - _MARGIN_TOP),
        ]
        return canvas.add_axes(rect)

    def render_panel(self, region, panel) -> None:
        if isinstance(panel, ScatterWithLinePanel):
            self._scatter(region, panel, self.config.overlay_marker_size)
            region.plot(
                panel.xs, panel.line_ys,
                color=self.config.fit_line_color,
                linewidth=self.config.line_width,
                zorder=3,
            )
        elif isinstance(panel, ScatterPanel):
            self._scatter(region, panel, self.config.marker_size)
        elif isinstance(panel, HistogramPanel):
            region.hist(panel.values, bins=panel.bucket_count, range=panel.bin_range,
                        color=self.config.hist_color, edgecolor="black",
                        linewidth=0.5)
            region.set_title(panel.title or f"Distribution of {panel.label}")
            region.set_xlabel(panel.label)
        elif isinstance(panel, LineChartPanel):
            for line in panel.lines:
                region.plot(line.xs, line.ys, label=line.name, color=line.color,
                            linewidth=self.config.line_width, zorder=line.zorder)
            region.set_title(panel.title)
            region.set_xlabel(panel.x_label)
            region.set_ylabel(panel.y_label)
            region.legend(loc="best")
        else:
            raise TypeError(f"Unsupported panel type: {type(panel).__name__}")

    def _scatter(self, region, panel, marker_size):
        region.scatter(panel.xs, panel.ys, s=marker_size,
                       color=self.config.point_color, zorder=2)
        region.set_title(panel.title or f"{panel.y_label} vs {panel.x_label}")
        region.set_xlabel(panel.x_label)
        region.set_ylabel(panel.y_label)

    def save_canvas(self, canvas: Figure, path: str) -> None:
        canvas.savefig(path, dpi=canvas.dpi)
