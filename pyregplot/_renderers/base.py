"""
Abstract base classes for renderers.

Defines the panel types and the interface all renderers must implement.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .._utils import as_series, check_nonempty, check_paired, nan_to_zero
from ..exceptions import EmptyInputError

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 16


@dataclass(frozen=True)
class ScatterPanel:
    """Scatter of (x, y) points."""
    xs: np.ndarray
    ys: np.ndarray
    x_label: str
    y_label: str
    title: Optional[str] = None

    kind = "scatter"


@dataclass(frozen=True)
class HistogramPanel:
    """Histogram of one series."""
    values: np.ndarray
    label: str
    bucket_count: int = DEFAULT_BUCKET_COUNT
    title: Optional[str] = None

    kind = "histogram"

    @property
    def bin_range(self) -> Tuple[float, float]:
        """Span of the finite values; infinite values fall outside every bin."""
        finite = self.values[np.isfinite(self.values)]
        return float(finite.min()), float(finite.max())


@dataclass(frozen=True)
class ScatterWithLinePanel:
    """Scatter plus the line y = slope * x + intercept sampled at each x."""
    xs: np.ndarray
    ys: np.ndarray
    slope: float
    intercept: float
    x_label: str
    y_label: str
    title: Optional[str] = None

    kind = "scatter_with_line"

    @property
    def line_ys(self) -> np.ndarray:
        return self.slope * self.xs + self.intercept


@dataclass(frozen=True)
class LineSeries:
    """One named line of a line chart."""
    name: str
    xs: np.ndarray
    ys: np.ndarray
    color: str
    zorder: int


@dataclass(frozen=True)
class LineChartPanel:
    """Several named lines sharing one pair of axes, with a legend."""
    lines: Tuple[LineSeries, ...]
    title: str
    x_label: str
    y_label: str

    kind = "line_chart"


def _readonly(arr):
    arr = np.array(arr, dtype=np.float64)
    arr.setflags(write=False)
    return arr


class RendererBase(ABC):
    """
    Abstract base class for all renderers.

    The public ``draw_*`` methods validate input, apply the NaN display
    policy and build a panel; subclasses only rasterize panels and manage
    canvases. A region is whatever ``add_region`` returns.
    """

    name = "base"

    def draw_scatter(self, region, xs, ys, x_label: str, y_label: str,
                     title: Optional[str] = None) -> ScatterPanel:
        """
        Draw a scatter plot into ``region``.

        NaN coordinates are plotted as 0.

        Raises
        ------
        LengthMismatchError
            If xs and ys differ in length
        EmptyInputError
            If no points are supplied
        """
        xs, ys = self._points(xs, ys)
        panel = ScatterPanel(xs, ys, x_label, y_label, title)
        self.render_panel(region, panel)
        return panel

    def draw_histogram(self, region, values, label: str,
                       bucket_count: int = DEFAULT_BUCKET_COUNT,
                       title: Optional[str] = None) -> HistogramPanel:
        """
        Draw a histogram into ``region``.

        NaN values are binned as 0. Infinite values are left out of the bins.

        Raises
        ------
        EmptyInputError
            If no values are supplied, or none of them is finite
        """
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be >= 1, got {bucket_count}")
        values = check_nonempty(as_series(values, 'values'), 'values')
        values, n_nan = nan_to_zero(values)
        if n_nan:
            logger.debug("Histogram '%s': %d NaN values plotted as 0", label, n_nan)
        n_inf = int(np.isinf(values).sum())
        if n_inf == len(values):
            raise EmptyInputError(f"Histogram '{label}' has no finite values")
        if n_inf:
            logger.debug("Histogram '%s': %d infinite values left out", label, n_inf)
        panel = HistogramPanel(_readonly(values), label, int(bucket_count), title)
        self.render_panel(region, panel)
        return panel

    def draw_scatter_with_line(self, region, xs, ys, slope: float, intercept: float,
                               x_label: str, y_label: str,
                               title: Optional[str] = None) -> ScatterWithLinePanel:
        """
        Draw a scatter plot plus the line ``y = slope * x + intercept``.

        The line is sampled at the same x positions as the points.

        Raises
        ------
        LengthMismatchError
            If xs and ys differ in length
        EmptyInputError
            If no points are supplied
        """
        xs, ys = self._points(xs, ys)
        panel = ScatterWithLinePanel(
            xs, ys, float(slope), float(intercept), x_label, y_label, title
        )
        self.render_panel(region, panel)
        return panel

    def draw_line_chart(self, region, lines: Sequence[LineSeries], title: str,
                        x_label: str, y_label: str) -> LineChartPanel:
        """Draw named lines with a legend; lines are drawn in the given order."""
        if not lines:
            raise EmptyInputError("No lines to draw")
        checked = []
        for line in lines:
            xs, ys = check_paired(line.xs, line.ys, f"{line.name} x", f"{line.name} y")
            check_nonempty(xs, line.name)
            checked.append(LineSeries(line.name, _readonly(xs), _readonly(ys),
                                      line.color, line.zorder))
        panel = LineChartPanel(tuple(checked), title, x_label, y_label)
        self.render_panel(region, panel)
        return panel

    def _points(self, xs, ys):
        xs, ys = check_paired(xs, ys)
        check_nonempty(xs, 'points')
        xs, nan_x = nan_to_zero(xs)
        ys, nan_y = nan_to_zero(ys)
        if nan_x or nan_y:
            logger.debug("Scatter: %d x and %d y NaN coordinates plotted as 0",
                         nan_x, nan_y)
        return _readonly(xs), _readonly(ys)

    @abstractmethod
    def new_canvas(self, width: float, height: float, dpi: int):
        """
        Create an empty canvas.

        Parameters
        ----------
        width, height : float
            Canvas size in inches
        dpi : int
            Raster resolution
        """
        pass

    @abstractmethod
    def add_region(self, canvas, left: float, bottom: float,
                   width: float, height: float):
        """
        Reserve a rectangular region of ``canvas``.

        Coordinates are fractions of the canvas with the origin at the
        bottom-left corner.
        """
        pass

    @abstractmethod
    def render_panel(self, region, panel) -> None:
        """Rasterize one validated panel into ``region``."""
        pass

    @abstractmethod
    def save_canvas(self, canvas, path: str) -> None:
        """Encode ``canvas`` as an image file at ``path``."""
        pass
