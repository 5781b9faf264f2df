"""
Per-epoch metric collection and comparison charts.

A ``MetricsAggregator`` is owned by one training run and handed to the
training loop's callback. It does no locking: callers recording from
several threads must serialize calls to ``record``.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np

from ._io import default_path, write_canvas
from ._renderers import LineSeries, RendererBase, get_renderer
from .config import DEFAULT_CONFIG, PlotConfig
from .exceptions import EmptyInputError, IncompleteSeriesError, LengthMismatchError

logger = logging.getLogger(__name__)

COMPARISON_FILENAME = "comparison_metrics.png"


class MetricsAggregator:
    """
    Named scalar series, one value appended per epoch.

    Examples
    --------
    >>> metrics = MetricsAggregator()
    >>> for epoch in range(1, 4):
    ...     metrics.record('mse', epoch, loss[epoch])
    ...     metrics.record('rmse', epoch, loss[epoch] ** 0.5)
    >>> metrics.render_comparison(3)
    PosixPath('plot/comparison_metrics.png')
    """

    def __init__(self):
        self._series: Dict[str, List[float]] = {}

    def record(self, metric_name: str, epoch_index: int, value: float) -> None:
        """Append ``value`` to the series of ``metric_name``."""
        value = float(value)
        self._series.setdefault(metric_name, []).append(value)
        logger.debug("Epoch %s: %s = %g", epoch_index, metric_name, value)

    def record_epoch(self, epoch_index: int, metrics: Mapping[str, float]) -> None:
        """Record every metric of one epoch."""
        for name, value in metrics.items():
            self.record(name, epoch_index, value)

    def callback(self) -> Callable[[int, str, float], None]:
        """Per-step hook ``(epoch_index, metric_name, value)`` for a training loop."""
        def on_metric(epoch_index, metric_name, value):
            self.record(metric_name, epoch_index, value)
        return on_metric

    @property
    def names(self) -> List[str]:
        """Recorded metric names, sorted."""
        return sorted(self._series)

    def series(self, metric_name: str) -> np.ndarray:
        """Copy of the values recorded for ``metric_name``."""
        if metric_name not in self._series:
            raise KeyError(f"No values recorded for metric '{metric_name}'")
        return np.array(self._series[metric_name], dtype=np.float64)

    def clear(self) -> None:
        self._series.clear()

    def __contains__(self, metric_name):
        return metric_name in self._series

    def __len__(self):
        return len(self._series)

    def _ordered_names(self, order):
        if order is None:
            return sorted(self._series)
        order = list(order)
        if sorted(order) != sorted(self._series):
            raise ValueError(
                f"order must list each recorded metric exactly once\n"
                f"Recorded: {sorted(self._series)}\n"
                f"Given:    {order}"
            )
        return order

    def render_comparison(
        self,
        epoch_count: int,
        output_path: Optional[Union[str, Path]] = None,
        order: Optional[Sequence[str]] = None,
        title: str = "Final Moving Average Loss Across Epochs",
        x_label: str = "Epochs",
        y_label: str = "Loss",
        renderer: Union[str, RendererBase, None] = None,
        config: Optional[PlotConfig] = None,
    ) -> Path:
        """
        Plot every recorded series against epochs 1..epoch_count.

        Colors and drawing order follow ``order`` if given, else metric
        names sorted lexicographically.

        Parameters
        ----------
        epoch_count : int
            Number of epochs each series must cover
        output_path : str or Path, optional
            Image path (default: ``plot/comparison_metrics.png``)
        order : sequence of str, optional
            Every recorded metric name exactly once, in rendering order
        title, x_label, y_label : str
            Chart annotations
        renderer : str or RendererBase, optional
            Renderer name or instance (default: matplotlib)
        config : PlotConfig, optional
            Figure size, palette and line width

        Returns
        -------
        Path
            Written image file

        Raises
        ------
        IncompleteSeriesError
            If a series has fewer than ``epoch_count`` values
        LengthMismatchError
            If a series has more than ``epoch_count`` values
        EmptyInputError
            If nothing was recorded or ``epoch_count`` < 1
        PlotWriteError
            If the image cannot be written
        """
        if epoch_count < 1:
            raise EmptyInputError(f"epoch_count must be >= 1, got {epoch_count}")
        if not self._series:
            raise EmptyInputError("No metrics recorded")

        names = self._ordered_names(order)
        for name in names:
            length = len(self._series[name])
            if length < epoch_count:
                raise IncompleteSeriesError(name, length, epoch_count)
            if length > epoch_count:
                raise LengthMismatchError(
                    f"Metric '{name}' has {length} values, more than "
                    f"{epoch_count} epochs"
                )

        config = config or DEFAULT_CONFIG
        renderer = get_renderer(renderer, config=config)
        if output_path is None:
            output_path = default_path(COMPARISON_FILENAME, config)

        epochs = np.arange(1, epoch_count + 1, dtype=np.float64)
        palette = config.metric_palette
        lines = [
            LineSeries(name, epochs, self.series(name),
                       color=palette[i % len(palette)], zorder=i + 2)
            for i, name in enumerate(names)
        ]

        canvas = renderer.new_canvas(*config.metrics_figsize, config.dpi)
        region = renderer.add_region(canvas, 0.0, 0.0, 1.0, 1.0)
        renderer.draw_line_chart(region, lines, title, x_label, y_label)
        return write_canvas(renderer, canvas, output_path)

    def __repr__(self):
        lengths = {name: len(self._series[name]) for name in self.names}
        return f"MetricsAggregator({lengths})"


__all__ = ['MetricsAggregator', 'COMPARISON_FILENAME']
