"""
Pair plot: an N x N grid of histograms and scatter plots.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from ._io import default_path, write_canvas
from ._renderers import RendererBase, get_renderer
from ._utils import as_series
from .config import DEFAULT_CONFIG, PlotConfig
from .exceptions import EmptyInputError, LengthMismatchError
from .table import TableView

logger = logging.getLogger(__name__)


def pair_grid_filename(labels: Sequence[str]) -> str:
    """File name of the pair grid for ``labels``: ``data_<l1>_..._<lN>.png``."""
    return "data_" + "_".join(labels) + ".png"


def grid_cell_rect(row: int, col: int, grid_dim: int) -> Tuple[float, float, float, float]:
    """
    Canvas fractions ``(left, bottom, width, height)`` of cell (row, col).

    Columns run left to right; row 0 is the bottom row.
    """
    size = 1.0 / grid_dim
    return col * size, row * size, size, size


def render_pair_grid(
    columns: Union[Sequence[Tuple[str, Sequence[float]]], TableView],
    output_path: Optional[Union[str, Path]] = None,
    renderer: Union[str, RendererBase, None] = None,
    config: Optional[PlotConfig] = None,
) -> Path:
    """
    Render a pair plot of the given columns.

    Cell (row, col) shows the histogram of column ``col`` when row == col,
    otherwise the scatter of column ``col`` (x) against column ``row`` (y).

    Parameters
    ----------
    columns : list of (name, values) or TableView
        Series to compare, in grid order
    output_path : str or Path, optional
        Image path (default: ``plot/data_<labels>.png``)
    renderer : str or RendererBase, optional
        Renderer name or instance (default: matplotlib)
    config : PlotConfig, optional
        Tile size, bucket count and styling

    Returns
    -------
    Path
        Written image file

    Raises
    ------
    EmptyInputError
        If no columns (or zero-length columns) are supplied
    LengthMismatchError
        If the columns differ in length
    PlotWriteError
        If the image cannot be written

    Examples
    --------
    >>> table = TableView({'TRIP_MILES': miles, 'FARE': fares})
    >>> render_pair_grid(table)
    PosixPath('plot/data_TRIP_MILES_FARE.png')
    """
    config = config or DEFAULT_CONFIG
    renderer = get_renderer(renderer, config=config)

    if isinstance(columns, TableView):
        columns = columns.pairs()
    labels = [str(name) for name, _ in columns]
    series = [as_series(values, name) for name, values in columns]

    grid_dim = len(labels)
    if grid_dim == 0:
        raise EmptyInputError("No columns to plot")
    lengths = {len(s) for s in series}
    if len(lengths) > 1:
        raise LengthMismatchError(
            f"Columns differ in length: {dict(zip(labels, map(len, series)))}"
        )

    if output_path is None:
        output_path = default_path(pair_grid_filename(labels), config)

    side = config.tile_size * grid_dim
    canvas = renderer.new_canvas(side, side, config.dpi)

    for row in range(grid_dim):
        for col in range(grid_dim):
            region = renderer.add_region(canvas, *grid_cell_rect(row, col, grid_dim))
            if row == col:
                renderer.draw_histogram(region, series[col], labels[col],
                                        bucket_count=config.bucket_count)
            else:
                renderer.draw_scatter(region, series[col], series[row],
                                      labels[col], labels[row])

    logger.debug("Pair grid %dx%d with %d rows per column",
                 grid_dim, grid_dim, next(iter(lengths)))
    return write_canvas(renderer, canvas, output_path)


__all__ = ['render_pair_grid', 'pair_grid_filename', 'grid_cell_rect']
