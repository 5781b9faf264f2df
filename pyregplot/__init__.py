"""
PyRegPlot: correlation summaries and diagnostic plots for regression workflows.

Copyright (C) 2024 SGCX
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from .table import TableView
from .correlation import CorrelationMatrix, compute_correlation_matrix
from .grid import render_pair_grid
from .overlay import render_model_fit, render_data
from .metrics import MetricsAggregator
from .config import PlotConfig, DEFAULT_CONFIG
from .exceptions import (
    PlotRegError,
    UnknownColumnError,
    LengthMismatchError,
    EmptyInputError,
    IncompleteSeriesError,
    PlotWriteError,
)

# Import renderer utilities (for advanced users)
from ._renderers import get_renderer, list_available_renderers, RendererBase

__all__ = [
    'TableView',
    'CorrelationMatrix',
    'compute_correlation_matrix',
    'render_pair_grid',
    'render_model_fit',
    'render_data',
    'MetricsAggregator',
    'PlotConfig',
    'DEFAULT_CONFIG',
    'PlotRegError',
    'UnknownColumnError',
    'LengthMismatchError',
    'EmptyInputError',
    'IncompleteSeriesError',
    'PlotWriteError',
    'get_renderer',
    'list_available_renderers',
    'RendererBase',
]
