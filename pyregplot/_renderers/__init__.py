"""
Renderer selection.

Every plotting entry point accepts ``renderer=`` as either a registered
name or a ready ``RendererBase`` instance.
"""

import warnings
from typing import Optional, Union

from ..config import PlotConfig
from .base import (
    DEFAULT_BUCKET_COUNT,
    HistogramPanel,
    LineChartPanel,
    LineSeries,
    RendererBase,
    ScatterPanel,
    ScatterWithLinePanel,
)
from .matplotlib_renderer import MatplotlibRenderer

_RENDERERS = {
    'matplotlib': MatplotlibRenderer,
}


def get_renderer(
    renderer: Union[str, RendererBase, None] = 'matplotlib',
    config: Optional[PlotConfig] = None,
) -> RendererBase:
    """
    Get a renderer.

    Parameters
    ----------
    renderer : str, RendererBase or None
        - None or 'matplotlib': Agg raster output
        - RendererBase instance: returned unchanged, keeping its own
          styling config
    config : PlotConfig, optional
        Styling passed to a newly created renderer. An instance whose
        config differs from this one triggers a warning, since the caller
        sizes the canvas from ``config`` while the instance styles panels
        from its own.

    Returns
    -------
    RendererBase
        Renderer instance

    Examples
    --------
    >>> renderer = get_renderer()
    >>> renderer = get_renderer('matplotlib', config=PlotConfig(dpi=150))
    """
    if isinstance(renderer, RendererBase):
        own = getattr(renderer, 'config', None)
        if config is not None and own is not None and own != config:
            warnings.warn(
                f"{type(renderer).__name__} keeps its own styling config; "
                f"pass config= to the renderer constructor to change colors and markers"
            )
        return renderer
    if renderer is None:
        renderer = 'matplotlib'

    try:
        cls = _RENDERERS[renderer]
    except KeyError:
        raise ValueError(
            f"Unknown renderer: '{renderer}'\n"
            f"Valid options: {list_available_renderers()}"
        ) from None
    return cls(config=config)


def list_available_renderers() -> list:
    """List names of available renderers."""
    return sorted(_RENDERERS)


__all__ = [
    'get_renderer',
    'list_available_renderers',
    'RendererBase',
    'MatplotlibRenderer',
    'ScatterPanel',
    'HistogramPanel',
    'ScatterWithLinePanel',
    'LineChartPanel',
    'LineSeries',
    'DEFAULT_BUCKET_COUNT',
]
