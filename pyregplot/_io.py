"""
Image output.

Files are written to a temporary name in the destination directory and
moved into place, so a failed write leaves earlier files untouched.
"""

import logging
import os
import tempfile
from pathlib import Path

from .exceptions import PlotWriteError

logger = logging.getLogger(__name__)


def default_path(filename, config):
    """Path of ``filename`` inside the configured output directory."""
    return Path(config.output_dir) / filename


def ensure_output_dir(path) -> Path:
    """Create the parent directory of ``path`` if missing."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PlotWriteError(path, e) from e
    return path


def write_canvas(renderer, canvas, path) -> Path:
    """Rasterize ``canvas`` with ``renderer`` into ``path``."""
    path = ensure_output_dir(path)
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.stem}-", suffix=path.suffix or ".png"
        )
        os.close(fd)
        os.chmod(tmp_name, 0o666 & ~_current_umask())
    except OSError as e:
        raise PlotWriteError(path, e) from e

    try:
        renderer.save_canvas(canvas, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        _discard(tmp_name)
        raise PlotWriteError(path, e) from e
    except Exception:
        _discard(tmp_name)
        raise

    logger.info("Plot saved as %s", path)
    return path


def _current_umask():
    # os.umask can only be read by setting it
    mask = os.umask(0o022)
    os.umask(mask)
    return mask


def _discard(tmp_name):
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass
