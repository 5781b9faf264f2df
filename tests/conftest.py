"""
Shared fixtures.

``RecordingRenderer`` intercepts panel draws so tests can check panel
types and placement without inspecting pixels.
"""

import pytest

from pyregplot._renderers import RendererBase


class RecordingCanvas:
    def __init__(self, width, height, dpi):
        self.width = width
        self.height = height
        self.dpi = dpi
        self.regions = []


class RecordingRegion:
    def __init__(self, rect):
        self.rect = rect
        self.panels = []


class RecordingRenderer(RendererBase):
    """Renderer that records panels and writes a text description."""

    name = "recording"

    def __init__(self):
        self.canvases = []

    def new_canvas(self, width, height, dpi):
        canvas = RecordingCanvas(width, height, dpi)
        self.canvases.append(canvas)
        return canvas

    def add_region(self, canvas, left, bottom, width, height):
        region = RecordingRegion((left, bottom, width, height))
        canvas.regions.append(region)
        return region

    def render_panel(self, region, panel):
        region.panels.append(panel)

    def save_canvas(self, canvas, path):
        with open(path, 'w') as f:
            for region in canvas.regions:
                kinds = ",".join(p.kind for p in region.panels)
                f.write(f"{region.rect} {kinds}\n")

    @property
    def last_canvas(self):
        return self.canvases[-1]


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    """Run a test with the working directory set to a fresh temp dir."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
