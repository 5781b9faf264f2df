"""
Test the model overlay and raw data plots.
"""

from pathlib import Path

import numpy as np
import pytest

from pyregplot import (
    EmptyInputError,
    LengthMismatchError,
    PlotConfig,
    render_data,
    render_model_fit,
)

SMALL = PlotConfig(model_figsize=(2.0, 1.0), dpi=40)


class TestModelFit:
    """Test render_model_fit."""

    def test_line_through_points(self, recorder, tmp_path):
        """Test the line passes through w*x + b at each x in xs."""
        render_model_fit([0, 1, 2], [1, 3, 5], weight=2, bias=1,
                         x_label='TRIP_MILES', y_label='FARE',
                         output_path=tmp_path / 'model.png', renderer=recorder)
        (region,) = recorder.last_canvas.regions
        (panel,) = region.panels
        assert panel.kind == 'scatter_with_line'
        np.testing.assert_allclose(panel.xs, [0, 1, 2])
        np.testing.assert_allclose(panel.line_ys, 2 * panel.xs + 1, atol=1e-12)
        assert panel.title == 'Model Plot'

    def test_unsorted_xs_reused(self, recorder, tmp_path):
        """Test the line samples exactly the data's x positions."""
        xs = [3.0, -1.0, 7.5]
        render_model_fit(xs, [0, 0, 0], 0.5, -2.0, 'x', 'y',
                         output_path=tmp_path / 'model.png', renderer=recorder)
        panel = recorder.last_canvas.regions[0].panels[0]
        np.testing.assert_array_equal(panel.xs, xs)
        np.testing.assert_allclose(panel.line_ys, [-0.5, -2.5, 1.75])

    def test_weight_vector(self, recorder, tmp_path):
        """Test a one-element weights vector is accepted."""
        render_model_fit([1, 2], [2, 4], np.array([[2.0]]), [0.0], 'x', 'y',
                         output_path=tmp_path / 'model.png', renderer=recorder)
        panel = recorder.last_canvas.regions[0].panels[0]
        assert panel.slope == 2.0
        assert panel.intercept == 0.0

    def test_weight_vector_too_long(self, recorder, tmp_path):
        """Test a multi-feature weights vector is rejected."""
        with pytest.raises(ValueError, match="weight"):
            render_model_fit([1, 2], [2, 4], [1.0, 2.0], 0.0, 'x', 'y',
                             output_path=tmp_path / 'model.png', renderer=recorder)

    def test_length_mismatch(self, recorder, tmp_path):
        """Test unequal xs and ys fail before anything is drawn."""
        with pytest.raises(LengthMismatchError):
            render_model_fit([1, 2, 3], [1, 2], 1.0, 0.0, 'x', 'y',
                             output_path=tmp_path / 'model.png', renderer=recorder)
        assert recorder.canvases == []

    def test_empty(self, recorder, tmp_path):
        """Test zero points fail."""
        with pytest.raises(EmptyInputError):
            render_model_fit([], [], 1.0, 0.0, 'x', 'y',
                             output_path=tmp_path / 'model.png', renderer=recorder)

    def test_default_path(self, in_tmp_cwd):
        """Test default output under plot/, created if missing."""
        path = render_model_fit([0, 1, 2], [1, 3, 5], 2.0, 1.0, 'x', 'y', config=SMALL)
        assert path == Path('plot') / 'model_plot.png'
        assert (in_tmp_cwd / path).is_file()
        # Second call into the existing directory succeeds
        render_model_fit([0, 1, 2], [1, 3, 5], 2.0, 1.0, 'x', 'y', config=SMALL)


class TestDataPlot:
    """Test render_data."""

    def test_scatter_only(self, recorder, tmp_path):
        """Test a plain scatter titled Data Plot."""
        render_data([1, 2], [3, 4], 'TRIP_MILES', 'FARE',
                    output_path=tmp_path / 'data.png', renderer=recorder)
        panel = recorder.last_canvas.regions[0].panels[0]
        assert panel.kind == 'scatter'
        assert panel.title == 'Data Plot'

    def test_default_path(self, in_tmp_cwd):
        """Test file name built from feature and label."""
        path = render_data([1, 2], [3, 4], 'TRIP_MILES', 'FARE', config=SMALL)
        assert path == Path('plot') / 'data_TRIP_MILES_FARE.png'
        assert (in_tmp_cwd / path).is_file()
