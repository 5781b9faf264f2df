"""
Test metric aggregation and comparison charts.
"""

from pathlib import Path

import numpy as np
import pytest

from pyregplot import (
    EmptyInputError,
    IncompleteSeriesError,
    LengthMismatchError,
    MetricsAggregator,
    PlotConfig,
)

SMALL = PlotConfig(metrics_figsize=(2.0, 1.0), dpi=40)


@pytest.fixture
def metrics():
    agg = MetricsAggregator()
    for epoch in range(1, 4):
        agg.record('rmse', epoch, 3.0 / epoch)
        agg.record('mse', epoch, 9.0 / epoch ** 2)
    return agg


class TestRecording:
    """Test accumulation."""

    def test_record_appends(self, metrics):
        """Test values accumulate per metric."""
        np.testing.assert_allclose(metrics.series('rmse'), [3.0, 1.5, 1.0])
        assert len(metrics) == 2
        assert 'mse' in metrics

    def test_names_sorted(self, metrics):
        """Test names are reported in lexicographic order."""
        assert metrics.names == ['mse', 'rmse']

    def test_record_epoch(self):
        """Test recording a whole epoch at once."""
        agg = MetricsAggregator()
        agg.record_epoch(1, {'loss': 2.0, 'mae': 1.0})
        agg.record_epoch(2, {'loss': 1.0, 'mae': 0.5})
        np.testing.assert_allclose(agg.series('loss'), [2.0, 1.0])

    def test_callback(self):
        """Test the training-loop hook records into its aggregator."""
        agg = MetricsAggregator()
        hook = agg.callback()
        hook(1, 'loss', 0.25)
        np.testing.assert_allclose(agg.series('loss'), [0.25])

    def test_instances_independent(self):
        """Test there is no shared state between aggregators."""
        a, b = MetricsAggregator(), MetricsAggregator()
        a.record('loss', 1, 1.0)
        assert 'loss' not in b

    def test_series_copy(self, metrics):
        """Test returned series do not alias internal storage."""
        values = metrics.series('mse')
        values[0] = -1.0
        assert metrics.series('mse')[0] == 9.0

    def test_unknown_series(self, metrics):
        """Test reading an unrecorded metric fails."""
        with pytest.raises(KeyError):
            metrics.series('accuracy')

    def test_clear(self, metrics):
        """Test clearing removes every series."""
        metrics.clear()
        assert len(metrics) == 0


class TestRenderComparison:
    """Test chart rendering."""

    def test_all_series_drawn(self, metrics, recorder, tmp_path):
        """Test one line per metric over epochs 1..N."""
        metrics.render_comparison(3, tmp_path / 'm.png', renderer=recorder)
        panel = recorder.last_canvas.regions[0].panels[0]
        assert panel.kind == 'line_chart'
        assert [line.name for line in panel.lines] == ['mse', 'rmse']
        for line in panel.lines:
            np.testing.assert_array_equal(line.xs, [1.0, 2.0, 3.0])

    def test_deterministic_colors(self, recorder, tmp_path):
        """Test colors depend on name order, not insertion order."""
        first, second = MetricsAggregator(), MetricsAggregator()
        for name in ('rmse', 'mse', 'mae'):
            first.record(name, 1, 1.0)
        for name in ('mae', 'rmse', 'mse'):
            second.record(name, 1, 1.0)

        first.render_comparison(1, tmp_path / 'a.png', renderer=recorder)
        colors_a = [(l.name, l.color, l.zorder)
                    for l in recorder.last_canvas.regions[0].panels[0].lines]
        second.render_comparison(1, tmp_path / 'b.png', renderer=recorder)
        colors_b = [(l.name, l.color, l.zorder)
                    for l in recorder.last_canvas.regions[0].panels[0].lines]
        assert colors_a == colors_b
        assert [name for name, _, _ in colors_a] == ['mae', 'mse', 'rmse']

    def test_caller_order(self, metrics, recorder, tmp_path):
        """Test a caller-supplied order sets colors and z-order."""
        metrics.render_comparison(3, tmp_path / 'm.png', order=['rmse', 'mse'],
                                  renderer=recorder)
        lines = recorder.last_canvas.regions[0].panels[0].lines
        assert [line.name for line in lines] == ['rmse', 'mse']
        assert lines[0].color == SMALL.metric_palette[0]
        assert lines[0].zorder < lines[1].zorder

    def test_bad_order(self, metrics, recorder, tmp_path):
        """Test an order that omits a metric fails."""
        with pytest.raises(ValueError, match="exactly once"):
            metrics.render_comparison(3, tmp_path / 'm.png', order=['mse'],
                                      renderer=recorder)

    def test_incomplete_series(self, metrics, recorder, tmp_path):
        """Test a short series fails naming the metric."""
        metrics.record('mae', 1, 0.5)
        with pytest.raises(IncompleteSeriesError, match="mae") as exc:
            metrics.render_comparison(3, tmp_path / 'm.png', renderer=recorder)
        assert exc.value.metric_name == 'mae'
        assert exc.value.length == 1
        assert exc.value.expected == 3
        assert not (tmp_path / 'm.png').exists()

    def test_too_many_values(self, metrics, recorder, tmp_path):
        """Test a series longer than epoch_count is not truncated."""
        with pytest.raises(LengthMismatchError):
            metrics.render_comparison(2, tmp_path / 'm.png', renderer=recorder)

    def test_nothing_recorded(self, recorder, tmp_path):
        """Test rendering without metrics fails."""
        with pytest.raises(EmptyInputError):
            MetricsAggregator().render_comparison(3, tmp_path / 'm.png', renderer=recorder)

    def test_zero_epochs(self, metrics, recorder, tmp_path):
        """Test epoch_count < 1 fails."""
        with pytest.raises(EmptyInputError):
            metrics.render_comparison(0, tmp_path / 'm.png', renderer=recorder)

    def test_failure_keeps_series(self, metrics, recorder, tmp_path):
        """Test a failed render leaves recorded data intact."""
        with pytest.raises(IncompleteSeriesError):
            metrics.render_comparison(4, tmp_path / 'm.png', renderer=recorder)
        np.testing.assert_allclose(metrics.series('rmse'), [3.0, 1.5, 1.0])

    def test_default_path(self, metrics, in_tmp_cwd):
        """Test the chart is written to plot/comparison_metrics.png."""
        path = metrics.render_comparison(3, config=SMALL)
        assert path == Path('plot') / 'comparison_metrics.png'
        assert (in_tmp_cwd / path).is_file()

    def test_failed_write_keeps_previous_file(self, metrics, in_tmp_cwd):
        """Test an aborted render does not touch an earlier image."""
        path = metrics.render_comparison(3, config=SMALL)
        before = path.read_bytes()
        metrics.record('mae', 1, 0.1)
        with pytest.raises(IncompleteSeriesError):
            metrics.render_comparison(3, config=SMALL)
        assert path.read_bytes() == before
