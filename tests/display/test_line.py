"""Tests for line chart rendering."""

from __future__ import annotations

import re
from decimal import Decimal
from unittest.mock import patch

from ccgraph.display import line as line_module
from ccgraph.display.line import LineChart
from ccgraph.display.line import build_line_plot
from ccgraph.display.line import render_index
from ccgraph.display.rich import MARKER_GLYPH
from ccgraph.display.rich import PEAK_MARK
from ccgraph.display.rich import format_axis_value
from ccgraph.models import ChartKind
from ccgraph.models import RenderOptions
from ccgraph.models import UsageDataset

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class TestFormatAxisValue:
    """Tests for y-axis label formatting."""

    def test_fixed_width(self):
        """Values are right-aligned to eight characters."""
        assert format_axis_value(5) == "    5.00"
        assert format_axis_value(1234.5) == " 1234.50"


class TestBuildLinePlot:
    """Tests for build_line_plot."""

    def test_plot_has_axis_labels(self):
        """The plot carries formatted y-axis labels up to the maximum."""
        plot = strip_ansi(build_line_plot([Decimal(5), Decimal(25)], height=15, width=80))

        assert "25.00" in plot
        assert "0.00" in plot

    def test_height_bounds_output(self):
        """Plot does not exceed the requested height."""
        plot = strip_ansi(build_line_plot([Decimal(1), Decimal(3), Decimal(2)], height=15, width=80))
        assert len(plot.rstrip("\n").splitlines()) <= 15

    def test_all_zero_costs(self):
        """A flat zero series still plots."""
        plot = build_line_plot([Decimal(0), Decimal(0)], height=10, width=60)
        assert plot

    def test_plotext_calls(self):
        """Series is plotted in order with fixed-width tick labels."""
        with patch.object(line_module, "plt") as mock_plt:
            mock_plt.build.return_value = "plot"
            result = build_line_plot([Decimal(2), Decimal(8)], height=15, width=30)

        assert result == "plot"
        mock_plt.plotsize.assert_called_once_with(line_module.MIN_PLOT_WIDTH, 15)
        mock_plt.plot.assert_called_once()
        x_values, y_values = mock_plt.plot.call_args.args
        assert x_values == [0, 1]
        assert y_values == [2.0, 8.0]
        ticks, labels = mock_plt.yticks.call_args.args
        assert ticks[-1] == 8.0
        assert all(len(label) == 8 for label in labels)


class TestRenderIndex:
    """Tests for render_index."""

    def test_index_lines(self, two_day_dataset):
        """Each record is listed with index, date and cost."""
        lines = [line.plain for line in render_index(two_day_dataset)]

        assert lines[0] == "Dates:"
        assert lines[1] == "  [0] 01/01: $5.00"
        assert lines[2] == f"  [1] 01/02: $25.00{PEAK_MARK}"

    def test_maximum_computed_once(self, make_dataset):
        """The index scans for the maximum once, not per record."""
        dataset = make_dataset(*((f"2024-03-{day:02d}", day, None) for day in range(1, 31)))

        with patch.object(
            UsageDataset, "max_cost", autospec=True, side_effect=UsageDataset.max_cost
        ) as mock_max:
            lines = render_index(dataset)

        assert mock_max.call_count == 1
        assert lines[-1].plain.endswith(PEAK_MARK)

    def test_ties_marked(self, make_dataset):
        """All maximum records are annotated."""
        dataset = make_dataset(("2024-01-01", 3, None), ("2024-01-02", 3, None))
        lines = [line.plain for line in render_index(dataset)]
        assert all(line.endswith(PEAK_MARK) for line in lines[1:])


class TestLineChart:
    """Tests for the LineChart renderable."""

    def test_renders_plot_and_index(self, two_day_dataset, console_output):
        """Plot output is followed by the date index, without markers."""
        options = RenderOptions(chart_kind=ChartKind.LINE)
        console, buffer = console_output

        with patch.object(line_module, "build_line_plot", return_value="<plot>") as mock_build:
            console.print(LineChart(two_day_dataset, options))

        mock_build.assert_called_once_with(
            [Decimal(5), Decimal(25)], height=15, width=120
        )
        output = buffer.getvalue()
        assert output.index("<plot>") < output.index("Dates:")
        assert "[1] 01/02: $25.00" in output
        assert MARKER_GLYPH not in output
        assert "Legend" not in output
