"""Line chart rendering."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

import plotext as plt
from rich.console import Console
from rich.console import ConsoleOptions
from rich.console import RenderResult
from rich.text import Text

from ccgraph.display.rich import PEAK_MARK
from ccgraph.display.rich import format_axis_value
from ccgraph.display.rich import format_cost
from ccgraph.display.rich import format_date_label
from ccgraph.models import RenderOptions
from ccgraph.models import UsageDataset

Y_TICK_COUNT = 5
MIN_PLOT_WIDTH = 40
MAX_X_TICKS = 10


def build_line_plot(costs: Sequence[Decimal], height: int, width: int) -> str:
    """Plot costs as a connected line and return the canvas as text.

    Args:
        costs: Costs in chronological order
        height: Plot height in rows
        width: Plot width in columns

    Returns:
        The plot, possibly containing ANSI color codes
    """
    values = [float(cost) for cost in costs]
    top = max(values) or 1.0
    ticks = [top * i / (Y_TICK_COUNT - 1) for i in range(Y_TICK_COUNT)]

    plt.clear_figure()
    plt.theme("clear")
    plt.plotsize(max(width, MIN_PLOT_WIDTH), height)
    plt.plot(list(range(len(values))), values, marker="braille")
    plt.ylim(0, top)
    plt.yticks(ticks, [format_axis_value(tick) for tick in ticks])
    x_ticks = list(range(0, len(values), math.ceil(len(values) / MAX_X_TICKS)))
    plt.xticks(x_ticks, [str(i) for i in x_ticks])
    return plt.build()


def render_index(dataset: UsageDataset) -> list[Text]:
    """Render the indexed per-day value list shown under the plot."""
    lines = [Text("Dates:", style="dim")]
    peaks = dataset.peaks()
    for index, record in enumerate(dataset.records):
        crown = PEAK_MARK if peaks[index] else ""
        lines.append(
            Text(
                f"  [{index}] {format_date_label(record.date)}: "
                f"{format_cost(record.cost)}{crown}",
                style="dim",
            )
        )
    return lines


class LineChart:
    """Rich renderable for a cost-over-time line plot."""

    def __init__(self, dataset: UsageDataset, options: RenderOptions):
        self.dataset = dataset
        self.options = options

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        plot = build_line_plot(
            self.dataset.costs(),
            height=self.options.height,
            width=options.max_width,
        )
        yield Text.from_ansi(plot, style="green")
        yield Text()
        yield from render_index(self.dataset)
