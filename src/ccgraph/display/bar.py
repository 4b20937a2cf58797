"""Bar chart rendering.

Each day is one row of ``width`` cells. Filled cells take the color of the
day's cost tier; threshold markers appear only in the unfilled part of a row,
so a bar always hides the markers it passes.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
from enum import StrEnum

import msgspec
from rich.console import Console
from rich.console import ConsoleOptions
from rich.console import RenderResult
from rich.text import Text

from ccgraph.display.rich import FILL_GLYPH
from ccgraph.display.rich import MARKER_GLYPH
from ccgraph.display.rich import PRO_MARKER_COLOR
from ccgraph.display.rich import PRO_MAX_MARKER_COLOR
from ccgraph.display.rich import format_amount
from ccgraph.display.rich import format_cost
from ccgraph.display.rich import format_date_label
from ccgraph.display.rich import peak_suffix
from ccgraph.models import RenderOptions
from ccgraph.models import Thresholds
from ccgraph.models import Tier
from ccgraph.models import UsageDataset
from ccgraph.models import UsageRecord
from ccgraph.scale import bar_length
from ccgraph.scale import marker_column
from ccgraph.scale import select_scale

LABEL_WIDTH = 10


class CellKind(StrEnum):
    """What occupies a bar cell."""

    FILL = "fill"
    MARKER = "marker"
    EMPTY = "empty"


class BarCell(msgspec.Struct, frozen=True):
    """A single cell of a bar row."""

    kind: CellKind
    color: str | None = None

    @property
    def glyph(self) -> str:
        match self.kind:
            case CellKind.FILL:
                return FILL_GLYPH
            case CellKind.MARKER:
                return MARKER_GLYPH
            case CellKind.EMPTY:
                return " "


def marker_columns(
    scale: Decimal,
    width: int,
    thresholds: Thresholds,
) -> dict[int, str]:
    """Map marker columns to their colors for thresholds within scale.

    If both thresholds land on one column the higher one wins.
    """
    columns: dict[int, str] = {}
    for amount, color in (
        (thresholds.pro, PRO_MARKER_COLOR),
        (thresholds.pro_max, PRO_MAX_MARKER_COLOR),
    ):
        column = marker_column(amount, scale, width)
        if column is not None:
            columns[column] = color
    return columns


def layout_bar_row(
    cost: Decimal,
    scale: Decimal,
    width: int,
    thresholds: Thresholds,
    show_threshold: bool = True,
) -> list[BarCell]:
    """Lay out the cells of one bar row.

    Args:
        cost: The day's cost
        scale: Cost mapped to the full row width
        width: Number of cells
        thresholds: Plan thresholds for tiers and markers
        show_threshold: Whether to place threshold markers

    Returns:
        Exactly ``width`` cells
    """
    filled = bar_length(cost, scale, width)
    fill_color = thresholds.tier_for(cost).color
    markers = marker_columns(scale, width, thresholds) if show_threshold else {}

    cells = []
    for column in range(width):
        if column < filled:
            cells.append(BarCell(CellKind.FILL, fill_color))
        elif column in markers:
            cells.append(BarCell(CellKind.MARKER, markers[column]))
        else:
            cells.append(BarCell(CellKind.EMPTY))
    return cells


def render_cells(cells: list[BarCell]) -> Text:
    """Render laid-out cells as styled text."""
    text = Text()
    for cell in cells:
        text.append(cell.glyph, style=cell.color or "")
    return text


def render_bar_row(
    record: UsageRecord,
    scale: Decimal,
    options: RenderOptions,
    is_peak: bool = False,
) -> Text:
    """Render a labeled bar row for one day."""
    label = f"{format_date_label(record.date)}{peak_suffix(is_peak)}"

    text = Text()
    text.append(f"{label:<{LABEL_WIDTH}} ", style="bright_black")
    text.append_text(
        render_cells(
            layout_bar_row(
                record.cost,
                scale,
                options.width,
                options.thresholds,
                options.show_threshold,
            )
        )
    )
    text.append(f" {format_cost(record.cost)}", style="white")
    return text


def render_legend(scale: Decimal, thresholds: Thresholds) -> list[Text]:
    """Render legend lines for tiers and the thresholds within scale."""
    pro = format_amount(thresholds.pro)
    pro_max = format_amount(thresholds.pro_max)
    ceiling = format_amount(scale)

    lines = [Text("Legend:", style="dim")]

    line = Text(FILL_GLYPH, style=Tier.WITHIN_PRO.color)
    line.append(f" < {pro} (Less than Pro plan)")
    lines.append(line)

    if scale >= thresholds.pro:
        line = Text(FILL_GLYPH, style=Tier.EXCEEDS_PRO.color)
        line.append(f" {pro}-{pro_max} (Exceeds Pro plan) ")
        line.append(MARKER_GLYPH, style=PRO_MARKER_COLOR)
        line.append(f" {pro} line (scale: {ceiling})")
        lines.append(line)

    if scale >= thresholds.pro_max:
        line = Text(FILL_GLYPH, style=Tier.EXCEEDS_PRO_MAX.color)
        line.append(f" >= {pro_max} (Exceeds Pro Max plan) ")
        line.append(MARKER_GLYPH, style=PRO_MAX_MARKER_COLOR)
        line.append(f" {pro_max} line (scale: {ceiling})")
        lines.append(line)

    return lines


class BarChart:
    """Rich renderable for a bar-per-day usage chart."""

    def __init__(self, dataset: UsageDataset, options: RenderOptions):
        """Initialize chart with a normalized dataset.

        Args:
            dataset: Sorted usage records
            options: Resolved render options
        """
        self.dataset = dataset
        self.options = options
        self.scale = select_scale(dataset.max_cost())

    def rows(self) -> Iterator[Text]:
        """Yield one rendered row per record."""
        for record, is_peak in zip(self.dataset.records, self.dataset.peaks()):
            yield render_bar_row(record, self.scale, self.options, is_peak=is_peak)

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield from self.rows()

        if self.options.show_threshold:
            yield Text()
            yield from render_legend(self.scale, self.options.thresholds)
