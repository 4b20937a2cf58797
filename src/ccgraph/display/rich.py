"""Rich-based rendering primitives for ccgraph."""

from __future__ import annotations

from datetime import date
from decimal import Decimal


FILL_GLYPH = "█"
MARKER_GLYPH = "│"
PEAK_MARK = " 👑"
NO_PEAK_MARK = "   "

PRO_MARKER_COLOR = "yellow"
PRO_MAX_MARKER_COLOR = "red"


def format_date_label(day: date) -> str:
    """Format a date as zero-padded MM/DD."""
    return f"{day.month:02d}/{day.day:02d}"


def format_cost(cost: Decimal) -> str:
    """Format a cost in dollars with cents."""
    return f"${cost:,.2f}"


def format_amount(amount: Decimal) -> str:
    """Format a threshold amount, dropping cents for whole dollars."""
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_tokens(tokens: int) -> str:
    """Format a token count with thousands separators."""
    return f"{tokens:,}"


def format_axis_value(value: float) -> str:
    """Format a y-axis value right-aligned to a fixed width."""
    return f"{value:.2f}".rjust(8)


def peak_suffix(is_peak: bool) -> str:
    """Return the mark appended to the peak day's label."""
    return PEAK_MARK if is_peak else NO_PEAK_MARK
