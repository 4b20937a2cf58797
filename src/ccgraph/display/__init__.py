"""Display utilities for ccgraph.

This module provides the Rich renderables for the bar chart, the line chart
and the totals summary, plus the formatting primitives they share.
"""
from __future__ import annotations

from ccgraph.display.bar import BarCell
from ccgraph.display.bar import BarChart
from ccgraph.display.bar import CellKind
from ccgraph.display.bar import layout_bar_row
from ccgraph.display.bar import render_legend
from ccgraph.display.line import LineChart
from ccgraph.display.line import build_line_plot
from ccgraph.display.rich import format_cost
from ccgraph.display.rich import format_date_label
from ccgraph.display.rich import format_tokens
from ccgraph.display.totals import TotalsSummary
from ccgraph.display.totals import summarize_totals

__all__ = [
    # Bar chart
    "BarChart",
    "BarCell",
    "CellKind",
    "layout_bar_row",
    "render_legend",
    # Line chart
    "LineChart",
    "build_line_plot",
    # Totals
    "TotalsSummary",
    "summarize_totals",
    # Formatting
    "format_cost",
    "format_date_label",
    "format_tokens",
]
