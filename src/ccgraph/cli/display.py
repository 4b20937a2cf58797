"""Rich display components for ccgraph CLI."""

from __future__ import annotations

from rich.console import Console
from rich.console import ConsoleOptions
from rich.console import RenderResult
from rich.markup import escape
from rich.text import Text

from ccgraph.display.bar import BarChart
from ccgraph.display.line import LineChart
from ccgraph.display.totals import summarize_totals
from ccgraph.errors.types import CcgraphError
from ccgraph.errors.types import ErrorCategory
from ccgraph.models import ChartKind
from ccgraph.models import RenderOptions
from ccgraph.models import UsageDataset

REPORT_TITLE = "📊 Claude Usage Report"


class UsageReport:
    """Rich renderable for the complete report.

    Produces:
    - Title line
    - Bar chart with legend, or line plot with date index
    - Totals summary
    """

    def __init__(self, dataset: UsageDataset, options: RenderOptions):
        """Initialize report.

        Args:
            dataset: Normalized usage records
            options: Resolved render options
        """
        self.dataset = dataset
        self.options = options

    def chart(self) -> BarChart | LineChart:
        """Return the chart renderable for the selected kind."""
        if self.options.chart_kind == ChartKind.LINE:
            return LineChart(self.dataset, self.options)
        return BarChart(self.dataset, self.options)

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield Text()
        yield Text(REPORT_TITLE, style="bold cyan")
        yield Text()
        yield self.chart()
        yield Text()
        yield summarize_totals(self.dataset)


def display_error(console: Console, error: CcgraphError, verbose: bool = False) -> None:
    """Print an error and its remediation.

    Args:
        console: Console to print to, normally stderr
        error: The error that ended the run
        verbose: Whether to include technical details
    """
    report = error.to_report()
    color = "yellow" if report.category == ErrorCategory.INPUT_TIMEOUT else "red"

    console.print(f"[{color}]Error:[/{color}] {escape(report.message)}")
    if report.remediation:
        console.print(report.remediation)
    if verbose and report.details:
        for key, value in report.details.items():
            console.print(f"[dim]{key}: {escape(str(value))}[/dim]")
