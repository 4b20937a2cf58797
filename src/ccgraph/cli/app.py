"""Main CLI application for ccgraph."""

from __future__ import annotations

import logging
import sys
from enum import IntEnum

import typer
from rich.console import Console

from ccgraph.errors.types import CcgraphError
from ccgraph.errors.types import ErrorCategory
from ccgraph.models import ChartKind
from ccgraph.models import Period
from ccgraph.models import RenderOptions

logger = logging.getLogger(__name__)

# Create the main app
app = typer.Typer(
    name="ccusage-graph",
    help="Display ccusage JSON output as terminal graphs.",
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for ccusage-graph."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    INPUT_ERROR = 2
    PARSE_ERROR = 3
    NO_DATA = 4
    CONFIG_ERROR = 5


EXIT_CODES: dict[ErrorCategory, ExitCode] = {
    ErrorCategory.INPUT_TIMEOUT: ExitCode.INPUT_ERROR,
    ErrorCategory.INPUT: ExitCode.INPUT_ERROR,
    ErrorCategory.PARSE: ExitCode.PARSE_ERROR,
    ErrorCategory.NO_USAGE_DATA: ExitCode.NO_DATA,
    ErrorCategory.CONFIGURATION: ExitCode.CONFIG_ERROR,
}


def exit_code_for(error: CcgraphError) -> ExitCode:
    """Map an error to the process exit code."""
    return EXIT_CODES.get(error.category, ExitCode.GENERAL_ERROR)


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    chart_type: ChartKind = typer.Option(
        None, "--type", "-t", help="Graph type (bar, line)"
    ),
    period: Period = typer.Option(
        None, "--period", "-p", help="Time period to display (day, week, month)"
    ),
    no_threshold: bool = typer.Option(
        False, "--no-threshold", help="Hide Pro/Pro Max threshold lines"
    ),
    width: int = typer.Option(
        None, "--width", "-w", min=10, help="Bar chart width in cells"
    ),
    timeout: float = typer.Option(
        None, "--timeout", min=0.0, help="Seconds to wait for input"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Display ccusage JSON output as terminal graphs.

    Example: ccusage daily --json | ccusage-graph --type line
    """
    if version:
        from ccgraph import __version__

        typer.echo(f"ccusage-graph {__version__}")
        raise typer.Exit()

    configure_logging(verbose)

    # Store options in context
    ctx.meta["no_color"] = no_color
    ctx.meta["verbose"] = verbose

    # If no command provided, render the graph from stdin
    if ctx.invoked_subcommand is None:
        run_graph(
            chart_type=chart_type,
            period=period,
            no_threshold=no_threshold,
            width=width,
            timeout=timeout,
            no_color=no_color,
            verbose=verbose,
        )


def resolve_options(
    config,
    chart_type: ChartKind | None = None,
    period: Period | None = None,
    no_threshold: bool = False,
    width: int | None = None,
) -> RenderOptions:
    """Merge command-line flags over configured defaults."""
    return RenderOptions(
        chart_kind=chart_type or config.chart.type,
        show_threshold=config.chart.show_threshold and not no_threshold,
        period=period or config.chart.period,
        thresholds=config.thresholds.to_thresholds(),
        width=width or config.chart.width,
        height=config.chart.height,
    )


def run_graph(
    chart_type: ChartKind | None = None,
    period: Period | None = None,
    no_threshold: bool = False,
    width: int | None = None,
    timeout: float | None = None,
    no_color: bool = False,
    verbose: bool = False,
) -> None:
    """Read stdin, normalize it and print the report."""
    from ccgraph.cli.display import UsageReport
    from ccgraph.cli.display import display_error
    from ccgraph.config.settings import get_config
    from ccgraph.input import read_input
    from ccgraph.schema import load_dataset

    err_console = Console(stderr=True, no_color=no_color)

    try:
        config = get_config()
        options = resolve_options(config, chart_type, period, no_threshold, width)
        logger.debug("Render options: %s", options)

        raw = read_input(
            typer.get_binary_stream("stdin"),
            timeout=config.input.timeout if timeout is None else timeout,
        )
        dataset = load_dataset(raw)
    except CcgraphError as e:
        display_error(err_console, e, verbose=verbose)
        raise typer.Exit(exit_code_for(e)) from e
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from None

    console = Console(no_color=no_color or not config.chart.color, highlight=False)
    console.print(UsageReport(dataset, options))


def run_app() -> None:
    """Run the CLI app."""
    app()


# Import command modules and register their typer groups
# These imports must come after app is defined
from ccgraph.cli.commands import config as config_cmd  # noqa: E402

app.add_typer(config_cmd.config_app, name="config")
