"""Config management commands for ccgraph."""

from __future__ import annotations

import msgspec.toml
import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from ccgraph.cli.app import ExitCode
from ccgraph.config.paths import config_file
from ccgraph.config.settings import Config
from ccgraph.config.settings import get_config
from ccgraph.config.settings import save_config
from ccgraph.errors.types import ConfigError

# Create config group
config_app = typer.Typer(help="Manage configuration settings.")


@config_app.command("show")
def config_show_command(ctx: typer.Context) -> None:
    """Display current settings."""
    console = Console()
    verbose = ctx.meta.get("verbose", False)
    config_path = config_file()

    try:
        config = get_config()
    except ConfigError as e:
        from ccgraph.cli.display import display_error

        display_error(Console(stderr=True), e, verbose=verbose)
        raise typer.Exit(ExitCode.CONFIG_ERROR) from e

    # Format as TOML
    toml_data = msgspec.toml.encode(config)
    console.print(
        Panel(Syntax(toml_data.decode(), "toml"), title=f"Config: {config_path}")
    )

    if verbose and not config_path.exists():
        console.print("[dim]Using default configuration (file not created yet)[/dim]")


@config_app.command("path")
def config_path_command() -> None:
    """Print the config file location."""
    typer.echo(str(config_file()))


@config_app.command("init")
def config_init_command(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing config file"
    ),
) -> None:
    """Write a config file with the default settings."""
    console = Console()
    config_path = config_file()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        console.print("[dim]Use --force to overwrite it.[/dim]")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    save_config(Config(), config_path)
    console.print(f"[green]✓[/green] Wrote default configuration to {config_path}")


@config_app.command("reset")
def config_reset_command(
    confirm: bool = typer.Option(
        False, "--yes", "-y", help="Skip confirmation prompt"
    ),
) -> None:
    """Delete the config file, restoring defaults."""
    console = Console()
    config_path = config_file()

    if not config_path.exists():
        console.print("[dim]No config file to reset.[/dim]")
        return

    if not confirm and not typer.confirm(f"Delete {config_path}?"):
        console.print("[dim]Reset cancelled.[/dim]")
        return

    config_path.unlink()
    console.print(f"[green]✓[/green] Removed {config_path}")
