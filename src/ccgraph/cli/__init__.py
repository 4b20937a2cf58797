"""CLI framework for ccgraph."""
from __future__ import annotations

from ccgraph.cli.app import ExitCode
from ccgraph.cli.app import app
from ccgraph.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
