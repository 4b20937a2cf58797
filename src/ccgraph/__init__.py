"""ccgraph: Display ccusage JSON output as terminal graphs."""

from __future__ import annotations

__version__ = "0.2.0"

from ccgraph.models import ChartKind
from ccgraph.models import Period
from ccgraph.models import RenderOptions
from ccgraph.models import SchemaFormat
from ccgraph.models import Thresholds
from ccgraph.models import Tier
from ccgraph.models import UsageDataset
from ccgraph.models import UsageRecord
from ccgraph.models import UsageTotal
from ccgraph.scale import select_scale
from ccgraph.schema import load_dataset
from ccgraph.schema import normalize
from ccgraph.schema import parse_document

__all__ = [
    "__version__",
    "ChartKind",
    "Period",
    "RenderOptions",
    "SchemaFormat",
    "Thresholds",
    "Tier",
    "UsageDataset",
    "UsageRecord",
    "UsageTotal",
    "select_scale",
    "parse_document",
    "normalize",
    "load_dataset",
]


def main() -> None:
    """Entry point for the ccusage-graph CLI."""
    from ccgraph.cli.app import run_app

    run_app()
