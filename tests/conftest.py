"""Pytest configuration and shared fixtures for ccgraph tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from ccgraph.models import RenderOptions
from ccgraph.models import SchemaFormat
from ccgraph.models import Thresholds
from ccgraph.models import UsageDataset
from ccgraph.models import UsageRecord
from ccgraph.models import UsageTotal


@pytest.fixture
def daily_document() -> dict:
    """Current ccusage layout with two days."""
    return {
        "daily": [
            {
                "date": "2024-01-02",
                "inputTokens": 1200,
                "outputTokens": 800,
                "totalTokens": 2000,
                "totalCost": 25,
                "modelsUsed": ["claude-sonnet-4"],
            },
            {
                "date": "2024-01-01",
                "inputTokens": 600,
                "outputTokens": 400,
                "totalTokens": 1000,
                "totalCost": 5,
                "modelsUsed": ["claude-sonnet-4"],
            },
        ]
    }


@pytest.fixture
def legacy_document() -> dict:
    """Legacy ccusage layout, one entry without tokens."""
    return {
        "usage": [
            {"date": "2024-03-10", "model": "claude-3-opus", "tokens": 5000, "cost": 12.5},
            {"date": "2024-03-09", "model": "claude-3-opus", "cost": 3.25},
        ],
        "total": {"cost": 15.75, "tokens": 5000},
    }


@pytest.fixture
def thresholds() -> Thresholds:
    """Default $20 / $200 thresholds."""
    return Thresholds()


@pytest.fixture
def render_options() -> RenderOptions:
    """Bar chart options with markers enabled."""
    return RenderOptions()


@pytest.fixture
def make_dataset():
    """Factory building a dataset from (iso date, cost, tokens) tuples."""

    def _make(
        *rows: tuple[str, str | int, int | None],
        total: UsageTotal | None = None,
    ) -> UsageDataset:
        records = tuple(
            UsageRecord(date=date.fromisoformat(day), cost=Decimal(str(cost)), tokens=tokens)
            for day, cost, tokens in rows
        )
        return UsageDataset(
            records=records,
            source_format=SchemaFormat.CURRENT,
            total=total,
        )

    return _make


@pytest.fixture
def two_day_dataset(make_dataset) -> UsageDataset:
    """Dataset matching the two-day daily document."""
    return make_dataset(("2024-01-01", 5, 1000), ("2024-01-02", 25, 2000))


@pytest.fixture
def console_output() -> tuple[Console, StringIO]:
    """Plain-text console writing into a buffer."""
    buffer = StringIO()
    console = Console(file=buffer, width=120, no_color=True, highlight=False)
    return console, buffer


@pytest.fixture(autouse=True)
def temp_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated config directory and a fresh config singleton."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CCGRAPH_CONFIG_DIR", str(config_dir))
    monkeypatch.setattr("ccgraph.config.settings._config", None)

    for var in (
        "CCGRAPH_TIMEOUT",
        "CCGRAPH_CHART_TYPE",
        "CCGRAPH_NO_THRESHOLD",
        "CCGRAPH_NO_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)

    return config_dir
