"""Totals summary shown under every chart."""

from __future__ import annotations

from decimal import Decimal

import msgspec
from rich.console import Console
from rich.console import ConsoleOptions
from rich.console import RenderResult
from rich.text import Text

from ccgraph.display.rich import format_cost
from ccgraph.display.rich import format_tokens
from ccgraph.models import UsageDataset


class TotalsSummary(msgspec.Struct, frozen=True):
    """Aggregate cost and tokens for a dataset."""

    cost: Decimal
    tokens: int | None = None  # None hides the token line

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield Text(f"💰 Total Cost: {format_cost(self.cost)}", style="bold yellow")
        if self.tokens is not None:
            yield Text(
                f"🔢 Total Tokens: {format_tokens(self.tokens)}", style="bold blue"
            )


def summarize_totals(dataset: UsageDataset) -> TotalsSummary:
    """Use the document's totals, or sum the records.

    Records without a token count add zero; a computed token total of zero
    is omitted.
    """
    if dataset.total is not None:
        return TotalsSummary(cost=dataset.total.cost, tokens=dataset.total.tokens)

    cost = sum((record.cost for record in dataset.records), Decimal(0))
    tokens = sum(record.tokens or 0 for record in dataset.records)
    return TotalsSummary(cost=cost, tokens=tokens or None)
