"""Input schemas for ccusage JSON output.

ccusage has emitted two layouts over time:

- current: ``{"daily": [{"date", "totalCost", "totalTokens", ...}], "totals": {...}}``
- legacy: ``{"usage": [{"date", "cost", "tokens", "model"}], "total": {...}}``

Each entry type knows how to map itself onto a canonical
:class:`~ccgraph.models.UsageRecord`, so renderers never see either layout.
"""

from __future__ import annotations

import logging
from datetime import date
from datetime import datetime
from decimal import Decimal
from operator import attrgetter

import msgspec

from ccgraph.errors.types import NoUsageDataError
from ccgraph.errors.types import ParseFailureError
from ccgraph.models import SchemaFormat
from ccgraph.models import UsageDataset
from ccgraph.models import UsageRecord
from ccgraph.models import UsageTotal

logger = logging.getLogger(__name__)


def parse_date(value: str) -> date:
    """Parse a calendar date or an ISO-8601 timestamp into a date."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise ParseFailureError(f"Invalid date: {value!r}") from None


def _check_non_negative(**values: Decimal | int | None) -> None:
    for name, value in values.items():
        if isinstance(value, Decimal) and not value.is_finite():
            raise ValueError(f"{name} must be a finite number, got {value}")
        if value is not None and value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


class DailyEntry(msgspec.Struct, frozen=True, rename="camel"):
    """Entry of the current ``daily`` collection."""

    date: str
    total_cost: Decimal
    total_tokens: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative(totalCost=self.total_cost, totalTokens=self.total_tokens)

    def to_record(self) -> UsageRecord:
        return UsageRecord(
            date=parse_date(self.date),
            cost=abs(self.total_cost),  # -0 would print as $-0.00
            tokens=self.total_tokens,
        )


class LegacyEntry(msgspec.Struct, frozen=True):
    """Entry of the legacy ``usage`` collection."""

    date: str
    cost: Decimal
    tokens: int | None = None
    model: str | None = None

    def __post_init__(self) -> None:
        _check_non_negative(cost=self.cost, tokens=self.tokens)

    def to_record(self) -> UsageRecord:
        return UsageRecord(
            date=parse_date(self.date),
            cost=abs(self.cost),
            tokens=self.tokens,
        )


class TotalEntry(msgspec.Struct, frozen=True):
    """Explicit ``total`` object."""

    cost: Decimal
    tokens: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative(cost=self.cost, tokens=self.tokens)


class CcusageTotals(msgspec.Struct, frozen=True, rename="camel"):
    """``totals`` object emitted next to ``daily`` by current ccusage."""

    total_cost: Decimal
    total_tokens: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative(totalCost=self.total_cost, totalTokens=self.total_tokens)


class UsageDocument(msgspec.Struct, frozen=True):
    """Top-level ccusage JSON document in either layout."""

    daily: list[DailyEntry] | None = None
    usage: list[LegacyEntry] | None = None
    total: TotalEntry | None = None
    totals: CcusageTotals | None = None

    def detect_format(self) -> SchemaFormat | None:
        """Return the layout holding records, preferring the current one."""
        if self.daily:
            return SchemaFormat.CURRENT
        if self.usage:
            return SchemaFormat.LEGACY
        return None

    def entries(self, schema_format: SchemaFormat) -> list[DailyEntry] | list[LegacyEntry]:
        """Return the entries of the given layout."""
        match schema_format:
            case SchemaFormat.CURRENT:
                return self.daily or []
            case SchemaFormat.LEGACY:
                return self.usage or []

    def explicit_total(self) -> UsageTotal | None:
        """Return totals supplied by the document, if any."""
        if self.total is not None:
            return UsageTotal(cost=abs(self.total.cost), tokens=self.total.tokens)
        if self.totals is not None:
            return UsageTotal(cost=abs(self.totals.total_cost), tokens=self.totals.total_tokens)
        return None


def parse_document(raw: bytes | str) -> UsageDocument:
    """Decode a ccusage JSON document.

    Args:
        raw: JSON text as read from stdin

    Returns:
        Typed UsageDocument

    Raises:
        ParseFailureError: If the JSON is malformed or has the wrong shape
    """
    try:
        return msgspec.json.decode(raw, type=UsageDocument)
    except msgspec.ValidationError as e:
        raise ParseFailureError(f"Invalid usage data: {e}") from e
    except msgspec.DecodeError as e:
        raise ParseFailureError(f"Error parsing JSON input: {e}") from e


def normalize(document: UsageDocument) -> UsageDataset:
    """Convert a document into a chronologically sorted dataset.

    Raises:
        NoUsageDataError: If neither ``daily`` nor ``usage`` has entries
        ParseFailureError: If an entry has an invalid date
    """
    schema_format = document.detect_format()
    if schema_format is None:
        raise NoUsageDataError("No usage data found in JSON")

    records = [entry.to_record() for entry in document.entries(schema_format)]
    records.sort(key=attrgetter("date"))
    logger.debug("Normalized %d records from %s format", len(records), schema_format)

    return UsageDataset(
        records=tuple(records),
        source_format=schema_format,
        total=document.explicit_total(),
    )


def load_dataset(raw: bytes | str) -> UsageDataset:
    """Parse and normalize in one step."""
    return normalize(parse_document(raw))
