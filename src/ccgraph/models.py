"""Data models for ccgraph.

Defines the canonical usage records every renderer consumes, independent of
which ccusage JSON layout they were read from.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum

import msgspec


class ChartKind(StrEnum):
    """Chart presentations."""

    BAR = "bar"
    LINE = "line"


class Period(StrEnum):
    """Reporting period requested on the command line."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class SchemaFormat(StrEnum):
    """Known ccusage JSON layouts, keyed by their collection field."""

    CURRENT = "daily"
    LEGACY = "usage"


class Tier(StrEnum):
    """Cost brackets relative to the plan thresholds."""

    WITHIN_PRO = "within_pro"  # below the first threshold
    EXCEEDS_PRO = "exceeds_pro"  # between the thresholds
    EXCEEDS_PRO_MAX = "exceeds_pro_max"  # at or above the second threshold

    @property
    def color(self) -> str:
        """Return the rich color used for this tier."""
        match self:
            case Tier.WITHIN_PRO:
                return "green"
            case Tier.EXCEEDS_PRO:
                return "yellow"
            case Tier.EXCEEDS_PRO_MAX:
                return "red"


class UsageRecord(msgspec.Struct, frozen=True):
    """One day of usage in canonical form."""

    date: date
    cost: Decimal
    tokens: int | None = None  # Legacy input may omit token counts


class UsageTotal(msgspec.Struct, frozen=True):
    """Aggregate totals supplied by the input document."""

    cost: Decimal
    tokens: int | None = None


class UsageDataset(msgspec.Struct, frozen=True):
    """Chronologically sorted usage records plus optional explicit totals."""

    records: tuple[UsageRecord, ...]
    source_format: SchemaFormat
    total: UsageTotal | None = None

    def max_cost(self) -> Decimal:
        """Return the highest single-day cost."""
        return max(record.cost for record in self.records)

    def is_peak(self, record: UsageRecord) -> bool:
        """Check if a record holds the maximum cost (every tie counts)."""
        return record.cost == self.max_cost()

    def peaks(self) -> list[bool]:
        """Return is_peak for every record, computing the maximum once."""
        top = self.max_cost()
        return [record.cost == top for record in self.records]

    def costs(self) -> list[Decimal]:
        """Return costs in chronological order."""
        return [record.cost for record in self.records]


class Thresholds(msgspec.Struct, frozen=True):
    """Plan price points drawn as reference markers."""

    pro: Decimal = Decimal(20)
    pro_max: Decimal = Decimal(200)

    def tier_for(self, cost: Decimal) -> Tier:
        """Classify a cost into its tier."""
        if cost >= self.pro_max:
            return Tier.EXCEEDS_PRO_MAX
        if cost >= self.pro:
            return Tier.EXCEEDS_PRO
        return Tier.WITHIN_PRO


class RenderOptions(msgspec.Struct, frozen=True):
    """Already-resolved options for a single render."""

    chart_kind: ChartKind = ChartKind.BAR
    show_threshold: bool = True
    period: Period = Period.DAY
    thresholds: Thresholds = msgspec.field(default_factory=Thresholds)
    width: int = 50  # Bar chart cells per row
    height: int = 15  # Line chart rows


def validate_thresholds(thresholds: Thresholds) -> list[str]:
    """Return list of validation errors, empty if valid."""
    errors = []
    if thresholds.pro <= 0:
        errors.append(f"pro threshold {thresholds.pro} must be positive")
    if thresholds.pro_max <= thresholds.pro:
        errors.append(
            f"pro_max threshold {thresholds.pro_max} must exceed pro threshold {thresholds.pro}"
        )
    return errors
