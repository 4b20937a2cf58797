"""Tests for data models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import patch

import msgspec
import pytest

from ccgraph.models import ChartKind
from ccgraph.models import RenderOptions
from ccgraph.models import Thresholds
from ccgraph.models import Tier
from ccgraph.models import UsageDataset
from ccgraph.models import UsageRecord
from ccgraph.models import validate_thresholds


class TestTier:
    """Tests for Tier enum."""

    def test_tier_colors(self):
        """Each tier maps to its fill color."""
        assert Tier.WITHIN_PRO.color == "green"
        assert Tier.EXCEEDS_PRO.color == "yellow"
        assert Tier.EXCEEDS_PRO_MAX.color == "red"


class TestThresholds:
    """Tests for Thresholds.tier_for."""

    def test_defaults(self):
        """Default thresholds are $20 and $200."""
        thresholds = Thresholds()
        assert thresholds.pro == Decimal(20)
        assert thresholds.pro_max == Decimal(200)

    @pytest.mark.parametrize(
        ("cost", "expected"),
        [
            ("0", Tier.WITHIN_PRO),
            ("19.99", Tier.WITHIN_PRO),
            ("20", Tier.EXCEEDS_PRO),
            ("199.99", Tier.EXCEEDS_PRO),
            ("200", Tier.EXCEEDS_PRO_MAX),
            ("1500", Tier.EXCEEDS_PRO_MAX),
        ],
    )
    def test_tier_boundaries(self, cost, expected):
        """Tier is decided by the cost alone, thresholds are inclusive."""
        assert Thresholds().tier_for(Decimal(cost)) == expected

    def test_custom_thresholds(self):
        """Tiers follow configured amounts."""
        thresholds = Thresholds(pro=Decimal(20), pro_max=Decimal(300))
        assert thresholds.tier_for(Decimal(250)) == Tier.EXCEEDS_PRO


class TestUsageDataset:
    """Tests for UsageDataset helpers."""

    def test_max_cost(self, two_day_dataset):
        """max_cost returns the highest cost."""
        assert two_day_dataset.max_cost() == Decimal(25)

    def test_is_peak_marks_every_tie(self, make_dataset):
        """All records sharing the maximum are peaks."""
        dataset = make_dataset(
            ("2024-01-01", 10, None),
            ("2024-01-02", 30, None),
            ("2024-01-03", 30, None),
        )
        peaks = [dataset.is_peak(record) for record in dataset.records]
        assert peaks == [False, True, True]

    def test_peaks_matches_is_peak(self, make_dataset):
        """peaks marks the same records as is_peak, in order."""
        dataset = make_dataset(
            ("2024-01-01", 30, None),
            ("2024-01-02", 10, None),
            ("2024-01-03", 30, None),
        )
        assert dataset.peaks() == [True, False, True]
        assert dataset.peaks() == [dataset.is_peak(record) for record in dataset.records]

    def test_peaks_scans_maximum_once(self, make_dataset):
        """The maximum is computed once, however many records there are."""
        dataset = make_dataset(*((f"2024-01-{day:02d}", day, None) for day in range(1, 29)))

        with patch.object(
            UsageDataset, "max_cost", autospec=True, side_effect=UsageDataset.max_cost
        ) as mock_max:
            peaks = dataset.peaks()

        assert mock_max.call_count == 1
        assert peaks == [False] * 27 + [True]

    def test_costs_in_order(self, two_day_dataset):
        """costs preserves record order."""
        assert two_day_dataset.costs() == [Decimal(5), Decimal(25)]

    def test_records_are_immutable(self):
        """Records are frozen."""
        record = UsageRecord(date=date(2024, 1, 1), cost=Decimal(1))
        with pytest.raises(AttributeError):
            record.cost = Decimal(2)


class TestRenderOptions:
    """Tests for RenderOptions defaults."""

    def test_defaults(self):
        """Bar chart with thresholds, 50 cells, 15 rows."""
        options = RenderOptions()
        assert options.chart_kind == ChartKind.BAR
        assert options.show_threshold is True
        assert options.width == 50
        assert options.height == 15
        assert options.thresholds == Thresholds()

    def test_replace(self):
        """Options can be derived with msgspec.structs.replace."""
        options = msgspec.structs.replace(RenderOptions(), chart_kind=ChartKind.LINE)
        assert options.chart_kind == ChartKind.LINE


class TestValidation:
    """Tests for validation helpers."""

    def test_valid_thresholds(self):
        """Default thresholds are valid."""
        assert validate_thresholds(Thresholds()) == []

    def test_inverted_thresholds(self):
        """pro_max must exceed pro."""
        errors = validate_thresholds(Thresholds(pro=Decimal(200), pro_max=Decimal(20)))
        assert any("pro_max" in error for error in errors)

    def test_non_positive_pro(self):
        """pro must be positive."""
        errors = validate_thresholds(Thresholds(pro=Decimal(0)))
        assert any("positive" in error for error in errors)
