"""Tests for the stats readouts."""

from __future__ import annotations

import pytest

from triad_explorer.core.depth import ViewState
from triad_explorer.core.stats import StatsPresenter, StatsText, format_grouped, total_transactions


class TestStatsPresenter:
    @pytest.mark.parametrize(
        "depth, transactions, leaves",
        [
            (0, "1,000", "1"),
            (1, "3,000", "3"),
            (3, "27,000", "27"),
            (6, "729,000", "729"),
        ],
    )
    def test_readouts(self, depth, transactions, leaves):
        stats = StatsPresenter().present(ViewState(depth))
        assert stats == StatsText(str(depth), transactions, leaves)

    def test_custom_separator(self):
        stats = StatsPresenter(separator=" ").present(ViewState(6))
        assert stats.total_transactions == "729 000"

    def test_custom_transactions_per_triad(self):
        stats = StatsPresenter(transactions_per_triad=10).present(ViewState(2))
        assert stats.total_transactions == "90"


def test_total_transactions():
    assert total_transactions(4) == 81_000


def test_format_grouped_large_values():
    assert format_grouped(1234567) == "1,234,567"
    assert format_grouped(1234567, ".") == "1.234.567"
