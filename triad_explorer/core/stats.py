from __future__ import annotations

from dataclasses import dataclass

from .activity import leaf_count
from .depth import ViewState


@dataclass(frozen=True)
class StatsText:
    depth: str
    total_transactions: str
    leaf_triads: str


def total_transactions(depth: int, per_triad: int = 1000) -> int:
    return per_triad * leaf_count(depth)


def format_grouped(value: int, separator: str = ",") -> str:
    text = f"{value:,}"
    if separator != ",":
        text = text.replace(",", separator)
    return text


class StatsPresenter:
    """Human-readable readouts derived from the current depth."""

    def __init__(self, transactions_per_triad: int = 1000, separator: str = ",") -> None:
        self.transactions_per_triad = transactions_per_triad
        self.separator = separator

    def present(self, state: ViewState) -> StatsText:
        depth = state.current_depth
        return StatsText(
            depth=str(depth),
            total_transactions=format_grouped(total_transactions(depth, self.transactions_per_triad), self.separator),
            leaf_triads=format_grouped(leaf_count(depth), self.separator),
        )
