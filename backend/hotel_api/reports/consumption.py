"""Category rollup of ancillary consumption charges."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from hotel_api.reports.rounding import ZERO, to_money
from hotel_api.reports.types import (
    Category,
    CategoryConsumption,
    ConsumptionEntry,
    KnownCategory,
    ReportWindow,
)

DEFAULT_FALLBACK_LABEL = "Other"


def in_window(
    entries: Iterable[ConsumptionEntry], window: ReportWindow
) -> list[ConsumptionEntry]:
    return [entry for entry in entries if window.contains_instant(entry.consumed_at)]


def consumption_total(entries: Iterable[ConsumptionEntry]) -> Decimal:
    return sum((entry.total_price or ZERO for entry in entries), ZERO)


def aggregate_by_category(
    entries: Iterable[ConsumptionEntry],
    window: ReportWindow,
    *,
    fallback_label: str = DEFAULT_FALLBACK_LABEL,
) -> list[CategoryConsumption]:
    """Sum consumption by category in first-seen order.

    Uncategorized entries are bucketed apart from a catalog category that
    happens to share the fallback label; both may appear in the output.
    """
    totals: dict[Category, Decimal] = {}
    for entry in in_window(entries, window):
        totals[entry.category] = totals.get(entry.category, ZERO) + (
            entry.total_price or ZERO
        )

    rollup: list[CategoryConsumption] = []
    for category, amount in totals.items():
        if isinstance(category, KnownCategory):
            rollup.append(CategoryConsumption(category.label, to_money(amount)))
        else:
            rollup.append(
                CategoryConsumption(fallback_label, to_money(amount), uncategorized=True)
            )
    return rollup


__all__ = ["aggregate_by_category", "consumption_total", "in_window"]
