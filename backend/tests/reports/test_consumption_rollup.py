"""Tests for consumption category rollups."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal

from hotel_api.reports.consumption import aggregate_by_category
from hotel_api.reports.types import KnownCategory


def _at(day: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=UTC)


def test_uncategorized_items_fall_back_to_other(make_consumption, window_for) -> None:
    entries = [
        make_consumption(_at(2), "12.50", None),
        make_consumption(_at(3), "7.50", None),
    ]

    rollup = aggregate_by_category(entries, window_for(date(2024, 1, 1), date(2024, 1, 5)))

    assert len(rollup) == 1
    assert rollup[0].category == "Other"
    assert rollup[0].amount == Decimal("20.00")
    assert rollup[0].uncategorized is True


def test_categories_keep_first_seen_order(make_consumption, window_for) -> None:
    entries = [
        make_consumption(_at(2), "8.00", "Minibar"),
        make_consumption(_at(2, 20), "38.00", "Room service"),
        make_consumption(_at(3), "6.00", "Minibar"),
        make_consumption(_at(4), None, "Laundry"),
    ]

    rollup = aggregate_by_category(entries, window_for(date(2024, 1, 1), date(2024, 1, 5)))

    assert [(c.category, c.amount) for c in rollup] == [
        ("Minibar", Decimal("14.00")),
        ("Room service", Decimal("38.00")),
        ("Laundry", Decimal("0.00")),
    ]


def test_catalog_category_named_other_stays_distinct(make_consumption, window_for) -> None:
    entries = [
        make_consumption(_at(2), "5.00", KnownCategory("Other")),
        make_consumption(_at(2), "3.00", None),
    ]

    rollup = aggregate_by_category(
        entries, window_for(date(2024, 1, 1), date(2024, 1, 2)), fallback_label="Other"
    )

    assert [(c.category, c.amount, c.uncategorized) for c in rollup] == [
        ("Other", Decimal("5.00"), False),
        ("Other", Decimal("3.00"), True),
    ]


def test_window_bounds_compare_timestamps(make_consumption, window_for) -> None:
    window = window_for(date(2024, 1, 2), date(2024, 1, 3))
    entries = [
        make_consumption(_at(1, 23, 59), "100.00", "Minibar"),
        make_consumption(_at(2, 0, 0), "1.00", "Minibar"),
        make_consumption(_at(3, 23, 59), "2.00", "Minibar"),
        make_consumption(_at(4, 0, 0), "100.00", "Minibar"),
    ]

    rollup = aggregate_by_category(entries, window)

    assert [(c.category, c.amount) for c in rollup] == [("Minibar", Decimal("3.00"))]


def test_blank_category_label_is_unknown(make_consumption, window_for) -> None:
    rollup = aggregate_by_category(
        [make_consumption(_at(2), "4.00", "   ")],
        window_for(date(2024, 1, 1), date(2024, 1, 2)),
        fallback_label="Outros",
    )

    assert [(c.category, c.uncategorized) for c in rollup] == [("Outros", True)]


def test_no_consumption_yields_no_categories(window_for) -> None:
    assert aggregate_by_category([], window_for(date(2024, 1, 1), date(2024, 1, 2))) == []
