"""Tests for the trailing six-month rollup."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from hotel_api.reports.monthly import month_bounds, month_label, monthly_rollup, rollup_span
from hotel_api.reports.summary import summarize


@pytest.mark.parametrize(
    ("anchor", "expected_end"),
    [
        (date(2024, 2, 10), date(2024, 2, 29)),
        (date(2023, 2, 10), date(2023, 2, 28)),
        (date(2000, 2, 1), date(2000, 2, 29)),
        (date(2100, 2, 1), date(2100, 2, 28)),
    ],
)
def test_february_ends_on_its_last_calendar_day(anchor: date, expected_end: date) -> None:
    assert month_bounds(anchor) == (date(anchor.year, 2, 1), expected_end)


def test_month_bounds_walk_back_across_years() -> None:
    assert month_bounds(date(2024, 1, 31), 1) == (date(2023, 12, 1), date(2023, 12, 31))
    assert month_bounds(date(2024, 3, 31), 1) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(date(2024, 5, 15), 17) == (date(2022, 12, 1), date(2022, 12, 31))
    assert month_bounds(date(2024, 7, 4), 3) == (date(2024, 4, 1), date(2024, 4, 30))


def test_rollup_has_six_months_oldest_first() -> None:
    rollup = monthly_rollup([], date(2024, 3, 10))

    assert [m.month for m in rollup] == [
        "October 2023",
        "November 2023",
        "December 2023",
        "January 2024",
        "February 2024",
        "March 2024",
    ]
    assert [m.month_start for m in rollup] == sorted(m.month_start for m in rollup)
    assert all(m.reservations == 0 and m.average_rate == Decimal("0.00") for m in rollup)


def test_rollup_buckets_by_check_in_month(make_reservation) -> None:
    reservations = [
        make_reservation(date(2024, 2, 29), date(2024, 3, 2), "300.00", guests=2),
        make_reservation(date(2024, 3, 1), date(2024, 3, 3), "200.00", guests=1),
        make_reservation(date(2024, 3, 31), date(2024, 4, 2), "100.00", guests=3),
        make_reservation(date(2023, 9, 30), date(2023, 10, 2), "999.00"),
    ]

    rollup = {m.month: m for m in monthly_rollup(reservations, date(2024, 3, 10))}

    february = rollup["February 2024"]
    assert (february.reservations, february.revenue, february.guests) == (
        1,
        Decimal("300.00"),
        2,
    )
    march = rollup["March 2024"]
    assert (march.reservations, march.revenue, march.guests) == (2, Decimal("300.00"), 4)
    assert march.average_rate == Decimal("150.00")
    assert "September 2023" not in rollup
    assert rollup["October 2023"].reservations == 0


def test_rollup_span_covers_oldest_to_current_month() -> None:
    assert rollup_span(date(2024, 3, 10)) == (date(2023, 10, 1), date(2024, 3, 31))
    assert rollup_span(date(2024, 3, 10), span=1) == (date(2024, 3, 1), date(2024, 3, 31))


def test_month_label_is_unique_per_month() -> None:
    labels = {month_label(month_bounds(date(2024, 6, 1), back)[0]) for back in range(24)}
    assert len(labels) == 24


def test_calendar_month_window_matches_rollup_entry(
    make_reservation, make_rooms, window_for
) -> None:
    reservations = [
        make_reservation(date(2024, 1, 31), date(2024, 2, 2), "120.00"),
        make_reservation(date(2024, 2, 1), date(2024, 2, 3), "250.00"),
        make_reservation(date(2024, 2, 14), date(2024, 2, 15), "99.99"),
        make_reservation(date(2024, 2, 29), date(2024, 3, 1), "80.01"),
        make_reservation(date(2024, 3, 1), date(2024, 3, 4), "310.00"),
    ]
    start, end = month_bounds(date(2024, 2, 1))

    summary = summarize(reservations, [], make_rooms(2), window_for(start, end))
    february = next(
        m for m in monthly_rollup(reservations, date(2024, 4, 2)) if m.month_start == start
    )

    assert summary.total_reservations == february.reservations == 3
    assert summary.total_revenue == february.revenue == Decimal("430.00")
    assert summary.average_daily_rate == february.average_rate
