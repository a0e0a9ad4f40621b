"""Occupancy and revenue reporting engine.

Every function in this package is a pure computation over records that were
already fetched; nothing here touches the database or the clock.
"""

from hotel_api.reports.consumption import aggregate_by_category
from hotel_api.reports.monthly import monthly_rollup, rollup_span
from hotel_api.reports.occupancy import daily_occupancy, valid_stays
from hotel_api.reports.revenue import allocate_daily_revenue, daily_points
from hotel_api.reports.summary import summarize

__all__ = [
    "aggregate_by_category",
    "allocate_daily_revenue",
    "daily_occupancy",
    "daily_points",
    "monthly_rollup",
    "rollup_span",
    "summarize",
    "valid_stays",
]
