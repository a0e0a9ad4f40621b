"""Versioned API router."""

from fastapi import APIRouter

from . import health, hotel_reports

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(hotel_reports.router, tags=["hotel-reports"])

__all__ = ["router"]
