"""Failure taxonomy for hotel report generation."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for report failures surfaced to callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ReportError):
    """Missing caller/property identity or malformed window bounds."""


class DataAccessError(ReportError):
    """The record store could not supply reservations, rooms or consumption."""


class ComputationError(ReportError):
    """A source record cannot take part in a computation (e.g. negative stay)."""


__all__ = [
    "ComputationError",
    "DataAccessError",
    "ReportError",
    "ValidationError",
]
