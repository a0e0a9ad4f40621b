"""Service layer exports."""
from hotel_api.services import record_store, reporting_service

__all__ = ["record_store", "reporting_service"]
