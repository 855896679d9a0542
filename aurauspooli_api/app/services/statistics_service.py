"""
Service layer for statistics.

Provides the totals shown on the landing page (how many customers are
waiting for work, how many operators are offering it) together with a
breakdown of requests and bookings by status.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict

from ..core.store import Directory


class StatisticsService:
    """Service providing aggregated counts over the directory."""

    @classmethod
    async def overview(cls, directory: Directory) -> Dict[str, Any]:
        """Return a dictionary with high-level counts.

        ``service_requests_by_status`` and ``bookings_by_status`` only
        contain statuses that occur at least once.
        """
        requests = directory.list_service_requests()
        operator_services = directory.list_operator_services()
        bookings = directory.list_bookings()
        return {
            "postal_areas": len(directory.list_postal_areas()),
            "service_requests": len(requests),
            "operator_services": len(operator_services),
            "available_operator_services": sum(1 for s in operator_services if s.available),
            "bookings": len(bookings),
            "service_requests_by_status": dict(Counter(r.status.value for r in requests)),
            "bookings_by_status": dict(Counter(b.status.value for b in bookings)),
        }
