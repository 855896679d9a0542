"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When a new domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    postal_areas,
    service_requests,
    operator_services,
    bookings,
    pricing,
    statistics,
)

router = APIRouter()

router.include_router(postal_areas.router, prefix="/postal-areas", tags=["postal-areas"])
router.include_router(service_requests.router, prefix="/service-requests", tags=["service-requests"])
router.include_router(operator_services.router, prefix="/operator-services", tags=["operator-services"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(pricing.router, prefix="/pricing", tags=["pricing"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
