"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for a specific
domain (postal areas, service requests, operator services, bookings,
pricing, statistics).  The routers are aggregated in ``router.py``.
"""
