"""
Application package initializer.

The project is organised into a handful of small pieces: ``core``
holds configuration, logging, the error taxonomy and the in-memory
directory; ``schemas`` holds the Pydantic models exchanged over the
API; ``services`` holds the business logic (pricing, service requests,
operator listings, bookings); ``api`` exposes the versioned routers.
"""

from .main import app  # noqa: F401
