"""
Main entrypoint for the Aurauspooli API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory directory and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn aurauspooli_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import Directory
from .api.v1.router import router as v1_router
from .schemas.pricing import PricingConfig


def create_app(
    directory: Optional[Directory] = None,
    pricing_config: Optional[PricingConfig] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    directory : Optional[Directory]
        Store backing the application.  A new, empty directory (with the
        seeded postal areas) is created when omitted.
    pricing_config : Optional[PricingConfig]
        Default pricing for quotes and bookings.  Built from the
        settings when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that anything below can log.
    setup_logging(settings.log_level, settings.log_file, settings.log_file_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.directory = directory if directory is not None else Directory()
    app.state.pricing_config = pricing_config or PricingConfig()

    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).info(
        "%s %s ready (base fee %.2f, hourly rate %.2f)",
        settings.project_name,
        settings.api_version,
        app.state.pricing_config.base_price_per_area,
        app.state.pricing_config.hourly_rate,
    )
    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
