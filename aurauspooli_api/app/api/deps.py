"""
FastAPI dependencies shared by the v1 endpoints.

The directory and the default pricing config are created by
``create_app`` and kept on ``app.state``.
"""

from fastapi import Request

from ..core.store import Directory
from ..schemas.pricing import PricingConfig


def get_directory(request: Request) -> Directory:
    return request.app.state.directory


def get_pricing_config(request: Request) -> PricingConfig:
    return request.app.state.pricing_config
