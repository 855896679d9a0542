"""
Pricing endpoints for API v1.

``/pricing/quote`` is what a customer sees while filling in a request:
the price for their yard size given how many neighbours are already
waiting in the same postal area.  ``/pricing/calculate`` exposes the raw
calculator.
"""

from fastapi import APIRouter, Depends, Query

from aurauspooli_api.app.api.deps import get_directory, get_pricing_config
from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.schemas.common import YardSizeCategory
from aurauspooli_api.app.schemas.pricing import (
    PriceBreakdown,
    PriceCalculationRequest,
    PriceQuote,
    PricingConfig,
)
from aurauspooli_api.app.services.pricing_service import PricingService, calculate_price


router = APIRouter()


@router.get("/config", response_model=PricingConfig)
async def get_pricing_config_endpoint(pricing_config: PricingConfig = Depends(get_pricing_config)) -> PricingConfig:
    return pricing_config


@router.post("/calculate", response_model=PriceBreakdown)
async def calculate(
    body: PriceCalculationRequest,
    pricing_config: PricingConfig = Depends(get_pricing_config),
) -> PriceBreakdown:
    """Run the calculator.  A ``pricing_config`` in the body overrides the defaults."""
    return calculate_price(
        body.estimated_time_minutes,
        body.bookings_in_same_area,
        body.pricing_config or pricing_config,
    )


@router.get("/quote", response_model=PriceQuote)
async def quote(
    postal_code: str = Query(..., description="Postal code of the customer"),
    yard_size_category: YardSizeCategory = Query(..., description="small, medium or large"),
    directory: Directory = Depends(get_directory),
    pricing_config: PricingConfig = Depends(get_pricing_config),
) -> PriceQuote:
    return await PricingService.quote_for_area(directory, postal_code, yard_size_category, pricing_config)
