"""
Pydantic models for price calculation.

``PricingConfig`` defaults are taken from the application settings so
that deployments can change the base fee and hourly rate through
environment variables.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.config import settings
from .common import YardSizeCategory


class PricingConfig(BaseModel):
    base_price_per_area: float = Field(
        default_factory=lambda: settings.base_price_per_area,
        description="Flat fee per postal area, shared by all bookings in the area",
    )
    hourly_rate: float = Field(
        default_factory=lambda: settings.hourly_rate,
        description="Price of one hour of work",
    )
    time_unit_minutes: int = Field(
        default_factory=lambda: settings.time_unit_minutes,
        description="Billing increment in minutes",
    )


class PriceBreakdown(BaseModel):
    base_price: float
    base_price_per_customer: float
    hourly_component: float
    total_price: float
    discount_multiplier: float
    bookings_count: int


class PriceCalculationRequest(BaseModel):
    """Raw input of the pricing calculator."""

    estimated_time_minutes: float = Field(..., examples=[15])
    bookings_in_same_area: int = Field(1, examples=[4])
    pricing_config: Optional[PricingConfig] = None


class PriceQuote(BaseModel):
    """Price preview for a prospective customer in a postal area."""

    postal_code: str
    yard_size_category: YardSizeCategory
    estimated_time_minutes: int
    current_bookings_in_area: int
    breakdown: PriceBreakdown
    formatted_total: str = Field(..., examples=["37.50€"])
