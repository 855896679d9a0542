"""
Pricing for snow-clearing jobs.

The price of a job is the area base fee divided among everyone booked
in the same postal area, plus an hourly component for the estimated
work time::

    total = base_price_per_area / max(1, bookings) + hourly_rate * minutes / 60

The calculator does not round; ``format_price`` rounds to two decimals
for display only.  ``time_unit_minutes`` travels with the config but is
not applied to the duration before pricing.
"""

import logging
import math
from typing import Dict, Optional

from ..core.config import settings
from ..core.store import Directory
from ..schemas.common import YardSizeCategory
from ..schemas.pricing import PriceBreakdown, PriceQuote, PricingConfig


logger = logging.getLogger(__name__)


# Estimated work time per yard size: up to 200 m², 200-500 m², over 500 m².
ESTIMATED_TIME_MINUTES: Dict[YardSizeCategory, int] = {
    YardSizeCategory.SMALL: 15,
    YardSizeCategory.MEDIUM: 30,
    YardSizeCategory.LARGE: 45,
}


def calculate_price(
    estimated_time_minutes: float,
    bookings_in_same_area: int,
    config: Optional[PricingConfig] = None,
) -> PriceBreakdown:
    """Return the price breakdown for one customer.

    ``bookings_in_same_area`` includes the customer being priced, and is
    clamped to at least one.
    """
    config = config or PricingConfig()
    bookings_count = max(1, bookings_in_same_area)
    discount_multiplier = 1 / bookings_count

    base_price = config.base_price_per_area
    base_price_per_customer = base_price * discount_multiplier
    hourly_component = config.hourly_rate * (estimated_time_minutes / 60)

    return PriceBreakdown(
        base_price=base_price,
        base_price_per_customer=base_price_per_customer,
        hourly_component=hourly_component,
        total_price=base_price_per_customer + hourly_component,
        discount_multiplier=discount_multiplier,
        bookings_count=bookings_count,
    )


def round_to_time_unit(minutes: float, time_unit: int = 15) -> int:
    """Round ``minutes`` up to the next multiple of ``time_unit`` (20 -> 30 for 15)."""
    return math.ceil(minutes / time_unit) * time_unit


def get_estimated_time(yard_size_category: YardSizeCategory) -> int:
    return ESTIMATED_TIME_MINUTES[YardSizeCategory(yard_size_category)]


def format_price(amount: float) -> str:
    return f"{amount:.2f}{settings.currency_suffix}"


class PricingService:
    """Price previews backed by the directory."""

    @classmethod
    async def quote_for_area(
        cls,
        directory: Directory,
        postal_code: str,
        yard_size_category: YardSizeCategory,
        config: Optional[PricingConfig] = None,
    ) -> PriceQuote:
        """Preview the price for a new customer in ``postal_code``.

        Requests already pending or confirmed in the area share the base
        fee with the new customer, who is counted as one more booking.
        The postal code is not checked against the seed list, matching
        what a customer sees while still filling in the form.
        """
        current = directory.count_current_bookings_in_area(postal_code)
        minutes = get_estimated_time(yard_size_category)
        breakdown = calculate_price(minutes, current + 1, config)
        logger.debug(
            "Quote for %s (%s): %s neighbours, total %s",
            postal_code,
            yard_size_category,
            current,
            breakdown.total_price,
        )
        return PriceQuote(
            postal_code=postal_code,
            yard_size_category=yard_size_category,
            estimated_time_minutes=minutes,
            current_bookings_in_area=current,
            breakdown=breakdown,
            formatted_total=format_price(breakdown.total_price),
        )
