"""Tests for the pricing calculator and area quotes."""

import asyncio

import pytest

from aurauspooli_api.app.schemas.common import ServiceRequestStatus, YardSizeCategory
from aurauspooli_api.app.schemas.pricing import PricingConfig
from aurauspooli_api.app.services.pricing_service import (
    PricingService,
    calculate_price,
    format_price,
    get_estimated_time,
    round_to_time_unit,
)


class TestCalculatePrice:
    """Test calculate_price"""

    def test_single_booking_pays_full_base_fee(self):
        price = calculate_price(15, 1)

        assert price.base_price == pytest.approx(50.0)
        assert price.base_price_per_customer == pytest.approx(50.0)
        assert price.hourly_component == pytest.approx(25.0)
        assert price.total_price == pytest.approx(75.0)
        assert price.discount_multiplier == pytest.approx(1.0)
        assert price.bookings_count == 1

    def test_four_bookings_share_base_fee(self):
        price = calculate_price(15, 4)

        assert price.base_price_per_customer == pytest.approx(12.5)
        assert price.hourly_component == pytest.approx(25.0)
        assert price.total_price == pytest.approx(37.5)
        assert price.discount_multiplier == pytest.approx(0.25)
        assert price.bookings_count == 4

    @pytest.mark.parametrize("bookings", [0, -1, -10])
    def test_non_positive_bookings_count_as_one(self, bookings):
        assert calculate_price(30, bookings) == calculate_price(30, 1)

    def test_hourly_component_scales_with_minutes(self):
        assert calculate_price(45, 1).hourly_component == pytest.approx(75.0)
        assert calculate_price(0, 1).total_price == pytest.approx(50.0)

    def test_no_rounding_applied(self):
        price = calculate_price(20, 3)

        assert price.base_price_per_customer == pytest.approx(50 / 3)
        assert price.hourly_component == pytest.approx(100 * 20 / 60)

    def test_time_unit_not_applied(self):
        coarse = PricingConfig(base_price_per_area=50, hourly_rate=100, time_unit_minutes=60)

        assert calculate_price(20, 1, coarse) == calculate_price(20, 1)

    def test_custom_config(self):
        config = PricingConfig(base_price_per_area=80, hourly_rate=60, time_unit_minutes=15)
        price = calculate_price(30, 2, config)

        assert price.base_price == pytest.approx(80.0)
        assert price.base_price_per_customer == pytest.approx(40.0)
        assert price.hourly_component == pytest.approx(30.0)
        assert price.total_price == pytest.approx(70.0)

    def test_default_config_from_settings(self):
        config = PricingConfig()

        assert config.base_price_per_area == 50
        assert config.hourly_rate == 100
        assert config.time_unit_minutes == 15


class TestPricingHelpers:
    """Test the companion helpers"""

    @pytest.mark.parametrize(
        "minutes, unit, expected",
        [(20, 15, 30), (15, 15, 15), (0, 15, 0), (1, 15, 15), (31, 30, 60), (46, 15, 60)],
    )
    def test_round_to_time_unit(self, minutes, unit, expected):
        assert round_to_time_unit(minutes, unit) == expected

    def test_round_to_time_unit_default_unit(self):
        assert round_to_time_unit(16) == 30

    def test_estimated_time_per_yard_size(self):
        assert {size.value: get_estimated_time(size) for size in YardSizeCategory} == {
            "small": 15,
            "medium": 30,
            "large": 45,
        }

    def test_estimated_time_accepts_plain_strings(self):
        assert get_estimated_time("medium") == 30

    @pytest.mark.parametrize(
        "amount, expected",
        [(37.5, "37.50€"), (75, "75.00€"), (0, "0.00€"), (16.666666, "16.67€")],
    )
    def test_format_price(self, amount, expected):
        assert format_price(amount) == expected


class TestQuoteForArea:
    """Test PricingService.quote_for_area"""

    def test_first_customer_in_area(self, directory):
        quote = asyncio.run(PricingService.quote_for_area(directory, "00100", YardSizeCategory.SMALL))

        assert quote.current_bookings_in_area == 0
        assert quote.breakdown.bookings_count == 1
        assert quote.estimated_time_minutes == 15
        assert quote.formatted_total == "75.00€"

    def test_counts_the_new_customer_on_top_of_neighbours(self, directory, request_fields):
        for _ in range(3):
            directory.submit_service_request("customer-1", **request_fields("00100"))
        directory.submit_service_request("customer-2", **request_fields("00200"))

        quote = asyncio.run(PricingService.quote_for_area(directory, "00100", YardSizeCategory.SMALL))

        assert quote.current_bookings_in_area == 3
        assert quote.breakdown.bookings_count == 4
        assert quote.breakdown.total_price == pytest.approx(37.5)
        assert quote.formatted_total == "37.50€"

    def test_cancelled_neighbours_do_not_lower_price(self, directory, request_fields):
        kept = directory.submit_service_request("customer-1", **request_fields("00100"))
        dropped = directory.submit_service_request("customer-2", **request_fields("00100"))
        directory.set_service_request_status(dropped.id, ServiceRequestStatus.CANCELLED)

        quote = asyncio.run(PricingService.quote_for_area(directory, "00100", YardSizeCategory.LARGE))

        assert kept.status == ServiceRequestStatus.PENDING
        assert quote.current_bookings_in_area == 1
        assert quote.breakdown.total_price == pytest.approx(25.0 + 75.0)
