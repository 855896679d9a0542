"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.main import create_app


FIXED_NOW = datetime(2025, 1, 10, 8, 0, 0, tzinfo=timezone.utc)
BOOKING_DAY = date(2025, 1, 15)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def booking_day() -> date:
    return BOOKING_DAY


@pytest.fixture
def directory() -> Directory:
    """Fresh directory with a frozen clock."""
    return Directory(clock=lambda: FIXED_NOW)


@pytest.fixture
def client(directory: Directory) -> TestClient:
    """HTTP client for an application backed by ``directory``."""
    return TestClient(create_app(directory=directory))


@pytest.fixture
def request_fields():
    """Keyword arguments for ``Directory.submit_service_request``."""
    def _fields(postal_code: str = "00100", **overrides):
        fields = {
            "postal_code": postal_code,
            "address": "Mannerheimintie 1",
            "yard_size_category": "small",
            "estimated_time_minutes": 15,
            "service_type": "both",
        }
        fields.update(overrides)
        return fields
    return _fields


@pytest.fixture
def booking_fields():
    """Keyword arguments for ``Directory.create_booking``."""
    def _fields(service_request_id: int, scheduled_date: date = BOOKING_DAY, **overrides):
        fields = {
            "service_request_id": service_request_id,
            "scheduled_date": scheduled_date,
            "base_price": 50.0,
            "hourly_rate": 100.0,
            "discount_multiplier": 1.0,
            "final_price": 75.0,
        }
        fields.update(overrides)
        return fields
    return _fields
