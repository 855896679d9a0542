"""
Pydantic models for bookings and per-area booking counts.

A booking links one service request to an optional operator listing on
a scheduled date.  Its price fields are filled in by the booking
service from the pricing calculator and are not accepted from clients.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import BookingStatus


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    service_request_id: int = Field(..., examples=[1])
    operator_service_id: Optional[int] = Field(None, examples=[1])
    scheduled_date: date = Field(..., examples=["2025-01-15"])
    scheduled_time: Optional[str] = Field(
        None,
        pattern=r"^([01]\d|2[0-3]):[0-5]\d$",
        examples=["07:30"],
        description="Start time in HH:MM format",
    )
    status: BookingStatus = Field(BookingStatus.SCHEDULED, examples=["scheduled"])


class BookingStatusUpdate(BaseModel):
    """Schema for moving a booking to a new status.

    ``actual_time_minutes`` is recorded when supplied, which is normally
    together with ``completed``.
    """

    status: BookingStatus = Field(..., examples=["completed"])
    actual_time_minutes: Optional[int] = Field(None, examples=[35])


class BookingRead(BaseModel):
    id: int
    service_request_id: int
    operator_service_id: Optional[int] = None
    scheduled_date: date
    scheduled_time: Optional[str] = None
    actual_time_minutes: Optional[int] = None
    base_price: float
    hourly_rate: float
    discount_multiplier: float
    final_price: float
    status: BookingStatus = BookingStatus.SCHEDULED
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class PostalAreaBookingCount(BaseModel):
    """Number of bookings recorded for a postal code on a given date."""

    postal_code: str
    booking_date: date
    active_bookings_count: int = 0
