"""
Business logic for bookings.

Creating a booking prices the linked service request at that moment:
the customer shares the area base fee with every booking already
counted for the same postal code and date, plus themselves.  The price
fields stored on the booking are exactly the calculator's output.

The area counter kept by the directory is bumped for every new booking,
including one created directly as ``cancelled``, and is not lowered when
a booking is cancelled later, so it counts bookings ever made for that
day rather than bookings still active.
"""

import logging
from datetime import date
from typing import Dict, FrozenSet, List, Optional

from ..core.errors import InvalidTransitionError, NotFoundError, ValidationError
from ..core.store import Directory
from ..schemas.booking import BookingCreate, BookingRead
from ..schemas.common import BookingStatus
from ..schemas.pricing import PricingConfig
from .pricing_service import calculate_price


logger = logging.getLogger(__name__)


ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.SCHEDULED: frozenset({BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED}),
    BookingStatus.IN_PROGRESS: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

# A booking starts out scheduled, or cancelled when it is recorded only to
# hold its place in the area count.
INITIAL_STATUSES: FrozenSet[BookingStatus] = frozenset({BookingStatus.SCHEDULED, BookingStatus.CANCELLED})


class BookingService:
    """Service for creating and tracking bookings."""

    @classmethod
    async def create_booking(
        cls,
        directory: Directory,
        data: BookingCreate,
        config: Optional[PricingConfig] = None,
    ) -> BookingRead:
        """Price and store a booking for an existing service request.

        Raises ``NotFoundError`` if the service request or the operator
        service does not exist, and ``ValidationError`` if the operator
        service is switched off, or if the booking would start out
        ``in_progress`` or ``completed``.
        """
        config = config or PricingConfig()
        initial_status = BookingStatus(data.status)
        if initial_status not in INITIAL_STATUSES:
            logger.warning("Booking rejected: cannot be created with status %s", initial_status.value)
            raise ValidationError(f"A booking cannot be created with status {initial_status.value}")
        request = directory.get_service_request(data.service_request_id)
        if request is None:
            raise NotFoundError("Service request", data.service_request_id)
        if data.operator_service_id is not None:
            operator_service = directory.get_operator_service(data.operator_service_id)
            if operator_service is None:
                raise NotFoundError("Operator service", data.operator_service_id)
            if not operator_service.available:
                logger.warning("Booking rejected: operator service %s is not available", operator_service.id)
                raise ValidationError(f"Operator service {operator_service.id} is not available")

        already_booked = directory.get_active_booking_count(request.postal_code, data.scheduled_date)
        price = calculate_price(request.estimated_time_minutes, already_booked + 1, config)
        booking = directory.create_booking(
            service_request_id=request.id,
            operator_service_id=data.operator_service_id,
            scheduled_date=data.scheduled_date,
            scheduled_time=data.scheduled_time,
            status=initial_status,
            base_price=price.base_price,
            hourly_rate=config.hourly_rate,
            discount_multiplier=price.discount_multiplier,
            final_price=price.total_price,
        )
        logger.info(
            "Booking %s created for service request %s on %s in %s (%s bookings, %.2f)",
            booking.id,
            request.id,
            booking.scheduled_date,
            request.postal_code,
            price.bookings_count,
            booking.final_price,
        )
        return booking

    @classmethod
    async def list_bookings(cls, directory: Directory) -> List[BookingRead]:
        return directory.list_bookings()

    @classmethod
    async def get_booking(cls, directory: Directory, booking_id: int) -> BookingRead:
        booking = directory.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    @classmethod
    async def list_active_bookings(cls, directory: Directory, postal_code: str, booking_date: date) -> List[BookingRead]:
        return directory.list_active_bookings_by_area_and_date(postal_code, booking_date)

    @classmethod
    async def get_active_booking_count(cls, directory: Directory, postal_code: str, booking_date: date) -> int:
        return directory.get_active_booking_count(postal_code, booking_date)

    @classmethod
    async def change_status(
        cls,
        directory: Directory,
        booking_id: int,
        status: BookingStatus,
        actual_time_minutes: Optional[int] = None,
    ) -> BookingRead:
        """Move a booking along ``scheduled → in_progress → completed``.

        ``cancelled`` is reachable from any non-terminal status.  The area
        counter is not adjusted.
        """
        status = BookingStatus(status)
        booking = await cls.get_booking(directory, booking_id)
        if actual_time_minutes is not None and actual_time_minutes < 0:
            raise ValidationError("actual_time_minutes must not be negative")
        if status not in ALLOWED_TRANSITIONS[booking.status]:
            raise InvalidTransitionError("booking", booking.status.value, status.value)
        previous = booking.status
        updated = directory.set_booking_status(booking_id, status, actual_time_minutes)
        logger.info("Booking %s moved from %s to %s", booking_id, previous.value, updated.status.value)
        return updated
