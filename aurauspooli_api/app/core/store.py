"""
In-memory directory: the single source of truth for all records.

The ``Directory`` owns ordered collections of postal areas, service
requests, operator listings, bookings and per-area, per-date booking
counts.  State lives only as long as the directory object; there is no
persistence.  One directory is created per application by
``create_app`` and stored on ``app.state``; routes obtain it through
the ``get_directory`` dependency in ``api.deps``.  Tests build a fresh
directory each.

The directory is permissive.  It does not check postal
codes, durations or references; that is the job of the service layer.
A booking whose service request cannot be found is stored, but the
area counter is left untouched.  The counter is incremented for every
booking whose request resolves, whatever the booking status, and is
never decremented.

Identifiers are allocated per record kind, starting at 1.  Mutating
operations hold a re-entrant lock so there is at most one writer at a
time even if the directory is used from worker threads.
"""

import itertools
import logging
import threading
from datetime import date, datetime, timezone
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from ..schemas.booking import BookingRead, PostalAreaBookingCount
from ..schemas.common import BookingStatus, ServiceRequestStatus
from ..schemas.operator_service import OperatorServiceRead
from ..schemas.postal_area import PostalAreaRead
from ..schemas.service_request import ServiceRequestRead


logger = logging.getLogger(__name__)


# (postal_code, city, area_name)
SEED_POSTAL_AREAS: Tuple[Tuple[str, str, str], ...] = (
    ("00100", "Helsinki", "Keskusta"),
    ("00200", "Helsinki", "Lauttasaari"),
    ("00300", "Helsinki", "Munkkiniemi"),
    ("00400", "Helsinki", "Käpylä"),
    ("00500", "Helsinki", "Sörnäinen"),
    ("02100", "Espoo", "Tapiola"),
    ("02200", "Espoo", "Niittykumpu"),
    ("02600", "Espoo", "Leppävaara"),
    ("01300", "Vantaa", "Tikkurila"),
    ("01600", "Vantaa", "Myyrmäki"),
)

# Service request statuses counted as "neighbours already in" for a quote.
CURRENT_REQUEST_STATUSES = frozenset({ServiceRequestStatus.PENDING, ServiceRequestStatus.CONFIRMED})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_date(value: Union[date, str]) -> date:
    if isinstance(value, str):
        return date.fromisoformat(value)
    return value


class Directory:
    """In-memory store of postal areas, requests, listings and bookings."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or utcnow
        self._lock = threading.RLock()
        self._postal_areas: List[PostalAreaRead] = [
            PostalAreaRead(id=index, postal_code=code, city=city, area_name=area_name)
            for index, (code, city, area_name) in enumerate(SEED_POSTAL_AREAS, start=1)
        ]
        self._service_requests: List[ServiceRequestRead] = []
        self._operator_services: List[OperatorServiceRead] = []
        self._bookings: List[BookingRead] = []
        self._booking_counts: Dict[Tuple[str, date], PostalAreaBookingCount] = {}
        self._ids: Dict[str, Iterator[int]] = {
            "service_request": itertools.count(1),
            "operator_service": itertools.count(1),
            "booking": itertools.count(1),
        }

    def _next_id(self, kind: str) -> int:
        return next(self._ids[kind])

    # ------------------------------------------------------------------
    # Postal areas
    # ------------------------------------------------------------------
    def list_postal_areas(self) -> List[PostalAreaRead]:
        return list(self._postal_areas)

    def find_postal_area_by_code(self, postal_code: str) -> Optional[PostalAreaRead]:
        return next((area for area in self._postal_areas if area.postal_code == postal_code), None)

    # ------------------------------------------------------------------
    # Service requests
    # ------------------------------------------------------------------
    def submit_service_request(
        self,
        customer_id: str,
        *,
        postal_code: str,
        address: str,
        yard_size_category: str,
        estimated_time_minutes: int,
        service_type: str,
        requested_date: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> ServiceRequestRead:
        """Store a new service request with status ``pending``."""
        with self._lock:
            now = self._clock()
            request = ServiceRequestRead(
                id=self._next_id("service_request"),
                customer_id=customer_id,
                postal_code=postal_code,
                address=address,
                yard_size_category=yard_size_category,
                estimated_time_minutes=estimated_time_minutes,
                service_type=service_type,
                status=ServiceRequestStatus.PENDING,
                requested_date=requested_date,
                notes=notes,
                created_at=now,
                updated_at=now,
            )
            self._service_requests.append(request)
            return request

    def list_service_requests(self) -> List[ServiceRequestRead]:
        return list(self._service_requests)

    def filter_service_requests_by_postal_code(self, postal_code: str) -> List[ServiceRequestRead]:
        return [sr for sr in self._service_requests if sr.postal_code == postal_code]

    def get_service_request(self, request_id: int) -> Optional[ServiceRequestRead]:
        return next((sr for sr in self._service_requests if sr.id == request_id), None)

    def set_service_request_status(
        self, request_id: int, status: ServiceRequestStatus
    ) -> Optional[ServiceRequestRead]:
        with self._lock:
            request = self.get_service_request(request_id)
            if request is None:
                return None
            request.status = ServiceRequestStatus(status)
            request.updated_at = self._clock()
            return request

    # ------------------------------------------------------------------
    # Operator services
    # ------------------------------------------------------------------
    def submit_operator_service(
        self,
        operator_id: str,
        *,
        postal_code: str,
        service_type: str,
        max_capacity_per_day: Optional[int] = None,
        equipment_description: Optional[str] = None,
    ) -> OperatorServiceRead:
        """Store a new operator listing, available by default."""
        with self._lock:
            now = self._clock()
            service = OperatorServiceRead(
                id=self._next_id("operator_service"),
                operator_id=operator_id,
                postal_code=postal_code,
                service_type=service_type,
                available=True,
                max_capacity_per_day=max_capacity_per_day,
                equipment_description=equipment_description,
                created_at=now,
                updated_at=now,
            )
            self._operator_services.append(service)
            return service

    def list_operator_services(self) -> List[OperatorServiceRead]:
        return list(self._operator_services)

    def filter_operator_services_by_postal_code(self, postal_code: str) -> List[OperatorServiceRead]:
        return [os_ for os_ in self._operator_services if os_.postal_code == postal_code]

    def get_operator_service(self, service_id: int) -> Optional[OperatorServiceRead]:
        return next((os_ for os_ in self._operator_services if os_.id == service_id), None)

    def set_operator_service_availability(self, service_id: int, available: bool) -> Optional[OperatorServiceRead]:
        with self._lock:
            service = self.get_operator_service(service_id)
            if service is None:
                return None
            service.available = available
            service.updated_at = self._clock()
            return service

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(
        self,
        *,
        service_request_id: int,
        scheduled_date: date,
        base_price: float,
        hourly_rate: float,
        discount_multiplier: float,
        final_price: float,
        operator_service_id: Optional[int] = None,
        scheduled_time: Optional[str] = None,
        actual_time_minutes: Optional[int] = None,
        status: BookingStatus = BookingStatus.SCHEDULED,
        completed_at: Optional[datetime] = None,
    ) -> BookingRead:
        """Store a booking and bump the area counter for its date.

        The counter is keyed by the postal code of the linked service
        request.  If the request does not exist the booking is still
        stored and the counter is not touched.  A booking stored as
        ``completed`` without ``completed_at`` is stamped with the
        current time.
        """
        status = BookingStatus(status)
        with self._lock:
            now = self._clock()
            if status == BookingStatus.COMPLETED and completed_at is None:
                completed_at = now
            booking = BookingRead(
                id=self._next_id("booking"),
                service_request_id=service_request_id,
                operator_service_id=operator_service_id,
                scheduled_date=scheduled_date,
                scheduled_time=scheduled_time,
                actual_time_minutes=actual_time_minutes,
                base_price=base_price,
                hourly_rate=hourly_rate,
                discount_multiplier=discount_multiplier,
                final_price=final_price,
                status=status,
                completed_at=completed_at,
                created_at=now,
                updated_at=now,
            )
            self._bookings.append(booking)
            self._increment_booking_count(service_request_id, booking.scheduled_date)
            return booking

    def _increment_booking_count(self, service_request_id: int, booking_date: date) -> None:
        request = self.get_service_request(service_request_id)
        if request is None:
            logger.debug(
                "Service request %s not found; booking count for %s not updated",
                service_request_id,
                booking_date,
            )
            return
        key = (request.postal_code, booking_date)
        existing = self._booking_counts.get(key)
        if existing is not None:
            existing.active_bookings_count += 1
        else:
            self._booking_counts[key] = PostalAreaBookingCount(
                postal_code=request.postal_code,
                booking_date=booking_date,
                active_bookings_count=1,
            )

    def list_bookings(self) -> List[BookingRead]:
        return list(self._bookings)

    def get_booking(self, booking_id: int) -> Optional[BookingRead]:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def set_booking_status(
        self,
        booking_id: int,
        status: BookingStatus,
        actual_time_minutes: Optional[int] = None,
    ) -> Optional[BookingRead]:
        """Change a booking's status; the area counter is left as is."""
        with self._lock:
            booking = self.get_booking(booking_id)
            if booking is None:
                return None
            now = self._clock()
            booking.status = BookingStatus(status)
            if actual_time_minutes is not None:
                booking.actual_time_minutes = actual_time_minutes
            if booking.status == BookingStatus.COMPLETED:
                booking.completed_at = now
            booking.updated_at = now
            return booking

    def list_active_bookings_by_area_and_date(self, postal_code: str, booking_date: Union[date, str]) -> List[BookingRead]:
        booking_date = _as_date(booking_date)
        request_ids = {sr.id for sr in self.filter_service_requests_by_postal_code(postal_code)}
        return [
            b
            for b in self._bookings
            if b.service_request_id in request_ids
            and b.scheduled_date == booking_date
            and b.status != BookingStatus.CANCELLED
        ]

    def get_active_booking_count(self, postal_code: str, booking_date: Union[date, str]) -> int:
        """Bookings counted for the area on ``booking_date`` (a date or ISO string)."""
        booking_date = _as_date(booking_date)
        count = self._booking_counts.get((postal_code, booking_date))
        return count.active_bookings_count if count else 0

    def list_booking_counts(self) -> List[PostalAreaBookingCount]:
        return list(self._booking_counts.values())

    def count_current_bookings_in_area(self, postal_code: str) -> int:
        """Number of pending or confirmed service requests in the area."""
        return sum(
            1
            for sr in self.filter_service_requests_by_postal_code(postal_code)
            if sr.status in CURRENT_REQUEST_STATUSES
        )
