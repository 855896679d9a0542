"""
Booking endpoints for API v1.

Bookings link a service request to a scheduled date and are priced by
the ``BookingService`` when created.  The per-area counters used for
pricing are exposed read-only through ``/bookings/active-count``.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from aurauspooli_api.app.api.deps import get_directory, get_pricing_config
from aurauspooli_api.app.core.errors import InvalidTransitionError, NotFoundError, ValidationError
from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.schemas.booking import BookingCreate, BookingRead, BookingStatusUpdate
from aurauspooli_api.app.schemas.pricing import PricingConfig
from aurauspooli_api.app.services.booking_service import BookingService


router = APIRouter()


@router.post("/", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    directory: Directory = Depends(get_directory),
    pricing_config: PricingConfig = Depends(get_pricing_config),
) -> BookingRead:
    """Create a booking with computed price fields.

    Returns 404 if the service request or operator service does not
    exist and 422 if the operator service is not available or the
    requested status is not ``scheduled`` or ``cancelled``.
    """
    try:
        return await BookingService.create_booking(directory, booking, pricing_config)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


@router.get("/", response_model=List[BookingRead])
async def list_bookings(directory: Directory = Depends(get_directory)) -> List[BookingRead]:
    return await BookingService.list_bookings(directory)


@router.get("/active", response_model=List[BookingRead])
async def list_active_bookings(
    postal_code: str = Query(..., description="Postal code of the area"),
    booking_date: date = Query(..., alias="date", description="Scheduled date (YYYY-MM-DD)"),
    directory: Directory = Depends(get_directory),
) -> List[BookingRead]:
    """List bookings in an area on a date, excluding cancelled ones."""
    return await BookingService.list_active_bookings(directory, postal_code, booking_date)


@router.get("/active-count")
async def get_active_booking_count(
    postal_code: str = Query(..., description="Postal code of the area"),
    booking_date: date = Query(..., alias="date", description="Scheduled date (YYYY-MM-DD)"),
    directory: Directory = Depends(get_directory),
) -> dict:
    """Return the booking counter for an area and date (0 if none)."""
    count = await BookingService.get_active_booking_count(directory, postal_code, booking_date)
    return {"postal_code": postal_code, "date": booking_date, "active_bookings_count": count}


@router.get("/{booking_id}", response_model=BookingRead)
async def get_booking(
    booking_id: int = Path(..., description="ID of the booking"),
    directory: Directory = Depends(get_directory),
) -> BookingRead:
    try:
        return await BookingService.get_booking(directory, booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{booking_id}/status", response_model=BookingRead)
async def update_booking_status(
    update: BookingStatusUpdate,
    booking_id: int = Path(..., description="ID of the booking"),
    directory: Directory = Depends(get_directory),
) -> BookingRead:
    """Move a booking to a new status.

    Allowed: ``scheduled → in_progress → completed`` and ``cancelled``
    from either of the first two.  Cancelling does not lower the area
    counter.  Returns 409 for any other change.
    """
    try:
        return await BookingService.change_status(
            directory, booking_id, update.status, update.actual_time_minutes
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
