"""
Service request endpoints for API v1.

Customers submit requests for snow-clearing work here.  The submitting
customer is identified by the ``X-Caller-Id`` header.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from aurauspooli_api.app.api.deps import get_directory
from aurauspooli_api.app.core.errors import InvalidTransitionError, NotFoundError, ValidationError
from aurauspooli_api.app.core.security import get_caller_id
from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.schemas.service_request import (
    ServiceRequestCreate,
    ServiceRequestRead,
    ServiceRequestStatusUpdate,
)
from aurauspooli_api.app.services.service_request_service import ServiceRequestService


router = APIRouter()


@router.post("/", response_model=ServiceRequestRead, status_code=status.HTTP_201_CREATED)
async def submit_service_request(
    request: ServiceRequestCreate,
    customer_id: str = Depends(get_caller_id),
    directory: Directory = Depends(get_directory),
) -> ServiceRequestRead:
    """Submit a new service request.

    The estimated duration is derived from ``yard_size_category`` and
    the request starts as ``pending``.  Returns 422 if the postal code
    is not served.
    """
    try:
        return await ServiceRequestService.submit_service_request(directory, customer_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


@router.get("/", response_model=List[ServiceRequestRead])
async def list_service_requests(
    postal_code: Optional[str] = Query(None, description="Only requests in this postal code"),
    directory: Directory = Depends(get_directory),
) -> List[ServiceRequestRead]:
    """List service requests in submission order, optionally for one postal code."""
    return await ServiceRequestService.list_service_requests(directory, postal_code)


@router.get("/{request_id}", response_model=ServiceRequestRead)
async def get_service_request(
    request_id: int = Path(..., description="ID of the service request"),
    directory: Directory = Depends(get_directory),
) -> ServiceRequestRead:
    try:
        return await ServiceRequestService.get_service_request(directory, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{request_id}/status", response_model=ServiceRequestRead)
async def update_service_request_status(
    update: ServiceRequestStatusUpdate,
    request_id: int = Path(..., description="ID of the service request"),
    directory: Directory = Depends(get_directory),
) -> ServiceRequestRead:
    """Move a service request to a new status.

    Allowed: ``pending → confirmed → assigned → completed``, and
    ``cancelled`` from any of the first three.  Returns 409 for any
    other change and 404 if the request does not exist.
    """
    try:
        return await ServiceRequestService.change_status(directory, request_id, update.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
