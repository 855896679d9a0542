"""
Operator service endpoints for API v1.

Operators list the areas they cover.  The listing operator is
identified by the ``X-Caller-Id`` header.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from aurauspooli_api.app.api.deps import get_directory
from aurauspooli_api.app.core.errors import NotFoundError, ValidationError
from aurauspooli_api.app.core.security import get_caller_id
from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.schemas.operator_service import OperatorServiceCreate, OperatorServiceRead
from aurauspooli_api.app.services.operator_listing_service import OperatorListingService


router = APIRouter()


@router.post("/", response_model=OperatorServiceRead, status_code=status.HTTP_201_CREATED)
async def submit_operator_service(
    service: OperatorServiceCreate,
    operator_id: str = Depends(get_caller_id),
    directory: Directory = Depends(get_directory),
) -> OperatorServiceRead:
    """Create an operator listing.  Returns 422 if the postal code is not served."""
    try:
        return await OperatorListingService.submit_operator_service(directory, operator_id, service)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


@router.get("/", response_model=List[OperatorServiceRead])
async def list_operator_services(
    postal_code: Optional[str] = Query(None, description="Only listings in this postal code"),
    directory: Directory = Depends(get_directory),
) -> List[OperatorServiceRead]:
    return await OperatorListingService.list_operator_services(directory, postal_code)


@router.get("/{service_id}", response_model=OperatorServiceRead)
async def get_operator_service(
    service_id: int = Path(..., description="ID of the operator service"),
    directory: Directory = Depends(get_directory),
) -> OperatorServiceRead:
    try:
        return await OperatorListingService.get_operator_service(directory, service_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/{service_id}/toggle-availability", response_model=OperatorServiceRead)
async def toggle_operator_service_availability(
    service_id: int = Path(..., description="ID of the operator service"),
    directory: Directory = Depends(get_directory),
) -> OperatorServiceRead:
    """Switch a listing between available and unavailable."""
    try:
        return await OperatorListingService.toggle_availability(directory, service_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
