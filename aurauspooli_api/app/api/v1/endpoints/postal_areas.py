"""
Postal area endpoints for API v1.

Postal areas are read-only reference data.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from aurauspooli_api.app.api.deps import get_directory
from aurauspooli_api.app.core.errors import NotFoundError
from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.schemas.postal_area import PostalAreaRead
from aurauspooli_api.app.services.postal_area_service import PostalAreaService


router = APIRouter()


@router.get("/", response_model=List[PostalAreaRead])
async def list_postal_areas(directory: Directory = Depends(get_directory)) -> List[PostalAreaRead]:
    """List the served postal areas in their fixed order."""
    return await PostalAreaService.list_postal_areas(directory)


@router.get("/{postal_code}", response_model=PostalAreaRead)
async def get_postal_area(
    postal_code: str = Path(..., description="Postal code, e.g. 00100"),
    directory: Directory = Depends(get_directory),
) -> PostalAreaRead:
    """Retrieve a postal area by its code.  Raises 404 if the code is not served."""
    try:
        return await PostalAreaService.get_postal_area(directory, postal_code)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
