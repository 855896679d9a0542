"""
Statistics endpoint for API v1.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from aurauspooli_api.app.api.deps import get_directory
from aurauspooli_api.app.core.store import Directory
from aurauspooli_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("/overview", response_model=Dict[str, Any])
async def overview(directory: Directory = Depends(get_directory)) -> Dict[str, Any]:
    """Return totals of areas, requests, listings and bookings."""
    return await StatisticsService.overview(directory)
