"""
Business logic for operator service listings.

Operators list the postal areas they cover.  Listings start out
available and can be switched on and off.
"""

import logging
from typing import List, Optional

from ..core.errors import NotFoundError
from ..core.store import Directory
from ..schemas.operator_service import OperatorServiceCreate, OperatorServiceRead
from .postal_area_service import require_known_postal_code


logger = logging.getLogger(__name__)


class OperatorListingService:
    """Service for operator listings."""

    @classmethod
    async def submit_operator_service(
        cls, directory: Directory, operator_id: str, data: OperatorServiceCreate
    ) -> OperatorServiceRead:
        """Validate and store a listing for ``operator_id``.

        Raises ``ValidationError`` if the postal code is not served.
        """
        require_known_postal_code(directory, data.postal_code)
        service = directory.submit_operator_service(operator_id, **data.model_dump())
        logger.info("Operator %s listed service %s in %s", operator_id, service.id, service.postal_code)
        return service

    @classmethod
    async def list_operator_services(
        cls, directory: Directory, postal_code: Optional[str] = None
    ) -> List[OperatorServiceRead]:
        if postal_code is not None:
            return directory.filter_operator_services_by_postal_code(postal_code)
        return directory.list_operator_services()

    @classmethod
    async def get_operator_service(cls, directory: Directory, service_id: int) -> OperatorServiceRead:
        service = directory.get_operator_service(service_id)
        if service is None:
            raise NotFoundError("Operator service", service_id)
        return service

    @classmethod
    async def toggle_availability(cls, directory: Directory, service_id: int) -> OperatorServiceRead:
        service = await cls.get_operator_service(directory, service_id)
        updated = directory.set_operator_service_availability(service_id, not service.available)
        logger.info("Operator service %s availability set to %s", service_id, updated.available)
        return updated
