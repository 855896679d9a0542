"""
Business logic for customer service requests.

Submitting a request checks that the postal code is one of the served
areas and derives the estimated duration from the yard size.  Status
changes follow ``pending → confirmed → assigned → completed``; a request
can be cancelled from any status that is not yet terminal.
"""

import logging
from typing import Dict, FrozenSet, List, Optional

from ..core.errors import InvalidTransitionError, NotFoundError
from ..core.store import Directory
from ..schemas.common import ServiceRequestStatus
from ..schemas.service_request import ServiceRequestCreate, ServiceRequestRead
from .postal_area_service import require_known_postal_code
from .pricing_service import get_estimated_time


logger = logging.getLogger(__name__)


ALLOWED_TRANSITIONS: Dict[ServiceRequestStatus, FrozenSet[ServiceRequestStatus]] = {
    ServiceRequestStatus.PENDING: frozenset({ServiceRequestStatus.CONFIRMED, ServiceRequestStatus.CANCELLED}),
    ServiceRequestStatus.CONFIRMED: frozenset({ServiceRequestStatus.ASSIGNED, ServiceRequestStatus.CANCELLED}),
    ServiceRequestStatus.ASSIGNED: frozenset({ServiceRequestStatus.COMPLETED, ServiceRequestStatus.CANCELLED}),
    ServiceRequestStatus.COMPLETED: frozenset(),
    ServiceRequestStatus.CANCELLED: frozenset(),
}


class ServiceRequestService:
    """Service for submitting and tracking service requests."""

    @classmethod
    async def submit_service_request(
        cls, directory: Directory, customer_id: str, data: ServiceRequestCreate
    ) -> ServiceRequestRead:
        """Validate and store a new request for ``customer_id``.

        Raises ``ValidationError`` if the postal code is not served.
        """
        require_known_postal_code(directory, data.postal_code)
        request = directory.submit_service_request(
            customer_id,
            estimated_time_minutes=get_estimated_time(data.yard_size_category),
            **data.model_dump(),
        )
        logger.info(
            "Customer %s submitted service request %s in %s",
            customer_id,
            request.id,
            request.postal_code,
        )
        return request

    @classmethod
    async def list_service_requests(
        cls, directory: Directory, postal_code: Optional[str] = None
    ) -> List[ServiceRequestRead]:
        if postal_code is not None:
            return directory.filter_service_requests_by_postal_code(postal_code)
        return directory.list_service_requests()

    @classmethod
    async def get_service_request(cls, directory: Directory, request_id: int) -> ServiceRequestRead:
        request = directory.get_service_request(request_id)
        if request is None:
            raise NotFoundError("Service request", request_id)
        return request

    @classmethod
    async def change_status(
        cls, directory: Directory, request_id: int, status: ServiceRequestStatus
    ) -> ServiceRequestRead:
        status = ServiceRequestStatus(status)
        request = await cls.get_service_request(directory, request_id)
        if status not in ALLOWED_TRANSITIONS[request.status]:
            raise InvalidTransitionError("service request", request.status.value, status.value)
        previous = request.status
        updated = directory.set_service_request_status(request_id, status)
        logger.info("Service request %s moved from %s to %s", request_id, previous.value, updated.status.value)
        return updated
