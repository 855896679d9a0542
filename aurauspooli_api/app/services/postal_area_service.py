"""
Read access to the static postal area list.

Also hosts ``require_known_postal_code``, used by the other services to
reject postal codes outside the served areas.
"""

import logging
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import Directory
from ..schemas.postal_area import PostalAreaRead


logger = logging.getLogger(__name__)


class PostalAreaService:
    """Service for postal area lookups."""

    @classmethod
    async def list_postal_areas(cls, directory: Directory) -> List[PostalAreaRead]:
        return directory.list_postal_areas()

    @classmethod
    async def get_postal_area(cls, directory: Directory, postal_code: str) -> PostalAreaRead:
        area = directory.find_postal_area_by_code(postal_code)
        if area is None:
            raise NotFoundError("Postal area", postal_code)
        return area


def require_known_postal_code(directory: Directory, postal_code: str) -> PostalAreaRead:
    """Return the postal area for ``postal_code`` or raise ``ValidationError``."""
    area = directory.find_postal_area_by_code(postal_code)
    if area is None:
        logger.warning("Rejected unknown postal code %s", postal_code)
        raise ValidationError(f"Postal code {postal_code} is not served")
    return area
