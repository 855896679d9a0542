"""
Pydantic models for operator service listings.

An operator declares which postal area it covers, which kind of work it
does and, optionally, how many jobs a day it can take.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import ServiceType


class OperatorServiceBase(BaseModel):
    postal_code: str = Field(..., examples=["02100"])
    service_type: ServiceType = Field(ServiceType.BOTH, examples=["machine"])
    max_capacity_per_day: Optional[int] = Field(None, ge=1, examples=[8])
    equipment_description: Optional[str] = Field(None, examples=["Wheel loader with 2.5 m plough"])


class OperatorServiceCreate(OperatorServiceBase):
    """Schema for submitting an operator service listing."""
    pass


class OperatorServiceRead(OperatorServiceBase):
    id: int
    operator_id: str
    available: bool = True
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }
