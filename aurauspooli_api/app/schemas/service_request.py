"""
Pydantic models for customer service requests.

A service request is a customer's posting for snow-clearing work at an
address.  The estimated duration is not supplied by the client; it is
derived from the yard size category when the request is submitted.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import ServiceRequestStatus, ServiceType, YardSizeCategory


class ServiceRequestBase(BaseModel):
    postal_code: str = Field(..., examples=["00100"])
    address: str = Field(..., examples=["Mannerheimintie 1"])
    yard_size_category: YardSizeCategory = Field(..., examples=["small"])
    service_type: ServiceType = Field(ServiceType.BOTH, examples=["both"])
    requested_date: Optional[date] = Field(None, examples=["2025-01-15"])
    notes: Optional[str] = Field(None, examples=["Gate code 1234"])


class ServiceRequestCreate(ServiceRequestBase):
    """Schema for submitting a service request."""
    pass


class ServiceRequestStatusUpdate(BaseModel):
    """Schema for moving a service request to a new status."""

    status: ServiceRequestStatus = Field(..., examples=["confirmed"])


class ServiceRequestRead(ServiceRequestBase):
    id: int
    customer_id: str
    estimated_time_minutes: int
    status: ServiceRequestStatus = ServiceRequestStatus.PENDING
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }
