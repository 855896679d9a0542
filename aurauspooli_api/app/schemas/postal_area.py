"""
Pydantic model for postal areas.

Postal areas are static reference data seeded when the directory is
built and never changed afterwards, so the model is frozen.  The postal
code is the key used for matching requests, operator listings and
bookings to an area.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PostalAreaRead(BaseModel):
    id: int
    postal_code: str = Field(..., examples=["00100"])
    city: str = Field(..., examples=["Helsinki"])
    area_name: Optional[str] = Field(None, examples=["Keskusta"])

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
