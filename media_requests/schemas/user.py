"""Pydantic schemas for Users."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

from media_requests.schemas.request import as_utc


class UserOut(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}

    @field_validator("created_at")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
