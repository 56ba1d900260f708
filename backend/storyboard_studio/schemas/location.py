from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from .validators import reject_explicit_null


class LocationBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class LocationCreate(LocationBase):
    pass


class LocationUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return reject_explicit_null(value)


class Location(LocationBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
