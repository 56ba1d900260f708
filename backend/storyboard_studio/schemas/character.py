from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from .validators import reject_explicit_null


class CharacterBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class CharacterCreate(CharacterBase):
    pass


class CharacterUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return reject_explicit_null(value)


class Character(CharacterBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
