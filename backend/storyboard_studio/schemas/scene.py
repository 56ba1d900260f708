from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from .validators import reject_explicit_null


class SceneBase(BaseModel):
    sequence_number: int = Field(..., ge=0)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location_id: Optional[int] = None


class SceneCreate(SceneBase):
    storyboard_id: int


class SceneUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    # explicit null detaches the scene from its location
    location_id: Optional[int] = None

    @field_validator("title", "description")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_explicit_null(value)


class Scene(SceneBase):
    id: int
    storyboard_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
