from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional

from storyboard_studio.models.storyboard import StoryboardStatus
from .validators import reject_explicit_null


class StoryboardBase(BaseModel):
    title: str = Field(..., min_length=1)
    initial_prompt: Optional[str] = None
    script_content: Optional[str] = None


class StoryboardCreate(StoryboardBase):
    @model_validator(mode="after")
    def require_prompt_or_script(self):
        if self.initial_prompt is None and self.script_content is None:
            raise ValueError("Either initial_prompt or script_content must be provided")
        return self


class StoryboardUpdate(BaseModel):
    # plain field patch; status is assigned as-is, without transition checks
    title: Optional[str] = Field(default=None, min_length=1)
    status: Optional[StoryboardStatus] = None

    @field_validator("title", "status")
    @classmethod
    def required_fields_not_null(cls, value):
        return reject_explicit_null(value)


class Storyboard(StoryboardBase):
    id: int
    status: StoryboardStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
