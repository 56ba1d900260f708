from datetime import datetime
from enum import Enum
from pydantic import BaseModel
from typing import List, Optional

from storyboard_studio.models.storyboard import StoryboardStatus


class ExportFormat(str, Enum):
    json = "json"
    csv = "csv"
    # structured plain text; the file still gets a .pdf extension
    pdf_text = "pdf_text"

    @classmethod
    def _missing_(cls, value):
        # clients call the text export "pdf"
        if isinstance(value, str) and value.lower() == "pdf":
            return cls.pdf_text
        return None

    @property
    def extension(self) -> str:
        return "pdf" if self is ExportFormat.pdf_text else self.value


class ExportedLocation(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class ExportedCharacter(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class ExportedStoryboard(BaseModel):
    id: int
    title: str
    initial_prompt: Optional[str] = None
    script_content: Optional[str] = None
    status: StoryboardStatus
    created_at: datetime
    updated_at: datetime


class ExportedScene(BaseModel):
    id: int
    sequence_number: int
    title: str
    description: str
    location: Optional[ExportedLocation] = None
    characters: List[ExportedCharacter] = []
    created_at: datetime
    updated_at: datetime


class StoryboardSnapshot(BaseModel):
    storyboard: ExportedStoryboard
    scenes: List[ExportedScene]


class ExportResult(BaseModel):
    data: str
    filename: str
