from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, Enum
from sqlalchemy.orm import relationship

from storyboard_studio.db.base import Base

import enum


class StoryboardStatus(str, enum.Enum):
    draft = "draft"
    generating = "generating"
    completed = "completed"
    exported = "exported"


class Storyboard(Base):
    __tablename__ = "storyboards"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)

    # at least one of these is set when the storyboard is created
    initial_prompt = Column(Text, nullable=True)
    script_content = Column(Text, nullable=True)

    status = Column(
        Enum(StoryboardStatus, name="storyboard_status"),
        default=StoryboardStatus.draft,
        nullable=False,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    scenes = relationship(
        "Scene",
        back_populates="storyboard",
        cascade="all, delete-orphan",
        order_by="Scene.sequence_number",
    )
