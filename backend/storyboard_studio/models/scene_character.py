from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storyboard_studio.db.base import Base


class SceneCharacter(Base):
    __tablename__ = "scene_characters"
    __table_args__ = (
        UniqueConstraint("scene_id", "character_id", name="uq_scene_character"),
    )

    id = Column(Integer, primary_key=True, index=True)

    scene_id = Column(
        Integer,
        ForeignKey("scenes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    character_id = Column(
        Integer,
        ForeignKey("characters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    scene = relationship("Scene", back_populates="character_links")
    character = relationship("Character", back_populates="scene_links")
