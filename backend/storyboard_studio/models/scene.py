from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from storyboard_studio.db.base import Base


class Scene(Base):
    __tablename__ = "scenes"

    id = Column(Integer, primary_key=True, index=True)
    storyboard_id = Column(
        Integer,
        ForeignKey("storyboards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ordering key inside a storyboard; duplicates are allowed
    sequence_number = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    location_id = Column(
        Integer,
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    storyboard = relationship("Storyboard", back_populates="scenes")
    location = relationship("Location", back_populates="scenes")
    character_links = relationship(
        "SceneCharacter",
        back_populates="scene",
        cascade="all, delete-orphan",
        order_by="SceneCharacter.id",
    )
