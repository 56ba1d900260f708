# backend/storyboard_studio/services/entity_store.py

"""
CRUD access to characters, locations, storyboards, scenes and the
scene/character junction.

Every function takes the caller's ``Session`` first and commits its own
work. Reads return ``None`` for a missing row; writes that need a row raise
``NotFoundError``. SQLAlchemy failures are rolled back and re-raised as
``StoreError`` (or ``ConflictError`` for the assignment unique constraint).
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storyboard_studio import models, schemas
from storyboard_studio.core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# columns a patch may never clear
_REQUIRED_FIELDS = {
    models.Character: {"name"},
    models.Location: {"name"},
    models.Storyboard: {"title", "status"},
    models.Scene: {"title", "description"},
}


@contextmanager
def transaction(db: Session, action: str):
    """Commit on success; roll back and translate SQLAlchemy errors on failure."""
    try:
        yield
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("%s failed: %s", action, e)
        raise StoreError(f"{action} failed: {e}") from e
    except Exception:
        db.rollback()
        raise


def _apply_patch(row, patch: BaseModel) -> None:
    data = patch.model_dump(exclude_unset=True)
    required = _REQUIRED_FIELDS.get(type(row), set())
    for field, value in data.items():
        if value is None and field in required:
            raise ValidationError(f"{field} cannot be null")
    for field, value in data.items():
        setattr(row, field, value)
    if hasattr(row, "updated_at"):
        row.updated_at = datetime.utcnow()


def _require(db: Session, model, entity_id: int, label: str):
    row = db.get(model, entity_id)
    if row is None:
        raise NotFoundError(label, entity_id)
    return row


def _delete(db: Session, model, entity_id: int, label: str) -> bool:
    row = db.get(model, entity_id)
    if row is None:
        return False
    with transaction(db, f"Deleting {label.lower()} {entity_id}"):
        db.delete(row)
    logger.info("Deleted %s %s", label.lower(), entity_id)
    return True


# --- Characters ---


def create_character(db: Session, character_in: schemas.CharacterCreate) -> models.Character:
    character = models.Character(
        name=character_in.name,
        description=character_in.description,
    )
    with transaction(db, "Character creation"):
        db.add(character)
    db.refresh(character)
    return character


def get_character(db: Session, character_id: int) -> Optional[models.Character]:
    return db.get(models.Character, character_id)


def list_characters(db: Session) -> List[models.Character]:
    return db.query(models.Character).order_by(models.Character.id).all()


def update_character(
    db: Session, character_id: int, patch: schemas.CharacterUpdate
) -> models.Character:
    character = _require(db, models.Character, character_id, "Character")
    with transaction(db, "Character update"):
        _apply_patch(character, patch)
    db.refresh(character)
    return character


def delete_character(db: Session, character_id: int) -> bool:
    """Remove a character together with its scene assignments."""
    return _delete(db, models.Character, character_id, "Character")


# --- Locations ---


def create_location(db: Session, location_in: schemas.LocationCreate) -> models.Location:
    location = models.Location(
        name=location_in.name,
        description=location_in.description,
    )
    with transaction(db, "Location creation"):
        db.add(location)
    db.refresh(location)
    return location


def get_location(db: Session, location_id: int) -> Optional[models.Location]:
    return db.get(models.Location, location_id)


def list_locations(db: Session) -> List[models.Location]:
    return db.query(models.Location).order_by(models.Location.id).all()


def update_location(
    db: Session, location_id: int, patch: schemas.LocationUpdate
) -> models.Location:
    location = _require(db, models.Location, location_id, "Location")
    with transaction(db, "Location update"):
        _apply_patch(location, patch)
    db.refresh(location)
    return location


def delete_location(db: Session, location_id: int) -> bool:
    """Remove a location; scenes that used it keep existing with no location."""
    return _delete(db, models.Location, location_id, "Location")


# --- Storyboards ---


def create_storyboard(db: Session, storyboard_in: schemas.StoryboardCreate) -> models.Storyboard:
    storyboard = models.Storyboard(
        title=storyboard_in.title,
        initial_prompt=storyboard_in.initial_prompt,
        script_content=storyboard_in.script_content,
        status=models.StoryboardStatus.draft,
    )
    with transaction(db, "Storyboard creation"):
        db.add(storyboard)
    db.refresh(storyboard)
    logger.info("Created storyboard %s (%r)", storyboard.id, storyboard.title)
    return storyboard


def get_storyboard(db: Session, storyboard_id: int) -> Optional[models.Storyboard]:
    return db.get(models.Storyboard, storyboard_id)


def list_storyboards(db: Session) -> List[models.Storyboard]:
    return db.query(models.Storyboard).order_by(models.Storyboard.id).all()


def update_storyboard(
    db: Session, storyboard_id: int, patch: schemas.StoryboardUpdate
) -> models.Storyboard:
    """Assign title and/or status directly. No transition rules apply here."""
    storyboard = _require(db, models.Storyboard, storyboard_id, "Storyboard")
    with transaction(db, "Storyboard update"):
        _apply_patch(storyboard, patch)
    db.refresh(storyboard)
    return storyboard


def set_storyboard_status(
    db: Session, storyboard: models.Storyboard, status: models.StoryboardStatus
) -> models.Storyboard:
    with transaction(db, f"Setting storyboard {storyboard.id} status to {status.value}"):
        storyboard.status = status
        storyboard.updated_at = datetime.utcnow()
    db.refresh(storyboard)
    return storyboard


def delete_storyboard(db: Session, storyboard_id: int) -> bool:
    """Remove a storyboard with all of its scenes and their assignments."""
    return _delete(db, models.Storyboard, storyboard_id, "Storyboard")


# --- Scenes ---


def create_scene(db: Session, scene_in: schemas.SceneCreate) -> models.Scene:
    _require(db, models.Storyboard, scene_in.storyboard_id, "Storyboard")
    if scene_in.location_id is not None:
        _require(db, models.Location, scene_in.location_id, "Location")

    scene = models.Scene(
        storyboard_id=scene_in.storyboard_id,
        sequence_number=scene_in.sequence_number,
        title=scene_in.title,
        description=scene_in.description,
        location_id=scene_in.location_id,
    )
    with transaction(db, "Scene creation"):
        db.add(scene)
    db.refresh(scene)
    return scene


def get_scene(db: Session, scene_id: int) -> Optional[models.Scene]:
    return db.get(models.Scene, scene_id)


def list_scenes(db: Session, storyboard_id: int) -> List[models.Scene]:
    return (
        db.query(models.Scene)
        .filter(models.Scene.storyboard_id == storyboard_id)
        .order_by(models.Scene.sequence_number.asc(), models.Scene.id.asc())
        .all()
    )


def update_scene(db: Session, scene_id: int, patch: schemas.SceneUpdate) -> models.Scene:
    scene = _require(db, models.Scene, scene_id, "Scene")
    location_id = patch.model_dump(exclude_unset=True).get("location_id")
    if location_id is not None:
        _require(db, models.Location, location_id, "Location")

    with transaction(db, "Scene update"):
        _apply_patch(scene, patch)
    db.refresh(scene)
    return scene


def delete_scene(db: Session, scene_id: int) -> bool:
    """Remove a scene and its character assignments."""
    return _delete(db, models.Scene, scene_id, "Scene")


# --- Scene <-> Character ---


def assign_character_to_scene(
    db: Session, scene_id: int, character_id: int
) -> models.SceneCharacter:
    _require(db, models.Scene, scene_id, "Scene")
    _require(db, models.Character, character_id, "Character")

    existing = (
        db.query(models.SceneCharacter)
        .filter_by(scene_id=scene_id, character_id=character_id)
        .first()
    )
    if existing:
        raise ConflictError(
            f"Character {character_id} is already assigned to scene {scene_id}"
        )

    link = models.SceneCharacter(scene_id=scene_id, character_id=character_id)
    db.add(link)
    try:
        db.commit()
    except IntegrityError as e:
        # lost a race against an identical assignment
        db.rollback()
        raise ConflictError(
            f"Character {character_id} is already assigned to scene {scene_id}"
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Character assignment to scene failed: %s", e)
        raise StoreError(f"Character assignment to scene failed: {e}") from e

    db.refresh(link)
    return link


def remove_character_from_scene(db: Session, scene_id: int, character_id: int) -> bool:
    with transaction(db, "Removing character from scene"):
        removed = (
            db.query(models.SceneCharacter)
            .filter_by(scene_id=scene_id, character_id=character_id)
            .delete(synchronize_session=False)
        )
    return removed > 0


def list_scene_characters(db: Session, scene_id: int) -> List[models.Character]:
    return (
        db.query(models.Character)
        .join(models.SceneCharacter, models.SceneCharacter.character_id == models.Character.id)
        .filter(models.SceneCharacter.scene_id == scene_id)
        .order_by(models.SceneCharacter.id)
        .all()
    )
