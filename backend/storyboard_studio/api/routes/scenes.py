from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storyboard_studio.api.dependencies import get_db
from storyboard_studio import schemas
from storyboard_studio.services import entity_store

router = APIRouter(prefix="/scenes", tags=["scenes"])


@router.post("/", response_model=schemas.Scene, status_code=status.HTTP_201_CREATED)
def create_scene(scene_in: schemas.SceneCreate, db: Session = Depends(get_db)):
    return entity_store.create_scene(db, scene_in)


@router.get("/{scene_id}", response_model=Optional[schemas.Scene])
def get_scene(scene_id: int, db: Session = Depends(get_db)):
    return entity_store.get_scene(db, scene_id)


@router.patch("/{scene_id}", response_model=schemas.Scene)
def update_scene(
    scene_id: int, scene_in: schemas.SceneUpdate, db: Session = Depends(get_db)
):
    return entity_store.update_scene(db, scene_id, scene_in)


@router.delete("/{scene_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_scene(scene_id: int, db: Session = Depends(get_db)):
    if not entity_store.delete_scene(db, scene_id):
        raise HTTPException(status_code=404, detail="Scene not found")


# --- characters appearing in a scene ---


@router.get("/{scene_id}/characters", response_model=List[schemas.Character])
def list_scene_characters(scene_id: int, db: Session = Depends(get_db)):
    return entity_store.list_scene_characters(db, scene_id)


@router.post(
    "/{scene_id}/characters",
    response_model=schemas.SceneCharacter,
    status_code=status.HTTP_201_CREATED,
)
def assign_character_to_scene(
    scene_id: int,
    assignment: schemas.SceneCharacterAssign,
    db: Session = Depends(get_db),
):
    return entity_store.assign_character_to_scene(db, scene_id, assignment.character_id)


@router.delete(
    "/{scene_id}/characters/{character_id}",
    response_model=schemas.SceneCharacterRemoval,
)
def remove_character_from_scene(
    scene_id: int, character_id: int, db: Session = Depends(get_db)
):
    removed = entity_store.remove_character_from_scene(db, scene_id, character_id)
    return schemas.SceneCharacterRemoval(removed=removed)
