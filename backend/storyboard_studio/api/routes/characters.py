from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storyboard_studio.api.dependencies import get_db
from storyboard_studio import schemas
from storyboard_studio.services import entity_store

router = APIRouter(prefix="/characters", tags=["characters"])


@router.post("/", response_model=schemas.Character, status_code=status.HTTP_201_CREATED)
def create_character(character_in: schemas.CharacterCreate, db: Session = Depends(get_db)):
    return entity_store.create_character(db, character_in)


@router.get("/", response_model=List[schemas.Character])
def list_characters(db: Session = Depends(get_db)):
    return entity_store.list_characters(db)


@router.get("/{character_id}", response_model=Optional[schemas.Character])
def get_character(character_id: int, db: Session = Depends(get_db)):
    return entity_store.get_character(db, character_id)


@router.patch("/{character_id}", response_model=schemas.Character)
def update_character(
    character_id: int, character_in: schemas.CharacterUpdate, db: Session = Depends(get_db)
):
    return entity_store.update_character(db, character_id, character_in)


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_character(character_id: int, db: Session = Depends(get_db)):
    if not entity_store.delete_character(db, character_id):
        raise HTTPException(status_code=404, detail="Character not found")
