from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from storyboard_studio.api.dependencies import get_db
from storyboard_studio import schemas
from storyboard_studio.services import entity_store
from storyboard_studio.services.lifecycle import lifecycle

router = APIRouter(prefix="/storyboards", tags=["storyboards"])


@router.post("/", response_model=schemas.Storyboard, status_code=status.HTTP_201_CREATED)
def create_storyboard(
    storyboard_in: schemas.StoryboardCreate, db: Session = Depends(get_db)
):
    return entity_store.create_storyboard(db, storyboard_in)


@router.get("/", response_model=List[schemas.Storyboard])
def list_storyboards(db: Session = Depends(get_db)):
    return entity_store.list_storyboards(db)


@router.get("/{storyboard_id}", response_model=Optional[schemas.Storyboard])
def get_storyboard(storyboard_id: int, db: Session = Depends(get_db)):
    # absence is a normal answer here, not an error
    return entity_store.get_storyboard(db, storyboard_id)


@router.patch("/{storyboard_id}", response_model=schemas.Storyboard)
def update_storyboard(
    storyboard_id: int,
    storyboard_in: schemas.StoryboardUpdate,
    db: Session = Depends(get_db),
):
    return entity_store.update_storyboard(db, storyboard_id, storyboard_in)


@router.delete("/{storyboard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_storyboard(storyboard_id: int, db: Session = Depends(get_db)):
    if not entity_store.delete_storyboard(db, storyboard_id):
        raise HTTPException(status_code=404, detail="Storyboard not found")


@router.post("/{storyboard_id}/generate", response_model=List[schemas.Scene])
def generate_scenes(storyboard_id: int, db: Session = Depends(get_db)):
    return lifecycle.generate(db, storyboard_id)


@router.get("/{storyboard_id}/scenes", response_model=List[schemas.Scene])
def list_scenes(storyboard_id: int, db: Session = Depends(get_db)):
    return entity_store.list_scenes(db, storyboard_id)


@router.get("/{storyboard_id}/export", response_model=schemas.ExportResult)
def export_storyboard(
    storyboard_id: int,
    format: str = Query("json", description="json, csv or pdf"),
    db: Session = Depends(get_db),
):
    return lifecycle.export(db, storyboard_id, format)
