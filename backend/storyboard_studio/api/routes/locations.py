from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storyboard_studio.api.dependencies import get_db
from storyboard_studio import schemas
from storyboard_studio.services import entity_store

router = APIRouter(prefix="/locations", tags=["locations"])


@router.post("/", response_model=schemas.Location, status_code=status.HTTP_201_CREATED)
def create_location(location_in: schemas.LocationCreate, db: Session = Depends(get_db)):
    return entity_store.create_location(db, location_in)


@router.get("/", response_model=List[schemas.Location])
def list_locations(db: Session = Depends(get_db)):
    return entity_store.list_locations(db)


@router.get("/{location_id}", response_model=Optional[schemas.Location])
def get_location(location_id: int, db: Session = Depends(get_db)):
    return entity_store.get_location(db, location_id)


@router.patch("/{location_id}", response_model=schemas.Location)
def update_location(
    location_id: int, location_in: schemas.LocationUpdate, db: Session = Depends(get_db)
):
    return entity_store.update_location(db, location_id, location_in)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(location_id: int, db: Session = Depends(get_db)):
    if not entity_store.delete_location(db, location_id):
        raise HTTPException(status_code=404, detail="Location not found")
