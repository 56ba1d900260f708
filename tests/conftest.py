import os

# must be set before storyboard_studio reads its settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from storyboard_studio import models, schemas
from storyboard_studio.db import Base, SessionLocal, engine
from storyboard_studio.main import app
from storyboard_studio.services import entity_store


@pytest.fixture
def db():
    """Fresh schema and a session on the shared in-memory database."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Test client for the FastAPI app, sharing the ``db`` fixture's database."""
    return TestClient(app)


@pytest.fixture
def storyboard(db) -> models.Storyboard:
    return entity_store.create_storyboard(
        db,
        schemas.StoryboardCreate(
            title="Test Storyboard",
            initial_prompt="A hero faces a great challenge and must overcome conflict to save the day",
        ),
    )


@pytest.fixture
def location(db) -> models.Location:
    return entity_store.create_location(
        db, schemas.LocationCreate(name="Abandoned Warehouse", description="Dusty and dark")
    )


@pytest.fixture
def character(db) -> models.Character:
    return entity_store.create_character(
        db, schemas.CharacterCreate(name="Alice", description="The protagonist")
    )


@pytest.fixture
def make_scene(db):
    """Factory for scenes with a description derived from the title."""

    def _make(storyboard_id, sequence_number, title="Scene", location_id=None):
        return entity_store.create_scene(
            db,
            schemas.SceneCreate(
                storyboard_id=storyboard_id,
                sequence_number=sequence_number,
                title=title,
                description=f"{title} description",
                location_id=location_id,
            ),
        )

    return _make
