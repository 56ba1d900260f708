# backend/storyboard_studio/mcp_server.py
"""
MCP tool server exposing the storyboard operations to LLM clients.

Every tool opens its own session, delegates to the service layer and
returns plain JSON-compatible data. Service errors propagate so the MCP
runtime reports them as tool failures.
"""

import logging
from contextlib import contextmanager
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from storyboard_studio import schemas
from storyboard_studio.core.logging import configure_logging
from storyboard_studio.db.init_db import init_db
from storyboard_studio.db.session import SessionLocal
from storyboard_studio.services import entity_store
from storyboard_studio.services.lifecycle import lifecycle

logger = logging.getLogger(__name__)

mcp = FastMCP("StoryboardStudio")


@contextmanager
def session_scope():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _dump(schema, row) -> Optional[dict]:
    if row is None:
        return None
    return schema.model_validate(row).model_dump(mode="json")


# --- Storyboards ---


@mcp.tool()
def create_storyboard(
    title: str,
    initial_prompt: Optional[str] = None,
    script_content: Optional[str] = None,
) -> dict:
    """
    Create a draft storyboard.

    Args:
        title: Storyboard title.
        initial_prompt: Short story idea. Required unless script_content is given.
        script_content: Full script text. Takes precedence over the prompt when scenes are generated.
    """
    storyboard_in = schemas.StoryboardCreate(
        title=title, initial_prompt=initial_prompt, script_content=script_content
    )
    with session_scope() as db:
        return _dump(schemas.Storyboard, entity_store.create_storyboard(db, storyboard_in))


@mcp.tool()
def list_storyboards() -> List[dict]:
    """List every storyboard."""
    with session_scope() as db:
        return [_dump(schemas.Storyboard, s) for s in entity_store.list_storyboards(db)]


@mcp.tool()
def get_storyboard(storyboard_id: int) -> Optional[dict]:
    """Fetch one storyboard, or null if it does not exist."""
    with session_scope() as db:
        return _dump(schemas.Storyboard, entity_store.get_storyboard(db, storyboard_id))


@mcp.tool()
def update_storyboard(
    storyboard_id: int, title: Optional[str] = None, status: Optional[str] = None
) -> dict:
    """Change the title and/or status of a storyboard. Omitted arguments are left alone."""
    fields = {k: v for k, v in {"title": title, "status": status}.items() if v is not None}
    patch = schemas.StoryboardUpdate(**fields)
    with session_scope() as db:
        return _dump(
            schemas.Storyboard, entity_store.update_storyboard(db, storyboard_id, patch)
        )


@mcp.tool()
def delete_storyboard(storyboard_id: int) -> bool:
    """Delete a storyboard with its scenes. Returns false if it did not exist."""
    with session_scope() as db:
        return entity_store.delete_storyboard(db, storyboard_id)


@mcp.tool()
def generate_scenes(storyboard_id: int) -> List[dict]:
    """Generate scenes from the storyboard's script (or prompt) and mark it completed."""
    with session_scope() as db:
        return [_dump(schemas.Scene, s) for s in lifecycle.generate(db, storyboard_id)]


@mcp.tool()
def export_storyboard(storyboard_id: int, format: str = "json") -> dict:
    """
    Export a storyboard with its scenes, locations and characters.

    Args:
        storyboard_id: Storyboard to export.
        format: "json", "csv" or "pdf" (structured text).

    Returns:
        {"data": <serialized storyboard>, "filename": <suggested file name>}
    """
    with session_scope() as db:
        return lifecycle.export(db, storyboard_id, format).model_dump()


# --- Scenes ---


@mcp.tool()
def create_scene(
    storyboard_id: int,
    sequence_number: int,
    title: str,
    description: str,
    location_id: Optional[int] = None,
) -> dict:
    """Add a scene to a storyboard at the given sequence number."""
    scene_in = schemas.SceneCreate(
        storyboard_id=storyboard_id,
        sequence_number=sequence_number,
        title=title,
        description=description,
        location_id=location_id,
    )
    with session_scope() as db:
        return _dump(schemas.Scene, entity_store.create_scene(db, scene_in))


@mcp.tool()
def update_scene(
    scene_id: int,
    title: Optional[str] = None,
    description: Optional[str] = None,
    location_id: Optional[int] = None,
    clear_location: bool = False,
) -> dict:
    """Edit a scene. Pass clear_location=true to detach it from its location."""
    fields = {
        k: v
        for k, v in {"title": title, "description": description, "location_id": location_id}.items()
        if v is not None
    }
    if clear_location:
        fields["location_id"] = None
    patch = schemas.SceneUpdate(**fields)
    with session_scope() as db:
        return _dump(schemas.Scene, entity_store.update_scene(db, scene_id, patch))


@mcp.tool()
def list_scenes(storyboard_id: int) -> List[dict]:
    """List a storyboard's scenes in sequence order."""
    with session_scope() as db:
        return [_dump(schemas.Scene, s) for s in entity_store.list_scenes(db, storyboard_id)]


@mcp.tool()
def delete_scene(scene_id: int) -> bool:
    """Delete a scene. Returns false if it did not exist."""
    with session_scope() as db:
        return entity_store.delete_scene(db, scene_id)


@mcp.tool()
def assign_character_to_scene(scene_id: int, character_id: int) -> dict:
    """Put a character in a scene. Fails if the character is already there."""
    with session_scope() as db:
        link = entity_store.assign_character_to_scene(db, scene_id, character_id)
        return _dump(schemas.SceneCharacter, link)


@mcp.tool()
def remove_character_from_scene(scene_id: int, character_id: int) -> bool:
    """Take a character out of a scene. Returns false if they were not in it."""
    with session_scope() as db:
        return entity_store.remove_character_from_scene(db, scene_id, character_id)


@mcp.tool()
def list_scene_characters(scene_id: int) -> List[dict]:
    """List the characters appearing in a scene."""
    with session_scope() as db:
        return [
            _dump(schemas.Character, c)
            for c in entity_store.list_scene_characters(db, scene_id)
        ]


# --- Characters & locations ---


@mcp.tool()
def create_character(name: str, description: Optional[str] = None) -> dict:
    """Create a character that can be cast into scenes."""
    character_in = schemas.CharacterCreate(name=name, description=description)
    with session_scope() as db:
        return _dump(schemas.Character, entity_store.create_character(db, character_in))


@mcp.tool()
def update_character(
    character_id: int,
    name: Optional[str] = None,
    description: Optional[str] = None,
    clear_description: bool = False,
) -> dict:
    """Rename a character or change its description. Pass clear_description=true to remove it."""
    fields = {k: v for k, v in {"name": name, "description": description}.items() if v is not None}
    if clear_description:
        fields["description"] = None
    patch = schemas.CharacterUpdate(**fields)
    with session_scope() as db:
        return _dump(
            schemas.Character, entity_store.update_character(db, character_id, patch)
        )


@mcp.tool()
def list_characters() -> List[dict]:
    """List every character."""
    with session_scope() as db:
        return [_dump(schemas.Character, c) for c in entity_store.list_characters(db)]


@mcp.tool()
def create_location(name: str, description: Optional[str] = None) -> dict:
    """Create a location scenes can take place in."""
    location_in = schemas.LocationCreate(name=name, description=description)
    with session_scope() as db:
        return _dump(schemas.Location, entity_store.create_location(db, location_in))


@mcp.tool()
def update_location(
    location_id: int,
    name: Optional[str] = None,
    description: Optional[str] = None,
    clear_description: bool = False,
) -> dict:
    """Rename a location or change its description. Pass clear_description=true to remove it."""
    fields = {k: v for k, v in {"name": name, "description": description}.items() if v is not None}
    if clear_description:
        fields["description"] = None
    patch = schemas.LocationUpdate(**fields)
    with session_scope() as db:
        return _dump(schemas.Location, entity_store.update_location(db, location_id, patch))


@mcp.tool()
def list_locations() -> List[dict]:
    """List every location."""
    with session_scope() as db:
        return [_dump(schemas.Location, loc) for loc in entity_store.list_locations(db)]


def main():
    configure_logging()
    init_db()
    logger.info("Starting StoryboardStudio MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
