"""
Tests for the MCP tool functions. FastMCP's decorator returns the plain
function, so the tools are called directly.
"""

import json

import pytest

from storyboard_studio import mcp_server
from storyboard_studio.core.exceptions import ConflictError, NotFoundError


@pytest.fixture
def tools(db):
    return mcp_server


def test_storyboard_round_trip(tools):
    sb = tools.create_storyboard(title="Pilot", initial_prompt="A hero's final fight")
    assert sb["status"] == "draft"
    assert tools.get_storyboard(sb["id"])["title"] == "Pilot"
    assert [s["id"] for s in tools.list_storyboards()] == [sb["id"]]

    scenes = tools.generate_scenes(sb["id"])
    assert [s["sequence_number"] for s in scenes] == [1, 2, 3]
    assert tools.get_storyboard(sb["id"])["status"] == "completed"

    exported = tools.export_storyboard(sb["id"], format="json")
    assert exported["filename"] == f"storyboard_{sb['id']}.json"
    assert len(json.loads(exported["data"])["scenes"]) == 3
    assert tools.get_storyboard(sb["id"])["status"] == "exported"


def test_update_storyboard_only_changes_given_fields(tools):
    sb = tools.create_storyboard(title="Pilot", script_content="INT. LAB")
    updated = tools.update_storyboard(sb["id"], status="draft")
    assert updated["title"] == "Pilot"

    renamed = tools.update_storyboard(sb["id"], title="Pilot v2")
    assert renamed["title"] == "Pilot v2"


def test_get_missing_storyboard(tools):
    assert tools.get_storyboard(404) is None


def test_scene_and_cast_tools(tools):
    sb = tools.create_storyboard(title="Pilot", initial_prompt="quiet")
    location = tools.create_location(name="Lab")
    scene = tools.create_scene(
        sb["id"], 1, "Arrival", "Doors open", location_id=location["id"]
    )
    character = tools.create_character(name="Dr. Vale")

    tools.assign_character_to_scene(scene["id"], character["id"])
    with pytest.raises(ConflictError):
        tools.assign_character_to_scene(scene["id"], character["id"])
    assert [c["name"] for c in tools.list_scene_characters(scene["id"])] == ["Dr. Vale"]

    detached = tools.update_scene(scene["id"], clear_location=True)
    assert detached["location_id"] is None
    assert detached["title"] == "Arrival"

    assert tools.remove_character_from_scene(scene["id"], character["id"]) is True
    assert tools.remove_character_from_scene(scene["id"], character["id"]) is False
    assert [s["id"] for s in tools.list_scenes(sb["id"])] == [scene["id"]]
    assert tools.delete_scene(scene["id"]) is True


def test_character_and_location_updates(tools):
    character = tools.create_character(name="Vale", description="Scientist")
    assert tools.update_character(character["id"], name="Dr. Vale")["description"] == "Scientist"
    assert [c["name"] for c in tools.list_characters()] == ["Dr. Vale"]

    location = tools.create_location(name="Lab")
    assert tools.update_location(location["id"], description="Sterile")["name"] == "Lab"
    assert [loc["name"] for loc in tools.list_locations()] == ["Lab"]


def test_descriptions_can_be_cleared(tools):
    character = tools.create_character(name="Vale", description="Scientist")
    # a bare None leaves the description alone
    assert tools.update_character(character["id"], description=None)["description"] == "Scientist"
    cleared = tools.update_character(character["id"], clear_description=True)
    assert cleared["description"] is None
    assert cleared["name"] == "Vale"

    location = tools.create_location(name="Lab", description="Sterile")
    cleared = tools.update_location(location["id"], clear_description=True)
    assert cleared["description"] is None
    assert [loc["description"] for loc in tools.list_locations()] == [None]


def test_errors_propagate(tools):
    with pytest.raises(NotFoundError):
        tools.generate_scenes(999)
    assert tools.delete_storyboard(999) is False
