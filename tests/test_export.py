"""
Tests for the export pipeline: snapshot content and the three renderings.
"""

import json

import pytest

from storyboard_studio import schemas
from storyboard_studio.core.exceptions import NotFoundError, ValidationError
from storyboard_studio.services import entity_store, export
from storyboard_studio.services.lifecycle import lifecycle


@pytest.fixture
def populated(db, storyboard, location, character, make_scene):
    """Storyboard with two scenes: one furnished, one bare."""
    bob = entity_store.create_character(
        db, schemas.CharacterCreate(name='Bob "The Brick"', description=None)
    )
    second = make_scene(storyboard.id, 2, "Aftermath")
    first = entity_store.create_scene(
        db,
        schemas.SceneCreate(
            storyboard_id=storyboard.id,
            sequence_number=1,
            title='The "Deal"',
            description="Alice meets Bob, quietly",
            location_id=location.id,
        ),
    )
    entity_store.assign_character_to_scene(db, first.id, character.id)
    entity_store.assign_character_to_scene(db, first.id, bob.id)
    return {"storyboard": storyboard, "first": first, "second": second}


# ============================================================================
# JSON
# ============================================================================


def test_json_matches_store(db, populated):
    storyboard = populated["storyboard"]
    result = export.export_storyboard(db, storyboard.id, "json")
    payload = json.loads(result.data)

    assert result.filename == f"storyboard_{storyboard.id}.json"
    assert list(payload) == ["storyboard", "scenes"]
    assert payload["storyboard"]["title"] == "Test Storyboard"
    assert payload["storyboard"]["status"] == "draft"

    stored = entity_store.list_scenes(db, storyboard.id)
    assert len(payload["scenes"]) == len(stored)
    assert [s["id"] for s in payload["scenes"]] == [s.id for s in stored]

    for exported, scene in zip(payload["scenes"], stored):
        expected_chars = entity_store.list_scene_characters(db, scene.id)
        assert [c["id"] for c in exported["characters"]] == [c.id for c in expected_chars]
        if scene.location_id is None:
            assert exported["location"] is None
        else:
            assert exported["location"]["id"] == scene.location_id


def test_json_scene_field_order(db, populated):
    payload = json.loads(export.export_storyboard(db, populated["storyboard"].id, "json").data)
    assert list(payload["scenes"][0]) == [
        "id",
        "sequence_number",
        "title",
        "description",
        "location",
        "characters",
        "created_at",
        "updated_at",
    ]
    assert payload["scenes"][0]["location"] == {
        "id": populated["first"].location_id,
        "name": "Abandoned Warehouse",
        "description": "Dusty and dark",
    }


def test_json_is_pretty_printed(db, storyboard):
    data = export.export_storyboard(db, storyboard.id, schemas.ExportFormat.json).data
    assert data.startswith("{\n  ")


def test_json_without_scenes(db, storyboard):
    payload = json.loads(export.export_storyboard(db, storyboard.id, "json").data)
    assert payload["scenes"] == []


# ============================================================================
# CSV
# ============================================================================


def test_csv_rows(db, populated):
    first, second = populated["first"], populated["second"]
    result = export.export_storyboard(db, populated["storyboard"].id, "csv")
    lines = result.data.split("\n")

    assert result.filename.endswith(".csv")
    assert lines[0] == export.CSV_HEADER
    assert lines[1] == ",".join(
        [
            str(first.id),
            "1",
            '"The ""Deal"""',
            '"Alice meets Bob, quietly"',
            '"Abandoned Warehouse"',
            '"Alice; Bob ""The Brick"""',
            first.created_at.isoformat(),
            first.updated_at.isoformat(),
        ]
    )
    # no location and no characters render as empty quoted fields
    assert lines[2].startswith(f'{second.id},2,"Aftermath","Aftermath description","",""')
    assert len(lines) == 3


# ============================================================================
# Text ("pdf")
# ============================================================================


def test_pdf_text_layout(db, populated):
    storyboard = populated["storyboard"]
    result = export.export_storyboard(db, storyboard.id, "pdf")
    lines = result.data.split("\n")

    assert result.filename == f"storyboard_{storyboard.id}.pdf"
    assert lines[:8] == [
        "STORYBOARD: Test Storyboard",
        f"Created: {storyboard.created_at.isoformat()}",
        "Status: draft",
        "",
        "Initial Prompt: A hero faces a great challenge and must overcome conflict to save the day",
        "",
        "SCENES:",
        "",
    ]
    assert lines[8:] == [
        'Scene 1: The "Deal"',
        "Description: Alice meets Bob, quietly",
        "Location: Abandoned Warehouse",
        'Characters: Alice, Bob "The Brick"',
        "",
        "Scene 2: Aftermath",
        "Description: Aftermath description",
        "",
    ]


def test_pdf_text_includes_script_block(db):
    sb = entity_store.create_storyboard(
        db, schemas.StoryboardCreate(title="Scripted", script_content="FADE IN.")
    )
    data = export.export_storyboard(db, sb.id, schemas.ExportFormat.pdf_text).data
    assert "Script Content: FADE IN.\n" in data
    assert "Initial Prompt" not in data


# ============================================================================
# Errors & status
# ============================================================================


def test_export_does_not_change_status_by_itself(db, storyboard):
    export.export_storyboard(db, storyboard.id, "json")
    db.expire_all()
    assert entity_store.get_storyboard(db, storyboard.id).status.value == "draft"


def test_exported_payload_shows_status_before_export(db, storyboard):
    lifecycle.generate(db, storyboard.id)
    payload = json.loads(lifecycle.export(db, storyboard.id, "json").data)
    assert payload["storyboard"]["status"] == "completed"


def test_missing_storyboard(db):
    with pytest.raises(NotFoundError):
        export.export_storyboard(db, 999, "csv")


def test_unsupported_format(db, storyboard):
    with pytest.raises(ValidationError, match="Unsupported export format"):
        export.export_storyboard(db, storyboard.id, "xml")


def test_format_extensions():
    assert schemas.ExportFormat("pdf") is schemas.ExportFormat.pdf_text
    assert [f.extension for f in schemas.ExportFormat] == ["json", "csv", "pdf"]
