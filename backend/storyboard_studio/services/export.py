# backend/storyboard_studio/services/export.py

"""
Storyboard export: build a denormalized snapshot and render it as JSON,
CSV or structured plain text.

Nothing here changes the storyboard; ``lifecycle.export`` moves it to
``exported`` once serialization succeeded.
"""

from typing import Callable, Dict, List, Union

from sqlalchemy.orm import Session, selectinload

from storyboard_studio import models, schemas
from storyboard_studio.core.exceptions import NotFoundError, ValidationError

CSV_HEADER = "Scene ID,Sequence,Title,Description,Location,Characters,Created At,Updated At"


def build_snapshot(db: Session, storyboard: models.Storyboard) -> schemas.StoryboardSnapshot:
    scenes = (
        db.query(models.Scene)
        .options(
            selectinload(models.Scene.location),
            selectinload(models.Scene.character_links).selectinload(
                models.SceneCharacter.character
            ),
        )
        .filter(models.Scene.storyboard_id == storyboard.id)
        .order_by(models.Scene.sequence_number.asc(), models.Scene.id.asc())
        .all()
    )

    return schemas.StoryboardSnapshot(
        storyboard=schemas.ExportedStoryboard.model_validate(storyboard, from_attributes=True),
        scenes=[_snapshot_scene(s) for s in scenes],
    )


def _snapshot_scene(scene: models.Scene) -> schemas.ExportedScene:
    location = None
    if scene.location is not None:
        location = schemas.ExportedLocation(
            id=scene.location.id,
            name=scene.location.name,
            description=scene.location.description,
        )

    characters = [
        schemas.ExportedCharacter(
            id=link.character.id,
            name=link.character.name,
            description=link.character.description,
        )
        for link in scene.character_links
    ]

    return schemas.ExportedScene(
        id=scene.id,
        sequence_number=scene.sequence_number,
        title=scene.title,
        description=scene.description,
        location=location,
        characters=characters,
        created_at=scene.created_at,
        updated_at=scene.updated_at,
    )


def to_json(snapshot: schemas.StoryboardSnapshot) -> str:
    return snapshot.model_dump_json(indent=2)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def to_csv(snapshot: schemas.StoryboardSnapshot) -> str:
    rows = [CSV_HEADER]
    for scene in snapshot.scenes:
        location_name = scene.location.name if scene.location else ""
        character_names = "; ".join(c.name for c in scene.characters)
        rows.append(
            ",".join(
                [
                    str(scene.id),
                    str(scene.sequence_number),
                    _quote(scene.title),
                    _quote(scene.description),
                    _quote(location_name),
                    _quote(character_names),
                    scene.created_at.isoformat(),
                    scene.updated_at.isoformat(),
                ]
            )
        )
    return "\n".join(rows)


def to_pdf_text(snapshot: schemas.StoryboardSnapshot) -> str:
    storyboard = snapshot.storyboard
    lines: List[str] = [
        f"STORYBOARD: {storyboard.title}",
        f"Created: {storyboard.created_at.isoformat()}",
        f"Status: {storyboard.status.value}",
        "",
    ]

    if storyboard.initial_prompt:
        lines += [f"Initial Prompt: {storyboard.initial_prompt}", ""]
    if storyboard.script_content:
        lines += [f"Script Content: {storyboard.script_content}", ""]

    lines += ["SCENES:", ""]

    for scene in snapshot.scenes:
        lines.append(f"Scene {scene.sequence_number}: {scene.title}")
        lines.append(f"Description: {scene.description}")
        if scene.location:
            lines.append(f"Location: {scene.location.name}")
        if scene.characters:
            lines.append(f"Characters: {', '.join(c.name for c in scene.characters)}")
        lines.append("")

    return "\n".join(lines)


SERIALIZERS: Dict[schemas.ExportFormat, Callable[[schemas.StoryboardSnapshot], str]] = {
    schemas.ExportFormat.json: to_json,
    schemas.ExportFormat.csv: to_csv,
    schemas.ExportFormat.pdf_text: to_pdf_text,
}


def parse_format(export_format: Union[schemas.ExportFormat, str]) -> schemas.ExportFormat:
    try:
        return schemas.ExportFormat(export_format)
    except ValueError:
        raise ValidationError(f"Unsupported export format: {export_format}")


def export_storyboard(
    db: Session,
    storyboard_id: int,
    export_format: Union[schemas.ExportFormat, str],
) -> schemas.ExportResult:
    storyboard = db.get(models.Storyboard, storyboard_id)
    if storyboard is None:
        raise NotFoundError("Storyboard", storyboard_id)
    fmt = parse_format(export_format)

    snapshot = build_snapshot(db, storyboard)
    return schemas.ExportResult(
        data=SERIALIZERS[fmt](snapshot),
        filename=f"storyboard_{storyboard_id}.{fmt.extension}",
    )
