# backend/storyboard_studio/services/lifecycle.py

"""
Storyboard status machine for the two bulk operations.

    draft ──generate──▶ generating ──▶ completed ──export──▶ exported
      ▲                     │
      └──── on failure ─────┘

Only ``generate`` and ``export`` go through here. Plain edits of title or
status use ``entity_store.update_storyboard`` and are not checked.
"""

import logging
from datetime import datetime
from typing import List, Union

from sqlalchemy.orm import Session

from storyboard_studio import models, schemas
from storyboard_studio.core.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from storyboard_studio.services import entity_store
from storyboard_studio.services import export as export_pipeline
from storyboard_studio.services.scene_synthesizer import SceneDraft, synthesize

logger = logging.getLogger(__name__)

Status = models.StoryboardStatus


class StoryboardLifecycle:

    def generate(self, db: Session, storyboard_id: int) -> List[models.Scene]:
        """
        Synthesize scenes from the storyboard text and store them.

        The storyboard is claimed by moving it to ``generating`` with a
        compare-and-swap, so two concurrent calls cannot both insert scenes.
        Scene inserts and the move to ``completed`` commit together; if
        anything fails the transaction is rolled back, the status goes back
        to ``draft`` and the triggering error is re-raised.
        """
        storyboard = entity_store.get_storyboard(db, storyboard_id)
        if storyboard is None:
            raise NotFoundError("Storyboard", storyboard_id)

        # empty strings count as missing text
        source_text = storyboard.script_content or storyboard.initial_prompt
        if not source_text:
            raise ValidationError(
                "Storyboard must have either initial_prompt or script_content to generate scenes"
            )

        self._claim(db, storyboard)

        try:
            with entity_store.transaction(db, f"Scene generation for storyboard {storyboard_id}"):
                drafts = synthesize(source_text)
                scenes = self._persist_drafts(db, storyboard, drafts)
                storyboard.status = Status.completed
                storyboard.updated_at = datetime.utcnow()
        except Exception:
            logger.exception("Scene generation failed for storyboard %s", storyboard_id)
            db.rollback()
            self._revert_to_draft(db, storyboard_id)
            raise

        for scene in scenes:
            db.refresh(scene)
        logger.info(
            "Generated %d scenes for storyboard %s", len(scenes), storyboard_id
        )
        return scenes

    def export(
        self,
        db: Session,
        storyboard_id: int,
        export_format: Union[schemas.ExportFormat, str],
    ) -> schemas.ExportResult:
        """Serialize the storyboard, then mark it ``exported`` whatever the format."""
        result = export_pipeline.export_storyboard(db, storyboard_id, export_format)

        storyboard = entity_store.get_storyboard(db, storyboard_id)
        entity_store.set_storyboard_status(db, storyboard, Status.exported)
        logger.info("Exported storyboard %s as %s", storyboard_id, result.filename)
        return result

    def _claim(self, db: Session, storyboard: models.Storyboard) -> None:
        # committed on its own so a concurrent caller sees "generating"
        with entity_store.transaction(db, f"Claiming storyboard {storyboard.id}"):
            claimed = (
                db.query(models.Storyboard)
                .filter(
                    models.Storyboard.id == storyboard.id,
                    models.Storyboard.status != Status.generating,
                )
                .update(
                    {"status": Status.generating, "updated_at": datetime.utcnow()},
                    synchronize_session=False,
                )
            )
        if not claimed:
            raise ConflictError(
                f"Scene generation is already in progress for storyboard {storyboard.id}"
            )
        db.refresh(storyboard)
        logger.info("Storyboard %s is generating", storyboard.id)

    def _persist_drafts(
        self, db: Session, storyboard: models.Storyboard, drafts: List[SceneDraft]
    ) -> List[models.Scene]:
        scenes = []
        for position, draft in enumerate(drafts, start=1):
            scene = models.Scene(
                storyboard_id=storyboard.id,
                sequence_number=position,
                title=draft.title,
                description=draft.description,
                location_id=None,
            )
            db.add(scene)
            scenes.append(scene)
        db.flush()
        return scenes

    def _revert_to_draft(self, db: Session, storyboard_id: int) -> None:
        try:
            db.query(models.Storyboard).filter(
                models.Storyboard.id == storyboard_id
            ).update(
                {"status": Status.draft, "updated_at": datetime.utcnow()},
                synchronize_session=False,
            )
            db.commit()
        except Exception as revert_error:
            db.rollback()
            logger.error(
                "Failed to revert storyboard %s status: %s", storyboard_id, revert_error
            )


lifecycle = StoryboardLifecycle()
