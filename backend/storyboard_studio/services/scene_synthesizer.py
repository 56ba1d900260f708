# backend/storyboard_studio/services/scene_synthesizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class SceneDraft:
    title: str
    description: str


@dataclass(frozen=True)
class KeywordRule:
    keywords: Tuple[str, ...]
    draft: SceneDraft

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


# evaluated in this order; each matching rule contributes one scene
KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule(
        keywords=("action", "fight"),
        draft=SceneDraft(
            title="Opening Action Sequence",
            description="High-energy opening scene that establishes the tone and introduces key elements",
        ),
    ),
    KeywordRule(
        keywords=("character", "hero", "protagonist"),
        draft=SceneDraft(
            title="Character Introduction",
            description="Scene introducing the main character and establishing their motivation",
        ),
    ),
    KeywordRule(
        keywords=("conflict", "problem", "challenge"),
        draft=SceneDraft(
            title="Rising Conflict",
            description="Scene where the main conflict is established and stakes are raised",
        ),
    ),
    KeywordRule(
        keywords=("climax", "final", "showdown"),
        draft=SceneDraft(
            title="Climactic Confrontation",
            description="The main conflict reaches its peak and resolution begins",
        ),
    ),
)

FALLBACK_DRAFTS: Tuple[SceneDraft, ...] = (
    SceneDraft(
        title="Opening Scene",
        description="Establishes setting and introduces key story elements",
    ),
    SceneDraft(
        title="Development",
        description="Story develops and characters are further established",
    ),
    SceneDraft(
        title="Resolution",
        description="Story conflicts are resolved and conclusion is reached",
    ),
)


def synthesize(text: str) -> List[SceneDraft]:
    """
    Turn story text into an ordered list of scene drafts.

    Rule based and deterministic: every keyword rule that matches the text
    (case-insensitive substring) adds its template scene, in rule order.
    When nothing matches, the three generic fallback scenes are returned.
    The input is only inspected, never copied into the drafts.
    """
    lowered = (text or "").lower()

    drafts = [rule.draft for rule in KEYWORD_RULES if rule.matches(lowered)]
    if not drafts:
        drafts = list(FALLBACK_DRAFTS)

    return drafts
