from .character import Character, CharacterCreate, CharacterUpdate
from .location import Location, LocationCreate, LocationUpdate
from .storyboard import Storyboard, StoryboardCreate, StoryboardUpdate
from .scene import Scene, SceneCreate, SceneUpdate
from .scene_character import SceneCharacter, SceneCharacterAssign, SceneCharacterRemoval
from .export import (
    ExportFormat,
    ExportResult,
    ExportedCharacter,
    ExportedLocation,
    ExportedScene,
    ExportedStoryboard,
    StoryboardSnapshot,
)

__all__ = [
    "Character",
    "CharacterCreate",
    "CharacterUpdate",
    "Location",
    "LocationCreate",
    "LocationUpdate",
    "Storyboard",
    "StoryboardCreate",
    "StoryboardUpdate",
    "Scene",
    "SceneCreate",
    "SceneUpdate",
    "SceneCharacter",
    "SceneCharacterAssign",
    "SceneCharacterRemoval",
    "ExportFormat",
    "ExportResult",
    "ExportedCharacter",
    "ExportedLocation",
    "ExportedScene",
    "ExportedStoryboard",
    "StoryboardSnapshot",
]
