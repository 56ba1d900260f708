from storyboard_studio.db.base import Base
from .character import Character
from .location import Location
from .storyboard import Storyboard, StoryboardStatus
from .scene import Scene
from .scene_character import SceneCharacter

__all__ = ["Base", "Character", "Location", "Storyboard", "StoryboardStatus", "Scene", "SceneCharacter"]
