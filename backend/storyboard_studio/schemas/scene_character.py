from datetime import datetime
from pydantic import BaseModel


class SceneCharacterAssign(BaseModel):
    character_id: int


class SceneCharacter(BaseModel):
    id: int
    scene_id: int
    character_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class SceneCharacterRemoval(BaseModel):
    removed: bool
