from storyboard_studio.db.base import Base
from storyboard_studio.db.session import engine, SessionLocal

__all__ = ["Base", "engine", "SessionLocal"]
