import os
from pydantic_settings import BaseSettings

from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Storyboard Studio API"
    API_V1_PREFIX: str = "/api/v1"

    # Any SQLAlchemy URL works; sqlite is the local default
    SQLALCHEMY_DATABASE_URI: str = os.getenv(
        "DATABASE_URL", "sqlite:///./storyboard.db"
    )
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
