from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storyboard_studio.core.config import settings


def _engine_kwargs(uri: str) -> dict:
    url = make_url(uri)
    if url.get_backend_name() != "sqlite":
        return {}

    kwargs = {"connect_args": {"check_same_thread": False}}
    # in-memory sqlite lives on one connection, so every session must share it
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    echo=settings.SQL_ECHO,
    **_engine_kwargs(settings.SQLALCHEMY_DATABASE_URI),
)


@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if engine.dialect.name != "sqlite":
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
