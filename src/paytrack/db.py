"""Engine singleton for the local SQLite key-value store."""
from __future__ import annotations
from sqlmodel import SQLModel, create_engine
from paytrack.config import settings

if settings.DATABASE_URL is None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)

engine = create_engine(settings.database_url, echo=False)


def init_db() -> None:
    """Create all tables that do not exist yet."""
    import paytrack.models  # noqa: F401   # registers table mappers
    SQLModel.metadata.create_all(engine)
