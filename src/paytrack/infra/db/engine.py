"""SQLite connection setup for the key-value engine."""
from sqlalchemy import event
from sqlalchemy.engine import Engine
from paytrack.db import engine
import paytrack.models  # noqa: F401   # registers the keyvalue table mapper

SQLITE_PRAGMAS = {
    "journal_mode": "WAL",
    "synchronous": "NORMAL",
    "busy_timeout": 5000,
}


def apply_sqlite_pragmas(dbapi_conn, _record) -> None:
    cur = dbapi_conn.cursor()
    try:
        for name, value in SQLITE_PRAGMAS.items():
            cur.execute(f"PRAGMA {name}={value}")
    finally:
        cur.close()


def configure(target: Engine) -> Engine:
    """Register the pragmas on every new connection of a SQLite engine, once."""
    if target.dialect.name == "sqlite" and not event.contains(target, "connect", apply_sqlite_pragmas):
        event.listen(target, "connect", apply_sqlite_pragmas)
    return target


configure(engine)

__all__ = ["engine", "configure"]
