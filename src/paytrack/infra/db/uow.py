"""One SQLite session per load-mutate-save cycle."""
from __future__ import annotations
from sqlmodel import Session
from paytrack.infra.db.engine import engine
from paytrack.infra.db.repositories.kv_repository import KeyValueRepository
from paytrack.infra.kv.payroll_storage import PayrollStorage


class UnitOfWork:
    """Commits on clean exit, rolls back on error, always closes.

    ``storage`` reads and writes the payroll blobs through this session, so
    a mutation and its save land in the same transaction.
    """

    def __init__(self) -> None:
        self._session: Session | None = None
        self._storage: PayrollStorage | None = None

    def __enter__(self) -> "UnitOfWork":
        self._session = Session(engine)
        self._storage = PayrollStorage(KeyValueRepository(self._session))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        session, self._session, self._storage = self._session, None, None
        try:
            if exc_type is None:
                session.commit()
            else:
                session.rollback()
        finally:
            session.close()

    def _active(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork used outside its with-block")
        return self._session

    @property
    def session(self) -> Session:
        return self._active()

    @property
    def storage(self) -> PayrollStorage:
        self._active()
        return self._storage

    def commit(self) -> None:
        self._active().commit()
