"""Shared test fixtures.

  kv_store          dict-backed KeyValueStore for pure domain/adapter tests.
  storage           PayrollStorage over kv_store.
  use_test_engine   redirects the engine singleton + UoW to a temp-file SQLite DB.
  client            FastAPI TestClient wired to the test engine.
"""
import pytest
from sqlmodel import SQLModel, create_engine

from paytrack.infra.kv.payroll_storage import PayrollStorage
from paytrack.infra.kv.store import InMemoryKeyValueStore


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def storage(kv_store):
    return PayrollStorage(kv_store)


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_paytrack.db"
    test_engine = create_engine(f"sqlite:///{db_path}", echo=False)

    import paytrack.models  # noqa: F401  register all ORM mappers
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("paytrack.db.engine", test_engine)
    monkeypatch.setattr("paytrack.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("paytrack.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from paytrack.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c
