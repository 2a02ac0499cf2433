"""Unit tests for the UnitOfWork context manager and SQLite setup."""
import pytest
from sqlmodel import Session, create_engine, select
from paytrack.domain.entries import PayrollEntry
from paytrack.domain.rates import RateSettings
from paytrack.infra.db.engine import configure
from paytrack.infra.db.uow import UnitOfWork
from paytrack.models.kv import KeyValue


def test_commit_persists_record(use_test_engine):
    with UnitOfWork() as uow:
        uow.session.add(KeyValue(key="payrollData", value="[]"))
        uow.commit()

    # Verify in a separate session
    with Session(use_test_engine) as s:
        fetched = s.get(KeyValue, "payrollData")
        assert fetched is not None
        assert fetched.value == "[]"


def test_rollback_on_exception_reverts_record(use_test_engine):
    with pytest.raises(ValueError):
        with UnitOfWork() as uow:
            uow.session.add(KeyValue(key="payrollSettings", value="{}"))
            uow.session.flush()  # written, not committed
            raise ValueError("forced error")

    with Session(use_test_engine) as s:
        assert s.exec(select(KeyValue)).all() == []


def test_storage_saves_in_the_same_transaction(use_test_engine):
    with UnitOfWork() as uow:
        uow.storage.save_entries([PayrollEntry("2024-03-05", 8, 2, 50, "")])
        uow.storage.save_settings(RateSettings(120, 180))

    with UnitOfWork() as uow:
        assert uow.storage.load_entries() == [PayrollEntry("2024-03-05", 8, 2, 50, "")]
        assert uow.storage.load_settings() == RateSettings(120, 180)


def test_failed_cycle_leaves_blobs_untouched(use_test_engine):
    with pytest.raises(RuntimeError):
        with UnitOfWork() as uow:
            uow.storage.save_settings(RateSettings(1, 1))
            raise RuntimeError("render failed")

    with UnitOfWork() as uow:
        assert uow.storage.load_settings() == RateSettings(100, 150)


def test_use_outside_with_block_raises():
    uow = UnitOfWork()
    with pytest.raises(RuntimeError):
        uow.session
    with pytest.raises(RuntimeError):
        uow.storage
    with pytest.raises(RuntimeError):
        uow.commit()


def test_sqlite_connections_get_pragmas(tmp_path):
    engine = configure(create_engine(f"sqlite:///{tmp_path / 'pragmas.db'}"))
    configure(engine)  # registering twice is harmless
    try:
        with engine.connect() as conn:
            assert conn.exec_driver_sql("PRAGMA journal_mode").scalar() == "wal"
            assert conn.exec_driver_sql("PRAGMA busy_timeout").scalar() == 5000
    finally:
        engine.dispose()
