"""Persistence adapter: round trips and recovery from bad blobs."""
import json

import pytest

from paytrack.domain.entries import PayrollEntry
from paytrack.domain.rates import RateSettings
from paytrack.infra.kv.payroll_storage import ENTRIES_KEY, SETTINGS_KEY


def test_entries_round_trip(storage):
    entries = [
        PayrollEntry("2024-03-05", 8, 2, 50, ""),
        PayrollEntry("2024-02-29", 7.5, 0, 0, "night shift"),
    ]
    storage.save_entries(entries)
    assert sorted(storage.load_entries(), key=lambda e: e.date) == sorted(entries, key=lambda e: e.date)


def test_entries_are_stored_as_camel_case_json(storage, kv_store):
    storage.save_entries([PayrollEntry("2024-03-05", 8, 2, 50, "x")])
    assert json.loads(kv_store.get(ENTRIES_KEY)) == [
        {"date": "2024-03-05", "workHr": 8, "otHr": 2, "extra": 50, "remark": "x"}
    ]


def test_missing_entries_blob_loads_empty(storage):
    assert storage.load_entries() == []


@pytest.mark.parametrize("raw", [
    "{not json", '{"date": "2024-03-05"}', "42", "null",
    pytest.param("[" * 100000, id="deeply-nested"),
])
def test_malformed_entries_blob_loads_empty(storage, kv_store, raw):
    kv_store.set(ENTRIES_KEY, raw)
    assert storage.load_entries() == []


def test_unreadable_records_are_skipped(storage, kv_store):
    kv_store.set(ENTRIES_KEY, json.dumps([
        {"date": "2024-03-05", "workHr": "8", "otHr": None},
        "junk",
        {"workHr": 3},
        {"date": 20240306, "workHr": 3},
    ]))
    assert storage.load_entries() == [PayrollEntry("2024-03-05", 8.0, 0.0, 0.0, "")]


def test_duplicate_dates_keep_last(storage, kv_store):
    kv_store.set(ENTRIES_KEY, json.dumps([
        {"date": "2024-03-05", "workHr": 1},
        {"date": "2024-03-05", "workHr": 2},
    ]))
    loaded = storage.load_entries()
    assert len(loaded) == 1
    assert loaded[0].work_hr == 2


def test_settings_round_trip(storage):
    storage.save_settings(RateSettings(120, 180))
    assert storage.load_settings() == RateSettings(120, 180)


def test_missing_settings_use_defaults(storage):
    assert storage.load_settings() == RateSettings(100, 150)
    assert storage.load_settings(RateSettings(90, 135)) == RateSettings(90, 135)


@pytest.mark.parametrize("raw", [
    "not json", "[1, 2]", '"text"',
    pytest.param("[" * 100000, id="deeply-nested"),
])
def test_malformed_settings_use_defaults(storage, kv_store, raw):
    kv_store.set(SETTINGS_KEY, raw)
    assert storage.load_settings() == RateSettings(100, 150)


def test_partial_settings_fill_missing_key(storage, kv_store):
    kv_store.set(SETTINGS_KEY, json.dumps({"hourlyRate": 110, "otRate": "abc"}))
    assert storage.load_settings() == RateSettings(110, 150)
