"""Persistence adapter: the two named JSON blobs behind the tracker.

``payrollData``     -> JSON array of ``{date, workHr, otHr, extra, remark}``
``payrollSettings`` -> JSON object ``{hourlyRate, otRate}``

Reads never raise: absent or unparsable blobs fall back to an empty entry
log or the default rates.
"""
from __future__ import annotations
import json
import logging
from typing import Iterable
from paytrack.domain.entries import PayrollEntry
from paytrack.domain.rates import RateSettings
from paytrack.infra.kv.store import KeyValueStore

logger = logging.getLogger(__name__)

ENTRIES_KEY = "payrollData"
SETTINGS_KEY = "payrollSettings"


class PayrollStorage:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- Entries ---

    def load_entries(self) -> list[PayrollEntry]:
        raw = self._store.get(ENTRIES_KEY)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Stored %s is not valid JSON; starting with no entries", ENTRIES_KEY)
            return []
        if not isinstance(records, list):
            logger.warning("Stored %s is not a JSON array; starting with no entries", ENTRIES_KEY)
            return []

        # Later duplicates win, keeping one entry per date
        by_date: dict[str, PayrollEntry] = {}
        skipped = 0
        for record in records:
            if not isinstance(record, dict) or not isinstance(record.get("date"), str):
                skipped += 1
                continue
            by_date[record["date"]] = PayrollEntry.from_record(record)
        if skipped:
            logger.warning("Skipped %d unreadable record(s) in %s", skipped, ENTRIES_KEY)
        return list(by_date.values())

    def save_entries(self, entries: Iterable[PayrollEntry]) -> None:
        records = [e.to_record() for e in sorted(entries, key=lambda e: e.date)]
        self._store.set(ENTRIES_KEY, json.dumps(records, ensure_ascii=False))

    # --- Settings ---

    def load_settings(self, defaults: RateSettings | None = None) -> RateSettings:
        defaults = defaults or RateSettings()
        raw = self._store.get(SETTINGS_KEY)
        if raw is None:
            return defaults
        try:
            record = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Stored %s is not valid JSON; using default rates", SETTINGS_KEY)
            return defaults
        if not isinstance(record, dict):
            logger.warning("Stored %s is not a JSON object; using default rates", SETTINGS_KEY)
            return defaults
        return RateSettings.from_record(record, defaults)

    def save_settings(self, rates: RateSettings) -> None:
        self._store.set(SETTINGS_KEY, json.dumps(rates.to_record()))
