"""Payroll tracker use-case service.

One instance per UnitOfWork: it loads the entry log and the rates once,
and every mutation saves them back and returns a freshly derived
MonthView, so callers always re-render from current state.
"""
from __future__ import annotations
import logging
from paytrack.api.schemas.entries import EntryList, EntryRead, EntrySubmit
from paytrack.api.schemas.months import HoursDistribution, MonthRefRead, MonthView
from paytrack.api.schemas.settings import RateSettingsRead, RateSettingsUpdate
from paytrack.config import settings
from paytrack.domain.aggregate import is_flagged
from paytrack.domain.calendar import MonthRef
from paytrack.domain.entries import EntryStore, PayrollEntry
from paytrack.domain.exceptions import NotFoundError
from paytrack.domain.rates import RateSettings, RateSettingsManager
from paytrack.export.statement_image import render_statement_png, statement_filename
from paytrack.infra.db.uow import UnitOfWork
from paytrack.services.month_view import build_month_view, hours_view, period_read, summarize, statement_view

logger = logging.getLogger(__name__)


def _entry_read(entry: PayrollEntry) -> EntryRead:
    return EntryRead(
        date=entry.date,
        work_hr=entry.work_hr,
        ot_hr=entry.ot_hr,
        extra=entry.extra,
        remark=entry.remark,
        flagged=is_flagged(entry.remark),
    )


class PayrollService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow
        self._storage = uow.storage
        self._entries = EntryStore(self._storage.load_entries())
        self._rates = RateSettingsManager(
            self._storage,
            RateSettings(settings.DEFAULT_HOURLY_RATE, settings.DEFAULT_OT_RATE),
        )
        self._rates.load()

    def _view(self, ref: MonthRef) -> MonthView:
        return build_month_view(ref, self._entries.all(), self._rates.current, settings.CURRENCY_SYMBOL)

    # --- Reads ---

    def get_month(self, year: int, month: int) -> MonthView:
        return self._view(MonthRef(year, month))

    def navigate(self, year: int, month: int, step: int) -> MonthRefRead:
        return period_read(MonthRef(year, month).shift(step))

    def list_entries(self) -> EntryList:
        entries = sorted(self._entries.all(), key=lambda e: e.date)
        return EntryList(items=[_entry_read(e) for e in entries], total=len(entries))

    def get_entry(self, date: str) -> EntryRead:
        entry = self._entries.find(date)
        if entry is None:
            raise NotFoundError(f"No entry for {date}")
        return _entry_read(entry)

    def get_rates(self) -> RateSettingsRead:
        current = self._rates.current
        return RateSettingsRead(hourly_rate=current.hourly_rate, ot_rate=current.ot_rate)

    def get_hours(self) -> HoursDistribution:
        return hours_view(self._entries.all())

    # --- Mutations: save, then re-derive ---

    def submit_entry(self, date: str, payload: EntrySubmit) -> MonthView:
        ref = MonthRef.containing(date)
        replaced = date in self._entries
        self._entries.upsert(PayrollEntry.build(
            date,
            work_hr=payload.work_hr,
            ot_hr=payload.ot_hr,
            extra=payload.extra,
            remark=payload.remark,
        ))
        self._storage.save_entries(self._entries.all())
        self._uow.commit()
        logger.info("%s entry for %s", "Replaced" if replaced else "Recorded", date)
        return self._view(ref)

    def delete_entry(self, date: str) -> MonthView:
        ref = MonthRef.containing(date)
        if self._entries.remove(date):
            self._storage.save_entries(self._entries.all())
            self._uow.commit()
            logger.info("Deleted entry for %s", date)
        return self._view(ref)

    def update_rates(self, payload: RateSettingsUpdate, year: int, month: int) -> MonthView:
        ref = MonthRef(year, month)
        rates = self._rates.update(payload.hourly_rate, payload.ot_rate)
        self._uow.commit()
        logger.info("Rates set to %.2f regular / %.2f overtime", rates.hourly_rate, rates.ot_rate)
        return self._view(ref)

    # --- Export ---

    def export_statement(self, year: int, month: int) -> tuple[str, bytes]:
        ref = MonthRef(year, month)
        view = statement_view(ref, summarize(ref, self._entries.all(), self._rates.current))
        return statement_filename(ref), render_statement_png(view, scale=settings.EXPORT_SCALE)
