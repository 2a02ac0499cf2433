"""Rate settings endpoints."""
from datetime import date
from fastapi import APIRouter, Depends
from paytrack.api.deps import get_uow
from paytrack.api.schemas.months import MonthView
from paytrack.api.schemas.settings import RateSettingsRead, RateSettingsUpdate
from paytrack.infra.db.uow import UnitOfWork
from paytrack.services.payroll_service import PayrollService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=RateSettingsRead)
def get_settings(uow: UnitOfWork = Depends(get_uow)) -> RateSettingsRead:
    return PayrollService(uow).get_rates()


@router.put("", response_model=MonthView)
def update_settings(
    payload: RateSettingsUpdate,
    year: int | None = None,
    month: int | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> MonthView:
    """Save both rates and return the given month (default: today's) re-priced."""
    today = date.today()
    return PayrollService(uow).update_rates(
        payload,
        today.year if year is None else year,
        today.month if month is None else month,
    )
