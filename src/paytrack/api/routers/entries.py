"""Entry endpoints. Mutations answer with the re-derived month."""
from fastapi import APIRouter, Depends
from paytrack.api.deps import get_uow
from paytrack.api.schemas.entries import EntryList, EntryRead, EntrySubmit
from paytrack.api.schemas.months import MonthView
from paytrack.infra.db.uow import UnitOfWork
from paytrack.services.payroll_service import PayrollService

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("", response_model=EntryList)
def list_entries(uow: UnitOfWork = Depends(get_uow)) -> EntryList:
    return PayrollService(uow).list_entries()


@router.get("/{date}", response_model=EntryRead)
def get_entry(date: str, uow: UnitOfWork = Depends(get_uow)) -> EntryRead:
    return PayrollService(uow).get_entry(date)


@router.put("/{date}", response_model=MonthView)
def submit_entry(
    date: str, payload: EntrySubmit, uow: UnitOfWork = Depends(get_uow),
) -> MonthView:
    return PayrollService(uow).submit_entry(date, payload)


@router.delete("/{date}", response_model=MonthView)
def delete_entry(date: str, uow: UnitOfWork = Depends(get_uow)) -> MonthView:
    return PayrollService(uow).delete_entry(date)
