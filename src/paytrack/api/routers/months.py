"""Month view, navigation and statement export endpoints."""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from paytrack.api.deps import get_uow
from paytrack.api.schemas.months import MonthRefRead, MonthView
from paytrack.infra.db.uow import UnitOfWork
from paytrack.services.payroll_service import PayrollService

router = APIRouter(prefix="/months/{year}/{month}", tags=["months"])


@router.get("", response_model=MonthView)
def get_month(year: int, month: int, uow: UnitOfWork = Depends(get_uow)) -> MonthView:
    return PayrollService(uow).get_month(year, month)


@router.get("/navigate", response_model=MonthRefRead)
def navigate(
    year: int,
    month: int,
    step: int = Query(default=1, ge=-1, le=1),
    uow: UnitOfWork = Depends(get_uow),
) -> MonthRefRead:
    return PayrollService(uow).navigate(year, month, step)


@router.get("/statement.png")
def export_statement(year: int, month: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    filename, content = PayrollService(uow).export_statement(year, month)
    return Response(
        content=content,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
