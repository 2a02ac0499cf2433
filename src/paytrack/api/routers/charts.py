"""Chart endpoints that are not tied to one month."""
from fastapi import APIRouter, Depends
from paytrack.api.deps import get_uow
from paytrack.api.schemas.months import HoursDistribution
from paytrack.infra.db.uow import UnitOfWork
from paytrack.services.payroll_service import PayrollService

router = APIRouter(prefix="/charts", tags=["charts"])


@router.get("/hours", response_model=HoursDistribution)
def get_hours_distribution(uow: UnitOfWork = Depends(get_uow)) -> HoursDistribution:
    return PayrollService(uow).get_hours()
