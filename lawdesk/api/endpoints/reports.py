from typing import Any
from fastapi import APIRouter, Depends

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.crud import report as report_crud
from lawdesk.schemas.report import CaseReport, FinancialReport, LeadReport, TaskReport
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

router = APIRouter()


@router.get("/financial", response_model=FinancialReport)
async def get_financial_report(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Revenue, expenses and pending amounts over all transactions.
    """
    return report_crud.financial_report(storage)


@router.get("/leads", response_model=LeadReport)
async def get_lead_report(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Lead counts by status, legal area and origin, plus the conversion rate.
    """
    return report_crud.lead_report(storage)


@router.get("/tasks", response_model=TaskReport)
async def get_task_report(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return report_crud.task_report(storage)


@router.get("/cases", response_model=CaseReport)
async def get_case_report(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return report_crud.case_report(storage)
