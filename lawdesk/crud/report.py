"""
Aggregations behind the dashboard and report screens.
"""

from collections import Counter
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from lawdesk.schemas.base import utcnow
from lawdesk.schemas.enums import LeadStatus, TaskPriority, TransactionType
from lawdesk.schemas.report import CaseReport, FinancialReport, LeadReport, TaskReport
from lawdesk.storage import Storage

HIGH_PRIORITIES = {TaskPriority.high, TaskPriority.urgent}


def _total(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, Decimal("0.00"))


def _count_values(values: Iterable) -> dict:
    return dict(Counter(getattr(value, "value", value) for value in values))


def financial_report(storage: Storage) -> FinancialReport:
    transactions = storage.list_transactions()
    revenue = [t for t in transactions if t.type == TransactionType.revenue]
    expenses = [t for t in transactions if t.type == TransactionType.expense]

    total_revenue = _total(t.amount for t in revenue)
    total_expenses = _total(t.amount for t in expenses)

    return FinancialReport(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        balance=total_revenue - total_expenses,
        paid_revenue=_total(t.amount for t in revenue if t.paid),
        pending_revenue=_total(t.amount for t in revenue if not t.paid),
        pending_expenses=_total(t.amount for t in expenses if not t.paid),
        transaction_count=len(transactions),
    )


def lead_report(storage: Storage) -> LeadReport:
    leads = storage.list_leads()
    converted = sum(1 for lead in leads if lead.status == LeadStatus.converted)

    return LeadReport(
        total=len(leads),
        by_status=_count_values(lead.status for lead in leads),
        by_legal_area=_count_values(lead.legal_area for lead in leads),
        by_origin=_count_values(lead.origin for lead in leads),
        conversion_rate=converted / len(leads) if leads else 0.0,
    )


def task_report(storage: Storage, now: Optional[datetime] = None) -> TaskReport:
    now = now or utcnow()
    tasks = storage.list_tasks()
    completed = sum(1 for task in tasks if task.completed)

    return TaskReport(
        total=len(tasks),
        completed=completed,
        pending=len(tasks) - completed,
        high_priority=sum(1 for task in tasks if task.priority in HIGH_PRIORITIES),
        overdue=sum(
            1 for task in tasks
            if not task.completed and task.deadline is not None and task.deadline < now
        ),
        by_priority=_count_values(task.priority for task in tasks),
    )


def case_report(storage: Storage) -> CaseReport:
    cases = storage.list_cases()

    return CaseReport(
        total=len(cases),
        by_status=_count_values(case.status for case in cases),
        by_legal_area=_count_values(case.legal_area for case in cases),
        by_assignee=dict(Counter(
            case.assigned_to_id for case in cases if case.assigned_to_id is not None
        )),
        total_value=_total(case.value for case in cases if case.value is not None),
    )
