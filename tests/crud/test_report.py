from datetime import datetime, timedelta, timezone
from decimal import Decimal
import pytest

from lawdesk.crud import report as report_crud
from lawdesk.schemas import TaskCreate, TransactionCreate
from lawdesk.schemas.enums import TaskPriority, TransactionType
from lawdesk.storage import MemoryStorage

NOW = datetime(2024, 5, 1, 12, tzinfo=timezone.utc)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


def add_transaction(storage: MemoryStorage, type_: TransactionType, amount: str, paid: bool = False):
    storage.create_transaction(
        TransactionCreate(type=type_, description="x", amount=Decimal(amount), date=NOW, paid=paid),
        created_by_id=1,
    )


def test_financial_report(storage: MemoryStorage):
    add_transaction(storage, TransactionType.revenue, "1000.00", paid=True)
    add_transaction(storage, TransactionType.revenue, "500.00")
    add_transaction(storage, TransactionType.expense, "200.00")

    report = report_crud.financial_report(storage)

    assert report.total_revenue == Decimal("1500.00")
    assert report.total_expenses == Decimal("200.00")
    assert report.balance == Decimal("1300.00")
    assert report.paid_revenue == Decimal("1000.00")
    assert report.pending_revenue == Decimal("500.00")
    assert report.pending_expenses == Decimal("200.00")
    assert report.transaction_count == 3


def test_task_report_overdue_uses_reference_time(storage: MemoryStorage):
    storage.create_task(
        TaskCreate(title="late", deadline=NOW - timedelta(days=1), priority=TaskPriority.low),
        created_by_id=1,
    )
    storage.create_task(TaskCreate(title="future", deadline=NOW + timedelta(days=1)), created_by_id=1)
    storage.create_task(
        TaskCreate(title="done", deadline=NOW - timedelta(days=1), completed=True), created_by_id=1
    )
    storage.create_task(TaskCreate(title="no deadline"), created_by_id=1)

    report = report_crud.task_report(storage, now=NOW)

    assert report.overdue == 1
    assert report.completed == 1
    assert report.pending == 3
    assert report.high_priority == 0
    assert report.by_priority == {"baixa": 1, "media": 3}


def test_lead_report_without_leads(storage: MemoryStorage):
    report = report_crud.lead_report(storage)
    assert report.total == 0
    assert report.conversion_rate == 0.0
    assert report.by_status == {}
