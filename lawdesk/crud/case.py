from datetime import timedelta
import logging
from lawdesk.schemas.base import utcnow
from lawdesk.schemas.case import Case, CaseCreate
from lawdesk.schemas.enums import TransactionType
from lawdesk.schemas.transaction import TransactionCreate
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)

FEE_DUE_DAYS = 30


def fee_description(case_title: str) -> str:
    return f"Honorários - {case_title}"


def create_case(storage: Storage, case_in: CaseCreate, created_by_id: int) -> Case:
    """
    Create a case. When the case carries a value, an unpaid revenue
    transaction for that amount is billed against it, due in 30 days.
    """
    with storage.transaction():
        case = storage.create_case(case_in)

        if case.value is not None:
            now = utcnow()
            transaction = storage.create_transaction(
                TransactionCreate(
                    type=TransactionType.revenue,
                    description=fee_description(case.title),
                    amount=case.value,
                    date=now,
                    due_date=now + timedelta(days=FEE_DUE_DAYS),
                    paid=False,
                    case_id=case.id,
                ),
                created_by_id=created_by_id,
            )
            logger.info(f"Billed fee transaction {transaction.id} for case {case.id}")

    return case
