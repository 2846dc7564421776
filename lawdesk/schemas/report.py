from decimal import Decimal
from typing import Dict
from .base import BaseSchema


class FinancialReport(BaseSchema):
    total_revenue: Decimal
    total_expenses: Decimal
    balance: Decimal
    paid_revenue: Decimal
    pending_revenue: Decimal
    pending_expenses: Decimal
    transaction_count: int


class LeadReport(BaseSchema):
    total: int
    by_status: Dict[str, int]
    by_legal_area: Dict[str, int]
    by_origin: Dict[str, int]
    conversion_rate: float


class TaskReport(BaseSchema):
    total: int
    completed: int
    pending: int
    high_priority: int
    overdue: int
    by_priority: Dict[str, int]


class CaseReport(BaseSchema):
    total: int
    by_status: Dict[str, int]
    by_legal_area: Dict[str, int]
    by_assignee: Dict[int, int]
    total_value: Decimal
