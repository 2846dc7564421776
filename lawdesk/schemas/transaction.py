from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, Money, PatchSchema, UTCDateTime
from .enums import TransactionType


class TransactionBase(BaseSchema):
    type: TransactionType
    description: str = Field(..., min_length=1)
    amount: Money
    date: UTCDateTime
    due_date: Optional[UTCDateTime] = None
    paid: bool = False
    case_id: Optional[int] = None


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"type", "description", "amount", "date", "paid"}
    )

    type: Optional[TransactionType] = None
    description: Optional[str] = Field(None, min_length=1)
    amount: Optional[Money] = None
    date: Optional[UTCDateTime] = None
    due_date: Optional[UTCDateTime] = None
    paid: Optional[bool] = None
    case_id: Optional[int] = None


class Transaction(TransactionBase):
    id: int
    created_by_id: int
    created_at: datetime
