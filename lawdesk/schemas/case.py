from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, Money, PatchSchema, UTCDateTime
from .enums import CaseStatus, LegalArea


class CaseBase(BaseSchema):
    title: str = Field(..., min_length=1)
    client_id: int
    legal_area: LegalArea
    description: Optional[str] = None
    value: Optional[Money] = None
    assigned_to_id: Optional[int] = None
    status: CaseStatus = CaseStatus.active
    next_hearing: Optional[UTCDateTime] = None
    case_number: Optional[str] = None
    court: Optional[str] = None
    judge: Optional[str] = None


class CaseCreate(CaseBase):
    pass


class CaseUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"title", "client_id", "legal_area", "status"}
    )

    title: Optional[str] = Field(None, min_length=1)
    client_id: Optional[int] = None
    legal_area: Optional[LegalArea] = None
    description: Optional[str] = None
    value: Optional[Money] = None
    assigned_to_id: Optional[int] = None
    status: Optional[CaseStatus] = None
    next_hearing: Optional[UTCDateTime] = None
    case_number: Optional[str] = None
    court: Optional[str] = None
    judge: Optional[str] = None


class Case(CaseBase):
    id: int
    created_at: datetime
    updated_at: datetime
