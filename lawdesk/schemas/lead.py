from typing import Annotated, ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import AfterValidator, Field
from .base import BaseSchema, OptionalEmail, PatchSchema, UTCDateTime
from .enums import LeadStatus, LegalArea, LeadOrigin


def _not_converted(value: LeadStatus) -> LeadStatus:
    if value == LeadStatus.converted:
        raise ValueError("A lead can only become 'convertido' through the convert operation")
    return value


EditableLeadStatus = Annotated[LeadStatus, AfterValidator(_not_converted)]


class LeadBase(BaseSchema):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: OptionalEmail = None
    status: LeadStatus = LeadStatus.new
    legal_area: LegalArea
    origin: LeadOrigin
    notes: Optional[str] = None
    assigned_to_id: Optional[int] = None
    follow_up_date: Optional[UTCDateTime] = None


class LeadCreate(LeadBase):
    status: EditableLeadStatus = LeadStatus.new


class LeadUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"name", "phone", "status", "legal_area", "origin"}
    )

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    email: OptionalEmail = None
    status: Optional[EditableLeadStatus] = None
    legal_area: Optional[LegalArea] = None
    origin: Optional[LeadOrigin] = None
    notes: Optional[str] = None
    assigned_to_id: Optional[int] = None
    follow_up_date: Optional[UTCDateTime] = None


class Lead(LeadBase):
    id: int
    created_at: datetime
    updated_at: datetime
