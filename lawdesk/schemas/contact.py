from typing import Optional
from datetime import datetime
from pydantic import Field, model_validator
from .base import BaseSchema, UTCDateTime, utcnow


class ContactHistoryCreate(BaseSchema):
    date: UTCDateTime = Field(default_factory=utcnow)
    notes: str = Field(..., min_length=1)


class ContactHistory(ContactHistoryCreate):
    """A contact entry; append-only, attached to exactly one lead or client."""
    id: int
    lead_id: Optional[int] = None
    client_id: Optional[int] = None
    created_by_id: int
    created_at: datetime

    @model_validator(mode="after")
    def check_single_owner(self):
        if (self.lead_id is None) == (self.client_id is None):
            raise ValueError("Contact history must reference exactly one of lead or client")
        return self
