from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, OptionalEmail, PatchSchema


class ClientBase(BaseSchema):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: OptionalEmail = None
    address: Optional[str] = None
    document: Optional[str] = None


class ClientCreate(ClientBase):
    pass


class ClientUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"name", "phone"})

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    email: OptionalEmail = None
    address: Optional[str] = None
    document: Optional[str] = None


class Client(ClientBase):
    id: int
    converted_from_lead_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
