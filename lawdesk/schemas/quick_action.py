from typing import ClassVar, Dict, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, PatchSchema


class QuickActionBase(BaseSchema):
    title: str = Field(..., min_length=1)
    action_type: str = Field(..., min_length=1)
    description: Optional[str] = None
    template_content: Optional[str] = None


class QuickActionCreate(QuickActionBase):
    pass


class QuickActionUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"title", "action_type"})

    title: Optional[str] = Field(None, min_length=1)
    action_type: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    template_content: Optional[str] = None


class QuickAction(QuickActionBase):
    id: int
    created_by_id: int
    created_at: datetime
    updated_at: datetime


class QuickActionRenderRequest(BaseSchema):
    values: Dict[str, str] = {}


class QuickActionRenderResponse(BaseSchema):
    content: str
