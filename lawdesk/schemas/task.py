from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, PatchSchema, UTCDateTime
from .enums import TaskPriority


class TaskBase(BaseSchema):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    deadline: Optional[UTCDateTime] = None
    priority: TaskPriority = TaskPriority.medium
    completed: bool = False
    client_id: Optional[int] = None
    case_id: Optional[int] = None
    assigned_to_id: Optional[int] = None


class TaskCreate(TaskBase):
    pass


class TaskUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"title", "priority", "completed"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    deadline: Optional[UTCDateTime] = None
    priority: Optional[TaskPriority] = None
    completed: Optional[bool] = None
    client_id: Optional[int] = None
    case_id: Optional[int] = None
    assigned_to_id: Optional[int] = None


class Task(TaskBase):
    id: int
    created_by_id: int
    created_at: datetime
    updated_at: datetime
