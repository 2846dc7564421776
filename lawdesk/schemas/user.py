from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, OptionalEmail, PatchSchema
from .enums import UserRole


class UserBase(BaseSchema):
    username: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: UserRole
    email: OptionalEmail = None
    phone: Optional[str] = None


class UserCreate(UserBase):
    password: str = Field(..., min_length=1)


class UserUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"username", "name", "role", "password"})

    username: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[UserRole] = None
    email: OptionalEmail = None
    phone: Optional[str] = None
    password: Optional[str] = Field(None, min_length=1)


class User(UserBase):
    id: int
    created_at: datetime


class UserInDB(User):
    """Stored representation of a user; never returned by the API."""
    hashed_password: str


class UserSummary(BaseSchema):
    id: int
    username: str
    name: str
    role: UserRole
