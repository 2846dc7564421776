from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, ClassVar, FrozenSet, Optional
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


CENTS = Decimal("0.01")


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(_blank_to_none)]
Money = Annotated[Decimal, Field(max_digits=10, decimal_places=2), AfterValidator(_to_cents)]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchSchema(BaseSchema):
    """
    Base for partial updates.

    Unknown fields are rejected, and fields listed in ``non_nullable`` may
    be omitted but not explicitly set to null.
    """

    model_config = ConfigDict(extra="forbid")

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class Message(BaseModel):
    message: str
