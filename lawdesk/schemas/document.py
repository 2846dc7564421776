from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from pydantic import Field
from .base import BaseSchema, PatchSchema
from .enums import DocumentType


class DocumentBase(BaseSchema):
    """Document metadata. Uploads are simulated: no file content is stored."""
    title: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)
    type: DocumentType
    description: Optional[str] = None
    file_url: str = Field(..., min_length=1)
    file_size: int = Field(..., ge=0)
    case_id: Optional[int] = None
    client_id: Optional[int] = None


class DocumentCreate(DocumentBase):
    pass


class DocumentUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"title", "filename", "type", "file_url", "file_size"}
    )

    title: Optional[str] = Field(None, min_length=1)
    filename: Optional[str] = Field(None, min_length=1)
    type: Optional[DocumentType] = None
    description: Optional[str] = None
    file_url: Optional[str] = Field(None, min_length=1)
    file_size: Optional[int] = Field(None, ge=0)
    case_id: Optional[int] = None
    client_id: Optional[int] = None


class Document(DocumentBase):
    id: int
    uploaded_by_id: int
    created_at: datetime
    updated_at: datetime
