from typing import Optional
from datetime import datetime
from .base import BaseSchema


class BackupCreate(BaseSchema):
    name: Optional[str] = None
    description: Optional[str] = None
    automatic: bool = False


class Backup(BaseSchema):
    """Metadata for a simulated backup; no data is serialized."""
    id: int
    name: str
    description: str = ""
    filename: str
    file_size: Optional[int] = None
    created_by_id: Optional[int] = None
    automatic: bool
    created_at: datetime
