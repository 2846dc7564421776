from typing import List, Any
import logging
from fastapi import APIRouter, Depends, status

from lawdesk.core.auth import get_current_active_superuser
from lawdesk.core.database import get_storage
from lawdesk.crud import backup as backup_crud
from lawdesk.schemas.backup import Backup, BackupCreate
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Backup])
async def get_backups(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Retrieve backups, newest first.
    """
    return storage.list_backups()


@router.post("", response_model=Backup, status_code=status.HTTP_201_CREATED)
async def create_backup(
    *,
    backup_in: BackupCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Record a new backup. Only metadata is produced.
    """
    return backup_crud.create_backup(storage, backup_in, created_by_id=current_user.id)
