import logging
from typing import Optional
from lawdesk.schemas.backup import Backup, BackupCreate
from lawdesk.schemas.base import utcnow
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)


def backup_filename() -> str:
    return f"backup-{utcnow().isoformat().replace(':', '-')}.json"


def create_backup(storage: Storage, backup_in: BackupCreate, created_by_id: Optional[int]) -> Backup:
    """
    Record a backup. Only metadata is stored; no data is exported.
    """
    backup = storage.create_backup(backup_in, filename=backup_filename(), created_by_id=created_by_id)
    logger.info(f"Backup {backup.id} recorded as {backup.filename}")
    return backup
