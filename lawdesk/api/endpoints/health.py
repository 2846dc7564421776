from fastapi import APIRouter, Depends

from lawdesk.core.database import get_storage
from lawdesk.storage import Storage

router = APIRouter()


@router.get("")
async def health_check(storage: Storage = Depends(get_storage)):
    return {
        "status": "ok",
        "message": "API is running",
        "storage": storage.kind
    }
