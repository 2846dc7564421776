"""
Storage wiring for the application.

The repository instance is created explicitly when the app is built and
kept on ``app.state``; request handlers only reach it through the
``get_storage`` dependency.
"""

import logging
from fastapi import FastAPI, Request

from lawdesk.core.config import Settings
from lawdesk.core.sessions import SessionStore
from lawdesk.crud import user as user_crud
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)


async def get_storage(request: Request) -> Storage:
    """
    Dependency that provides the application's storage backend.
    """
    return request.app.state.storage


async def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def initialize_storage(app: FastAPI, settings: Settings) -> None:
    """
    Prepare the storage for serving requests: seed the administrator
    account when no user with that username exists yet.
    """
    storage: Storage = app.state.storage
    admin = user_crud.ensure_admin_user(storage, settings)
    logger.info(f"Storage initialized ({storage.kind}), administrator account: {admin.username}")


def close_storage(app: FastAPI) -> None:
    """
    Release the storage at shutdown. The in-memory store is simply dropped.
    """
    logger.info("Storage closed")
