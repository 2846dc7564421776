from typing import Any
import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status

from lawdesk.core.auth import SESSION_KEY, get_current_user
from lawdesk.core.database import get_session_store, get_storage
from lawdesk.core.sessions import SessionStore
from lawdesk.crud import user as user_crud
from lawdesk.schemas.auth import LoginRequest
from lawdesk.schemas.base import Message
from lawdesk.schemas.user import UserInDB, UserSummary
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=UserSummary)
async def login(
    *,
    request: Request,
    credentials: LoginRequest,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
) -> Any:
    """
    Log in with username and password and open a session.
    """
    user = user_crud.authenticate(storage, credentials.username, credentials.password)
    if not user:
        logger.warning(f"Failed login attempt for username: {credentials.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
        )

    sessions.destroy(request.session.get(SESSION_KEY))
    request.session[SESSION_KEY] = sessions.create(user.id)

    logger.info(f"User {user.id} logged in")
    return user


@router.post("/logout", response_model=Message)
async def logout(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
) -> Any:
    """
    Close the current session, if any.
    """
    sessions.destroy(request.session.get(SESSION_KEY))
    request.session.clear()
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserSummary)
async def read_me(current_user: UserInDB = Depends(get_current_user)) -> Any:
    """
    Get the logged-in user.
    """
    return current_user
