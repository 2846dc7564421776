from fastapi import Depends, HTTPException, Request, status

from lawdesk.core.database import get_session_store, get_storage
from lawdesk.core.sessions import SessionStore
from lawdesk.schemas.enums import UserRole
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage
from lawdesk.utils.logging import log_warning

SESSION_KEY = "sid"


async def get_current_user(
    request: Request,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
) -> UserInDB:
    """
    Resolve the logged-in user from the session cookie.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
    session_id = request.session.get(SESSION_KEY)
    user_id = sessions.get_user_id(session_id)
    if user_id is None:
        raise credentials_exception

    user = storage.get_user(user_id)
    if not user:
        log_warning(f"Session points to missing user {user_id}", context="Authentication")
        sessions.destroy(session_id)
        raise credentials_exception

    return user


async def get_current_active_superuser(
    current_user: UserInDB = Depends(get_current_user)
) -> UserInDB:
    """
    Check if current user is an administrator.
    """
    if current_user.role != UserRole.admin:
        log_warning(
            f"Admin-only access refused for user {current_user.id} ({current_user.role.value})",
            context="Authorization",
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return current_user
