from typing import Optional, Union, Dict, Any
import logging
from lawdesk.core.config import Settings, DEFAULT_ADMIN_PASSWORD
from lawdesk.core.security import get_password_hash, verify_password
from lawdesk.schemas.user import UserCreate, UserUpdate, UserInDB
from lawdesk.schemas.enums import UserRole
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)


def create_user(storage: Storage, user_in: UserCreate) -> UserInDB:
    hashed_password = get_password_hash(user_in.password)
    return storage.create_user(user_in, hashed_password=hashed_password)


def update_user(
    storage: Storage, user_id: int, user_in: Union[UserUpdate, Dict[str, Any]]
) -> Optional[UserInDB]:
    if isinstance(user_in, dict):
        update_data = dict(user_in)
    else:
        update_data = user_in.changes()

    if "password" in update_data:
        update_data["hashed_password"] = get_password_hash(update_data.pop("password"))

    return storage.update_user(user_id, update_data)


def authenticate(storage: Storage, username: str, password: str) -> Optional[UserInDB]:
    user = storage.get_user_by_username(username)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def ensure_admin_user(storage: Storage, settings: Settings) -> UserInDB:
    """
    Seed the configured administrator account if it does not exist yet.
    """
    existing = storage.get_user_by_username(settings.FIRST_ADMIN_USERNAME)
    if existing:
        return existing

    if settings.FIRST_ADMIN_PASSWORD == DEFAULT_ADMIN_PASSWORD:
        logger.warning(
            "Seeding administrator with the default password; set FIRST_ADMIN_PASSWORD"
        )

    admin = create_user(storage, UserCreate(
        username=settings.FIRST_ADMIN_USERNAME,
        password=settings.FIRST_ADMIN_PASSWORD,
        name=settings.FIRST_ADMIN_NAME,
        role=UserRole.admin,
        email=settings.FIRST_ADMIN_EMAIL,
    ))
    logger.info(f"Created administrator account: {admin.username}")
    return admin
