from dataclasses import dataclass
from typing import Optional

from config.log_config import get_logger
from models.user_model import default_user
from services.seed_service import DEFAULT_TOKEN
from services.storage_service import (
    StorageService,
    StorageWriteError,
    USER_KEY,
    TOKEN_KEY,
    LEGACY_TOKEN_KEY,
)

logger = get_logger("Session_Service")


@dataclass
class SessionState:
    token: str
    user: Optional[dict]


# Restore whatever session the local API left behind
def hydrate_session(storage: StorageService) -> SessionState:
    user = storage.read_json(USER_KEY, None)
    token = storage.read_raw(TOKEN_KEY) or storage.read_raw(LEGACY_TOKEN_KEY)

    if not isinstance(user, dict):
        user = default_user().model_dump(by_alias=True)

    return SessionState(token=token or DEFAULT_TOKEN, user=user)


def save_session(storage: StorageService, token: str, user: dict) -> SessionState:
    try:
        storage.write_json(USER_KEY, user)
        storage.write_raw(TOKEN_KEY, token)
    except StorageWriteError as e:
        # read-only environments keep the session in memory only
        logger.warning(f"Could not persist session: {e}")
    return SessionState(token=token, user=user)


def clear_session(storage: StorageService) -> SessionState:
    for key in (USER_KEY, TOKEN_KEY, LEGACY_TOKEN_KEY):
        try:
            storage.remove(key)
        except StorageWriteError as e:
            logger.warning(f"Could not clear {key}: {e}")
    return SessionState(token="", user=None)
