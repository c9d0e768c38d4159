import json
from typing import Any, Optional

from config.log_config import get_logger
from services.stores import KeyValueStore

logger = get_logger("Storage_Service")


# Fixed storage keys shared with the web client
USER_KEY = "arb_user"
TOKEN_KEY = "arb_token"
RESUMES_KEY = "arb_resumes"
LEGACY_TOKEN_KEY = "token"


class StorageWriteError(Exception):
    """Raised when the backing store refuses a write or delete."""

    def __init__(self, key: str, cause: Exception):
        super().__init__(f"Failed to write storage key {key}: {cause}")
        self.key = key
        self.cause = cause


class StorageService:
    def __init__(self, store: KeyValueStore):
        self.store = store

    # Read a JSON value, any failure yields the fallback
    def read_json(self, key: str, fallback: Any = None) -> Any:
        try:
            raw = self.store.load(key)
            if not raw:
                return fallback
            return json.loads(raw)
        except Exception as e:
            logger.debug(f"Falling back for key {key}: {e}")
            return fallback

    def write_json(self, key: str, value: Any) -> None:
        self.write_raw(key, json.dumps(value, ensure_ascii=False))

    # Raw strings are stored unencoded (the auth token)
    def read_raw(self, key: str, fallback: Optional[str] = None) -> Optional[str]:
        try:
            raw = self.store.load(key)
        except Exception as e:
            logger.debug(f"Falling back for key {key}: {e}")
            return fallback
        return raw if raw else fallback

    def write_raw(self, key: str, value: str) -> None:
        try:
            self.store.save(key, value)
        except Exception as e:
            logger.error(f"Error saving key {key}: {e}")
            raise StorageWriteError(key, e) from e

    def remove(self, key: str) -> None:
        try:
            self.store.delete(key)
        except Exception as e:
            logger.error(f"Error removing key {key}: {e}")
            raise StorageWriteError(key, e) from e
