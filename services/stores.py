"""Key-value persistence backends.

Every backend stores plain strings under string keys, the same way a browser
profile's ``localStorage`` does. Encoding (JSON or raw) is the job of
:class:`services.storage_service.StorageService`.
"""

import json
import os
import tempfile
from typing import Dict, Optional, Protocol

import redis

from config.log_config import get_logger

logger = get_logger("Stores")


class KeyValueStore(Protocol):
    def load(self, key: str) -> Optional[str]: ...

    def save(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def save(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class FileStore:
    """All keys kept in a single JSON object on disk.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace`` so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning(f"Storage file {self.path} unreadable, treating as empty: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".store-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def save(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


class RedisStore:
    def __init__(self, redis_client: redis.Redis, prefix: str = ""):
        self.r = redis_client
        self.prefix = prefix

    def generate_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def load(self, key: str) -> Optional[str]:
        value = self.r.get(self.generate_key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def save(self, key: str, value: str) -> None:
        self.r.set(self.generate_key(key), value)

    def delete(self, key: str) -> None:
        self.r.delete(self.generate_key(key))


def build_store(backend: Optional[str] = None) -> KeyValueStore:
    from config import env_config

    backend = (backend or env_config.STORAGE_BACKEND).lower()

    if backend == "memory":
        return MemoryStore()

    if backend == "redis":
        from config.redis_config import get_redis_client
        logger.info(f"Using redis storage at {env_config.redis_host}:{env_config.redis_port}")
        return RedisStore(get_redis_client(), prefix=env_config.redis_key_prefix)

    if backend == "file":
        logger.info(f"Using file storage at {env_config.STORAGE_PATH}")
        return FileStore(env_config.STORAGE_PATH)

    raise ValueError(f"Unknown storage backend: {backend}")
