"""Shared helpers for the local API tests."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from services.storage_service import StorageService
from services.stores import MemoryStore


class FakeClock:
    """Controllable replacement for utils.ids._utcnow."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


def patch_clock(clock):
    return patch("utils.ids._utcnow", side_effect=clock)


class FlakyStore(MemoryStore):
    """MemoryStore that can be told to fail reads or writes."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False

    def load(self, key):
        if self.fail_reads:
            raise OSError("storage disabled")
        return super().load(key)

    def save(self, key, value):
        if self.fail_writes:
            raise OSError("quota exceeded")
        super().save(key, value)

    def delete(self, key):
        if self.fail_writes:
            raise OSError("storage disabled")
        super().delete(key)


def make_storage(initial=None):
    store = MemoryStore(initial)
    return store, StorageService(store)
