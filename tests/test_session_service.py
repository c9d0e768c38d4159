import json
import unittest

from services.session_service import clear_session, hydrate_session, save_session
from services.storage_service import StorageService, USER_KEY, TOKEN_KEY, LEGACY_TOKEN_KEY
from tests.fixtures import FlakyStore, make_storage


class TestHydrateSession(unittest.TestCase):
    def test_defaults_when_empty(self):
        _, storage = make_storage()
        state = hydrate_session(storage)
        self.assertEqual(state.token, "local_token")
        self.assertEqual(state.user, {"_id": "local_user", "name": "Joe Doe", "email": "joe@example.com"})

    def test_reads_stored_values(self):
        user = {"_id": "local_user", "name": "Ada", "email": "ada@example.com"}
        _, storage = make_storage({USER_KEY: json.dumps(user), TOKEN_KEY: "tok"})
        state = hydrate_session(storage)
        self.assertEqual(state.token, "tok")
        self.assertEqual(state.user, user)

    def test_falls_back_to_legacy_token(self):
        _, storage = make_storage({LEGACY_TOKEN_KEY: "legacy"})
        self.assertEqual(hydrate_session(storage).token, "legacy")

    def test_corrupt_user_and_failing_reads_use_defaults(self):
        store = FlakyStore({USER_KEY: "{bad"})
        storage = StorageService(store)
        self.assertEqual(hydrate_session(storage).user["name"], "Joe Doe")
        store.fail_reads = True
        self.assertEqual(hydrate_session(storage).token, "local_token")


class TestSaveAndClearSession(unittest.TestCase):
    def test_save_then_clear(self):
        store, storage = make_storage({LEGACY_TOKEN_KEY: "old"})
        user = {"_id": "local_user", "name": "Ada", "email": "ada@example.com"}

        state = save_session(storage, "tok", user)
        self.assertEqual(state.token, "tok")
        self.assertEqual(json.loads(store.data[USER_KEY]), user)
        self.assertEqual(store.data[TOKEN_KEY], "tok")

        cleared = clear_session(storage)
        self.assertEqual(cleared.token, "")
        self.assertIsNone(cleared.user)
        self.assertEqual(store.data, {})

    def test_storage_failures_are_ignored(self):
        store = FlakyStore()
        store.fail_writes = True
        storage = StorageService(store)

        state = save_session(storage, "tok", {"name": "Ada"})
        self.assertEqual(state.token, "tok")
        self.assertEqual(clear_session(storage).token, "")


if __name__ == "__main__":
    unittest.main()
