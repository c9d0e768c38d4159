import json
import unittest

from services.seed_service import ensure_seed, is_missing, DEFAULT_TOKEN
from services.storage_service import USER_KEY, TOKEN_KEY, RESUMES_KEY
from tests.fixtures import make_storage


class TestEnsureSeed(unittest.TestCase):
    def test_seeds_empty_storage(self):
        store, storage = make_storage()
        ensure_seed(storage)

        self.assertEqual(
            json.loads(store.data[USER_KEY]),
            {"_id": "local_user", "name": "Joe Doe", "email": "joe@example.com"},
        )
        self.assertEqual(store.data[TOKEN_KEY], DEFAULT_TOKEN)
        self.assertEqual(json.loads(store.data[RESUMES_KEY]), [])

    def test_is_idempotent(self):
        store, storage = make_storage()
        ensure_seed(storage)
        snapshot = dict(store.data)

        for _ in range(3):
            ensure_seed(storage)

        self.assertEqual(store.data, snapshot)

    def test_keeps_existing_values(self):
        existing = {
            USER_KEY: json.dumps({"_id": "local_user", "name": "Ada", "email": "ada@example.com"}),
            TOKEN_KEY: "other_token",
            RESUMES_KEY: json.dumps([{"_id": "resume_1"}]),
        }
        store, storage = make_storage(existing)
        ensure_seed(storage)
        self.assertEqual(store.data, existing)

    def test_reseeds_after_external_clear(self):
        store, storage = make_storage()
        ensure_seed(storage)
        store.data.clear()
        ensure_seed(storage)
        self.assertEqual(set(store.data), {USER_KEY, TOKEN_KEY, RESUMES_KEY})

    def test_corrupt_user_is_replaced(self):
        store, storage = make_storage({USER_KEY: "{oops"})
        ensure_seed(storage)
        self.assertEqual(json.loads(store.data[USER_KEY])["name"], "Joe Doe")

    def test_falsy_values_are_reseeded(self):
        for stored in ("false", "0", '""', "null"):
            with self.subTest(stored=stored):
                store, storage = make_storage({USER_KEY: stored, RESUMES_KEY: stored})
                ensure_seed(storage)
                self.assertEqual(json.loads(store.data[USER_KEY])["_id"], "local_user")
                self.assertEqual(json.loads(store.data[RESUMES_KEY]), [])

    def test_empty_object_and_list_are_kept(self):
        store, storage = make_storage({USER_KEY: "{}", RESUMES_KEY: "[]"})
        ensure_seed(storage)
        self.assertEqual(store.data[USER_KEY], "{}")
        self.assertEqual(store.data[RESUMES_KEY], "[]")

    def test_is_missing(self):
        for value in (None, False, 0, 0.0, ""):
            self.assertTrue(is_missing(value), value)
        for value in ({}, [], True, 1, "x", "0"):
            self.assertFalse(is_missing(value), value)


if __name__ == "__main__":
    unittest.main()
