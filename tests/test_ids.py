import re
import unittest
from datetime import datetime, timezone

from tests.fixtures import FakeClock, patch_clock
from utils.ids import make_id, next_timestamp, now_iso, parse_iso, to_base36


class TestIds(unittest.TestCase):
    def test_to_base36(self):
        self.assertEqual(to_base36(0), "0")
        self.assertEqual(to_base36(35), "z")
        self.assertEqual(to_base36(36), "10")
        with self.assertRaises(ValueError):
            to_base36(-1)

    def test_make_id_shape(self):
        clock = FakeClock(datetime(2026, 1, 1, tzinfo=timezone.utc))
        with patch_clock(clock):
            resume_id = make_id("resume")
        millis = int(clock.now.timestamp() * 1000)
        self.assertRegex(resume_id, rf"^resume_{to_base36(millis)}_[0-9a-z]{{8}}$")

    def test_make_id_default_prefix_and_uniqueness(self):
        ids = {make_id() for _ in range(200)}
        self.assertEqual(len(ids), 200)
        self.assertTrue(all(i.startswith("res_") for i in ids))


class TestTimestamps(unittest.TestCase):
    def test_now_iso_format(self):
        clock = FakeClock(datetime(2026, 3, 4, 5, 6, 7, 891000, tzinfo=timezone.utc))
        with patch_clock(clock):
            self.assertEqual(now_iso(), "2026-03-04T05:06:07.891Z")

    def test_now_iso_matches_pattern(self):
        self.assertRegex(now_iso(), r"^\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z$")

    def test_parse_iso(self):
        parsed = parse_iso("2026-03-04T05:06:07.891Z")
        self.assertEqual(parsed, datetime(2026, 3, 4, 5, 6, 7, 891000, tzinfo=timezone.utc))
        self.assertIsNone(parse_iso("yesterday"))
        self.assertIsNone(parse_iso(None))
        self.assertIsNone(parse_iso(""))

    def test_next_timestamp_uses_now_when_later(self):
        clock = FakeClock(datetime(2026, 1, 1, 0, 0, 1, tzinfo=timezone.utc))
        with patch_clock(clock):
            self.assertEqual(next_timestamp("2026-01-01T00:00:00.000Z"), "2026-01-01T00:00:01.000Z")

    def test_next_timestamp_is_strictly_later(self):
        clock = FakeClock(datetime(2026, 1, 1, tzinfo=timezone.utc))
        with patch_clock(clock):
            self.assertEqual(next_timestamp("2026-01-01T00:00:00.000Z"), "2026-01-01T00:00:00.001Z")
            self.assertEqual(next_timestamp("2026-06-01T00:00:00.000Z"), "2026-06-01T00:00:00.001Z")

    def test_next_timestamp_ignores_garbage(self):
        self.assertTrue(re.match(r"^\d{4}-", next_timestamp("garbage")))


if __name__ == "__main__":
    unittest.main()
