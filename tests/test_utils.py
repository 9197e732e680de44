import unittest
from datetime import date, datetime
from unittest.mock import patch
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_gen.errors import MalformedPayloadError
from event_gen.models import ContextConfig, Location, Tag, TagCategory, Viewport
from event_gen.utils import (
    age_on,
    clean_llm_json,
    current_millis,
    distance_meters,
    extract_structured_json,
    manhattan_degrees,
    parse_local_datetime,
    strip_code_fences,
)


class TestTextCleaning(unittest.TestCase):

    def test_strip_code_fences(self):
        self.assertEqual(strip_code_fences('```json\n{"a": 1}\n```'), '{"a": 1}')
        self.assertEqual(strip_code_fences('```\n{"a": 1}\n```'), '{"a": 1}')
        self.assertEqual(strip_code_fences('  {"a": 1}  '), '{"a": 1}')

    def test_clean_llm_json(self):
        self.assertEqual(clean_llm_json('<think>hmm</think>```json\n{}\n```'), "{}")
        self.assertEqual(clean_llm_json(None), "")


class TestExtractStructuredJson(unittest.TestCase):

    def test_plain_object(self):
        self.assertEqual(extract_structured_json('{"events": []}'), {"events": []})

    def test_fenced_block_inside_prose(self):
        text = 'Sure!\n```json\n{"events": [1]}\n```\nAnything else?'
        self.assertEqual(extract_structured_json(text), {"events": [1]})

    def test_list_is_wrapped(self):
        self.assertEqual(extract_structured_json("[1, 2]"), {"events": [1, 2]})

    def test_stray_braces_in_prose_are_skipped(self):
        text = 'Use {curly} braces sparingly. {"events": []}'
        self.assertEqual(extract_structured_json(text), {"events": []})

    def test_truncated_object_does_not_yield_inner_object(self):
        text = '{"events": [{"title": "A"}, {"title": "B"'
        with self.assertRaises(MalformedPayloadError):
            extract_structured_json(text)

    def test_garbage(self):
        with self.assertRaises(MalformedPayloadError):
            extract_structured_json("no json here")
        with self.assertRaises(MalformedPayloadError):
            extract_structured_json("42")


class TestDatetimeUtils(unittest.TestCase):

    def test_parse_local_datetime(self):
        self.assertEqual(parse_local_datetime("2025-03-21T20:00"), datetime(2025, 3, 21, 20, 0))
        self.assertEqual(parse_local_datetime("2025-03-21T20:00:05"), datetime(2025, 3, 21, 20, 0, 5))
        self.assertEqual(
            parse_local_datetime("2025-03-21T20:00:05.5"), datetime(2025, 3, 21, 20, 0, 5, 500000)
        )

    def test_parse_local_datetime_rejects(self):
        for value in ["2025-03-21", "2025-03-21T20:00Z", "2025-03-21 20:00", "2025-13-01T00:00", ""]:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_local_datetime(value)

    @patch('event_gen.utils.datetime_utils.time.time_ns')
    def test_current_millis(self, mock_time_ns):
        mock_time_ns.return_value = 1_700_000_000_123_456_789
        self.assertEqual(current_millis(), 1_700_000_000_123)

    def test_age_on(self):
        self.assertEqual(age_on(date(2000, 2, 29), date(2025, 2, 28)), 24)
        self.assertEqual(age_on(date(2000, 2, 29), date(2025, 3, 1)), 25)


class TestGeo(unittest.TestCase):

    def test_distance_meters(self):
        self.assertEqual(distance_meters(46.5, 6.6, 46.5, 6.6), 0.0)
        # one degree of latitude is roughly 111.2 km
        self.assertAlmostEqual(distance_meters(0.0, 0.0, 1.0, 0.0), 111_195, delta=10)

    def test_manhattan_degrees(self):
        self.assertEqual(manhattan_degrees(0.0, 0.0, 0.25, -0.25), 0.5)


class TestViewportAndContext(unittest.TestCase):

    def test_radius_from_bounds(self):
        viewport = Viewport(
            camera_center=Location(0.0, 0.0),
            zoom=14.0,
            north_east=Location(0.01, 0.0),
            south_west=Location(-0.01, 0.0),
            radius_km=99,
        )
        self.assertAlmostEqual(viewport.estimate_radius_km(), 1.112, places=2)

    def test_radius_fallback(self):
        self.assertEqual(Viewport(Location(0, 0), 14.0, radius_km=3.0).estimate_radius_km(), 3.0)
        self.assertIsNone(Viewport(Location(0, 0), 14.0).estimate_radius_km())

    def test_context_from_viewport_clamps_radius(self):
        center = Location(46.52, 6.63)

        wide = ContextConfig.from_viewport(Viewport(center, 14.0, radius_km=40))
        narrow = ContextConfig.from_viewport(Viewport(center, 14.0, radius_km=0.2))
        unknown = ContextConfig.from_viewport(Viewport(center, 14.0))

        self.assertEqual(wide.radius_km, 5)
        self.assertEqual(narrow.radius_km, 1)
        self.assertIsNone(unknown.radius_km)
        self.assertEqual(wide.coordinates, (46.52, 6.63))
        self.assertIsNone(wide.location)


class TestTags(unittest.TestCase):

    def test_from_display_name(self):
        self.assertIs(Tag.from_display_name("Rock"), Tag.ROCK)
        self.assertIsNone(Tag.from_display_name("Underwater basket weaving"))

    def test_display_names_are_unique(self):
        names = [tag.display_name for tag in Tag]
        self.assertEqual(len(names), len(set(names)))

    def test_every_category_has_tags(self):
        for category in TagCategory:
            with self.subTest(category=category):
                self.assertTrue(Tag.for_category(category))


if __name__ == '__main__':
    unittest.main()
