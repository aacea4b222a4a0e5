import threading
import unittest
from unittest.mock import MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fixtures import VALID_AGENDA, VALID_TAGS, payload_fields, poster

from dev_events.errors import (
    DuplicateSlug,
    MalformedPayload,
    MissingImage,
    PersistenceFailed,
    ValidationFailed,
)
from dev_events.models.image import ImageFile
from dev_events.services.assets import AssetStore
from dev_events.services.ingestion import create_event, decode_string_list
from dev_events.services.storage import EventStore, InMemoryEventStore


class TestCreateEvent(unittest.TestCase):

    def setUp(self):
        self.event_store = InMemoryEventStore()
        self.asset_store = MagicMock(spec=AssetStore)
        self.asset_store.save.return_value = "/uploads/abc_poster.png"

    def _create(self, fields=None, image="default", **kwargs):
        return create_event(
            payload_fields() if fields is None else fields,
            poster() if image == "default" else image,
            event_store=kwargs.pop("event_store", self.event_store),
            asset_store=self.asset_store,
            **kwargs,
        )

    def test_valid_payload_creates_one_record(self):
        event = self._create()

        self.assertEqual(event.slug, "nextjs-conf-2026")
        self.assertEqual(event.tags, tuple(VALID_TAGS))
        self.assertEqual(event.agenda, tuple(VALID_AGENDA))
        self.assertEqual(event.image, "/uploads/abc_poster.png")
        self.assertEqual(self.event_store.find_all_sorted(), [event])
        self.asset_store.save.assert_called_once_with("poster.png", poster().content, "image/png")

    def test_list_fields_are_canonicalised(self):
        event = self._create(payload_fields(
            tags='[" react", "react", "vue"]',
            agenda='["Talk", "Talk ", "  "]',
        ))
        self.assertEqual(event.tags, ("react", "vue"))
        self.assertEqual(event.agenda, ("Talk", "Talk"))

    def test_slug_collision_appends_suffix(self):
        first = self._create()
        second = self._create()
        third = self._create()

        self.assertEqual(first.slug, "nextjs-conf-2026")
        self.assertEqual(second.slug, "nextjs-conf-2026-2")
        self.assertEqual(third.slug, "nextjs-conf-2026-3")

    def test_concurrent_submissions_get_distinct_slugs(self):
        results = []
        lock = threading.Lock()

        def worker():
            event = self._create()
            with lock:
                results.append(event.slug)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 8)
        self.assertEqual(len(set(results)), 8)

    def test_invalid_scalar_fields_raise_validation_failed(self):
        with self.assertRaises(ValidationFailed) as ctx:
            self._create(payload_fields(title="abc"))
        self.assertEqual(list(ctx.exception.errors), ["title"])
        self.asset_store.save.assert_not_called()

    def test_malformed_tags_raise(self):
        for raw in ("not json", '{"a": 1}', '["a", 1]', "", None):
            with self.subTest(raw=raw):
                fields = payload_fields()
                fields["tags"] = raw
                with self.assertRaises(MalformedPayload):
                    self._create(fields)
        self.asset_store.save.assert_not_called()

    def test_empty_agenda_is_malformed(self):
        with self.assertRaises(MalformedPayload):
            self._create(payload_fields(agenda="[]"))

    def test_missing_image_raises(self):
        with self.assertRaises(MissingImage):
            self._create(image=None)
        with self.assertRaises(MissingImage):
            self._create(image=ImageFile("poster.png", b"", "image/png"))
        self.assertEqual(self.event_store.find_all_sorted(), [])

    def test_store_failure_removes_uploaded_asset(self):
        failing_store = MagicMock(spec=EventStore)
        failing_store.insert.side_effect = PersistenceFailed()

        with self.assertRaises(PersistenceFailed):
            self._create(event_store=failing_store)

        self.asset_store.delete.assert_called_once_with("/uploads/abc_poster.png")

    def test_exhausted_slug_attempts_raise_persistence_failed(self):
        full_store = MagicMock(spec=EventStore)
        full_store.insert.side_effect = DuplicateSlug("nextjs-conf-2026")

        with self.assertRaises(PersistenceFailed):
            self._create(event_store=full_store, max_slug_attempts=3, random_slug_attempts=2)

        self.assertEqual(full_store.insert.call_count, 5)
        tried = [call[0][0].slug for call in full_store.insert.call_args_list]
        self.assertEqual(tried[:3], ["nextjs-conf-2026", "nextjs-conf-2026-2", "nextjs-conf-2026-3"])
        for slug in tried[3:]:
            self.assertRegex(slug, r"^nextjs-conf-2026-[0-9a-f]{6}$")
        self.asset_store.delete.assert_called_once()

    def test_many_colliding_titles_all_get_unique_slugs(self):
        created = [self._create() for _ in range(25)]

        slugs = [event.slug for event in created]
        self.assertEqual(len(set(slugs)), 25)
        self.assertEqual(slugs[:20], ["nextjs-conf-2026"] + [f"nextjs-conf-2026-{n}" for n in range(2, 21)])
        for slug in slugs[20:]:
            self.assertRegex(slug, r"^nextjs-conf-2026-[0-9a-f]{6}$")
        self.assertEqual(len(self.event_store.find_all_sorted()), 25)
        self.asset_store.delete.assert_not_called()

    def test_non_latin_titles_keep_distinct_slugs(self):
        tokyo = self._create(payload_fields(title="東京 開発者 カンファレンス"))
        moscow = self._create(payload_fields(title="Собрание разработчиков"))

        self.assertEqual(tokyo.slug, "東京-開発者-カンファレンス")
        self.assertEqual(moscow.slug, "собрание-разработчиков")


class TestDecodeStringList(unittest.TestCase):

    def test_decodes_json_array(self):
        self.assertEqual(decode_string_list('["a", "b"]', "tags"), ["a", "b"])

    def test_error_message_names_field(self):
        with self.assertRaises(MalformedPayload) as ctx:
            decode_string_list("[1, 2]", "agenda")
        self.assertIn("agenda", ctx.exception.message)


if __name__ == '__main__':
    unittest.main()
