import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dev_events.utils.cache import TTLCache
from dev_events.utils.slugs import DEFAULT_SLUG, slugify, with_random_suffix, with_suffix


class TestSlugify(unittest.TestCase):

    def test_punctuation_is_dropped(self):
        self.assertEqual(slugify("Next.js Conf 2026"), "nextjs-conf-2026")

    def test_whitespace_and_hyphens_collapse(self):
        self.assertEqual(slugify("  React --  Summit   EU "), "react-summit-eu")

    def test_accents_are_folded(self):
        self.assertEqual(slugify("Café Hackathon München"), "cafe-hackathon-munchen")

    def test_symbol_only_title_falls_back(self):
        self.assertEqual(slugify("!!! ???"), DEFAULT_SLUG)

    def test_non_latin_letters_are_kept(self):
        self.assertEqual(slugify("Собрание разработчиков"), "собрание-разработчиков")
        self.assertEqual(slugify("東京 デベロッパー"), "東京-デベロッパー")
        self.assertEqual(slugify("Йошкар-Ола Meetup"), "йошкар-ола-meetup")

    def test_underscores_are_dropped(self):
        self.assertEqual(slugify("snake_case day"), "snakecase-day")

    def test_with_random_suffix(self):
        self.assertRegex(with_random_suffix("conf"), r"^conf-[0-9a-f]{6}$")
        self.assertNotEqual(with_random_suffix("conf"), with_random_suffix("conf"))


    def test_with_suffix(self):
        self.assertEqual(with_suffix("conf", 1), "conf")
        self.assertEqual(with_suffix("conf", 2), "conf-2")
        self.assertEqual(with_suffix("conf", 10), "conf-10")


class TestTTLCache(unittest.TestCase):

    def setUp(self):
        self.now = 100.0
        self.cache = TTLCache(60, clock=lambda: self.now)
        self.calls = 0

    def _factory(self):
        self.calls += 1
        return f"value-{self.calls}"

    def test_value_is_reused_within_window(self):
        self.assertEqual(self.cache.get_or_set("k", self._factory), "value-1")
        self.now += 59
        self.assertEqual(self.cache.get_or_set("k", self._factory), "value-1")
        self.assertEqual(self.calls, 1)

    def test_value_expires_after_window(self):
        self.cache.get_or_set("k", self._factory)
        self.now += 60
        self.assertEqual(self.cache.get_or_set("k", self._factory), "value-2")

    def test_zero_ttl_disables_caching(self):
        cache = TTLCache(0, clock=lambda: self.now)
        cache.get_or_set("k", self._factory)
        cache.get_or_set("k", self._factory)
        self.assertEqual(self.calls, 2)

    def test_clear(self):
        self.cache.get_or_set("k", self._factory)
        self.cache.clear()
        self.cache.get_or_set("k", self._factory)
        self.assertEqual(self.calls, 2)


if __name__ == '__main__':
    unittest.main()
