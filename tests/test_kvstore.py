"""
Tests for the QSettings-backed key-value store.
"""
import pathlib

from DailyTracker.core.kvstore import KeyValueStore
from tests.base import BaseTestCase


class KeyValueStoreTests(BaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.path = pathlib.Path(self.tmp_dir) / 'kv' / 'test.ini'
        self.kv = KeyValueStore(self.path)

    def test_missing_key(self):
        self.assertIsNone(self.kv.get('habits'))
        self.assertFalse(self.kv.contains('habits'))

    def test_set_and_get(self):
        self.kv.set('tasks', b'[{"title": "a, b = c"}]')
        self.assertEqual(self.kv.get('tasks'), b'[{"title": "a, b = c"}]')
        self.assertTrue(self.kv.contains('tasks'))
        self.assertIn('tasks', self.kv.keys())

    def test_non_ascii_bytes(self):
        data = '{"name": "Víz ☕"}'.encode('utf-8')
        self.kv.set('habits', data)
        self.assertEqual(self.kv.get('habits'), data)

    def test_overwrite(self):
        self.kv.set('calorieData', b'1')
        self.kv.set('calorieData', b'2')
        self.assertEqual(self.kv.get('calorieData'), b'2')

    def test_written_to_disk(self):
        self.kv.set('financialData', b'{"monthly_income": 10}')
        self.assertTrue(self.path.exists())
        other = KeyValueStore(self.path)
        self.assertEqual(other.get('financialData'), b'{"monthly_income": 10}')

    def test_remove_and_clear(self):
        self.kv.set('a', b'1')
        self.kv.set('b', b'2')
        self.kv.remove('a')
        self.assertIsNone(self.kv.get('a'))
        self.kv.clear()
        self.assertEqual(self.kv.keys(), [])

    def test_set_requires_bytes(self):
        with self.assertRaises(TypeError):
            self.kv.set('a', 'text')
