"""
Unit tests for DailyTracker.core.codec.
"""
import json
import math
import unittest

from DailyTracker.core import codec
from DailyTracker.core.codec import Collection
from DailyTracker.core.models import CalorieData, FinancialData, Habit, Task
from DailyTracker.status import status
from tests.base import mute_signals


class CodecTests(unittest.TestCase):
    def test_collection_keys(self):
        self.assertEqual(
            [str(k) for k in Collection],
            ['habits', 'tasks', 'calorieGoal', 'financialData', 'calorieData'],
        )

    def test_default_values(self):
        self.assertEqual(codec.default_value(Collection.Habits), [])
        self.assertEqual(codec.default_value(Collection.Tasks), [])
        self.assertEqual(codec.default_value('calorieData'), CalorieData(0, 0, 0))
        self.assertEqual(codec.default_value(Collection.FinancialData), FinancialData(0.0))

    def test_encoding_is_readable_json(self):
        task = Task(title='Call mum', note='Sunday')
        payload = json.loads(codec.encode(Collection.Tasks, [task]).decode('utf-8'))
        self.assertEqual(payload, [{'id': str(task.id), 'title': 'Call mum', 'note': 'Sunday'}])

    def test_decode_habits(self):
        habits = [Habit(name='Stretch'), Habit(name='Journal')]
        data = codec.encode(Collection.Habits, habits)
        self.assertEqual(codec.decode(Collection.Habits, data), habits)

    def test_decode_invalid_json(self):
        with mute_signals(), self.assertRaises(status.StoreDecodeException):
            codec.decode(Collection.Tasks, b'\x00not json')

    def test_decode_invalid_utf8(self):
        with mute_signals(), self.assertRaises(status.StoreDecodeException):
            codec.decode(Collection.Tasks, b'\xff\xfe')

    def test_decode_list_collection_requires_list(self):
        with mute_signals(), self.assertRaises(status.StoreDecodeException):
            codec.decode(Collection.Habits, b'{"name": "x"}')

    def test_decode_rejects_duplicate_ids(self):
        task = Task(title='Twice')
        data = codec.encode(Collection.Tasks, [task, task])
        with mute_signals(), self.assertRaises(status.StoreDecodeException):
            codec.decode(Collection.Tasks, data)

    def test_encode_nan_fails(self):
        with mute_signals(), self.assertRaises(status.StoreEncodeException):
            codec.encode(Collection.FinancialData, FinancialData(monthly_income=math.nan))

    def test_encode_float_calories_fails(self):
        with mute_signals(), self.assertRaises(status.StoreEncodeException):
            codec.encode(Collection.CalorieData, CalorieData(goal=2000, consumed=1.5))
