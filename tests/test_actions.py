"""
Tests for DailyTracker.ui.actions input slots and display helpers.
"""
from DailyTracker.core.models import CalorieData, FinancialData
from DailyTracker.ui import actions
from tests.base import BaseTestCase


class InputSlotTests(BaseTestCase):
    def test_add_habit_from_text(self):
        habit = actions.add_habit_from_text(self.store, '  Water Intake ')
        self.assertEqual(habit.name, 'Water Intake')
        self.assertEqual(len(self.store.habits), 1)

    def test_blank_habit_name_is_ignored(self):
        self.assertIsNone(actions.add_habit_from_text(self.store, ''))
        self.assertIsNone(actions.add_habit_from_text(self.store, '   '))
        self.assertEqual(self.store.habits, [])

    def test_add_task_from_text(self):
        task = actions.add_task_from_text(self.store, 'Pay rent', ' by Friday ')
        self.assertEqual((task.title, task.note), ('Pay rent', 'by Friday'))
        self.assertIsNone(actions.add_task_from_text(self.store, ' '))
        self.assertEqual(len(self.store.tasks), 1)

    def test_commit_calorie_goal(self):
        self.assertTrue(actions.commit_calorie_goal(self.store, ' 2100 '))
        self.assertEqual(self.store.calorie_data.goal, 2100)

    def test_unparsable_input_skips_mutation(self):
        self.store.set_calorie_goal(1800)
        self.assertFalse(actions.commit_calorie_goal(self.store, 'lots'))
        self.assertFalse(actions.commit_consumed_calories(self.store, '12.5'))
        self.assertFalse(actions.commit_burned_calories(self.store, ''))
        self.assertFalse(actions.commit_monthly_income(self.store, 'a lot'))
        self.assertEqual(self.store.calorie_data, CalorieData(goal=1800))
        self.assertEqual(self.store.financial_data, FinancialData())

    def test_commit_calories(self):
        self.assertTrue(actions.commit_consumed_calories(self.store, '650'))
        self.assertTrue(actions.commit_burned_calories(self.store, '-50'))
        self.assertEqual(self.store.calorie_data.consumed, 650)
        self.assertEqual(self.store.calorie_data.burned, -50)

    def test_commit_monthly_income(self):
        self.assertTrue(actions.commit_monthly_income(self.store, '2450.75'))
        self.assertEqual(self.store.financial_data.monthly_income, 2450.75)


class DisplayTests(BaseTestCase):
    def test_display_remaining_is_clamped(self):
        data = CalorieData(goal=1000, consumed=1500, burned=0)
        self.assertEqual(data.remaining, -500)
        self.assertEqual(actions.display_remaining(data), 0)
        self.assertEqual(actions.display_remaining(CalorieData(goal=1000, consumed=200)), 800)

    def test_format_income(self):
        self.assertEqual(actions.format_income(FinancialData(1500.0), 'en_US'), '$1,500.00')
