"""Application-wide Qt signals and input slots for DailyTracker.

This module provides:
    - Signals: custom Qt signals for errors, settings changes and the log viewer.
    - Input slots: parse raw text committed by the user and forward it to a
      :class:`DailyTracker.core.store.TrackingStore`. Input that fails to parse
      skips the mutation.
    - Display helpers: presentation-side formatting of calorie and income values.
"""
import logging
from typing import Optional

from PySide6 import QtCore


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        logging.debug(f'Ignoring non-integer input: "{text}"')
        return None


def _parse_float(text: str) -> Optional[float]:
    try:
        return float(str(text).strip())
    except (TypeError, ValueError):
        logging.debug(f'Ignoring non-numeric input: "{text}"')
        return None


def add_habit_from_text(store, text: str):
    """Add a habit named ``text`` unless the text is blank.

    Args:
        store: The tracking store to mutate.
        text (str): Raw text from the habit name field.

    Returns:
        Habit | None: The new habit, or None when nothing was added.
    """
    name = (text or '').strip()
    if not name:
        return None
    return store.add_habit(name)


def add_task_from_text(store, title: str, note: str = ''):
    """Add a task unless the title is blank."""
    title = (title or '').strip()
    if not title:
        return None
    return store.add_task(title, (note or '').strip())


def commit_calorie_goal(store, text: str) -> bool:
    value = _parse_int(text)
    if value is None:
        return False
    store.set_calorie_goal(value)
    return True


def commit_consumed_calories(store, text: str) -> bool:
    value = _parse_int(text)
    if value is None:
        return False
    store.add_consumed_calories(value)
    return True


def commit_burned_calories(store, text: str) -> bool:
    value = _parse_int(text)
    if value is None:
        return False
    store.add_burned_calories(value)
    return True


def commit_monthly_income(store, text: str) -> bool:
    value = _parse_float(text)
    if value is None:
        return False
    store.set_monthly_income(value)
    return True


def display_remaining(calorie_data) -> int:
    """Remaining calories as shown to the user, floored at zero.

    The stored value may be negative; only the displayed value is clamped.
    """
    return max(0, calorie_data.remaining)


def format_income(financial_data, locale: str) -> str:
    """Format the monthly income as a currency string for ``locale``."""
    from ..settings import locale as _locale
    return _locale.format_currency_value(financial_data.monthly_income, locale)


class Signals(QtCore.QObject):
    """Centralized Qt signals for application-wide events."""
    settingChanged = QtCore.Signal(str, object)

    showLogs = QtCore.Signal()

    error = QtCore.Signal(str)


signals = Signals()
