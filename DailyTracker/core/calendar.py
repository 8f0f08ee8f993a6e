"""Calendar helpers shared by the habit and calendar screens.

Week boundaries follow the locale's first day of the week. Days of a month or
year are enumerated by stepping one day at a time until the month or year
changes.
"""
import datetime
from dataclasses import dataclass
from typing import List, Tuple

from dateutil.relativedelta import relativedelta

from .models import Habit, to_date
from ..settings import locale as _locale

ONE_DAY = datetime.timedelta(days=1)

#: Number of cells in the habit week strip. One more than the days of a week.
WEEK_STRIP_LENGTH: int = 8


@dataclass(frozen=True)
class DayCell:
    """One cell of the week strip."""
    date: datetime.date
    weekday: str  # short weekday name, e.g. "Mon"
    day_number: int


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_same_day(a: datetime.date, b: datetime.date) -> bool:
    """True if ``a`` and ``b`` fall on the same calendar day, ignoring time of day."""
    return to_date(a) == to_date(b)


def start_of_week(date: datetime.date, locale: str = _locale.DEFAULT_LOCALE) -> datetime.date:
    """First day of the week containing ``date``.

    Args:
        date: Any date or datetime.
        locale: Locale deciding which weekday starts the week.

    Returns:
        datetime.date: The week start, on or before ``date``.
    """
    day = to_date(date)
    offset = (day.weekday() - _locale.first_week_day(locale)) % 7
    return day - datetime.timedelta(days=offset)


def week_strip(date: datetime.date, locale: str = _locale.DEFAULT_LOCALE,
               length: int = WEEK_STRIP_LENGTH) -> List[datetime.date]:
    """Consecutive days starting at the week start of ``date``."""
    start = start_of_week(date, locale)
    return [start + datetime.timedelta(days=i) for i in range(length)]


def week_strip_cells(date: datetime.date, locale: str = _locale.DEFAULT_LOCALE,
                     length: int = WEEK_STRIP_LENGTH) -> List[DayCell]:
    return [
        DayCell(date=d, weekday=_locale.short_weekday_name(d, locale), day_number=d.day)
        for d in week_strip(date, locale, length)
    ]


def days_in_month(month: int, year: int) -> List[datetime.date]:
    """Every day of ``month`` in ``year``, in order.

    Raises:
        ValueError: If month is not between 1 and 12.
    """
    day = datetime.date(year, month, 1)
    days = []
    while day.month == month:
        days.append(day)
        day += ONE_DAY
    return days


def days_in_year(year: int) -> List[datetime.date]:
    """Every day of ``year``, in order."""
    day = datetime.date(year, 1, 1)
    days = []
    while day.year == year:
        days.append(day)
        day += ONE_DAY
    return days


def shift_month(month: int, year: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months forward (or back when negative).

    Returns:
        tuple[int, int]: The resulting (month, year).
    """
    d = datetime.date(year, month, 1) + relativedelta(months=delta)
    return d.month, d.year


def is_interacted(habit: Habit, date: datetime.date) -> bool:
    """True if ``habit`` has an interaction marked done on the calendar day of ``date``."""
    day = to_date(date)
    return any(i.day == day and i.interacted for i in habit.daily_interactions)


def interaction_calendar(habit: Habit, month: int, year: int) -> List[Tuple[datetime.date, bool]]:
    """Each day of the month paired with whether ``habit`` was done that day."""
    done = {i.day for i in habit.daily_interactions if i.interacted}
    return [(d, d in done) for d in days_in_month(month, year)]
