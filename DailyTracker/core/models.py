"""Records tracked by DailyTracker.

Every record converts to and from a plain dict. Decoding is strict: a missing
field or a field of the wrong type raises
:class:`~DailyTracker.status.status.StoreDecodeException`. Unknown keys are ignored.
"""
import datetime
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Type

from ..status import status


def to_date(value: datetime.date) -> datetime.date:
    """Return the calendar day of a date or datetime."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise TypeError(f'Expected a date or datetime, got {type(value)}.')


def _get(data: Dict[str, Any], key: str, types: Tuple[Type, ...], entity: str) -> Any:
    if not isinstance(data, dict):
        raise status.StoreDecodeException(f'{entity} must be a dict, got {type(data).__name__}.')
    if key not in data:
        raise status.StoreDecodeException(f'{entity} is missing "{key}".')

    v = data[key]
    if isinstance(v, bool) and bool not in types:
        raise status.StoreDecodeException(f'{entity} field "{key}" must not be a bool.')
    if not isinstance(v, types):
        raise status.StoreDecodeException(
            f'{entity} field "{key}" must be {" or ".join(t.__name__ for t in types)}, got {type(v).__name__}.'
        )
    return v


def _put_int(value: Any, key: str, entity: str) -> int:
    # Only values from_dict reads back may be written
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'{entity} field "{key}" must be an int, got {type(value).__name__}.')
    return value


def _get_uuid(data: Dict[str, Any], entity: str) -> uuid.UUID:
    v = _get(data, 'id', (str,), entity)
    try:
        return uuid.UUID(v)
    except ValueError as ex:
        raise status.StoreDecodeException(f'{entity} has an invalid id "{v}".') from ex


@dataclass
class DailyInteraction:
    """Whether a habit was done on one calendar day."""
    day: datetime.date
    interacted: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {'day': self.day.isoformat(), 'interacted': self.interacted}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DailyInteraction':
        v = _get(data, 'day', (str,), 'DailyInteraction')
        try:
            # Accepts plain dates as well as full timestamps
            day = datetime.datetime.fromisoformat(v).date()
        except ValueError as ex:
            raise status.StoreDecodeException(f'DailyInteraction has an invalid day "{v}".') from ex
        return cls(day=day, interacted=_get(data, 'interacted', (bool,), 'DailyInteraction'))


@dataclass
class Habit:
    """A user-defined activity tracked per calendar day.

    ``daily_interactions`` holds at most one entry per calendar day.
    """
    name: str
    daily_interactions: List[DailyInteraction] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def interaction_for(self, day: datetime.date):
        """Return the entry recorded for the calendar day of ``day``, or None."""
        day = to_date(day)
        return next((i for i in self.daily_interactions if i.day == day), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': str(self.id),
            'name': self.name,
            'daily_interactions': [i.to_dict() for i in self.daily_interactions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Habit':
        items = _get(data, 'daily_interactions', (list,), 'Habit')
        interactions = [DailyInteraction.from_dict(i) for i in items]

        days = [i.day for i in interactions]
        if len(days) != len(set(days)):
            raise status.StoreDecodeException('Habit has more than one interaction for the same day.')

        return cls(
            id=_get_uuid(data, 'Habit'),
            name=_get(data, 'name', (str,), 'Habit'),
            daily_interactions=interactions,
        )


@dataclass
class Task:
    """A to-do item."""
    title: str
    note: str = ''
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': str(self.id), 'title': self.title, 'note': self.note}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        return cls(
            id=_get_uuid(data, 'Task'),
            title=_get(data, 'title', (str,), 'Task'),
            note=_get(data, 'note', (str,), 'Task'),
        )


@dataclass
class CalorieGoal:
    """Legacy record of the daily calorie goal, mirrored by :attr:`CalorieData.goal`."""
    daily_goal: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {'daily_goal': _put_int(self.daily_goal, 'daily_goal', 'CalorieGoal')}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalorieGoal':
        return cls(daily_goal=_get(data, 'daily_goal', (int,), 'CalorieGoal'))


@dataclass
class CalorieData:
    """Today's calorie goal and running totals."""
    goal: int = 0
    consumed: int = 0
    burned: int = 0

    @property
    def remaining(self) -> int:
        """Calories left for the day. Can be negative."""
        return self.goal - (self.consumed - self.burned)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'goal': _put_int(self.goal, 'goal', 'CalorieData'),
            'consumed': _put_int(self.consumed, 'consumed', 'CalorieData'),
            'burned': _put_int(self.burned, 'burned', 'CalorieData'),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalorieData':
        return cls(
            goal=_get(data, 'goal', (int,), 'CalorieData'),
            consumed=_get(data, 'consumed', (int,), 'CalorieData'),
            burned=_get(data, 'burned', (int,), 'CalorieData'),
        )


@dataclass
class FinancialData:
    monthly_income: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {'monthly_income': self.monthly_income}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinancialData':
        return cls(monthly_income=float(_get(data, 'monthly_income', (int, float), 'FinancialData')))
