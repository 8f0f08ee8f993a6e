"""The tracking store: habits, tasks, calorie data and finances.

:class:`TrackingStore` owns every in-memory collection. Each mutation updates
memory, re-encodes the whole owning collection, overwrites its entry in the
:class:`~DailyTracker.core.kvstore.KeyValueStore` and then emits change
signals. Reads hand out copies, so the store is the only mutator.

Persisted data that cannot be decoded never stops the application: the
collection falls back to its zero value and the cause is kept in
:attr:`TrackingStore.load_results`. Writes that cannot be encoded are logged
and dropped.
"""
import copy
import datetime
import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from PySide6 import QtCore

from . import codec
from .codec import Collection
from .kvstore import KeyValueStore
from .models import (
    CalorieData,
    CalorieGoal,
    DailyInteraction,
    FinancialData,
    Habit,
    Task,
    to_date,
)
from ..status import status


class LoadState(enum.StrEnum):
    """Outcome of hydrating one collection."""
    Loaded = 'loaded from storage'
    Missing = 'nothing stored yet'
    Defaulted = 'defaulted after a decode failure'


@dataclass(frozen=True)
class LoadResult:
    """What happened when a collection was read back at startup.

    Attributes:
        key: The collection.
        state: Whether the value was loaded, missing, or replaced by the default.
        value: The value the collection now holds.
        error: The decode failure when ``state`` is ``Defaulted``.
    """
    key: Collection
    state: LoadState
    value: Any
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.state != LoadState.Defaulted


class TrackingStore(QtCore.QObject):
    """Observable store of every tracked collection.

    Consumers connect to the change signals, or call :meth:`subscribe` to be
    told which collection changed.

    Args:
        kvstore: Key-value area the collections are mirrored to.
        parent: Optional Qt parent.
    """
    collectionChanged = QtCore.Signal(str)  # Collection key

    habitsChanged = QtCore.Signal(object)  # List[Habit]
    tasksChanged = QtCore.Signal(object)  # List[Task]
    calorieGoalChanged = QtCore.Signal(object)  # CalorieGoal
    calorieDataChanged = QtCore.Signal(object)  # CalorieData
    financialDataChanged = QtCore.Signal(object)  # FinancialData

    persistFailed = QtCore.Signal(str, str)  # Collection key, message

    def __init__(self, kvstore: KeyValueStore, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent)
        self._kvstore = kvstore
        self._data: Dict[Collection, Any] = {key: codec.default_value(key) for key in Collection}
        self.load_results: Dict[Collection, LoadResult] = {}

        self._changed_signals = {
            Collection.Habits: self.habitsChanged,
            Collection.Tasks: self.tasksChanged,
            Collection.CalorieGoal: self.calorieGoalChanged,
            Collection.CalorieData: self.calorieDataChanged,
            Collection.FinancialData: self.financialDataChanged,
        }

    # Observers

    def subscribe(self, slot: Callable[[str], None]) -> None:
        """Call ``slot`` with the collection key after every change."""
        self.collectionChanged.connect(slot)

    def unsubscribe(self, slot: Callable[[str], None]) -> None:
        self.collectionChanged.disconnect(slot)

    # Snapshots

    @property
    def habits(self) -> List[Habit]:
        return copy.deepcopy(self._data[Collection.Habits])

    @property
    def tasks(self) -> List[Task]:
        return copy.deepcopy(self._data[Collection.Tasks])

    @property
    def calorie_goal(self) -> CalorieGoal:
        return copy.deepcopy(self._data[Collection.CalorieGoal])

    @property
    def calorie_data(self) -> CalorieData:
        return copy.deepcopy(self._data[Collection.CalorieData])

    @property
    def financial_data(self) -> FinancialData:
        return copy.deepcopy(self._data[Collection.FinancialData])

    def habit(self, habit_id: uuid.UUID) -> Optional[Habit]:
        h = self._find_habit(habit_id)
        return copy.deepcopy(h) if h else None

    def task(self, task_id: uuid.UUID) -> Optional[Task]:
        t = next((t for t in self._data[Collection.Tasks] if t.id == task_id), None)
        return copy.deepcopy(t) if t else None

    def interaction_state(self, habit_id: uuid.UUID, date: datetime.date) -> bool:
        """Whether ``habit_id`` is marked done on the calendar day of ``date``."""
        h = self._find_habit(habit_id)
        if h is None:
            return False
        entry = h.interaction_for(date)
        return bool(entry and entry.interacted)

    # Loading

    def load(self) -> Dict[Collection, LoadResult]:
        """Hydrate every collection from the key-value store.

        Never raises for bad stored data: undecodable collections keep their
        zero value and are reported as ``LoadState.Defaulted``.

        Returns:
            dict: The :class:`LoadResult` of each collection.
        """
        for key in Collection:
            result = self._load_collection(key)
            self._data[key] = result.value
            self.load_results[key] = result
            logging.info(f'Collection "{key}": {result.state.value}')

        for key in Collection:
            self._emit_changed(key)
        return dict(self.load_results)

    def _load_collection(self, key: Collection) -> LoadResult:
        try:
            data = self._kvstore.get(key)
        except TypeError as ex:
            logging.error(f'Could not read "{key}": {ex}')
            return LoadResult(key, LoadState.Defaulted, codec.default_value(key), ex)

        if data is None:
            return LoadResult(key, LoadState.Missing, codec.default_value(key))

        try:
            value = codec.decode(key, data)
        except status.StoreDecodeException as ex:
            logging.warning(f'Using an empty "{key}" collection.')
            return LoadResult(key, LoadState.Defaulted, codec.default_value(key), ex)

        return LoadResult(key, LoadState.Loaded, value)

    # Persistence

    def _persist(self, key: Collection) -> bool:
        """Re-encode and overwrite one collection. Returns False if the write was dropped."""
        try:
            data = codec.encode(key, self._data[key])
            self._kvstore.set(key, data)
        except status.StoreEncodeException as ex:
            self.persistFailed.emit(str(key), str(ex))
            return False
        except (OSError, TypeError) as ex:
            logging.error(f'Could not write "{key}": {ex}')
            self.persistFailed.emit(str(key), str(ex))
            return False

        logging.debug(f'Saved "{key}" ({len(data)} bytes)')
        return True

    def _emit_changed(self, key: Collection) -> None:
        self._changed_signals[key].emit(copy.deepcopy(self._data[key]))
        self.collectionChanged.emit(str(key))

    def _commit(self, *keys: Collection) -> None:
        for key in keys:
            self._persist(key)
        for key in keys:
            self._emit_changed(key)

    # Habits

    def _find_habit(self, habit_id: uuid.UUID) -> Optional[Habit]:
        return next((h for h in self._data[Collection.Habits] if h.id == habit_id), None)

    def add_habit(self, name: str) -> Habit:
        """Append a new habit with no interactions.

        Returns:
            Habit: A copy of the new habit.
        """
        habit = Habit(name=name)
        self._data[Collection.Habits].append(habit)
        self._commit(Collection.Habits)
        return copy.deepcopy(habit)

    def toggle_interaction(self, habit_id: uuid.UUID, date: datetime.date) -> bool:
        """Flip the habit's interaction for the calendar day of ``date``.

        The first toggle of a day records it as done. Later toggles flip the
        existing entry.

        Returns:
            bool: False if no habit has ``habit_id``.
        """
        habit = self._find_habit(habit_id)
        if habit is None:
            logging.debug(f'toggle_interaction: no habit with id {habit_id}')
            return False

        entry = habit.interaction_for(date)
        if entry is not None:
            entry.interacted = not entry.interacted
        else:
            habit.daily_interactions.append(DailyInteraction(day=to_date(date), interacted=True))

        self._commit(Collection.Habits)
        return True

    def delete_habit(self, habit_id: uuid.UUID) -> bool:
        habits = self._data[Collection.Habits]
        habit = self._find_habit(habit_id)
        if habit is None:
            return False

        habits.remove(habit)
        self._commit(Collection.Habits)
        return True

    # Tasks

    def add_task(self, title: str, note: str = '') -> Task:
        task = Task(title=title, note=note)
        self._data[Collection.Tasks].append(task)
        self._commit(Collection.Tasks)
        return copy.deepcopy(task)

    def remove_tasks(self, indices: Iterable[int]) -> None:
        """Remove the tasks at the given positions in one batch.

        Positions refer to the list before any removal, so their order does
        not matter.

        Raises:
            IndexError: If a position is outside the task list. Nothing is removed.
        """
        tasks = self._data[Collection.Tasks]
        positions = set(indices)
        bad = sorted(i for i in positions if not 0 <= i < len(tasks))
        if bad:
            raise IndexError(f'Task positions out of range: {bad}')

        self._data[Collection.Tasks] = [t for i, t in enumerate(tasks) if i not in positions]
        self._commit(Collection.Tasks)

    def update_task(self, task: Task) -> bool:
        """Replace the stored task that has ``task.id``.

        Returns:
            bool: False if no task has that id.
        """
        tasks = self._data[Collection.Tasks]
        for i, t in enumerate(tasks):
            if t.id == task.id:
                tasks[i] = copy.deepcopy(task)
                self._commit(Collection.Tasks)
                return True
        return False

    # Calories

    def set_calorie_goal(self, goal: int) -> None:
        self._data[Collection.CalorieGoal].daily_goal = goal
        self._data[Collection.CalorieData].goal = goal
        self._commit(Collection.CalorieGoal, Collection.CalorieData)

    def add_consumed_calories(self, n: int) -> None:
        self._data[Collection.CalorieData].consumed += n
        self._commit(Collection.CalorieData)

    def add_burned_calories(self, n: int) -> None:
        self._data[Collection.CalorieData].burned += n
        self._commit(Collection.CalorieData)

    def reset_today(self) -> None:
        """Zero consumed and burned calories. The goal is kept."""
        data = self._data[Collection.CalorieData]
        data.consumed = 0
        data.burned = 0
        self._commit(Collection.CalorieData)

    # Finances

    def set_monthly_income(self, amount: float) -> None:
        self._data[Collection.FinancialData].monthly_income = amount
        self._commit(Collection.FinancialData)
