"""Byte-level encoding of whole collections.

Each collection is written as UTF-8 JSON: a list of records for habits and
tasks, a single object for the calorie goal, calorie data and financial data.
There is no schema version; records written with a different field set fail
to decode.
"""
import enum
import json
import logging
from typing import Any, Dict

from . import models
from ..status import status


class Collection(enum.StrEnum):
    """Top-level persisted collections, valued by their storage key."""
    Habits = 'habits'
    Tasks = 'tasks'
    CalorieGoal = 'calorieGoal'
    FinancialData = 'financialData'
    CalorieData = 'calorieData'


LIST_COLLECTIONS: Dict[Collection, type] = {
    Collection.Habits: models.Habit,
    Collection.Tasks: models.Task,
}

RECORD_COLLECTIONS: Dict[Collection, type] = {
    Collection.CalorieGoal: models.CalorieGoal,
    Collection.FinancialData: models.FinancialData,
    Collection.CalorieData: models.CalorieData,
}


def default_value(key: Collection) -> Any:
    """The zero value of a collection: an empty list or a zeroed record."""
    key = Collection(key)
    if key in LIST_COLLECTIONS:
        return []
    return RECORD_COLLECTIONS[key]()


def encode(key: Collection, value: Any) -> bytes:
    """Encode a whole collection.

    Args:
        key: The collection being encoded.
        value: A list of records, or a single record.

    Returns:
        bytes: UTF-8 encoded JSON.

    Raises:
        status.StoreEncodeException: If the value cannot be serialized, e.g. it holds NaN.
    """
    key = Collection(key)
    try:
        if key in LIST_COLLECTIONS:
            payload = [item.to_dict() for item in value]
        else:
            payload = value.to_dict()
        return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode('utf-8')
    except (TypeError, ValueError, AttributeError) as ex:
        raise status.StoreEncodeException(f'Could not encode "{key}": {ex}') from ex


def decode(key: Collection, data: bytes) -> Any:
    """Decode a whole collection written by :func:`encode`.

    Raises:
        status.StoreDecodeException: If the bytes are not valid JSON or do not match the record schema.
    """
    key = Collection(key)
    try:
        payload = json.loads(data.decode('utf-8'))
    except ValueError as ex:
        raise status.StoreDecodeException(f'"{key}" is not valid JSON: {ex}') from ex

    if key in LIST_COLLECTIONS:
        if not isinstance(payload, list):
            raise status.StoreDecodeException(f'"{key}" must be a list, got {type(payload).__name__}.')
        cls = LIST_COLLECTIONS[key]
        value = [cls.from_dict(item) for item in payload]
        ids = [item.id for item in value]
        if len(ids) != len(set(ids)):
            raise status.StoreDecodeException(f'"{key}" contains duplicate ids.')
    else:
        value = RECORD_COLLECTIONS[key].from_dict(payload)

    logging.debug(f'Decoded "{key}" ({len(data)} bytes)')
    return value
