"""
Core package for DailyTracker providing the tracking store and its persistence.

This package includes:

- :mod:`DailyTracker.core.models` – Habit, task, calorie and finance records and their dict codecs.
- :mod:`DailyTracker.core.codec` – Collection keys and byte-level encode/decode of whole collections.
- :mod:`DailyTracker.core.kvstore` – QSettings-backed key-value area holding the encoded collections.
- :mod:`DailyTracker.core.store` – The observable :class:`~DailyTracker.core.store.TrackingStore`.
- :mod:`DailyTracker.core.calendar` – Week strips, days of a month or year, interaction lookups.
- :mod:`DailyTracker.core.context` – The application context built once at startup.
"""
