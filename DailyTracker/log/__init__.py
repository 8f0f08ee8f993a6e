"""
Logging subsystem for application logging.

Modules:

- :mod:`DailyTracker.log.log` – Log handler integrating Python logging, Qt messages and an in-memory log tank.
"""
