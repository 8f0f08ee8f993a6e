"""
UI package: application-wide signals and the slots that turn user input into store mutations.

This package provides:

- :mod:`DailyTracker.ui.actions` – Application-wide Qt signals, input slots and display helpers.
"""
