"""
Settings package: configuration paths, user settings and locale conventions.

This package provides:

- :mod:`DailyTracker.settings.lib` – Application paths, settings schema validation and persistence.
- :mod:`DailyTracker.settings.locale` – Localization utilities for formatting and week conventions.
"""
