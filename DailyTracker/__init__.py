"""
DailyTracker: personal tracking of habits, to-do tasks, calorie intake and monthly finances.

This package provides:

- :mod:`DailyTracker.core` – The observable tracking store, its models, persistence and calendar helpers.
- :mod:`DailyTracker.ui` – Application-wide signals and the slots that turn user input into store mutations.
- :mod:`DailyTracker.settings` – Application paths, user settings and locale conventions.
- :mod:`DailyTracker.log` – Logging setup with an in-memory log tank.
- :mod:`DailyTracker.status` – Status codes and exceptions.

Use :func:`DailyTracker.create_context` to build the application context.
"""

import sys

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('DailyTracker requires Python 3.11 or higher.')

__version__ = '0.1.0'
__description__ = 'DailyTracker: personal tracking of habits, tasks, calorie intake and finances.'

from .log import log

log.setup_logging()


def create_context(app_data_dir=None):
    """Build the application context and load saved data.

    See :func:`DailyTracker.core.context.create_context`.
    """
    from .core import context
    return context.create_context(app_data_dir=app_data_dir)
