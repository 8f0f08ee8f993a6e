"""Application context built once at startup and handed to every consumer."""
import datetime
import logging
from dataclasses import dataclass
from typing import List, Optional

from . import calendar
from .kvstore import KeyValueStore
from .store import TrackingStore
from ..log import log
from ..settings import lib
from ..status import status


@dataclass
class AppContext:
    """Everything a presentation layer needs, created by :func:`create_context`."""
    settings: lib.SettingsAPI
    kvstore: KeyValueStore
    store: TrackingStore

    @property
    def locale(self) -> str:
        return self.settings['locale']

    @property
    def week_strip_length(self) -> int:
        return self.settings['week_strip_length']

    def week_strip(self, date: datetime.date) -> List[datetime.date]:
        """Week strip days for ``date`` using the configured locale and length."""
        return calendar.week_strip(date, self.locale, self.week_strip_length)

    def week_strip_cells(self, date: datetime.date) -> List[calendar.DayCell]:
        return calendar.week_strip_cells(date, self.locale, self.week_strip_length)


def _load_settings(app_data_dir: Optional[str]) -> lib.SettingsAPI:
    try:
        return lib.SettingsAPI(app_data_dir=app_data_dir)
    except status.SettingsInvalidException:
        logging.warning('Reverting invalid settings to defaults.')
        lib.ConfigPaths(app_data_dir=app_data_dir).revert_settings_to_default()
        return lib.SettingsAPI(app_data_dir=app_data_dir)


def create_context(app_data_dir: Optional[str] = None) -> AppContext:
    """Build the settings, key-value store and tracking store, and load saved data.

    Args:
        app_data_dir: Optional directory to use instead of the platform app data location.

    Returns:
        AppContext: The ready-to-use context.
    """
    settings = _load_settings(app_data_dir)
    log.set_logging_level(log.level_from_name(settings['log_level']))

    kvstore = KeyValueStore(settings.store_path)
    store = TrackingStore(kvstore)
    store.load()

    return AppContext(settings=settings, kvstore=kvstore, store=store)
