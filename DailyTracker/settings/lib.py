"""Settings library for application paths and user settings.

Provides:
    - ConfigPaths: the application data directory and the files kept in it.
    - Schema validation and enforcement for settings.json.
    - SettingsAPI: loading, saving and reverting the user settings.
"""

import copy
import json
import logging
import pathlib
from typing import Dict, Any, Optional, List

from PySide6 import QtCore

from ..log.log import LOG_LEVELS
from .locale import LOCALE_MAP
from ..status import status

app_name: str = 'DailyTracker'

SETTINGS_KEYS: List[str] = [
    'locale',
    'week_strip_length',
    'log_level',
]

SETTINGS_SCHEMA: Dict[str, Any] = {
    'locale': {'type': str, 'required': True, 'allowed_values': LOCALE_MAP},
    'week_strip_length': {'type': int, 'required': True, 'min': 1},
    'log_level': {'type': str, 'required': True, 'allowed_values': list(LOG_LEVELS)},
}

DEFAULT_SETTINGS: Dict[str, Any] = {
    'locale': 'en_US',
    'week_strip_length': 8,
    'log_level': 'INFO',
}


def validate_settings(data: Dict[str, Any]) -> None:
    """Validate settings data against :data:`SETTINGS_SCHEMA`.

    Args:
        data: Settings dictionary to check.

    Raises:
        TypeError: If data is not a dict or a value has the wrong type.
        ValueError: If a required key is missing or a value is out of range.
    """
    if not isinstance(data, dict):
        msg: str = 'Settings must be a dict.'
        logging.error(msg)
        raise TypeError(msg)

    for key, specs in SETTINGS_SCHEMA.items():
        if specs.get('required') and key not in data:
            msg = f'Missing required setting: {key}'
            logging.error(msg)
            raise ValueError(msg)

        v = data[key]
        # bool is a subclass of int
        if not isinstance(v, specs['type']) or isinstance(v, bool):
            msg = f'Setting "{key}" must be {specs["type"]}, got {type(v)}.'
            logging.error(msg)
            raise TypeError(msg)

        if 'min' in specs and v < specs['min']:
            msg = f'Setting "{key}" must be at least {specs["min"]}, got {v}.'
            logging.error(msg)
            raise ValueError(msg)

        if 'allowed_values' in specs and v not in specs['allowed_values']:
            msg = f'Setting "{key}" must be one of {specs["allowed_values"]}, got "{v}".'
            logging.error(msg)
            raise ValueError(msg)


class ConfigPaths:
    """Manage application file paths and ensure default files and directories exist.

    The application data directory defaults to Qt's writable AppDataLocation and
    can be overridden, e.g. to point tests at a temporary directory.
    """

    def __init__(self, app_data_dir: Optional[str] = None) -> None:
        """Set up application paths and ensure required directories and files exist.

        Args:
            app_data_dir: Optional directory to use instead of the platform app data location.
        """
        if app_data_dir is None:
            QtCore.QCoreApplication.setApplicationName(app_name)
            QtCore.QCoreApplication.setOrganizationName('')
            logging.debug(f'Setting application name: {app_name}')

            p = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.AppDataLocation)
            app_data_dir = p

        self.app_data_dir: pathlib.Path = pathlib.Path(app_data_dir)
        logging.debug(f'Using app data directory: {self.app_data_dir}')

        self.config_dir: pathlib.Path = self.app_data_dir / 'config'
        self.db_dir: pathlib.Path = self.app_data_dir / 'db'

        self.settings_path: pathlib.Path = self.config_dir / 'settings.json'
        self.store_path: pathlib.Path = self.db_dir / 'store.ini'

        self._verify_and_prepare()

    def _verify_and_prepare(self) -> None:
        """Create missing directories and write default settings if absent."""
        if not self.config_dir.exists():
            logging.debug(f'Creating config directory: {self.config_dir}')
            self.config_dir.mkdir(parents=True, exist_ok=True)

        if not self.db_dir.exists():
            logging.debug(f'Creating db directory: {self.db_dir}')
            self.db_dir.mkdir(parents=True, exist_ok=True)

        if not self.settings_path.exists():
            logging.debug(f'Writing default settings to {self.settings_path}')
            self.revert_settings_to_default()

    def revert_settings_to_default(self) -> None:
        """Overwrite settings.json with :data:`DEFAULT_SETTINGS`."""
        with self.settings_path.open('w', encoding='utf-8') as f:
            json.dump(DEFAULT_SETTINGS, f, indent=4, ensure_ascii=False)


class SettingsAPI(ConfigPaths):
    """
    Provides dictionary-style access to the user settings stored in settings.json.
    """

    def __init__(self, app_data_dir: Optional[str] = None) -> None:
        """Initialize SettingsAPI and load the settings file.

        Args:
            app_data_dir: Optional directory to use instead of the platform app data location.

        Raises:
            status.SettingsInvalidException: If settings.json cannot be parsed or validated.
        """
        super().__init__(app_data_dir=app_data_dir)

        self._signals_blocked: bool = False
        self.data: Dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)

        self.load()

    def __getitem__(self, key: str) -> Any:
        """Retrieve a setting value.

        Raises:
            KeyError: If key is not in SETTINGS_KEYS.
        """
        if key not in SETTINGS_KEYS:
            raise KeyError(f'Invalid settings key: {key}, must be one of {SETTINGS_KEYS}')
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        """Assign a setting value, persist it and emit ``settingChanged``.

        Args:
            key: Setting key to set.
            value: Value to assign. Converted to the schema type when possible.

        Raises:
            KeyError: If key is not in SETTINGS_KEYS.
            ValueError: If the value cannot be converted or fails validation.
            TypeError: If the value has the wrong type after conversion.
        """
        if key not in SETTINGS_KEYS:
            raise KeyError(f'Invalid settings key: {key}, must be one of {SETTINGS_KEYS}')

        _type = SETTINGS_SCHEMA[key]['type']
        if not isinstance(value, _type):
            logging.warning(f'Setting "{key}" is not of type {_type}, got {type(value)}.')

            # Try to convert to the expected type
            if _type == str:
                value = str(value)
            elif _type == int:
                try:
                    value = int(value)
                except ValueError:
                    logging.error(f'Cannot convert "{value}" to int.')
                    raise

        new_data = dict(self.data)
        new_data[key] = value
        validate_settings(new_data)

        self.data = new_data
        self.save()

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        signals.settingChanged.emit(key, value)

    def block_signals(self, v: bool) -> None:
        """Enable or disable emission of ``settingChanged``.

        Args:
            v: True to block signals, False to allow signals to emit.
        """
        self._signals_blocked = v

    def load(self) -> Dict[str, Any]:
        """Load settings.json from disk and validate it.

        Returns:
            The loaded settings dictionary.

        Raises:
            status.SettingsNotFoundException: If settings.json is missing.
            status.SettingsInvalidException: If JSON parsing or validation fails.
        """
        logging.debug(f'Loading settings from "{self.settings_path}"')
        if not self.settings_path.exists():
            raise status.SettingsNotFoundException

        try:
            with self.settings_path.open('r', encoding='utf-8') as f:
                data: Dict[str, Any] = json.load(f)
            validate_settings(data)
        except (ValueError, TypeError) as ex:
            raise status.SettingsInvalidException(str(ex)) from ex

        self.data = {k: data[k] for k in SETTINGS_KEYS}
        return self.data

    def save(self) -> None:
        """Persist the current settings to settings.json."""
        logging.debug(f'Saving settings to "{self.settings_path}"')
        validate_settings(self.data)
        with self.settings_path.open('w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=4, ensure_ascii=False)

    def revert(self) -> None:
        """Restore the default settings, save them and emit ``settingChanged`` for each key."""
        logging.debug('Reverting settings to defaults.')
        self.data = copy.deepcopy(DEFAULT_SETTINGS)
        self.save()

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        for k, v in self.data.items():
            signals.settingChanged.emit(k, v)
