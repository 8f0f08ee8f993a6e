"""Local key-value area used to mirror the tracking store.

Values are opaque byte blobs addressed by string keys, kept in an INI file
through :class:`QtCore.QSettings`. Every write is synced to disk before the
call returns.
"""
import logging
import pathlib
from typing import List, Optional, Union

from PySide6 import QtCore


class KeyValueStore:
    """String key to bytes mapping persisted with QSettings.

    Args:
        path: Location of the INI file backing the store.
    """

    def __init__(self, path: Union[str, pathlib.Path]) -> None:
        self.path: pathlib.Path = pathlib.Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self._settings = QtCore.QSettings(str(self.path), QtCore.QSettings.IniFormat)
        logging.debug(f'Opened key-value store at "{self.path}"')

    def contains(self, key: str) -> bool:
        return self._settings.contains(key)

    def keys(self) -> List[str]:
        return list(self._settings.allKeys())

    def get(self, key: str) -> Optional[bytes]:
        """Return the bytes stored under ``key``, or None if the key is absent.

        Raises:
            TypeError: If the stored value is not a byte or text blob.
        """
        if not self._settings.contains(key):
            return None

        value = self._settings.value(key)
        if isinstance(value, QtCore.QByteArray):
            return value.data()
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode('utf-8')
        raise TypeError(f'Value stored under "{key}" is not a byte blob, got {type(value)}.')

    def set(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any previous value.

        Raises:
            TypeError: If data is not bytes.
            OSError: If the backing file cannot be written.
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f'Expected bytes, got {type(data)}.')

        self._settings.setValue(key, QtCore.QByteArray(bytes(data)))
        self._sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync()

    def clear(self) -> None:
        self._settings.clear()
        self._sync()

    def _sync(self) -> None:
        self._settings.sync()
        if self._settings.status() != QtCore.QSettings.NoError:
            raise OSError(f'Could not write key-value store "{self.path}": {self._settings.status()}')
