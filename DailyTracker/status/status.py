"""Status definitions and exceptions for DailyTracker.

This module provides:
    - Status: enumeration of possible application states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - Specific exceptions (e.g., StoreDecodeException) raised by the store and settings
"""
import enum
import logging
from typing import Dict


class Status(enum.StrEnum):
    """Enumeration of application status codes."""
    UnknownStatus = enum.auto()
    Okay = enum.auto()

    # Settings status
    SettingsNotFound = enum.auto()
    SettingsInvalid = enum.auto()

    # Persisted collection status
    StoreDecodeFailed = enum.auto()
    StoreEncodeFailed = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Unknown status.',
    Status.Okay: 'Everything is okay.',

    Status.SettingsNotFound: 'Could not find the settings file.',
    Status.SettingsInvalid: 'The settings file seems to be incomplete, or contains invalid values.',

    Status.StoreDecodeFailed: 'Could not read saved data. Falling back to an empty collection.',
    Status.StoreEncodeFailed: 'Could not save data. The change will be lost when the app closes.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in DailyTracker.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.
        notify_user (bool): Whether the error is emitted on ``signals.error``. Store
            failures are recovered from and only logged.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus
    notify_user = True

    def __init__(self, message: str = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message} {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.error(exception_message)

        if self.notify_user:
            from ..ui.actions import signals
            signals.error.emit(message or self.status_message)


class UnknownException(BaseStatusException):
    """Exception for an unknown error during status processing."""
    pass


class SettingsNotFoundException(BaseStatusException):
    """Exception raised when the settings file cannot be found."""
    status = Status.SettingsNotFound


class SettingsInvalidException(BaseStatusException):
    """Exception raised when the settings file is invalid or malformed."""
    status = Status.SettingsInvalid


class StoreDecodeException(BaseStatusException):
    """Exception raised when a persisted collection cannot be decoded."""
    status = Status.StoreDecodeFailed
    notify_user = False


class StoreEncodeException(BaseStatusException):
    """Exception raised when a collection cannot be encoded for persistence."""
    status = Status.StoreEncodeFailed
    notify_user = False
