"""Unittest base class for creating a clean test environment."""
import logging
import shutil
import tempfile
import unittest
from contextlib import contextmanager

from PySide6 import QtCore

from DailyTracker.core.context import AppContext, create_context
from DailyTracker.core.kvstore import KeyValueStore
from DailyTracker.core.store import TrackingStore


@contextmanager
def mute_signals(obj=None):
    """Block every signal of ``obj`` (the app-wide signals by default) inside the block."""
    if obj is None:
        from DailyTracker.ui.actions import signals
        obj = signals
    blocker = QtCore.QSignalBlocker(obj)
    try:
        yield
    finally:
        blocker.unblock()


class SignalRecorder:
    """Collects the arguments of every emission of the signals it is connected to."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)

    def __len__(self):
        return len(self.calls)


class BaseTestCase(unittest.TestCase):
    """Base test case that builds a fresh context in a temporary app data directory."""

    tmp_dir: str
    context: AppContext
    store: TrackingStore

    def setUp(self) -> None:
        if not QtCore.QCoreApplication.instance():
            QtCore.QCoreApplication([])
            logging.debug('QCoreApplication initialized for tests.')

        self.tmp_dir = tempfile.mkdtemp(prefix='dailytracker_test_')
        logging.debug(f'Created test app data directory at {self.tmp_dir}')

        self.context = create_context(app_data_dir=self.tmp_dir)
        self.store = self.context.store

    def tearDown(self) -> None:
        shutil.rmtree(self.tmp_dir, ignore_errors=True)
        logging.debug(f'Removed test app data directory {self.tmp_dir}')

    def reload_store(self) -> TrackingStore:
        """Return a new store hydrated from the same key-value file, as after a restart."""
        store = TrackingStore(KeyValueStore(self.context.settings.store_path))
        store.load()
        return store
