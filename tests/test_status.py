"""
Tests for DailyTracker.status.status.
"""
from DailyTracker.status import status
from DailyTracker.ui.actions import signals
from tests.base import BaseTestCase, SignalRecorder


class StatusTests(BaseTestCase):
    def test_every_status_has_a_message(self):
        for s in status.Status:
            self.assertIn(s, status.STATUS_MESSAGE)
            self.assertEqual(status.get_message(s), status.STATUS_MESSAGE[s])

    def test_exception_message_and_signal(self):
        received = SignalRecorder()
        signals.error.connect(received)
        try:
            ex = status.SettingsInvalidException('"locale" is missing')
        finally:
            signals.error.disconnect(received)

        self.assertEqual(ex.status, status.Status.SettingsInvalid)
        self.assertTrue(str(ex).startswith(status.get_message(status.Status.SettingsInvalid)))
        self.assertIn('"locale" is missing', str(ex))
        self.assertEqual(received.calls, [('"locale" is missing',)])

    def test_store_exceptions_are_not_shown_to_the_user(self):
        received = SignalRecorder()
        signals.error.connect(received)
        try:
            decode_ex = status.StoreDecodeException('"habits" is not valid JSON')
            encode_ex = status.StoreEncodeException('Could not encode "financialData"')
        finally:
            signals.error.disconnect(received)

        self.assertIn('"habits" is not valid JSON', str(decode_ex))
        self.assertEqual(encode_ex.status, status.Status.StoreEncodeFailed)
        self.assertEqual(received.calls, [])

    def test_exception_without_message(self):
        ex = status.StoreEncodeException()
        self.assertEqual(str(ex), status.get_message(status.Status.StoreEncodeFailed))
