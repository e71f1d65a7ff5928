"""Tests for TkTickSource."""

import tkinter as tk
import unittest
from unittest.mock import Mock, patch

from framewatch.sources.tk_tick_source import TkTickSource


class TestTkTickSource(unittest.TestCase):
    """Test cases for TkTickSource using a mock widget."""

    def setUp(self):
        """Set up test fixtures."""
        self.widget = Mock()
        self.widget.after = Mock(side_effect=["after#1", "after#2", "after#3"])
        self.reporter = Mock()
        self.reporter.current_nominal_frequency = Mock(return_value=60.0)
        self.source = TkTickSource(self.widget, self.reporter)

    def test_interval_from_rate(self):
        self.assertEqual(self.source.interval_ms(), 16)

        self.reporter.current_nominal_frequency.return_value = 144.0
        self.assertEqual(self.source.interval_ms(), 6)

        self.reporter.current_nominal_frequency.return_value = 5000.0
        self.assertEqual(self.source.interval_ms(), 1)

    def test_interval_fallback(self):
        """Unusable or missing rates fall back to the default interval."""
        self.reporter.current_nominal_frequency.return_value = 0.0
        self.assertEqual(self.source.interval_ms(), 16)

        source = TkTickSource(self.widget, default_interval_ms=40)
        self.assertEqual(source.interval_ms(), 40)

    def test_register_schedules_after(self):
        callback = Mock()

        self.source.register(callback)

        self.widget.after.assert_called_once()
        delay, func = self.widget.after.call_args[0]
        self.assertEqual(delay, 16)
        self.assertTrue(callable(func))
        self.assertTrue(self.source.is_pending)

    @patch("framewatch.sources.tk_tick_source.time.monotonic_ns", return_value=123456789)
    def test_fire_passes_timestamp(self, mock_clock):
        """The scheduled function calls back with a monotonic timestamp."""
        callback = Mock()
        self.source.register(callback)
        fire = self.widget.after.call_args[0][1]

        fire()

        callback.assert_called_once_with(123456789)
        self.assertFalse(self.source.is_pending)

    def test_callback_can_reregister(self):
        """A callback re-arming itself from inside the tick gets a new slot."""
        callback = Mock(side_effect=lambda ts: self.source.register(callback))
        self.source.register(callback)

        self.widget.after.call_args[0][1]()

        self.assertEqual(self.widget.after.call_count, 2)
        self.assertTrue(self.source.is_pending)
        self.widget.after_cancel.assert_not_called()

    def test_register_replaces_pending(self):
        """At most one registration is pending at a time."""
        callback = Mock()
        self.source.register(callback)
        self.source.register(callback)

        self.widget.after_cancel.assert_called_once_with("after#1")
        self.assertEqual(self.widget.after.call_count, 2)

    def test_deregister_cancels(self):
        callback = Mock()
        self.source.register(callback)

        self.source.deregister(callback)

        self.widget.after_cancel.assert_called_once_with("after#1")
        self.assertFalse(self.source.is_pending)

    def test_deregister_without_register(self):
        self.source.deregister(Mock())

        self.widget.after_cancel.assert_not_called()

    def test_deregister_other_callback_keeps_pending(self):
        callback = Mock()
        self.source.register(callback)

        self.source.deregister(Mock())

        self.widget.after_cancel.assert_not_called()
        self.assertTrue(self.source.is_pending)

    def test_deregister_tolerates_tk_errors(self):
        """Errors from after_cancel (e.g. destroyed widget) are swallowed."""
        callback = Mock()
        self.source.register(callback)
        self.widget.after_cancel.side_effect = tk.TclError("application destroyed")

        self.source.deregister(callback)

        self.assertFalse(self.source.is_pending)

    def test_cancelled_tick_does_not_fire(self):
        callback = Mock()
        self.source.register(callback)
        fire = self.widget.after.call_args[0][1]
        self.source.deregister(callback)

        # Tk would not run it, but a late run must still be harmless
        fire()

        callback.assert_not_called()


if __name__ == "__main__":
    unittest.main()
