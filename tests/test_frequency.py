"""Tests for refresh rate reporters."""

import unittest
from unittest.mock import Mock

from framewatch.sources.frequency import FixedFrequencyReporter, SettingsFrequencyReporter


class TestFixedFrequencyReporter(unittest.TestCase):
    def test_default_rate(self):
        self.assertEqual(FixedFrequencyReporter().current_nominal_frequency(), 60.0)

    def test_set_frequency(self):
        reporter = FixedFrequencyReporter(60)
        reporter.set_frequency(120)

        self.assertEqual(reporter.current_nominal_frequency(), 120.0)

    def test_rejects_invalid_rates(self):
        for rate in (0, -30.0, float("nan"), float("inf")):
            with self.subTest(rate=rate):
                with self.assertRaises(ValueError):
                    FixedFrequencyReporter(rate)

        reporter = FixedFrequencyReporter(60)
        with self.assertRaises(ValueError):
            reporter.set_frequency(0)
        self.assertEqual(reporter.current_nominal_frequency(), 60.0)


class TestSettingsFrequencyReporter(unittest.TestCase):
    def setUp(self):
        self.settings_manager = Mock()
        self.reporter = SettingsFrequencyReporter(self.settings_manager)

    def test_reads_setting_on_each_call(self):
        self.settings_manager.get_setting = Mock(side_effect=[60.0, 144])

        self.assertEqual(self.reporter.current_nominal_frequency(), 60.0)
        self.assertEqual(self.reporter.current_nominal_frequency(), 144.0)
        self.settings_manager.get_setting.assert_called_with("refresh_rate_hz", 0.0)

    def test_unparsable_setting(self):
        for value in (None, "fast", [60]):
            with self.subTest(value=value):
                self.settings_manager.get_setting = Mock(return_value=value)
                self.assertEqual(self.reporter.current_nominal_frequency(), 0.0)

    def test_numeric_string(self):
        self.settings_manager.get_setting = Mock(return_value="75")

        self.assertEqual(self.reporter.current_nominal_frequency(), 75.0)


if __name__ == "__main__":
    unittest.main()
