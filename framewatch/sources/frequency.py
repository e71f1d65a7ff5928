"""Refresh rate reporters.

Tk cannot query the display refresh rate, so the rate comes either from
the host application or from the user settings.
"""

import math

from ..constants import MonitorConstants
from ..utils.settings_manager import SettingsManager


class FixedFrequencyReporter:
    """Reports a refresh rate set by the host application."""

    def __init__(self, frequency_hz: float = MonitorConstants.DEFAULT_REFRESH_RATE_HZ):
        self._frequency_hz = self._validate(frequency_hz)

    @staticmethod
    def _validate(frequency_hz: float) -> float:
        frequency_hz = float(frequency_hz)
        if not (frequency_hz > 0 and math.isfinite(frequency_hz)):
            raise ValueError(f"Refresh rate must be positive, got {frequency_hz}")
        return frequency_hz

    def set_frequency(self, frequency_hz: float) -> None:
        """Report a new refresh rate, e.g. after a display mode change."""
        self._frequency_hz = self._validate(frequency_hz)

    def current_nominal_frequency(self) -> float:
        return self._frequency_hz


class SettingsFrequencyReporter:
    """Reads ``refresh_rate_hz`` from the settings on every call."""

    def __init__(self, settings_manager: SettingsManager):
        self.settings_manager = settings_manager

    def current_nominal_frequency(self) -> float:
        value = self.settings_manager.get_setting("refresh_rate_hz", 0.0)
        try:
            return float(value)
        except (TypeError, ValueError):
            # Unusable rates are ignored by the tracker
            return 0.0
