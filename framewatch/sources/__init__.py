"""Tick sources and refresh rate reporters for the frame rate tracker."""

from .tk_tick_source import TkTickSource
from .frequency import FixedFrequencyReporter, SettingsFrequencyReporter

__all__ = [
    "TkTickSource",
    "FixedFrequencyReporter",
    "SettingsFrequencyReporter",
]
