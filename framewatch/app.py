"""Wiring for using the frame rate tracker inside a Tk application."""

import tkinter as tk
from typing import Optional

from .monitor import DiagnosticSink, FrameRateTracker
from .sources import SettingsFrequencyReporter, TkTickSource
from .utils.logging_setup import setup_logging
from .utils.settings_manager import SettingsManager


def create_tracker(
    widget: tk.Misc,
    settings_manager: Optional[SettingsManager] = None,
    sink: Optional[DiagnosticSink] = None,
    configure_logging: bool = False,
) -> FrameRateTracker:
    """Build a tracker that measures frames on the widget's event loop.

    The refresh rate is read from the settings on every refresh, so
    changing ``refresh_rate_hz`` and calling ``tracker.refresh_config()``
    (or restarting the tracker) picks up the new rate.

    Args:
        widget: Any Tk widget of the application to monitor
        settings_manager: Settings source (default: ~/.framewatch_settings)
        sink: Diagnostic sink (default: framewatch loggers)
        configure_logging: Also set up queued logging from the settings

    Returns:
        A tracker ready for start()
    """
    if settings_manager is None:
        settings_manager = SettingsManager()
    settings = settings_manager.settings

    if configure_logging:
        setup_logging(settings.log_level, settings.log_file)

    reporter = SettingsFrequencyReporter(settings_manager)
    tick_source = TkTickSource(
        widget, reporter, default_interval_ms=settings.default_interval_ms
    )
    return FrameRateTracker(
        reporter,
        tick_source,
        sink=sink,
        max_consecutive_logs=settings.max_consecutive_logs,
    )
