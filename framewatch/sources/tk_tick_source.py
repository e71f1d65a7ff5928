"""Frame ticks driven by the Tk event loop."""

import logging
import math
import time
import tkinter as tk
from typing import Optional

from ..constants import MonitorConstants, TimeConstants
from ..monitor.interfaces import FrequencyReporter, TickCallback

log = logging.getLogger(__name__)


class TkTickSource:
    """Schedules one-shot frame callbacks with ``widget.after``.

    Tk has no vsync signal, so each registration waits one ideal frame
    interval at the reported refresh rate. When the event loop is busy the
    callback fires late, which is exactly what the tracker measures.
    """

    def __init__(
        self,
        widget: tk.Misc,
        frequency_reporter: Optional[FrequencyReporter] = None,
        default_interval_ms: int = MonitorConstants.DEFAULT_INTERVAL_MS,
    ):
        """Initialize the tick source.

        Args:
            widget: Any Tk widget; its ``after`` queue drives the ticks
            frequency_reporter: Optional refresh rate used to pace ticks
            default_interval_ms: Delay used when no usable rate is reported
        """
        self.widget = widget
        self.frequency_reporter = frequency_reporter
        self.default_interval_ms = max(MonitorConstants.MIN_INTERVAL_MS, default_interval_ms)
        self._after_id: Optional[str] = None
        self._callback: Optional[TickCallback] = None

    @property
    def is_pending(self) -> bool:
        return self._after_id is not None

    def interval_ms(self) -> int:
        """Delay before the next tick, derived from the current refresh rate."""
        if self.frequency_reporter is not None:
            rate = self.frequency_reporter.current_nominal_frequency()
            if rate > 0 and math.isfinite(rate):
                return max(
                    MonitorConstants.MIN_INTERVAL_MS,
                    int(TimeConstants.MS_PER_SECOND / rate),
                )
        return self.default_interval_ms

    def register(self, callback: TickCallback) -> None:
        """Schedule callback for the next tick, replacing any pending one."""
        if self._after_id is not None:
            self._cancel()

        self._callback = callback
        self._after_id = self.widget.after(self.interval_ms(), self._fire)

    def deregister(self, callback: TickCallback) -> None:
        """Cancel the pending tick if it belongs to callback."""
        if self._after_id is None or self._callback != callback:
            return
        self._cancel()
        self._callback = None

    def _cancel(self) -> None:
        try:
            self.widget.after_cancel(self._after_id)
        except (ValueError, tk.TclError) as e:
            log.debug("Could not cancel pending tick: %s", e)
        self._after_id = None

    def _fire(self) -> None:
        callback = self._callback
        self._after_id = None
        self._callback = None
        if callback is not None:
            callback(time.monotonic_ns())
