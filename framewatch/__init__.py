"""Frame interval monitoring for Tk applications.

Measures the time between successive frame ticks and logs rate-limited
warnings whenever frames arrive much later than the display refresh rate
allows.
"""

from .monitor import FrameRateTracker, MonitorConfig, MonitorState

__all__ = [
    "FrameRateTracker",
    "MonitorConfig",
    "MonitorState",
]
