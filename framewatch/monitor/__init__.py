"""Frame interval monitor and its collaborator interfaces."""

from .config import MonitorConfig
from .state import MonitorState
from .interfaces import TickSource, FrequencyReporter, DiagnosticSink, TickCallback
from .frame_rate_tracker import FrameRateTracker

__all__ = [
    "MonitorConfig",
    "MonitorState",
    "TickSource",
    "FrequencyReporter",
    "DiagnosticSink",
    "TickCallback",
    "FrameRateTracker",
]
