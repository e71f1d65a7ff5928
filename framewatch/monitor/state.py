"""Mutable per-run tracking state."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MonitorState:
    """Timing state owned by a single tracker and updated on every tick."""

    last_tick_ns: int = 0
    consecutive_bad_count: int = 0
    last_fps: Optional[float] = None  # fps of the latest classified tick

    def reset(self, now_ns: int) -> None:
        """Start a fresh run at the given timestamp."""
        self.last_tick_ns = now_ns
        self.consecutive_bad_count = 0
        self.last_fps = None
