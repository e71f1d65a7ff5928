"""Timing configuration derived from the nominal refresh rate."""

import math
from dataclasses import dataclass
from typing import Optional

from ..constants import MonitorConstants, TimeConstants


@dataclass(frozen=True)
class MonitorConfig:
    """Expected frame timing for one nominal refresh rate.

    Attributes:
        nominal_frequency_hz: Reported refresh rate (0.0 until a valid rate is read)
        ideal_interval_ns: Expected nanoseconds between frames
        bad_threshold_ns: Intervals longer than this are bad frames
    """

    nominal_frequency_hz: float = 0.0
    ideal_interval_ns: int = 0
    bad_threshold_ns: int = 0

    @classmethod
    def from_frequency(cls, frequency_hz: float) -> Optional["MonitorConfig"]:
        """Derive a configuration from a refresh rate.

        Args:
            frequency_hz: Nominal refresh rate in hertz

        Returns:
            The derived configuration, or None if the rate is unusable
            (non-positive, not finite, or too high to give a whole
            nanosecond per frame)
        """
        if not (frequency_hz > 0 and math.isfinite(frequency_hz)):
            return None

        ideal_interval_ns = int(TimeConstants.NANOS_PER_SECOND / frequency_hz)
        if ideal_interval_ns <= 0:
            return None

        grace_frames = int(frequency_hz / MonitorConstants.THRESHOLD_RATE_DIVISOR)
        return cls(
            nominal_frequency_hz=frequency_hz,
            ideal_interval_ns=ideal_interval_ns,
            bad_threshold_ns=ideal_interval_ns * grace_frames,
        )

    @property
    def ideal_interval_ms(self) -> float:
        """Expected milliseconds per frame."""
        return self.ideal_interval_ns / TimeConstants.NANOS_PER_MILLI

    @property
    def is_established(self) -> bool:
        return self.nominal_frequency_hz > 0
