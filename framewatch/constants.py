"""Constants for framewatch.

Grouped by concern: frame monitoring, time unit conversion and logging.
"""


class MonitorConstants:
    """Frame monitoring related constants."""

    # Consecutive bad-frame warnings before further warnings are suppressed
    MAX_CONSECUTIVE_LOGS = 10

    # Bad threshold is ideal interval times (refresh rate // this divisor)
    THRESHOLD_RATE_DIVISOR = 4

    # Tag used for all tracker diagnostics
    TAG = "FrameRateTracker"

    # Fallback Tk scheduling delay when no refresh rate is known
    DEFAULT_INTERVAL_MS = 16  # ~60fps
    MIN_INTERVAL_MS = 1

    DEFAULT_REFRESH_RATE_HZ = 60.0


class TimeConstants:
    """Time unit conversion factors."""

    NANOS_PER_SECOND = 1_000_000_000
    NANOS_PER_MILLI = 1_000_000
    MS_PER_SECOND = 1000.0


class LogConstants:
    """Logging configuration."""

    ROOT_LOGGER = "framewatch"
    FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    MAX_BYTES = 2_000_000
    BACKUP_COUNT = 3
    DEBUG_ENV_VAR = "FRAMEWATCH_DEBUG"
