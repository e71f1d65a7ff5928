"""Tracks the frame rate of the host UI and logs when things are bad.

The tick handler runs on the very event loop it is measuring, so it does as
little work as possible: a subtraction, a comparison and, only for bad
frames, one non-blocking log record.
"""

import logging
import time
from typing import Callable, Optional

from ..constants import MonitorConstants, TimeConstants
from ..utils.logging_setup import LoggingDiagnosticSink
from .config import MonitorConfig
from .interfaces import DiagnosticSink, FrequencyReporter, TickSource
from .state import MonitorState

log = logging.getLogger(__name__)


class FrameRateTracker:
    """Measures the interval between frame ticks and warns about slow frames.

    A frame is bad when its interval exceeds a quarter second worth of
    frames at the nominal refresh rate. Warnings are limited to
    ``max_consecutive_logs`` in a row; the first good frame re-enables them.

    All methods must be called from the thread that delivers ticks.
    """

    def __init__(
        self,
        frequency_reporter: FrequencyReporter,
        tick_source: TickSource,
        sink: Optional[DiagnosticSink] = None,
        clock: Callable[[], int] = time.monotonic_ns,
        max_consecutive_logs: int = MonitorConstants.MAX_CONSECUTIVE_LOGS,
    ):
        """Initialize the tracker and read the current refresh rate.

        Args:
            frequency_reporter: Source of the nominal refresh rate
            tick_source: Delivers one-shot frame callbacks
            sink: Receiver for diagnostics (defaults to the logging module)
            clock: Monotonic nanosecond clock, same timebase as the ticks
            max_consecutive_logs: Bad-frame warnings allowed in a row

        Raises:
            ValueError: If max_consecutive_logs is less than 1
        """
        if max_consecutive_logs < 1:
            raise ValueError(
                f"max_consecutive_logs must be at least 1, got {max_consecutive_logs}"
            )

        if sink is None:
            sink = LoggingDiagnosticSink()

        self._frequency_reporter = frequency_reporter
        self._tick_source = tick_source
        self._sink = sink
        self._clock = clock
        self._max_consecutive_logs = max_consecutive_logs

        self._config = MonitorConfig()
        self._state = MonitorState()
        self._running = False

        self.refresh_config()

    @property
    def config(self) -> MonitorConfig:
        return self._config

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def refresh_rate(self) -> float:
        """Nominal refresh rate in hertz (0.0 if never established)."""
        return self._config.nominal_frequency_hz

    @property
    def last_fps(self) -> Optional[float]:
        return self._state.last_fps

    @property
    def is_running(self) -> bool:
        return self._running

    def refresh_config(self) -> bool:
        """Re-read the refresh rate and re-derive timing if it changed.

        Displays with dynamic refresh rates may change their reported
        rate over time. Unusable rates are ignored.

        Returns:
            True if the configuration was updated
        """
        new_rate = self._frequency_reporter.current_nominal_frequency()
        old_rate = self._config.nominal_frequency_hz

        if new_rate == old_rate:
            return False

        new_config = MonitorConfig.from_frequency(new_rate)
        if new_config is None:
            return False

        if old_rate > 0:
            self._sink.info(
                MonitorConstants.TAG,
                "Refresh rate changed from %.2f hz to %.2f hz" % (old_rate, new_rate),
            )

        self._config = new_config
        return True

    def start(self) -> None:
        """Begin tracking frames. Does nothing if already running."""
        if self._running:
            log.debug("Frame rate tracking already running")
            return

        self.refresh_config()

        self._sink.info(
            MonitorConstants.TAG,
            "Beginning frame rate tracking. Screen refresh rate: %.2f hz, "
            "or %.2f ms per frame."
            % (self._config.nominal_frequency_hz, self._config.ideal_interval_ms),
        )

        self._state.reset(self._clock())
        self._running = True
        self._tick_source.register(self.on_tick)

    def stop(self) -> None:
        """Stop tracking frames. Safe to call when not running."""
        self._running = False
        self._tick_source.deregister(self.on_tick)

    def on_tick(self, frame_time_ns: int) -> None:
        """Classify one frame interval and re-arm for the next frame.

        Args:
            frame_time_ns: Monotonic timestamp of this frame in nanoseconds
        """
        state = self._state
        elapsed_ns = frame_time_ns - state.last_tick_ns

        # Duplicate or backwards timestamps carry no interval to classify,
        # and without a valid refresh rate there is nothing to compare against
        if elapsed_ns > 0 and self._config.is_established:
            self._classify(elapsed_ns)

        state.last_tick_ns = frame_time_ns

        if self._running:
            self._tick_source.register(self.on_tick)

    def _classify(self, elapsed_ns: int) -> None:
        state = self._state
        config = self._config
        fps = TimeConstants.NANOS_PER_SECOND / elapsed_ns
        state.last_fps = fps

        if elapsed_ns > config.bad_threshold_ns:
            if state.consecutive_bad_count < self._max_consecutive_logs:
                dropped_frames = elapsed_ns // config.ideal_interval_ns
                self._sink.warn(
                    MonitorConstants.TAG,
                    "Bad frame! Took %d ms (%d dropped frames, or %.2f FPS)"
                    % (
                        elapsed_ns // TimeConstants.NANOS_PER_MILLI,
                        dropped_frames,
                        fps,
                    ),
                )
                state.consecutive_bad_count += 1
        else:
            state.consecutive_bad_count = 0
