"""Interfaces the frame rate tracker depends on.

The tracker never talks to a display or an event loop directly. A tick
source delivers frame timestamps, a frequency reporter tells it the
nominal refresh rate and a diagnostic sink receives its log records.
"""

from typing import Callable, Protocol

TickCallback = Callable[[int], None]


class TickSource(Protocol):
    """Delivers one callback per frame with a monotonic timestamp in ns.

    Registrations are one-shot: after firing, the callback must be
    registered again to receive the next tick.
    """

    def register(self, callback: TickCallback) -> None: ...

    def deregister(self, callback: TickCallback) -> None: ...


class FrequencyReporter(Protocol):
    """Reports the nominal refresh rate in hertz.

    May return different values across calls on displays with a
    dynamic refresh rate.
    """

    def current_nominal_frequency(self) -> float: ...


class DiagnosticSink(Protocol):
    """Fire-and-forget receiver for diagnostic records."""

    def info(self, tag: str, message: str) -> None: ...

    def warn(self, tag: str, message: str) -> None: ...
