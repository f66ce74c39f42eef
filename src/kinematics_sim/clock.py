# MIT License (see LICENSE)
"""
Tick sources that drive playback.

A session subscribes a callback while playing and unsubscribes on pause;
unsubscribing is the only cancellation mechanism. Callbacks receive a
wall-clock timestamp in seconds and run synchronously on the thread that
delivers the tick.

- ManualTickSource: ticks are delivered explicitly with fire(). Use it in
  tests or to forward frames from a host UI loop.
- RealtimeTickSource: a blocking loop that ticks at a fixed rate from
  time.perf_counter() until nobody is subscribed.
"""
from __future__ import annotations
import logging
import time
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[float], None]


class TickSource(ABC):
    """
    Abstract source of animation ticks.

    Subclasses decide when ticks happen; the subscriber bookkeeping is
    shared here.
    """

    def __init__(self) -> None:
        self._subscribers: list[TickCallback] = []

    def subscribe(self, callback: TickCallback) -> None:
        """Start delivering ticks to callback (no-op if already subscribed)."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: TickCallback) -> None:
        """Stop delivering ticks to callback (no-op if not subscribed)."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def active(self) -> bool:
        """True while at least one callback is subscribed."""
        return bool(self._subscribers)

    def _deliver(self, timestamp: float) -> None:
        # Copy: callbacks may unsubscribe themselves mid-delivery.
        for cb in list(self._subscribers):
            if cb in self._subscribers:
                cb(timestamp)

    @abstractmethod
    def now(self) -> float:
        """Current timestamp of this source in seconds."""
        ...


class ManualTickSource(TickSource):
    """
    Tick source driven by explicit fire() calls.

    Example:
        ticks = ManualTickSource()
        session = SimulationSession(tick_source=ticks)
        session.play()
        ticks.fire(0.0)      # baseline
        ticks.fire(0.5)      # advances 0.5 s
    """

    def __init__(self) -> None:
        super().__init__()
        self._last = 0.0

    def now(self) -> float:
        return self._last

    def fire(self, timestamp: float) -> None:
        """Deliver one tick carrying the given timestamp."""
        self._last = float(timestamp)
        self._deliver(self._last)

    def advance(self, seconds: float) -> None:
        """Deliver one tick `seconds` after the previous one."""
        self.fire(self._last + seconds)


class RealtimeTickSource(TickSource):
    """
    Fixed-rate wall-clock tick loop.

    run() blocks the calling thread. It returns when the last subscriber
    goes away (e.g. playback reached the end or was paused from a
    callback) or when max_seconds of real time have passed.
    """

    def __init__(
        self,
        fps: float = 60.0,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        super().__init__()
        self.fps = fps
        self._clock = clock
        self._sleep = sleep

    def now(self) -> float:
        return self._clock()

    def run(self, max_seconds: float | None = None) -> int:
        """
        Deliver ticks until idle.

        Args:
            max_seconds: Optional real-time limit for the loop.

        Returns:
            Number of ticks delivered.
        """
        period = 1.0 / self.fps
        start = self._clock()
        ticks = 0
        while self.active:
            now = self._clock()
            if max_seconds is not None and now - start > max_seconds:
                logger.debug("Tick loop stopped after %.3f s", now - start)
                break
            self._deliver(now)
            ticks += 1
            self._sleep(period)
        return ticks
