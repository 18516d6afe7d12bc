"""
Animation Clock
===============
A cancellable repeating tick that drives the layout simulation.

Why is this file needed?
------------------------
1. Determinism: Tests step the simulation with `ManualClock.advance()` instead
   of waiting on a real timer.
2. Cancellation: Once `stop()` is called no further tick is delivered, even if
   the platform timer still has an event queued.

Classes:
    TickClock: Abstract base.
    ManualClock: Advanced explicitly by the caller.
    QtTickClock: Backed by a QTimer on the GUI thread.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from peoplegraph.config import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class CancelToken:
    """Flag shared between a clock and the tick it has scheduled."""
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class TickClock(ABC):
    """Calls a callback once per frame until stopped."""

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None
        self._token: Optional[CancelToken] = None

    @property
    def running(self) -> bool:
        return self._token is not None and not self._token.cancelled

    def start(self, callback: TickCallback) -> None:
        """Start (or restart) ticking into `callback`."""
        self.stop()
        self._callback = callback
        self._token = CancelToken()
        self._schedule()
        logger.debug(f"{self.__class__.__name__} started.")

    def stop(self) -> None:
        if self._token is not None:
            self._token.cancel()
            self._unschedule()
            logger.debug(f"{self.__class__.__name__} stopped.")
        self._token = None
        self._callback = None

    def _fire(self, token: CancelToken) -> None:
        if token.cancelled or self._callback is None:
            return
        self._callback()

    # ---- backend hooks ----

    @abstractmethod
    def _schedule(self) -> None:
        """Arrange for `_fire` to be called every frame."""

    @abstractmethod
    def _unschedule(self) -> None:
        """Release the backend timer."""


class ManualClock(TickClock):
    """Clock that only ticks when told to."""

    def _schedule(self) -> None:
        pass

    def _unschedule(self) -> None:
        pass

    def advance(self, ticks: int = 1) -> int:
        """
        Deliver up to `ticks` frames.

        Returns:
            The number of frames actually delivered (fewer if a callback
            stopped the clock).
        """
        delivered = 0
        for _ in range(ticks):
            token = self._token
            if token is None or token.cancelled:
                break
            self._fire(token)
            delivered += 1
        return delivered


class QtTickClock(TickClock):
    """Clock driven by a repeating QTimer."""

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__()
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def _on_timeout(self) -> None:
        if self._token is not None:
            self._fire(self._token)

    def _schedule(self) -> None:
        self._timer.start()

    def _unschedule(self) -> None:
        self._timer.stop()
