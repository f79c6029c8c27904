from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from PyQt6.QtCore import QTimer


TICK_INTERVAL_MS = 1000

TickCallback = Callable[[], None]
TickerFactory = Callable[[TickCallback], "Ticker"]


class Ticker(ABC):
    """Repeating one-second tick source owned by a single running interval."""

    def __init__(self, callback: TickCallback) -> None:
        self._callback = callback

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True between ``start`` and ``stop``."""

    @abstractmethod
    def start(self) -> None:
        """Begin delivering ticks."""

    @abstractmethod
    def stop(self) -> None:
        """Stop delivering ticks. Safe to call more than once."""


class QtTicker(Ticker):
    """Tick source driven by a ``QTimer`` on the calling thread's event loop."""

    def __init__(self, callback: TickCallback, interval_ms: int = TICK_INTERVAL_MS) -> None:
        super().__init__(callback)
        self._timer = QTimer()
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def _on_timeout(self) -> None:
        self._callback()
