from __future__ import annotations

import pytest
from PyQt6.QtCore import QCoreApplication

from pomodoro.core.configuration import PomodoroConfiguration
from pomodoro.core.ticker import Ticker


class ManualTicker(Ticker):
    """Tick source advanced explicitly with ``fire``; no event loop required."""

    def __init__(self, callback) -> None:
        super().__init__(callback)
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        self._active = True

    def stop(self) -> None:
        self._active = False

    def fire(self, count: int = 1) -> int:
        """Deliver up to ``count`` ticks, stopping early once stopped. Returns ticks delivered."""
        delivered = 0
        for _ in range(count):
            if not self._active:
                break
            self._callback()
            delivered += 1
        return delivered


class RecordingTickerFactory:
    """Hands out ``ManualTicker`` instances and remembers every one created."""

    def __init__(self) -> None:
        self.tickers: list[ManualTicker] = []

    def __call__(self, callback) -> ManualTicker:
        ticker = ManualTicker(callback)
        self.tickers.append(ticker)
        return ticker

    @property
    def current(self) -> ManualTicker:
        return self.tickers[-1]


@pytest.fixture(scope="session")
def qt_app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def ticker_factory() -> RecordingTickerFactory:
    return RecordingTickerFactory()


@pytest.fixture
def short_configuration() -> PomodoroConfiguration:
    return PomodoroConfiguration(
        focus_duration=5,
        short_break_duration=2,
        long_break_duration=3,
        focus_limit=2,
    )
