from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from enum import Enum

from pomodoro.core.configuration import Mode, PomodoroConfiguration
from pomodoro.core.ticker import QtTicker, Ticker, TickerFactory


logger = logging.getLogger(__name__)


class TimerState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class TimerSnapshot:
    state: TimerState
    mode: Mode
    elapsed_seconds: int
    remaining_seconds: int
    duration_seconds: int
    focus_count: int
    progress: float


class PomodoroTimerObserver:
    """Receives engine events. Every hook is optional; override the ones you need."""

    def on_elapsed_time_updated(self, elapsed_time: int) -> None:
        """Called on every tick while running, with the new elapsed time."""

    def on_will_change_mode(self, current_mode: Mode, new_mode: Mode) -> None:
        """Called when a mode ends, while ``timer.mode`` still reports ``current_mode``."""

    def on_did_change_mode(self, mode: Mode) -> None:
        """Called right after ``mode`` has been committed."""


class PomodoroTimer:
    """Focus/break state machine advanced by a one-second ticker.

    Not thread-safe: commands and ticks are expected on one thread (the Qt
    event loop thread when the default ``QtTicker`` is used). The observer is
    held weakly and the ticker only while running.
    """

    def __init__(
        self,
        configuration: PomodoroConfiguration,
        ticker_factory: TickerFactory | None = None,
    ) -> None:
        self.configuration = configuration
        self._ticker_factory: TickerFactory = ticker_factory or QtTicker
        self._ticker: Ticker | None = None
        self._observer_ref: weakref.ReferenceType[PomodoroTimerObserver] | None = None
        self._state = TimerState.STOPPED
        self._mode = Mode.FOCUS
        self._elapsed_time = 0
        self._focus_count = 0

    def __enter__(self) -> PomodoroTimer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def elapsed_time(self) -> int:
        return self._elapsed_time

    @property
    def focus_count(self) -> int:
        return self._focus_count

    @property
    def observer(self) -> PomodoroTimerObserver | None:
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    @observer.setter
    def observer(self, observer: PomodoroTimerObserver | None) -> None:
        self._observer_ref = weakref.ref(observer) if observer is not None else None

    @property
    def ticker(self) -> Ticker | None:
        return self._ticker

    def start(self) -> None:
        if self._state == TimerState.RUNNING:
            return
        self._state = TimerState.RUNNING
        self._ticker = self._ticker_factory(_weak_tick(self))
        self._ticker.start()
        logger.debug("Timer started in %s mode at %ss", self._mode.value, self._elapsed_time)

    def pause(self) -> None:
        if self._state != TimerState.RUNNING:
            return
        self._state = TimerState.PAUSED
        self._release_ticker()
        logger.debug("Timer paused in %s mode at %ss", self._mode.value, self._elapsed_time)

    def stop(self) -> None:
        if self._state == TimerState.STOPPED:
            return
        self._state = TimerState.STOPPED
        self._release_ticker()
        self._elapsed_time = 0
        logger.debug("Timer stopped in %s mode", self._mode.value)

    def close(self) -> None:
        """Release the ticker on teardown. A running timer is left paused so ``start`` can resume it."""
        if self._state == TimerState.RUNNING:
            self._state = TimerState.PAUSED
        self._release_ticker()

    def duration(self, mode: Mode) -> int:
        return self.configuration.duration(mode)

    def set_duration(self, seconds: int, mode: Mode) -> None:
        self.configuration.set_duration(seconds, mode)

    def current_time_remaining(self) -> int:
        # Derived on every call so live configuration edits apply immediately.
        return self.duration(self._mode) - self._elapsed_time

    def snapshot(self) -> TimerSnapshot:
        duration = self.duration(self._mode)
        progress = self._elapsed_time / duration if duration > 0 else 0.0
        return TimerSnapshot(
            state=self._state,
            mode=self._mode,
            elapsed_seconds=self._elapsed_time,
            remaining_seconds=self.current_time_remaining(),
            duration_seconds=duration,
            focus_count=self._focus_count,
            progress=max(0.0, min(1.0, progress)),
        )

    def _on_tick(self) -> None:
        if self._state == TimerState.RUNNING:
            self._elapsed_time += 1
            observer = self.observer
            if observer is not None:
                observer.on_elapsed_time_updated(self._elapsed_time)
        if self.current_time_remaining() <= 0:
            self._complete_mode()

    def _complete_mode(self) -> None:
        self._elapsed_time = 0
        current_mode = self._mode
        new_mode = self._next_mode()

        observer = self.observer
        if observer is not None:
            observer.on_will_change_mode(current_mode, new_mode)
        self._mode = new_mode
        logger.info("%s session ended, switching to %s", current_mode.value, new_mode.value)
        observer = self.observer
        if observer is not None:
            observer.on_did_change_mode(new_mode)

    def _next_mode(self) -> Mode:
        if self._mode != Mode.FOCUS:
            return Mode.FOCUS
        if self._focus_count + 1 < self.configuration.focus_limit:
            self._focus_count += 1
            return Mode.SHORT_BREAK
        self._focus_count = 0
        return Mode.LONG_BREAK

    def _release_ticker(self) -> None:
        if self._ticker is None:
            return
        self._ticker.stop()
        self._ticker = None


def _weak_tick(timer: PomodoroTimer):
    method = weakref.WeakMethod(timer._on_tick)

    def tick() -> None:
        bound = method()
        if bound is not None:
            bound()

    return tick
