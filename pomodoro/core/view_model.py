from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from pomodoro.core.configuration import Mode
from pomodoro.core.timer import PomodoroTimer, PomodoroTimerObserver, TimerState
from pomodoro.data.storage import Storage


logger = logging.getLogger(__name__)


def session_ended_message(mode: Mode) -> str:
    return f"Your {mode.value} session has ended."


class TimerViewModel(QObject, PomodoroTimerObserver):
    """Adapts a ``PomodoroTimer`` to Qt signals for views and notifiers.

    Registers itself as the timer's observer. The timer holds it weakly, so
    keep a reference to the view model for as long as events are wanted.
    """

    elapsed_updated = pyqtSignal(int)
    mode_will_change = pyqtSignal(str, str)
    mode_changed = pyqtSignal(str)
    state_changed = pyqtSignal(str)
    session_ended = pyqtSignal(str)
    configuration_changed = pyqtSignal()

    def __init__(self, pomodoro_timer: PomodoroTimer, storage: Storage | None = None) -> None:
        super().__init__()
        self.pomodoro_timer = pomodoro_timer
        self._storage = storage
        pomodoro_timer.observer = self

    # ----- Getters -----
    def is_stopped(self) -> bool:
        return self.pomodoro_timer.state == TimerState.STOPPED

    def current_state(self) -> TimerState:
        return self.pomodoro_timer.state

    def current_mode(self) -> Mode:
        return self.pomodoro_timer.mode

    def time_remaining(self) -> int:
        return self.pomodoro_timer.current_time_remaining()

    def format_remaining(self) -> str:
        remaining = max(0, self.time_remaining())
        minutes, seconds = divmod(remaining, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def can_edit_configuration(self) -> bool:
        return self.is_stopped()

    # ----- Timer controls -----
    def start_timer(self) -> None:
        self.pomodoro_timer.start()
        self._emit_state()

    def pause_timer(self) -> None:
        self.pomodoro_timer.pause()
        self._emit_state()

    def stop_timer(self) -> None:
        self.pomodoro_timer.stop()
        self._emit_state()

    def toggle(self) -> None:
        if self.pomodoro_timer.state == TimerState.RUNNING:
            self.pause_timer()
        else:
            self.start_timer()

    # ----- Configuration -----
    def set_duration_minutes(self, mode: Mode, minutes: int) -> None:
        self.set_duration(mode, minutes * 60)

    def set_duration(self, mode: Mode, seconds: int) -> None:
        self.pomodoro_timer.set_duration(seconds, mode)
        if self._storage:
            self._storage.save_configuration(self.pomodoro_timer.configuration)
        self.configuration_changed.emit()

    # ----- PomodoroTimerObserver -----
    def on_elapsed_time_updated(self, elapsed_time: int) -> None:
        self.elapsed_updated.emit(elapsed_time)

    def on_will_change_mode(self, current_mode: Mode, new_mode: Mode) -> None:
        self.mode_will_change.emit(current_mode.value, new_mode.value)
        message = session_ended_message(current_mode)
        logger.info(message)
        self.session_ended.emit(message)

    def on_did_change_mode(self, mode: Mode) -> None:
        self.mode_changed.emit(mode.value)

    def _emit_state(self) -> None:
        self.state_changed.emit(self.pomodoro_timer.state.value)
