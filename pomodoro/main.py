from __future__ import annotations

"""Headless entry point: runs the Pomodoro engine on a Qt event loop.

Loads the saved configuration, wires the timer to its view model and logs
session ends and mode changes to the console and the log file until the
process is interrupted.
"""

import signal
import sys
from pathlib import Path

from PyQt6.QtCore import QCoreApplication

from pomodoro.core.timer import PomodoroTimer
from pomodoro.core.view_model import TimerViewModel
from pomodoro.data.storage import Storage
from pomodoro.utils.logger import get_logger


def default_db_path() -> Path:
    """Returns the default SQLite settings file in the current directory."""
    return Path.cwd() / "pomodoro.db"


def main() -> int:
    """Builds the engine and its collaborators, then runs the Qt event loop."""
    app = QCoreApplication(sys.argv)
    logger = get_logger(console=True)

    storage = Storage(default_db_path())
    storage.init_db()
    configuration = storage.load_configuration()

    pomodoro_timer = PomodoroTimer(configuration)
    view_model = TimerViewModel(pomodoro_timer, storage=storage)
    view_model.mode_changed.connect(lambda mode: logger.info("Now in %s mode", mode))

    app.aboutToQuit.connect(pomodoro_timer.close)
    signal.signal(signal.SIGINT, lambda *_args: app.quit())

    logger.info(
        "Starting: focus=%ss short=%ss long=%ss limit=%s",
        configuration.focus_duration,
        configuration.short_break_duration,
        configuration.long_break_duration,
        configuration.focus_limit,
    )
    view_model.start_timer()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
