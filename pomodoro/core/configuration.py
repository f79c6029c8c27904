from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any


class Mode(str, Enum):
    FOCUS = "Focus"
    SHORT_BREAK = "Short Break"
    LONG_BREAK = "Long Break"


_DURATION_FIELDS = {
    "focus_duration": Mode.FOCUS,
    "short_break_duration": Mode.SHORT_BREAK,
    "long_break_duration": Mode.LONG_BREAK,
}


class InvalidConfigurationError(ValueError):
    """Raised when a duration is not positive or the focus limit is below one."""


@dataclass
class PomodoroConfiguration:
    """Durations (in seconds) for every mode plus the long-break cadence.

    Instances are shared by reference: an edit made through ``set_duration``
    is picked up by the next ``duration`` lookup, including by a timer that is
    already counting down in that mode. Every field write is validated,
    including plain attribute assignment.
    """

    focus_duration: int = 25 * 60
    short_break_duration: int = 5 * 60
    long_break_duration: int = 15 * 60
    focus_limit: int = 4

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "focus_limit":
            _check_focus_limit(value)
        elif name in _DURATION_FIELDS:
            _check_duration(value, _DURATION_FIELDS[name])
        super().__setattr__(name, value)

    @classmethod
    def default(cls) -> PomodoroConfiguration:
        return cls()

    def duration(self, mode: Mode) -> int:
        if mode == Mode.FOCUS:
            return self.focus_duration
        if mode == Mode.SHORT_BREAK:
            return self.short_break_duration
        return self.long_break_duration

    def set_duration(self, seconds: int, mode: Mode) -> None:
        if mode == Mode.FOCUS:
            self.focus_duration = seconds
        elif mode == Mode.SHORT_BREAK:
            self.short_break_duration = seconds
        else:
            self.long_break_duration = seconds

    def set_focus_limit(self, focus_limit: int) -> None:
        self.focus_limit = focus_limit

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PomodoroConfiguration:
        """Build from stored settings; missing keys keep their defaults, unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: int(value) for key, value in data.items() if key in known})


def _check_duration(seconds: int, mode: Mode) -> None:
    if seconds <= 0:
        raise InvalidConfigurationError(f"{mode.value} duration must be positive, got {seconds}")


def _check_focus_limit(focus_limit: int) -> None:
    if focus_limit < 1:
        raise InvalidConfigurationError(f"Focus limit must be at least 1, got {focus_limit}")
