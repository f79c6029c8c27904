import pytest

from pomodoro.core.configuration import InvalidConfigurationError, Mode, PomodoroConfiguration


def test_default_configuration() -> None:
    config = PomodoroConfiguration.default()

    assert config.duration(Mode.FOCUS) == 1500
    assert config.duration(Mode.SHORT_BREAK) == 300
    assert config.duration(Mode.LONG_BREAK) == 900
    assert config.focus_limit == 4


def test_set_duration_per_mode() -> None:
    config = PomodoroConfiguration.default()

    config.set_duration(50 * 60, Mode.FOCUS)
    config.set_duration(10 * 60, Mode.SHORT_BREAK)

    assert config.focus_duration == 3000
    assert config.short_break_duration == 600
    assert config.long_break_duration == 900


@pytest.mark.parametrize("seconds", [0, -5])
def test_set_duration_rejects_non_positive(seconds) -> None:
    config = PomodoroConfiguration.default()

    with pytest.raises(InvalidConfigurationError):
        config.set_duration(seconds, Mode.LONG_BREAK)

    assert config.long_break_duration == 900


def test_construction_validates() -> None:
    with pytest.raises(InvalidConfigurationError):
        PomodoroConfiguration(focus_duration=0)
    with pytest.raises(ValueError):
        PomodoroConfiguration(focus_limit=0)


def test_set_focus_limit() -> None:
    config = PomodoroConfiguration.default()
    config.set_focus_limit(2)
    assert config.focus_limit == 2

    with pytest.raises(InvalidConfigurationError):
        config.set_focus_limit(0)
    assert config.focus_limit == 2


def test_dict_conversion_fills_defaults_and_ignores_unknown_keys() -> None:
    config = PomodoroConfiguration.from_dict({"focus_duration": "600", "theme": "dark"})

    assert config.focus_duration == 600
    assert config.short_break_duration == 300
    assert config.to_dict() == {
        "focus_duration": 600,
        "short_break_duration": 300,
        "long_break_duration": 900,
        "focus_limit": 4,
    }


def test_mode_display_values() -> None:
    assert [mode.value for mode in Mode] == ["Focus", "Short Break", "Long Break"]


def test_direct_field_assignment_is_validated() -> None:
    config = PomodoroConfiguration.default()

    with pytest.raises(InvalidConfigurationError):
        config.focus_duration = 0
    with pytest.raises(InvalidConfigurationError):
        config.focus_limit = -1

    config.short_break_duration = 120
    assert config.focus_duration == 1500
    assert config.focus_limit == 4
    assert config.duration(Mode.SHORT_BREAK) == 120
