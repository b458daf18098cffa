from __future__ import annotations

import pytest

from gear_guru.core.errors import ValidationError
from gear_guru.core.events import EventLog, SelectionChanged
from gear_guru.core.selection import Selection, SelectionController
from gear_guru.core.settings import ScreenSettings, SelectOption


def _controller(log: EventLog | None = None) -> SelectionController:
    return SelectionController.from_settings(ScreenSettings(), sink=log if log is not None else EventLog())


def test_initial_selection_uses_settings_defaults() -> None:
    controller = _controller()
    assert controller.selection == Selection(sport="Downhill Ski", skill_level="Intermediate")


def test_valid_sport_updates_and_emits_event() -> None:
    log = EventLog()
    controller = _controller(log)

    result = controller.set_sport("Snowboarding")

    assert result.sport == "Snowboarding"
    assert controller.selection.skill_level == "Intermediate"
    assert log.events == [SelectionChanged(field="sport", value="Snowboarding")]


def test_invalid_sport_leaves_state_unchanged() -> None:
    log = EventLog()
    controller = _controller(log)

    with pytest.raises(ValidationError) as excinfo:
        controller.set_sport("Unicycle")

    assert excinfo.value.field == "sport"
    assert excinfo.value.value == "Unicycle"
    assert "Snowboarding" in excinfo.value.allowed
    assert controller.selection.sport == "Downhill Ski"
    assert len(log) == 0


def test_skill_level_validation() -> None:
    log = EventLog()
    controller = _controller(log)

    controller.set_skill_level("Expert")
    with pytest.raises(ValidationError, match="'Pro' is not a valid skill level") as excinfo:
        controller.set_skill_level("Pro")

    assert excinfo.value.field == "skill_level"
    assert controller.selection.skill_level == "Expert"
    assert log.kinds() == ["selection-changed"]


def test_option_values_are_case_sensitive() -> None:
    controller = _controller()
    with pytest.raises(ValidationError):
        controller.set_sport("snowboarding")


def test_reselecting_current_value_emits_nothing() -> None:
    log = EventLog()
    controller = _controller(log)

    controller.set_sport("Downhill Ski")

    assert controller.selection.sport == "Downhill Ski"
    assert len(log) == 0


def test_options_mark_the_current_value() -> None:
    controller = _controller()
    controller.set_skill_level("Advanced")

    options = controller.options("skill_level")

    assert [option.value for option in options] == ["Beginner", "Intermediate", "Advanced", "Expert"]
    assert [option.value for option in options if option.selected] == ["Advanced"]
    assert options[1].label == "Intermed."


def test_initial_value_outside_option_set_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SelectionController(
            sports=[SelectOption(value="Downhill Ski")],
            skill_levels=[SelectOption(value="Beginner")],
            sport="Unicycle",
            skill_level="Beginner",
        )


def test_configured_option_sets_replace_defaults() -> None:
    settings = ScreenSettings(
        sports=["Downhill Ski", "Snowboarding"],
        skill_levels=["Beginner", "Advanced"],
        default_skill_level="Advanced",
    )
    controller = SelectionController.from_settings(settings)

    assert controller.allowed("sport") == ("Downhill Ski", "Snowboarding")
    with pytest.raises(ValidationError):
        controller.set_sport("Telemark")
