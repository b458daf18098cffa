from __future__ import annotations

import itertools

import pytest

from gear_guru.core.errors import ValidationError
from gear_guru.core.events import EventLog, TabChanged
from gear_guru.core.models import TAB_NAMES
from gear_guru.core.tabs import TabController


def _active(controller: TabController) -> list[str]:
    return [tab.id for tab in controller.tabs() if tab.active]


def test_initial_tab_is_gear() -> None:
    controller = TabController()
    assert controller.active == "gear"
    assert _active(controller) == ["gear"]


def test_tabs_keep_display_order_and_labels() -> None:
    tabs = TabController().tabs()
    assert [tab.id for tab in tabs] == ["family", "gear", "measure", "resources"]
    assert [tab.label for tab in tabs] == ["FAMILY", "GEAR", "MEASURE", "RESOURCES"]
    assert [tab.icon for tab in tabs] == ["users", "compass", "ruler", "info"]


def test_tap_measure_while_gear_active() -> None:
    log = EventLog()
    controller = TabController(sink=log)

    controller.tap("measure")

    assert _active(controller) == ["measure"]
    assert log.events == [TabChanged(active="measure")]


def test_any_tap_sequence_leaves_exactly_one_active_tab() -> None:
    for sequence in itertools.product(TAB_NAMES, repeat=3):
        controller = TabController()
        for tab in sequence:
            controller.tap(tab)
            assert len(_active(controller)) == 1
        assert controller.active == sequence[-1]


def test_tapping_active_tab_emits_nothing() -> None:
    log = EventLog()
    controller = TabController(sink=log)

    controller.tap("gear")

    assert controller.active == "gear"
    assert len(log) == 0


def test_unknown_tab_is_rejected() -> None:
    log = EventLog()
    controller = TabController(sink=log)

    with pytest.raises(ValidationError, match="'settings' is not a valid tab"):
        controller.tap("settings")

    assert controller.active == "gear"
    assert len(log) == 0
