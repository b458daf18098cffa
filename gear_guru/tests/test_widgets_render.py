from __future__ import annotations

from pathlib import Path

from rich.console import Console

from gear_guru.app.widgets import gear_widget, screen_widget, sizing_widget, tab_bar_widget
from gear_guru.core.events import ImageLoadError, SelectChange, TabTap
from gear_guru.core.loader import load_member_bundle
from gear_guru.core.screen import ScreenViewModel

SAMPLE = Path(__file__).resolve().parents[1] / "content" / "sample_member.json"


def _export(renderable: object) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


def _view_model() -> ScreenViewModel:
    return ScreenViewModel.from_bundle(load_member_bundle(SAMPLE))


def test_full_screen_renders_every_section() -> None:
    view_model = _view_model()
    text = _export(screen_widget(view_model.render(), view_model.theme))

    assert "MEMBER DETAILS" in text
    assert "Sarah" in text
    assert "180 lbs" in text
    assert "Downhill" in text
    assert "Intermed." in text
    assert "Mondo" in text
    assert "Head Edge LYT" in text
    assert "UPDATE" in text
    assert "[GEAR]" in text


def test_tab_bar_follows_active_tab() -> None:
    view_model = _view_model()
    render = view_model.handle(TabTap(tab="resources"))
    text = _export(tab_bar_widget(render.tabs, view_model.theme))

    assert "[RESOURCES]" in text
    assert "[GEAR]" not in text


def test_selection_hint_and_placeholder_are_visible() -> None:
    view_model = _view_model()
    view_model.handle(ImageLoadError(item_id="profile-photo"))
    view_model.handle(ImageLoadError(item_id="profile-photo"))
    render = view_model.handle(SelectChange(field="skill_level", value="Legend"))
    text = _export(screen_widget(render, view_model.theme))

    assert "'Legend'" in text
    assert "[silhouette]" in text


def test_empty_sections_render_placeholders() -> None:
    view_model = ScreenViewModel(load_member_bundle(SAMPLE).profile, [], [])
    render = view_model.render()

    assert "Sizing" in _export(sizing_widget(render.sizing, view_model.theme))
    assert "Gear Inventory" in _export(gear_widget(render.gear, view_model.theme))
