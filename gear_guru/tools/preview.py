from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from gear_guru.app.widgets import screen_widget
from gear_guru.core.errors import ContentValidationError, ScreenError
from gear_guru.core.events import EventLog, ImageLoadError, SelectChange, TabTap, UserEvent
from gear_guru.core.loader import load_member_bundle
from gear_guru.core.screen import ScreenRender, ScreenViewModel
from gear_guru.core.settings import ScreenSettings
from gear_guru.core.theme import available_themes, get_theme

app = typer.Typer(add_completion=False, help="Render the member details screen for a member data file.")
console = Console()

DEFAULT_DATA = Path(__file__).resolve().parents[1] / "content" / "sample_member.json"


def render_signature_payload(render: ScreenRender) -> dict:
    return {
        "theme": render.theme,
        "profile": [list(row) for row in render.profile.rows],
        "photo": [render.profile.photo.stage, render.profile.photo.source],
        "controls": {control.field: control.value for control in render.controls},
        "sizing": [[entry.label, [[line.label, line.value, line.emphasis] for line in entry.lines]] for entry in render.sizing],
        "gear": [[card.id, card.status.badge_text, card.status.emphasize] for card in render.gear],
        "active_tab": render.active_tab,
    }


def _build_events(
    sport: str | None,
    level: str | None,
    tab: str | None,
    photo_errors: int,
    photo_item_id: str,
) -> list[UserEvent]:
    events: list[UserEvent] = []
    if sport is not None:
        events.append(SelectChange(field="sport", value=sport))
    if level is not None:
        events.append(SelectChange(field="skill_level", value=level))
    if tab is not None:
        events.append(TabTap(tab=tab))
    events.extend(ImageLoadError(item_id=photo_item_id) for _ in range(photo_errors))
    return events


@app.command()
def main(
    data: Path = typer.Option(DEFAULT_DATA, "--data", help="Member data JSON file."),
    theme: str = typer.Option("classic_blue", "--theme", help=f"Theme: {'|'.join(available_themes())}."),
    sport: Optional[str] = typer.Option(None, "--sport", help="Sport to select before rendering."),
    level: Optional[str] = typer.Option(None, "--level", help="Skill level to select before rendering."),
    tab: Optional[str] = typer.Option(None, "--tab", help="Tab to tap before rendering."),
    photo_errors: int = typer.Option(0, "--photo-errors", min=0, help="Number of profile photo load failures to simulate."),
) -> None:
    try:
        bundle = load_member_bundle(data)
    except ContentValidationError as exc:
        console.print(f"[bold red]Member data load failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    if theme not in available_themes():
        console.print(f"[bold red]Unknown theme '{theme}'.[/bold red]")
        raise typer.Exit(1)

    settings = ScreenSettings(theme=theme)
    log = EventLog()
    view_model = ScreenViewModel.from_bundle(bundle, settings=settings, theme=get_theme(theme), sink=log)

    try:
        render = view_model.render()
        for event in _build_events(sport, level, tab, photo_errors, settings.photo_item_id):
            render = view_model.handle(event)
    except ScreenError as exc:
        console.print(f"[bold red]Rendering failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    console.print(screen_widget(render, view_model.theme))

    summary = Table(title="Emitted Events")
    summary.add_column("Event", style="cyan", no_wrap=True)
    summary.add_column("Payload", style="white")
    for event in log.events:
        summary.add_row(event.kind, Text(event.model_dump_json(exclude={"kind"})))
    if not log.events:
        summary.add_row("-", "-")
    console.print()
    console.print(summary)

    hints = [control.hint for control in render.controls if control.hint]
    for hint in hints:
        console.print(hint, style="yellow", markup=False)

    payload = render_signature_payload(render)
    signature = hashlib.sha256(json.dumps(payload, sort_keys=True).encode("utf-8")).hexdigest()[:16]
    console.print(f"\n[bold green]Render signature:[/bold green] {signature}")


if __name__ == "__main__":
    app()
