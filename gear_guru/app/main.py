from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from gear_guru.app.services.logger import configure_logging
from gear_guru.app.services.settings_store import SettingsStore
from gear_guru.app.widgets import screen_widget
from gear_guru.core.errors import ContentValidationError, ScreenError
from gear_guru.core.events import EventLog, ImageLoadError, SelectChange, TabTap, UserEvent
from gear_guru.core.loader import load_member_bundle
from gear_guru.core.screen import ScreenViewModel

HELP_LINES = [
    "tab <family|gear|measure|resources>  highlight a destination",
    "sport <value>                        choose a sport",
    "level <value>                        choose a skill level",
    "photo-error                          report a profile photo load failure",
    "help                                 show this list",
    "quit                                 leave the screen",
]


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def parse_command(raw: str, photo_item_id: str) -> UserEvent | None:
    command, _, argument = raw.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()
    if command == "tab" and argument:
        return TabTap(tab=argument.lower())
    if command == "sport" and argument:
        return SelectChange(field="sport", value=argument)
    if command == "level" and argument:
        return SelectChange(field="skill_level", value=argument)
    if command == "photo-error":
        return ImageLoadError(item_id=photo_item_id)
    return None


def main() -> None:
    console = Console()
    repo_root = _repo_root()
    data_path = Path(os.environ.get("GEAR_GURU_DATA", repo_root / "gear_guru" / "content" / "sample_member.json"))
    settings = SettingsStore(repo_root / "settings.json").load_model()
    loggers = configure_logging(
        repo_root / "logs",
        level=settings.logging.level,
        keep_archives=settings.logging.keep_archives,
    )
    logger = loggers.app
    logger.info("Opening member details for %s.", data_path)

    try:
        bundle = load_member_bundle(data_path)
    except ContentValidationError as exc:
        logger.exception("Failed to load member data.")
        console.print(f"[bold red]Failed to load member data:[/bold red]\n{escape(str(exc))}")
        raise SystemExit(1) from exc

    events = EventLog()
    view_model = ScreenViewModel.from_bundle(bundle, settings=settings.screen, sink=events)

    try:
        render = view_model.render()
        while True:
            console.clear()
            console.print(screen_widget(render, view_model.theme))
            last_event = events.last()
            if last_event is not None:
                console.print(f"last event: {last_event.model_dump_json()}", style="dim", markup=False)
            raw = Prompt.ask("Action", default="help")
            if raw.strip().lower() in {"q", "quit", "exit"}:
                logger.info("Closed member details after %d events.", len(events))
                console.print("[bold]Goodbye.[/bold]")
                return
            if raw.strip().lower() in {"h", "help"}:
                for line in HELP_LINES:
                    console.print(f"- {line}")
                Prompt.ask("Press Enter to continue", default="")
                continue
            event = parse_command(raw, view_model.photo.item_id)
            if event is None:
                console.print("[red]Unknown action.[/red]")
                Prompt.ask("Press Enter to continue", default="")
                continue
            render = view_model.handle(event)
    except ScreenError:
        logger.exception("Rendering failed.")
        console.print(f"[bold red]Rendering failed.[/bold red] See {loggers.latest_log_path}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
