from __future__ import annotations

import logging
from pathlib import Path

from gear_guru.app.services.logger import configure_logging
from gear_guru.core.events import EventLog, TabChanged


def _reset_loggers() -> None:
    for name in ("gear_guru", "gear_guru.events"):
        target = logging.getLogger(name)
        for handler in target.handlers:
            handler.close()
        target.handlers.clear()
        target.propagate = True
        target.setLevel(logging.NOTSET)


def test_latest_log_rotation_keeps_limited_archives(tmp_path: Path) -> None:
    logs_dir = tmp_path / "logs"
    try:
        for _ in range(5):
            bundle = configure_logging(logs_dir, keep_archives=2, console=False)
            bundle.app.info("session")

        assert bundle.latest_log_path == logs_dir / "latest.log"
        assert bundle.latest_log_path.exists()
        assert len(list(logs_dir.glob("latest_*.log"))) == 2
    finally:
        _reset_loggers()


def test_app_and_event_loggers_write_their_files(tmp_path: Path) -> None:
    logs_dir = tmp_path / "logs"
    try:
        bundle = configure_logging(logs_dir, level="DEBUG", console=False)
        logging.getLogger("gear_guru.core.tabs").warning("rejected tap")
        EventLog()(TabChanged(active="measure"))
        for handler in (*bundle.app.handlers, *bundle.events.handlers):
            handler.flush()

        latest = bundle.latest_log_path.read_text(encoding="utf-8")
        events = (logs_dir / "events.log").read_text(encoding="utf-8")
        assert "[WARNING] gear_guru.core.tabs: rejected tap" in latest
        assert 'tab-changed {"active":"measure"}' in events
        assert "tab-changed" not in latest
    finally:
        _reset_loggers()
