from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
EVENT_FORMAT = "%(asctime)s %(message)s"


@dataclass(slots=True)
class AppLoggerBundle:
    app: logging.Logger
    events: logging.Logger
    latest_log_path: Path


def _archive_latest(logs_dir: Path) -> None:
    latest = logs_dir / "latest.log"
    if not latest.exists():
        return
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    latest.replace(logs_dir / f"latest_{stamp}.log")


def _rotate_latest_log(logs_dir: Path, keep_archives: int = 5) -> Path:
    logs_dir.mkdir(parents=True, exist_ok=True)
    _archive_latest(logs_dir)
    archives = sorted(
        (path for path in logs_dir.glob("latest_*.log") if path.is_file()),
        key=lambda path: (path.stat().st_mtime, path.name),
        reverse=True,
    )
    for stale in archives[keep_archives:]:
        stale.unlink(missing_ok=True)
    return logs_dir / "latest.log"


def _isolated_logger(name: str, level: int | str) -> logging.Logger:
    target = logging.getLogger(name)
    target.setLevel(level)
    for handler in list(target.handlers):
        handler.close()
        target.removeHandler(handler)
    target.propagate = False
    return target


def _file_handler(path: Path, fmt: str) -> logging.FileHandler:
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(logs_dir: Path, level: str = "INFO", keep_archives: int = 5, console: bool = True) -> AppLoggerBundle:
    latest = _rotate_latest_log(logs_dir, keep_archives=keep_archives)

    app_logger = _isolated_logger("gear_guru", level)
    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        stream_handler.setLevel(logging.WARNING)
        app_logger.addHandler(stream_handler)
    app_logger.addHandler(_file_handler(latest, LOG_FORMAT))

    events_logger = _isolated_logger("gear_guru.events", logging.INFO)
    events_logger.addHandler(_file_handler(logs_dir / "events.log", EVENT_FORMAT))

    return AppLoggerBundle(app=app_logger, events=events_logger, latest_log_path=latest)
