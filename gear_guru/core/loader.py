from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .errors import ContentValidationError
from .models import MemberBundle


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ContentValidationError(f"Missing member data file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ContentValidationError(f"Invalid JSON in {path.name}: {exc.msg} at line {exc.lineno}") from exc


def _format_issues(source: str, exc: PydanticValidationError) -> list[str]:
    errors = []
    for issue in exc.errors():
        issue_path = ".".join(str(part) for part in issue.get("loc", [])) or "(root)"
        errors.append(f"{source}:{issue_path}: {issue.get('msg', 'validation error')}")
    return errors


def parse_member_bundle(payload: Any, source: str = "payload") -> MemberBundle:
    if not isinstance(payload, dict):
        raise ContentValidationError(f"{source} must be an object with profile, sizing and gear.")
    try:
        return MemberBundle.model_validate(payload)
    except PydanticValidationError as exc:
        raise ContentValidationError(f"Schema validation failed for {source}.", _format_issues(source, exc)) from exc


def load_member_bundle(path: Path) -> MemberBundle:
    return parse_member_bundle(_load_json(path), source=path.name)
