from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .theme import DEFAULT_THEME

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SelectOption(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    value: str = Field(min_length=1)
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data, "label": data}
        if isinstance(data, dict) and not data.get("label"):
            return {**data, "label": data.get("value", "")}
        return data


def _options(*pairs: tuple[str, str]) -> list[SelectOption]:
    return [SelectOption(value=value, label=label) for value, label in pairs]


DEFAULT_SPORTS = (
    ("Downhill Ski", "Downhill"),
    ("Snowboarding", "Snowboard"),
    ("Cross Country", "XC Ski"),
    ("Telemark", "Telemark"),
)
DEFAULT_SKILL_LEVELS = (
    ("Beginner", "Beginner"),
    ("Intermediate", "Intermed."),
    ("Advanced", "Advanced"),
    ("Expert", "Expert"),
)


def _check_options(name: str, options: list[SelectOption], default: str) -> None:
    values = [option.value for option in options]
    if len(set(values)) != len(values):
        raise ValueError(f"{name} options must have unique values.")
    if default not in values:
        raise ValueError(f"Default {name} '{default}' is not one of its options.")


class ScreenSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = "Member Details"
    theme: str = DEFAULT_THEME
    sports: list[SelectOption] = Field(default_factory=lambda: _options(*DEFAULT_SPORTS), min_length=1)
    skill_levels: list[SelectOption] = Field(default_factory=lambda: _options(*DEFAULT_SKILL_LEVELS), min_length=1)
    default_sport: str = "Downhill Ski"
    default_skill_level: str = "Intermediate"
    photo_item_id: str = Field(default="profile-photo", min_length=1)

    @model_validator(mode="after")
    def validate_defaults(self) -> "ScreenSettings":
        _check_options("sport", self.sports, self.default_sport)
        _check_options("skill level", self.skill_levels, self.default_skill_level)
        return self


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: LogLevel = "INFO"
    keep_archives: int = Field(default=5, ge=0, le=50)


class AppSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    screen: ScreenSettings = Field(default_factory=ScreenSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def as_dict(self) -> dict[str, Any]:
        return json.loads(self.model_dump_json())


def merge_settings(payload: dict[str, Any] | None) -> dict[str, Any]:
    if not isinstance(payload, dict):
        payload = {}
    return AppSettings.model_validate(payload).as_dict()


def default_settings() -> dict[str, Any]:
    return AppSettings().as_dict()
