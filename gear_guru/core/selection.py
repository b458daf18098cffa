from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .errors import ValidationError
from .events import EventSink, SelectionChanged, discard_event
from .models import SELECTION_FIELDS, SelectionField
from .settings import ScreenSettings, SelectOption

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Selection:
    sport: str
    skill_level: str


@dataclass(frozen=True, slots=True)
class OptionView:
    value: str
    label: str
    selected: bool


class SelectionController:
    def __init__(
        self,
        sports: list[SelectOption],
        skill_levels: list[SelectOption],
        sport: str,
        skill_level: str,
        sink: EventSink = discard_event,
    ) -> None:
        self._options: dict[SelectionField, tuple[SelectOption, ...]] = {
            "sport": tuple(sports),
            "skill_level": tuple(skill_levels),
        }
        self._sink = sink
        self._require("sport", sport)
        self._require("skill_level", skill_level)
        self._selection = Selection(sport=sport, skill_level=skill_level)

    @classmethod
    def from_settings(cls, settings: ScreenSettings, sink: EventSink = discard_event) -> "SelectionController":
        return cls(
            sports=settings.sports,
            skill_levels=settings.skill_levels,
            sport=settings.default_sport,
            skill_level=settings.default_skill_level,
            sink=sink,
        )

    @property
    def selection(self) -> Selection:
        return self._selection

    def allowed(self, field: SelectionField) -> tuple[str, ...]:
        if field not in SELECTION_FIELDS:
            raise ValidationError("field", field, SELECTION_FIELDS)
        return tuple(option.value for option in self._options[field])

    def options(self, field: SelectionField) -> list[OptionView]:
        current = getattr(self._selection, field)
        return [
            OptionView(value=option.value, label=option.label, selected=option.value == current)
            for option in self._options[field]
        ]

    def _require(self, field: SelectionField, value: object) -> str:
        allowed = self.allowed(field)
        if not isinstance(value, str) or value not in allowed:
            raise ValidationError(field, value, allowed)
        return value

    def set_value(self, field: SelectionField, value: str) -> Selection:
        checked = self._require(field, value)
        if getattr(self._selection, field) == checked:
            return self._selection
        self._selection = replace(self._selection, **{field: checked})
        logger.debug("Selection %s -> %s", field, checked)
        self._sink(SelectionChanged(field=field, value=checked))
        return self._selection

    def set_sport(self, value: str) -> Selection:
        return self.set_value("sport", value)

    def set_skill_level(self, value: str) -> Selection:
        return self.set_value("skill_level", value)
