from __future__ import annotations

import logging
from typing import Callable, Literal, Union

from .models import SelectionField, StrictModel, TabName

FallbackStage = Literal["fallback", "placeholder"]

event_logger = logging.getLogger("gear_guru.events")


class SelectionChanged(StrictModel):
    kind: Literal["selection-changed"] = "selection-changed"
    field: SelectionField
    value: str


class TabChanged(StrictModel):
    kind: Literal["tab-changed"] = "tab-changed"
    active: TabName


class ImageFallbackTriggered(StrictModel):
    kind: Literal["image-fallback-triggered"] = "image-fallback-triggered"
    item_id: str
    stage: FallbackStage
    source: str | None = None


ScreenEvent = Union[SelectionChanged, TabChanged, ImageFallbackTriggered]
EventSink = Callable[[ScreenEvent], None]


class SelectChange(StrictModel):
    field: SelectionField
    value: str


class TabTap(StrictModel):
    tab: str


class ImageLoadError(StrictModel):
    item_id: str


UserEvent = Union[SelectChange, TabTap, ImageLoadError]


def discard_event(event: ScreenEvent) -> None:
    return None


class EventLog:
    def __init__(self) -> None:
        self.events: list[ScreenEvent] = []

    def __call__(self, event: ScreenEvent) -> None:
        self.events.append(event)
        event_logger.info("%s %s", event.kind, event.model_dump_json(exclude={"kind"}))

    def __len__(self) -> int:
        return len(self.events)

    def kinds(self) -> list[str]:
        return [event.kind for event in self.events]

    def last(self) -> ScreenEvent | None:
        return self.events[-1] if self.events else None

    def clear(self) -> None:
        self.events.clear()
