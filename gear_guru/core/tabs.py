from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ValidationError
from .events import EventSink, TabChanged, discard_event
from .models import TAB_NAMES, TabName

logger = logging.getLogger(__name__)

INITIAL_TAB: TabName = "gear"

TAB_LABELS: dict[TabName, tuple[str, str]] = {
    "family": ("FAMILY", "users"),
    "gear": ("GEAR", "compass"),
    "measure": ("MEASURE", "ruler"),
    "resources": ("RESOURCES", "info"),
}


@dataclass(frozen=True, slots=True)
class TabButton:
    id: TabName
    label: str
    icon: str
    active: bool


class TabController:
    def __init__(self, sink: EventSink = discard_event) -> None:
        self._active: TabName = INITIAL_TAB
        self._sink = sink

    @property
    def active(self) -> TabName:
        return self._active

    def tap(self, tab: str) -> TabName:
        if tab not in TAB_NAMES:
            raise ValidationError("tab", tab, TAB_NAMES)
        previous = self._active
        self._active = tab  # type: ignore[assignment]
        if previous != self._active:
            logger.debug("Tab %s -> %s", previous, self._active)
            self._sink(TabChanged(active=self._active))
        return self._active

    def tabs(self) -> list[TabButton]:
        return [
            TabButton(id=name, label=TAB_LABELS[name][0], icon=TAB_LABELS[name][1], active=name == self._active)
            for name in TAB_NAMES
        ]
