from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .icons import IconDescriptor, IconRegistry
from .models import SizingEntry, SizingKind

LineEmphasis = Literal["primary", "secondary", "pair"]


@dataclass(frozen=True, slots=True)
class SizingLine:
    value: str
    emphasis: LineEmphasis
    label: str | None = None


@dataclass(frozen=True, slots=True)
class RenderedSizing:
    label: str
    kind: SizingKind
    icon: IconDescriptor
    lines: tuple[SizingLine, ...]

    @property
    def empty(self) -> bool:
        return not self.lines

    def pairs(self) -> list[tuple[str, str]]:
        return [(line.label or "", line.value) for line in self.lines if line.emphasis == "pair"]

    def primary(self) -> str | None:
        return next((line.value for line in self.lines if line.emphasis == "primary"), None)

    def secondary(self) -> list[str]:
        return [line.value for line in self.lines if line.emphasis == "secondary"]


def _simple_lines(values: list[str]) -> tuple[SizingLine, ...]:
    return tuple(
        SizingLine(value=value, emphasis="primary" if index == 0 else "secondary")
        for index, value in enumerate(values)
    )


def _detailed_lines(entry: SizingEntry) -> tuple[SizingLine, ...]:
    return tuple(SizingLine(value=item.value, emphasis="pair", label=item.label) for item in entry.items)


def render_sizing(entry: SizingEntry, icons: IconRegistry) -> RenderedSizing:
    if entry.kind == "Detailed":
        lines = _detailed_lines(entry)
    else:
        lines = _simple_lines(entry.values)
    return RenderedSizing(label=entry.label, kind=entry.kind, icon=icons.get(entry.icon), lines=lines)


def render_sizing_section(entries: list[SizingEntry], icons: IconRegistry) -> list[RenderedSizing]:
    return [render_sizing(entry, icons) for entry in entries]
