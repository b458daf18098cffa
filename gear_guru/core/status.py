from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import UnknownStatusError
from .models import GEAR_STATUSES
from .theme import ThemeConfig

StatusIcon = Literal["check-circle", "alert-circle"]
BadgeColorClass = Literal["success", "warning"]


@dataclass(frozen=True, slots=True)
class StatusStyle:
    badge_text: str
    badge_color_class: BadgeColorClass
    icon: StatusIcon
    emphasize: bool

    @property
    def affirmative(self) -> bool:
        return self.icon == "check-circle"


@dataclass(frozen=True, slots=True)
class BadgeColors:
    foreground: str
    background: str
    icon: str


_AFFIRMATIVE = ("check-circle", "success", False)
_ALERT = ("alert-circle", "warning", True)

_STATUS_TABLE: dict[str, tuple[StatusIcon, BadgeColorClass, bool]] = {
    "Ready": _AFFIRMATIVE,
    "Cleaned": _AFFIRMATIVE,
    "Update": _ALERT,
}


def resolve_status(status: str) -> StatusStyle:
    if not isinstance(status, str) or status not in GEAR_STATUSES:
        raise UnknownStatusError(status)
    icon, color_class, emphasize = _STATUS_TABLE[status]
    return StatusStyle(badge_text=status, badge_color_class=color_class, icon=icon, emphasize=emphasize)


def status_colors(style: StatusStyle, theme: ThemeConfig) -> BadgeColors:
    if style.badge_color_class == "warning":
        return BadgeColors(foreground=theme.warning_fg, background=theme.warning_bg, icon=theme.alert_icon)
    return BadgeColors(foreground=theme.success_fg, background=theme.success_bg, icon=theme.affirm_icon)
