from __future__ import annotations

import logging
from dataclasses import dataclass, fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeConfig:
    name: str
    # screen chrome
    header_background: str
    header_text: str
    nav_background: str
    nav_active: str
    nav_inactive: str
    heading: str
    heading_secondary: str
    surface: str
    surface_alt: str
    text: str
    text_muted: str
    control_bg: str
    control_text: str
    online_dot: str
    success_fg: str
    success_bg: str
    warning_fg: str
    warning_bg: str
    affirm_icon: str
    alert_icon: str
    alert_card_bg: str
    # gear illustrations
    ski_gradient_start: str
    ski_gradient_end: str
    binding: str
    boot_shell: str
    boot_outline: str
    boot_accent: str
    boot_strap: str
    pole_shaft: str
    pole_grip: str
    pole_basket: str
    helmet_shell: str
    helmet_outline: str
    helmet_ear: str
    goggle: str
    highlight: str
    board_gradient_start: str
    board_gradient_end: str
    board_outline: str
    board_binding: str
    board_binding_outline: str
    skate_boot: str
    skate_outline: str
    skate_holder: str
    skate_blade: str
    skate_strap: str
    silhouette: str

    def color(self, token: str) -> str:
        if token == "name" or token not in _TOKEN_NAMES:
            raise KeyError(f"Unknown colour token '{token}'.")
        return getattr(self, token)

    def tokens(self) -> dict[str, str]:
        return {token: getattr(self, token) for token in sorted(_TOKEN_NAMES)}


_TOKEN_NAMES: frozenset[str] = frozenset(field.name for field in fields(ThemeConfig) if field.name != "name")


THEMES: dict[str, ThemeConfig] = {
    "classic_blue": ThemeConfig(
        name="classic_blue",
        header_background="#1d4ed8",
        header_text="#ffffff",
        nav_background="#1d4ed8",
        nav_active="#ffffff",
        nav_inactive="#93c5fd",
        heading="#1d4ed8",
        heading_secondary="#1d4ed8",
        surface="#ffffff",
        surface_alt="#f8fafc",
        text="#0f172a",
        text_muted="#94a3b8",
        control_bg="#ffffff",
        control_text="#334155",
        online_dot="#22c55e",
        success_fg="#16a34a",
        success_bg="#dcfce7",
        warning_fg="#dc2626",
        warning_bg="#fee2e2",
        affirm_icon="#2563eb",
        alert_icon="#dc2626",
        alert_card_bg="#fef2f2",
        ski_gradient_start="#ef4444",
        ski_gradient_end="#991b1b",
        binding="#1e293b",
        boot_shell="#475569",
        boot_outline="#1e293b",
        boot_accent="#ef4444",
        boot_strap="#0f172a",
        pole_shaft="#1e293b",
        pole_grip="#eab308",
        pole_basket="#3b82f6",
        helmet_shell="#3b82f6",
        helmet_outline="#1e3a8a",
        helmet_ear="#1e3a8a",
        goggle="#000000",
        highlight="#ffffff",
        board_gradient_start="#7c3aed",
        board_gradient_end="#4c1d95",
        board_outline="#3b0764",
        board_binding="#e2e8f0",
        board_binding_outline="#94a3b8",
        skate_boot="#1e293b",
        skate_outline="#0f172a",
        skate_holder="#94a3b8",
        skate_blade="#e2e8f0",
        skate_strap="#3b82f6",
        silhouette="#cbd5e1",
    ),
    "emerald": ThemeConfig(
        name="emerald",
        header_background="#ffffff",
        header_text="#0f172a",
        nav_background="#ffffff",
        nav_active="#008751",
        nav_inactive="#cbd5e1",
        heading="#008751",
        heading_secondary="#1e3a32",
        surface="#f8fafc",
        surface_alt="#f1f5f9",
        text="#0f172a",
        text_muted="#94a3b8",
        control_bg="#ecfdf5",
        control_text="#047857",
        online_dot="#008751",
        success_fg="#008751",
        success_bg="#e3f9f1",
        warning_fg="#ea580c",
        warning_bg="#ffedd5",
        affirm_icon="#008751",
        alert_icon="#f97316",
        alert_card_bg="#f8fafc",
        ski_gradient_start="#ef4444",
        ski_gradient_end="#991b1b",
        binding="#1e293b",
        boot_shell="#334155",
        boot_outline="#0f172a",
        boot_accent="#f97316",
        boot_strap="#0f172a",
        pole_shaft="#1e293b",
        pole_grip="#eab308",
        pole_basket="#3b82f6",
        helmet_shell="#1e40af",
        helmet_outline="#1e3a8a",
        helmet_ear="#1e293b",
        goggle="#000000",
        highlight="#ffffff",
        board_gradient_start="#7c3aed",
        board_gradient_end="#4c1d95",
        board_outline="#3b0764",
        board_binding="#e2e8f0",
        board_binding_outline="#94a3b8",
        skate_boot="#1e293b",
        skate_outline="#0f172a",
        skate_holder="#94a3b8",
        skate_blade="#e2e8f0",
        skate_strap="#3b82f6",
        silhouette="#cbd5e1",
    ),
}

DEFAULT_THEME = "classic_blue"


def available_themes() -> tuple[str, ...]:
    return tuple(THEMES.keys())


def get_theme(theme_name: str | None) -> ThemeConfig:
    theme = THEMES.get(theme_name or "")
    if theme is None:
        if theme_name:
            logger.warning("Unknown theme '%s'; using '%s'.", theme_name, DEFAULT_THEME)
        theme = THEMES[DEFAULT_THEME]
    return theme
