from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gear_guru.core.screen import GearCard, ProfileView, ScreenRender, SelectControl
from gear_guru.core.sizing import RenderedSizing
from gear_guru.core.tabs import TabButton
from gear_guru.core.theme import ThemeConfig

STATUS_GLYPHS = {"check-circle": "✔", "alert-circle": "!"}


def _photo_line(profile: ProfileView, theme: ThemeConfig) -> Text:
    photo = profile.photo
    if photo.stage == "placeholder":
        return Text("[silhouette]", style=theme.silhouette)
    return Text(f"{photo.source} ({photo.stage})")


def profile_widget(profile: ProfileView, theme: ThemeConfig) -> Panel:
    table = Table.grid(expand=True)
    table.add_column(justify="left", style=theme.text_muted)
    table.add_column(justify="right", style=f"bold {theme.text}")
    table.add_row("Photo", _photo_line(profile, theme))
    for label, value in profile.rows:
        table.add_row(label.upper(), Text(value))
    title = Text(profile.name, style=f"bold {theme.text}")
    title.append(" ●", style=theme.online_dot)
    return Panel(table, title=title, border_style=theme.heading)


def selection_widget(controls: tuple[SelectControl, ...], theme: ThemeConfig) -> Panel:
    table = Table.grid(expand=True, padding=(0, 1))
    table.add_column(style=f"bold {theme.control_text}")
    table.add_column()
    for control in controls:
        options = Text()
        for index, option in enumerate(control.options):
            if index:
                options.append(" | ")
            style = f"bold reverse {theme.control_text}" if option.selected else theme.text_muted
            options.append(option.label, style=style)
        table.add_row(control.label.upper(), options)
        if control.hint:
            table.add_row("", Text(control.hint, style=f"italic {theme.warning_fg}"))
    return Panel(table, title="Selection", border_style=theme.heading)


def _sizing_cell(entry: RenderedSizing, theme: ThemeConfig) -> Text:
    text = Text()
    if entry.empty:
        text.append("-", style=theme.text_muted)
        return text
    for index, line in enumerate(entry.lines):
        if index:
            text.append("\n")
        if line.emphasis == "pair":
            text.append(f"{line.label} ", style=theme.text_muted)
            text.append(line.value, style=f"bold {theme.text}")
        elif line.emphasis == "primary":
            text.append(line.value, style=f"bold {theme.text}")
        else:
            text.append(line.value.upper(), style=theme.text_muted)
    return text


def sizing_widget(sizing: tuple[RenderedSizing, ...], theme: ThemeConfig) -> Panel:
    table = Table(expand=True)
    table.add_column("Category", style=f"bold {theme.heading}")
    table.add_column("Icon", style=theme.text_muted)
    table.add_column("Sizing")
    if not sizing:
        table.add_row("-", "-", "-")
    for entry in sizing:
        table.add_row(Text(entry.label.upper()), entry.icon.key, _sizing_cell(entry, theme))
    return Panel(table, title="Sizing", border_style=theme.heading)


def _badge(card: GearCard) -> Text:
    style = f"bold {card.colors.foreground} on {card.colors.background}"
    if card.attention:
        style = f"blink {style}"
    badge = Text(f" {card.status.badge_text.upper()} ", style=style)
    badge.append(f" {STATUS_GLYPHS[card.status.icon]}", style=f"bold {card.colors.icon}")
    return badge


def gear_widget(gear: tuple[GearCard, ...], theme: ThemeConfig) -> Panel:
    table = Table(expand=True)
    table.add_column("Type", style=theme.text_muted)
    table.add_column("Brand", style=f"bold {theme.text}")
    table.add_column("Spec")
    table.add_column("Status", justify="right")
    if not gear:
        table.add_row("-", "-", "-", "-")
    for card in gear:
        table.add_row(Text(card.type.upper()), Text(card.brand), Text(card.spec.upper()), _badge(card))
    return Panel(table, title="Gear Inventory", border_style=theme.heading)


def tab_bar_widget(tabs: tuple[TabButton, ...], theme: ThemeConfig) -> Text:
    bar = Text(justify="center")
    for index, tab in enumerate(tabs):
        if index:
            bar.append("   ")
        if tab.active:
            bar.append(f"[{tab.label}]", style=f"bold {theme.nav_active} on {theme.nav_background}")
        else:
            bar.append(tab.label, style=theme.nav_inactive)
    return bar


def screen_widget(render: ScreenRender, theme: ThemeConfig) -> Panel:
    body = Group(
        profile_widget(render.profile, theme),
        selection_widget(render.controls, theme),
        sizing_widget(render.sizing, theme),
        gear_widget(render.gear, theme),
        tab_bar_widget(render.tabs, theme),
    )
    return Panel(body, title=render.title.upper(), subtitle=render.theme, border_style=theme.header_background)
