"""View-state core for the member details screen."""

from .errors import ContentValidationError, MissingDataError, ScreenError, UnknownStatusError, ValidationError
from .events import (
    EventLog,
    ImageFallbackTriggered,
    ImageLoadError,
    SelectChange,
    SelectionChanged,
    TabChanged,
    TabTap,
)
from .icons import IconDescriptor, IconRegistry
from .loader import load_member_bundle, parse_member_bundle
from .models import GearItem, MemberBundle, MemberProfile, SizingEntry, SizingItem
from .photo import ProfilePhoto
from .screen import ScreenRender, ScreenViewModel
from .selection import Selection, SelectionController
from .settings import AppSettings, ScreenSettings, default_settings, merge_settings
from .sizing import RenderedSizing, render_sizing, render_sizing_section
from .status import StatusStyle, resolve_status
from .tabs import TabController
from .theme import ThemeConfig, available_themes, get_theme

__all__ = [
    "AppSettings",
    "ContentValidationError",
    "EventLog",
    "GearItem",
    "IconDescriptor",
    "IconRegistry",
    "ImageFallbackTriggered",
    "ImageLoadError",
    "MemberBundle",
    "MemberProfile",
    "MissingDataError",
    "ProfilePhoto",
    "RenderedSizing",
    "ScreenError",
    "ScreenRender",
    "ScreenSettings",
    "ScreenViewModel",
    "SelectChange",
    "Selection",
    "SelectionChanged",
    "SelectionController",
    "SizingEntry",
    "SizingItem",
    "StatusStyle",
    "TabChanged",
    "TabController",
    "TabTap",
    "ThemeConfig",
    "UnknownStatusError",
    "ValidationError",
    "available_themes",
    "default_settings",
    "get_theme",
    "load_member_bundle",
    "merge_settings",
    "parse_member_bundle",
    "render_sizing",
    "render_sizing_section",
    "resolve_status",
]
