from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ContentValidationError, MissingDataError, UnknownStatusError, ValidationError
from .events import EventSink, ImageLoadError, SelectChange, TabTap, UserEvent, discard_event
from .icons import IconDescriptor, IconRegistry
from .models import SELECTION_FIELDS, GearItem, MemberBundle, MemberProfile, SelectionField, SizingEntry, TabName
from .photo import PhotoStage, ProfilePhoto
from .selection import OptionView, Selection, SelectionController
from .settings import ScreenSettings
from .sizing import RenderedSizing, render_sizing_section
from .status import BadgeColors, StatusStyle, resolve_status, status_colors
from .tabs import TabButton, TabController
from .theme import ThemeConfig, get_theme

logger = logging.getLogger(__name__)

CONTROL_LABELS: dict[SelectionField, str] = {"sport": "Sport", "skill_level": "Level"}


@dataclass(frozen=True, slots=True)
class PhotoView:
    item_id: str
    stage: PhotoStage
    source: str | None
    fallback_source: str | None
    alt: str
    placeholder: IconDescriptor | None


@dataclass(frozen=True, slots=True)
class ProfileView:
    name: str
    rows: tuple[tuple[str, str], ...]
    photo: PhotoView


@dataclass(frozen=True, slots=True)
class SelectControl:
    field: SelectionField
    label: str
    value: str
    options: tuple[OptionView, ...]
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class GearCard:
    id: str
    type: str
    brand: str
    spec: str
    icon: IconDescriptor
    status: StatusStyle
    colors: BadgeColors
    card_background: str

    @property
    def attention(self) -> bool:
        return self.status.emphasize


@dataclass(frozen=True, slots=True)
class ScreenRender:
    title: str
    theme: str
    profile: ProfileView
    controls: tuple[SelectControl, ...]
    sizing: tuple[RenderedSizing, ...]
    gear: tuple[GearCard, ...]
    tabs: tuple[TabButton, ...]
    active_tab: TabName

    def control(self, field: SelectionField) -> SelectControl:
        for control in self.controls:
            if control.field == field:
                return control
        raise KeyError(f"No selection control '{field}'.")

    def card(self, item_id: str) -> GearCard:
        for card in self.gear:
            if card.id == item_id:
                return card
        raise KeyError(f"No gear card '{item_id}'.")


def _assert_unique_ids(gear: list[GearItem]) -> None:
    seen: set[str] = set()
    for item in gear:
        if item.id in seen:
            raise ContentValidationError(f"Duplicate gear id '{item.id}'.")
        seen.add(item.id)


class ScreenViewModel:
    def __init__(
        self,
        profile: MemberProfile | None,
        sizing: list[SizingEntry] | None,
        gear: list[GearItem] | None,
        settings: ScreenSettings | None = None,
        theme: ThemeConfig | None = None,
        sink: EventSink = discard_event,
    ) -> None:
        self.settings = settings or ScreenSettings()
        self.theme = theme or get_theme(self.settings.theme)
        self.profile = profile
        self.sizing = list(sizing) if sizing is not None else None
        self.gear = list(gear) if gear is not None else None
        if self.gear is not None:
            _assert_unique_ids(self.gear)

        self.icons = IconRegistry(self.theme)
        self.selection = SelectionController.from_settings(self.settings, sink=sink)
        self.tabs = TabController(sink=sink)
        self.photo = ProfilePhoto(
            profile.photo if profile is not None else None,
            item_id=self.settings.photo_item_id,
            sink=sink,
        )
        self._hints: dict[SelectionField, str] = {}

    @classmethod
    def from_bundle(
        cls,
        bundle: MemberBundle,
        settings: ScreenSettings | None = None,
        theme: ThemeConfig | None = None,
        sink: EventSink = discard_event,
    ) -> "ScreenViewModel":
        return cls(bundle.profile, bundle.sizing, bundle.gear, settings=settings, theme=theme, sink=sink)

    @property
    def current_selection(self) -> Selection:
        return self.selection.selection

    @property
    def active_tab(self) -> TabName:
        return self.tabs.active

    def handle(self, event: UserEvent) -> ScreenRender:
        if isinstance(event, SelectChange):
            self._select(event.field, event.value)
        elif isinstance(event, TabTap):
            try:
                self.tabs.tap(event.tab)
            except ValidationError as exc:
                logger.warning("Rejected tab tap: %s", exc)
        elif isinstance(event, ImageLoadError):
            if event.item_id == self.photo.item_id:
                self.photo.on_load_error()
            else:
                logger.warning("Load error for unknown image '%s' ignored.", event.item_id)
        else:
            raise TypeError(f"Unsupported screen event: {event!r}")
        return self.render()

    def _select(self, field: SelectionField, value: str) -> None:
        try:
            self.selection.set_value(field, value)
        except ValidationError as exc:
            logger.warning("Rejected %s selection: %s", field, exc)
            self._hints[field] = str(exc)
            return
        self._hints.pop(field, None)

    def render(self) -> ScreenRender:
        profile, sizing, gear = self.profile, self.sizing, self.gear
        if profile is None or sizing is None or gear is None:
            missing = [
                name
                for name, value in (("profile", profile), ("sizing", sizing), ("inventory", gear))
                if value is None
            ]
            raise MissingDataError(f"Cannot render {self.settings.title}: missing {', '.join(missing)}.")

        return ScreenRender(
            title=self.settings.title,
            theme=self.theme.name,
            profile=self._profile_view(profile),
            controls=tuple(self._control(field) for field in SELECTION_FIELDS),
            sizing=tuple(render_sizing_section(sizing, self.icons)),
            gear=tuple(self._gear_card(item) for item in gear),
            tabs=tuple(self.tabs.tabs()),
            active_tab=self.tabs.active,
        )

    def _profile_view(self, profile: MemberProfile) -> ProfileView:
        photo = PhotoView(
            item_id=self.photo.item_id,
            stage=self.photo.stage,
            source=self.photo.source,
            fallback_source=self.photo.alt_source,
            alt=profile.name,
            placeholder=self.icons.placeholder() if self.photo.stage == "placeholder" else None,
        )
        return ProfileView(name=profile.name, rows=tuple(profile.attribute_rows()), photo=photo)

    def _control(self, field: SelectionField) -> SelectControl:
        return SelectControl(
            field=field,
            label=CONTROL_LABELS[field],
            value=getattr(self.selection.selection, field),
            options=tuple(self.selection.options(field)),
            hint=self._hints.get(field),
        )

    def _gear_card(self, item: GearItem) -> GearCard:
        try:
            style = resolve_status(item.status)
        except UnknownStatusError as exc:
            raise UnknownStatusError(item.status, item_id=item.id) from exc
        return GearCard(
            id=item.id,
            type=item.type,
            brand=item.brand,
            spec=item.spec,
            icon=self.icons.get(item.icon_key),
            status=style,
            colors=status_colors(style, self.theme),
            card_background=self.theme.alert_card_bg if style.emphasize else self.theme.surface_alt,
        )
