from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from .theme import ThemeConfig

logger = logging.getLogger(__name__)

ShapeKind = Literal["path", "rect", "line", "ellipse"]

GRADIENT_PREFIX = "gradient:"
VIEW_BOX = (0, 0, 64, 64)
FALLBACK_ICON = "helmet"
PLACEHOLDER_ICON = "silhouette"


@dataclass(frozen=True, slots=True)
class IconShape:
    kind: ShapeKind
    geometry: tuple[tuple[str, float | str], ...]
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    line_cap: str | None = None
    opacity: float | None = None
    transform: str | None = None

    def paint_refs(self) -> list[str]:
        return [ref for ref in (self.fill, self.stroke) if ref]

    def attrs(self) -> dict[str, float | str]:
        return dict(self.geometry)


@dataclass(frozen=True, slots=True)
class IconGradient:
    id: str
    start: str
    end: str


@dataclass(frozen=True, slots=True)
class IconDescriptor:
    key: str
    shapes: tuple[IconShape, ...]
    gradients: tuple[IconGradient, ...] = ()
    view_box: tuple[int, int, int, int] = VIEW_BOX
    colors: tuple[tuple[str, str], ...] = ()

    def tokens(self) -> set[str]:
        used: set[str] = set()
        for shape in self.shapes:
            used.update(ref for ref in shape.paint_refs() if not ref.startswith(GRADIENT_PREFIX))
        for gradient in self.gradients:
            used.update((gradient.start, gradient.end))
        return used

    def color_map(self) -> dict[str, str]:
        return dict(self.colors)

    def gradient(self, gradient_id: str) -> IconGradient:
        for gradient in self.gradients:
            if gradient.id == gradient_id:
                return gradient
        raise KeyError(f"Icon '{self.key}' has no gradient '{gradient_id}'.")

    def paint(self, ref: str | None) -> str | tuple[str, str] | None:
        """Resolve a fill or stroke reference to hex.

        Solid tokens give one colour; gradient references give the
        (start, end) stop colours.
        """
        if ref is None:
            return None
        colors = self.color_map()
        if ref.startswith(GRADIENT_PREFIX):
            gradient = self.gradient(ref[len(GRADIENT_PREFIX):])
            return colors[gradient.start], colors[gradient.end]
        return colors[ref]


def _path(d: str, **style: object) -> IconShape:
    return IconShape(kind="path", geometry=(("d", d),), **style)  # type: ignore[arg-type]


def _rect(x: float, y: float, w: float, h: float, rx: float = 0, **style: object) -> IconShape:
    return IconShape(kind="rect", geometry=(("x", x), ("y", y), ("width", w), ("height", h), ("rx", rx)), **style)  # type: ignore[arg-type]


def _line(x1: float, y1: float, x2: float, y2: float, **style: object) -> IconShape:
    return IconShape(kind="line", geometry=(("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)), **style)  # type: ignore[arg-type]


def _ellipse(cx: float, cy: float, rx: float, ry: float, **style: object) -> IconShape:
    return IconShape(kind="ellipse", geometry=(("cx", cx), ("cy", cy), ("rx", rx), ("ry", ry)), **style)  # type: ignore[arg-type]


_GEOMETRY: dict[str, tuple[tuple[IconShape, ...], tuple[IconGradient, ...]]] = {
    "ski": (
        (
            _path("M22 58 L42 6 C43 4 45 2 41 2", stroke="gradient:ski", stroke_width=3.5, line_cap="round"),
            _path("M42 58 L22 6 C21 4 19 2 23 2", stroke="gradient:ski", stroke_width=3.5, line_cap="round"),
            _rect(29, 29, 6, 6, rx=1, fill="binding", transform="rotate(45 32 32)"),
        ),
        (IconGradient(id="ski", start="ski_gradient_start", end="ski_gradient_end"),),
    ),
    "boot": (
        (
            _path(
                "M26 8 L42 10 C45 10.5 46 13 46 16 L44 44 L54 54 C56 56 54 60 50 60 L20 60 "
                "C16 60 16 56 18 52 L22 14 C22.5 10 23 8 26 8 Z",
                fill="boot_shell",
                stroke="boot_outline",
                stroke_width=1.5,
            ),
            _rect(28, 16, 16, 2.5, rx=1, fill="boot_accent"),
            _rect(26, 24, 18, 2.5, rx=1, fill="boot_accent"),
            _rect(28, 38, 14, 2.5, rx=1, fill="boot_accent"),
            _rect(30, 46, 14, 2.5, rx=1, fill="boot_accent"),
            _path("M23 11 L45 13", stroke="boot_strap", stroke_width=3),
            _path("M18 54 L52 54 L49 60 L20 60 Z", fill="boot_strap"),
        ),
        (),
    ),
    "pole": (
        (
            _line(22, 6, 16, 58, stroke="pole_shaft", stroke_width=2),
            _line(42, 6, 48, 58, stroke="pole_shaft", stroke_width=2),
            _path("M19 6 Q22 4 25 6 L23 18 Q20 20 17 18 Z", fill="pole_grip"),
            _path("M39 6 Q42 4 45 6 L43 18 Q40 20 37 18 Z", fill="pole_grip"),
            _ellipse(17, 52, 5, 2, stroke="pole_basket", stroke_width=2.5),
            _ellipse(47, 52, 5, 2, stroke="pole_basket", stroke_width=2.5),
        ),
        (),
    ),
    "helmet": (
        (
            _path(
                "M10 32 C10 12 22 8 32 8 C42 8 54 12 54 32 L54 48 C54 52 50 54 46 54 L18 54 "
                "C14 54 10 52 10 48 Z",
                fill="helmet_shell",
                stroke="helmet_outline",
                stroke_width=1.5,
            ),
            _path("M14 26 Q32 22 50 26 L50 36 Q32 32 14 36 Z", fill="goggle"),
            _path("M16 28 Q32 25 48 28", stroke="highlight", stroke_width=0.5, opacity=0.3),
            _path("M18 29 Q25 28 28 30", stroke="highlight", stroke_width=1, opacity=0.5, line_cap="round"),
            _path("M10 38 Q7 42 10 48 L14 48 Q17 42 14 38 Z", fill="helmet_ear"),
            _path("M54 38 Q57 42 54 48 L50 48 Q47 42 50 38 Z", fill="helmet_ear"),
            _rect(22, 14, 4, 2, rx=1, fill="highlight", opacity=0.4),
            _rect(38, 14, 4, 2, rx=1, fill="highlight", opacity=0.4),
        ),
        (),
    ),
    "snowboard": (
        (
            _path(
                "M18 10 Q14 10 12 16 L10 48 Q10 54 16 54 L48 54 Q54 54 54 48 L52 16 Q50 10 46 10 Z",
                fill="gradient:board",
                stroke="board_outline",
                stroke_width=1.5,
            ),
            _rect(20, 22, 24, 8, rx=2, fill="board_binding", stroke="board_binding_outline", stroke_width=1),
            _rect(20, 36, 24, 8, rx=2, fill="board_binding", stroke="board_binding_outline", stroke_width=1),
            _line(32, 12, 32, 52, stroke="highlight", stroke_width=1, opacity=0.3),
        ),
        (IconGradient(id="board", start="board_gradient_start", end="board_gradient_end"),),
    ),
    "skate": (
        (
            _path(
                "M20 8 L38 10 C41 10.5 42 13 42 16 L40 38 L50 46 C52 48 50 52 46 52 L18 52 "
                "C14 52 14 48 16 44 L18 14 C18.5 10 19 8 20 8 Z",
                fill="skate_boot",
                stroke="skate_outline",
                stroke_width=1.5,
            ),
            _path("M38 40 L50 46 C52 48 50 52 46 52 L18 52", fill="skate_outline"),
            _rect(14, 50, 36, 4, rx=2, fill="skate_holder"),
            _line(12, 54, 52, 54, stroke="skate_blade", stroke_width=2, line_cap="round"),
            _rect(22, 20, 18, 2.5, rx=1, fill="skate_strap"),
            _rect(20, 30, 20, 2.5, rx=1, fill="skate_strap"),
        ),
        (),
    ),
    "silhouette": (
        (
            _ellipse(32, 22, 11, 12, fill="silhouette"),
            _path("M12 60 C12 44 22 38 32 38 C42 38 52 44 52 60 Z", fill="silhouette"),
        ),
        (),
    ),
}

GEAR_TYPE_ALIASES: dict[str, str] = {
    "ski": "ski",
    "skis": "ski",
    "boot": "boot",
    "boots": "boot",
    "pole": "pole",
    "poles": "pole",
    "helmet": "helmet",
    "helmets": "helmet",
    "snowboard": "snowboard",
    "snowboards": "snowboard",
    "board": "snowboard",
    "skate": "skate",
    "skates": "skate",
    "silhouette": "silhouette",
    "placeholder": "silhouette",
}


def normalize_gear_type(gear_type: str) -> str:
    key = GEAR_TYPE_ALIASES.get(gear_type.strip().lower())
    if key is None:
        logger.debug("No icon for gear type '%s'; using '%s'.", gear_type, FALLBACK_ICON)
        return FALLBACK_ICON
    return key


class IconRegistry:
    def __init__(self, theme: ThemeConfig) -> None:
        self.theme = theme

    @staticmethod
    def keys() -> tuple[str, ...]:
        return tuple(_GEOMETRY.keys())

    def get(self, gear_type: str) -> IconDescriptor:
        key = normalize_gear_type(gear_type)
        shapes, gradients = _GEOMETRY[key]
        bare = IconDescriptor(key=key, shapes=shapes, gradients=gradients)
        colors = tuple((token, self.theme.color(token)) for token in sorted(bare.tokens()))
        return IconDescriptor(key=key, shapes=shapes, gradients=gradients, colors=colors)

    def placeholder(self) -> IconDescriptor:
        return self.get(PLACEHOLDER_ICON)
