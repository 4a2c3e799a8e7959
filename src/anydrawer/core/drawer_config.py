"""Drawer configuration model.

A ``DrawerConfig`` is built once by whoever opens the drawer and read by the
renderer for layout, animation timing, gesture handling and dismissal wiring.
Instances are frozen; use ``copy_with`` to derive a variant.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

from .drawer_side import DrawerSide
from .errors import InvalidConfiguration

if TYPE_CHECKING:
    from .sizing import Size

logger = logging.getLogger(__name__)

DEFAULT_CLOSE_ON_CLICK_OUTSIDE = True
DEFAULT_BACKDROP_OPACITY = 0.4
DEFAULT_DRAG_ENABLED = False
DEFAULT_MAX_DRAG_EXTENT = 300.0
DEFAULT_SIDE = DrawerSide.RIGHT
DEFAULT_ANIMATION_DURATION = timedelta(milliseconds=300)
DEFAULT_CLOSE_ON_ESCAPE_KEY = True
DEFAULT_BORDER_RADIUS = 20.0
DEFAULT_CLOSE_ON_RESUME = False
DEFAULT_CLOSE_ON_BACK_BUTTON = False
DEFAULT_MIN_BACKDROP_EXTENT = 30.0


class DismissTrigger(Enum):
    """User actions that can close an open drawer."""

    OUTSIDE_CLICK = auto()  # Tap/click on the backdrop
    ESCAPE_KEY = auto()
    BACK_BUTTON = auto()  # Android system back
    APP_RESUME = auto()  # App returns from background


@dataclass(frozen=True)
class DrawerConfig:
    """Display and behavior options for a drawer.

    Attributes:
        width_by_size: Computes the drawer width from the viewport size. When
            None the renderer falls back to ``default_drawer_width``.
        close_on_click_outside: Close when the backdrop is clicked
        backdrop_opacity: Opacity of the dimmed backdrop (0.0-1.0)
        drag_enabled: Whether the drawer can be dragged open from the screen edge
        max_drag_extent: Maximum distance the drawer can be dragged
        side: Screen edge the drawer slides in from
        animation_duration: Open/close animation length
        close_on_escape_key: Close when Escape is pressed
        border_radius: Corner radius of the drawer panel
        close_on_resume: Close when the app resumes from background
        close_on_back_button: Close on the Android back button
        max_drawer_extent: Upper bound for the drawer width
        min_backdrop_extent: Width of content that stays visible beside the drawer
    """

    width_by_size: Callable[["Size"], float] | None = None
    close_on_click_outside: bool = DEFAULT_CLOSE_ON_CLICK_OUTSIDE
    backdrop_opacity: float = DEFAULT_BACKDROP_OPACITY
    drag_enabled: bool | None = DEFAULT_DRAG_ENABLED
    max_drag_extent: float | None = DEFAULT_MAX_DRAG_EXTENT
    side: DrawerSide = DEFAULT_SIDE
    animation_duration: timedelta = DEFAULT_ANIMATION_DURATION
    close_on_escape_key: bool = DEFAULT_CLOSE_ON_ESCAPE_KEY
    border_radius: float = DEFAULT_BORDER_RADIUS
    close_on_resume: bool = DEFAULT_CLOSE_ON_RESUME
    close_on_back_button: bool = DEFAULT_CLOSE_ON_BACK_BUTTON
    max_drawer_extent: float | None = None
    min_backdrop_extent: float = DEFAULT_MIN_BACKDROP_EXTENT

    def __post_init__(self):
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "side", DrawerSide.parse(self.side))

        for name in ("backdrop_opacity", "border_radius"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise InvalidConfiguration(name, f"{name} must be a number, got {value!r}")

        if math.isnan(self.backdrop_opacity) or not 0 <= self.backdrop_opacity <= 1:
            raise InvalidConfiguration(
                "backdrop_opacity",
                f"backdrop_opacity must be between 0 and 1, got {self.backdrop_opacity}",
            )
        if math.isnan(self.border_radius) or self.border_radius < 0:
            raise InvalidConfiguration(
                "border_radius",
                f"border_radius must be greater than or equal to 0, got {self.border_radius}",
            )
        if not (self.close_on_click_outside or self.close_on_escape_key):
            raise InvalidConfiguration(
                "close_on_click_outside",
                "close_on_click_outside and close_on_escape_key cannot both be False",
            )

    def copy_with(self, **overrides) -> DrawerConfig:
        """Return a new config with ``overrides`` applied on top of this one.

        The result is validated like any freshly built config, so an override
        that breaks an invariant raises ``InvalidConfiguration``.
        """
        derived = dataclasses.replace(self, **overrides)
        logger.debug("Derived drawer config, overrides: %s", sorted(overrides))
        return derived

    def dismissal_triggers(self) -> frozenset[DismissTrigger]:
        triggers = set()
        if self.close_on_click_outside:
            triggers.add(DismissTrigger.OUTSIDE_CLICK)
        if self.close_on_escape_key:
            triggers.add(DismissTrigger.ESCAPE_KEY)
        if self.close_on_back_button:
            triggers.add(DismissTrigger.BACK_BUTTON)
        if self.close_on_resume:
            triggers.add(DismissTrigger.APP_RESUME)
        return frozenset(triggers)

    def __str__(self) -> str:
        lines = [
            f"    {f.name}={getattr(self, f.name)!s},"
            for f in dataclasses.fields(self)
        ]
        return "DrawerConfig(\n" + "\n".join(lines) + "\n)"
