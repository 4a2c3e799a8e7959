"""Width and drag geometry derived from a ``DrawerConfig``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .drawer_config import DrawerConfig

# (exclusive upper bound of viewport width, drawer width)
WIDTH_BREAKPOINTS: tuple[tuple[float, float], ...] = (
    (360, 260),
    (600, 300),
)
WIDE_SCREEN_WIDTH = 400.0


@dataclass(frozen=True)
class Size:
    """Viewport size in logical pixels."""

    width: float
    height: float


def default_drawer_width(screen_width: float) -> float:
    """Drawer width used when the config has no ``width_by_size``."""
    for upper_bound, drawer_width in WIDTH_BREAKPOINTS:
        if screen_width < upper_bound:
            return float(drawer_width)
    return WIDE_SCREEN_WIDTH


def resolve_drawer_width(config: DrawerConfig, size: Size) -> float:
    """Final drawer width for a viewport.

    Starts from ``config.width_by_size`` (or the breakpoint default), then
    caps it at ``max_drawer_extent`` and leaves at least
    ``min_backdrop_extent`` of the viewport uncovered.
    """
    if config.width_by_size is not None:
        width = float(config.width_by_size(size))
    else:
        width = default_drawer_width(size.width)

    if config.max_drawer_extent is not None:
        width = min(width, config.max_drawer_extent)
    width = min(width, size.width - config.min_backdrop_extent)
    return max(width, 0.0)


def clamp_drag_offset(config: DrawerConfig, offset: float) -> float:
    """Limit an edge-drag offset to what the config allows."""
    if not config.drag_enabled:
        return 0.0
    offset = max(offset, 0.0)
    if config.max_drag_extent is not None:
        offset = min(offset, config.max_drag_extent)
    return offset
