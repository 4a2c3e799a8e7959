"""Env configuration adapter producing a validated DrawerConfig."""

from __future__ import annotations

import logging
from datetime import timedelta

from ..config import Config, config as default_config
from ..core.drawer_config import DrawerConfig

logger = logging.getLogger(__name__)

# Config attribute -> DrawerConfig field
_DIRECT_FIELDS = {
    "SIDE": "side",
    "BACKDROP_OPACITY": "backdrop_opacity",
    "BORDER_RADIUS": "border_radius",
    "CLOSE_ON_CLICK_OUTSIDE": "close_on_click_outside",
    "CLOSE_ON_ESCAPE_KEY": "close_on_escape_key",
    "CLOSE_ON_RESUME": "close_on_resume",
    "CLOSE_ON_BACK_BUTTON": "close_on_back_button",
    "DRAG_ENABLED": "drag_enabled",
    "MAX_DRAG_EXTENT": "max_drag_extent",
    "MAX_DRAWER_EXTENT": "max_drawer_extent",
    "MIN_BACKDROP_EXTENT": "min_backdrop_extent",
}


def load_drawer_config(env: Config | None = None) -> DrawerConfig:
    """Build a DrawerConfig from environment settings.

    Unset values keep the DrawerConfig defaults. Raises InvalidConfiguration
    when the resulting combination is invalid.
    """
    env = default_config if env is None else env

    overrides = {}
    for attr, field_name in _DIRECT_FIELDS.items():
        value = getattr(env, attr)
        if value is not None:
            overrides[field_name] = value
    if env.ANIMATION_MS is not None:
        try:
            overrides["animation_duration"] = timedelta(milliseconds=env.ANIMATION_MS)
        except OverflowError:
            logger.warning(
                "Ignoring ANYDRAWER_ANIMATION_MS=%s: duration out of range", env.ANIMATION_MS
            )

    logger.debug("Loading drawer config from environment: %s", sorted(overrides))
    drawer_config = DrawerConfig(**overrides)
    if env.DEBUG:
        logger.debug("%s", drawer_config)
    return drawer_config
