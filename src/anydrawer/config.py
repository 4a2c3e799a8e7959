"""Environment configuration for anydrawer"""

from __future__ import annotations

import logging
import math
import os
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "ANYDRAWER_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _get_bool(environ: Mapping[str, str], name: str) -> bool | None:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning("Ignoring %s%s=%r: expected a boolean", ENV_PREFIX, name, raw)
    return None


def _get_float(environ: Mapping[str, str], name: str) -> float | None:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: expected a number", ENV_PREFIX, name, raw)
        return None
    if not math.isfinite(value):
        logger.warning("Ignoring %s%s=%r: expected a finite number", ENV_PREFIX, name, raw)
        return None
    return value


class Config:
    """Drawer defaults read from ANYDRAWER_* environment variables.

    Every attribute is None when its variable is unset or malformed, meaning
    "use the DrawerConfig default".
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        env = os.environ if environ is None else environ

        self.SIDE = (env.get(ENV_PREFIX + "SIDE") or "").strip() or None
        self.BACKDROP_OPACITY = _get_float(env, "BACKDROP_OPACITY")
        self.ANIMATION_MS = _get_float(env, "ANIMATION_MS")
        self.BORDER_RADIUS = _get_float(env, "BORDER_RADIUS")

        self.CLOSE_ON_CLICK_OUTSIDE = _get_bool(env, "CLOSE_ON_CLICK_OUTSIDE")
        self.CLOSE_ON_ESCAPE_KEY = _get_bool(env, "CLOSE_ON_ESCAPE_KEY")
        self.CLOSE_ON_RESUME = _get_bool(env, "CLOSE_ON_RESUME")
        self.CLOSE_ON_BACK_BUTTON = _get_bool(env, "CLOSE_ON_BACK_BUTTON")

        self.DRAG_ENABLED = _get_bool(env, "DRAG_ENABLED")
        self.MAX_DRAG_EXTENT = _get_float(env, "MAX_DRAG_EXTENT")
        self.MAX_DRAWER_EXTENT = _get_float(env, "MAX_DRAWER_EXTENT")
        self.MIN_BACKDROP_EXTENT = _get_float(env, "MIN_BACKDROP_EXTENT")

        self.DEBUG = bool(_get_bool(env, "DEBUG"))


config = Config()
