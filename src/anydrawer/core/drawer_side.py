"""Screen edge a drawer slides in from."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidConfiguration


class DrawerSide(Enum):
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: "DrawerSide | str") -> "DrawerSide":
        """Accept a member or its name/value, case-insensitive."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidConfiguration("side", f"side must be 'left' or 'right', got {value!r}")
