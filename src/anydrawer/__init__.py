"""anydrawer - Configuration for slide-out drawer widgets"""

__version__ = "1.0.0"
__description__ = "Configuration for slide-out drawer widgets"

from .core.drawer_config import DismissTrigger, DrawerConfig
from .core.drawer_side import DrawerSide
from .core.errors import InvalidConfiguration
from .core.sizing import Size, clamp_drag_offset, default_drawer_width, resolve_drawer_width

__all__ = [
    "DismissTrigger",
    "DrawerConfig",
    "DrawerSide",
    "InvalidConfiguration",
    "Size",
    "clamp_drag_offset",
    "default_drawer_width",
    "resolve_drawer_width",
    "__version__",
]
