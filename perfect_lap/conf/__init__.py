"""Settings and track layout configuration."""

from .settings import Settings, settings
from .track_layouts import load_track_layout, DEFAULT_LAYOUTS_FILE

__all__ = [
    "Settings",
    "settings",
    "load_track_layout",
    "DEFAULT_LAYOUTS_FILE",
]
