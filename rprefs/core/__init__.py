"""Core application services and configuration."""

from .prefs import PrefsSource, PrefsView, decode_bundle
from .settings import Settings, get_settings

__all__ = (
    "Settings",
    "get_settings",
    "PrefsSource",
    "PrefsView",
    "decode_bundle",
)
