"""Public interface for preference bundle access."""

from .exceptions import (
    PrefsError,
    PrefsPayloadError,
    PrefsSourceError,
    PrefsSourceNotConfiguredError,
    PrefsTypeMismatchError,
)
from .source import PrefsSource, decode_bundle
from .view import (
    GENERAL_PREFS_FIELD,
    HISTORY_PREFS_FIELD,
    GeneralPrefs,
    HistoryPrefs,
    PrefsView,
)

__all__ = [
    "PrefsView",
    "GeneralPrefs",
    "HistoryPrefs",
    "GENERAL_PREFS_FIELD",
    "HISTORY_PREFS_FIELD",
    "PrefsSource",
    "decode_bundle",
    "PrefsError",
    "PrefsTypeMismatchError",
    "PrefsSourceError",
    "PrefsPayloadError",
    "PrefsSourceNotConfiguredError",
]
