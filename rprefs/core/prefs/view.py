"""Read-only view over a decoded preferences bundle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NewType, cast

from .exceptions import PrefsTypeMismatchError

GeneralPrefs = NewType("GeneralPrefs", Mapping[str, Any])
HistoryPrefs = NewType("HistoryPrefs", Mapping[str, Any])

GENERAL_PREFS_FIELD = "general_prefs"
HISTORY_PREFS_FIELD = "history_prefs"

# JSON scalars and arrays can never stand in for a preference section.
_NON_RECORD_TYPES = (str, bytes, bytearray, int, float, bool, list, tuple)


@dataclass(frozen=True, slots=True)
class PrefsView:
    """Typed accessors over a bundle owned by someone else.

    The bundle is usually a ``dict`` produced by ``json.loads`` but any
    attribute-bearing object (a ``SimpleNamespace`` built by an
    ``object_hook``, a pydantic model allowing extras) works as well.
    Sections are returned as the very objects stored in the bundle; the
    view never copies or mutates them.
    """

    bundle: Any

    def get_general_prefs(self) -> GeneralPrefs | None:
        """Return the ``general_prefs`` section, or ``None`` when absent."""

        return cast("GeneralPrefs | None", self._section(GENERAL_PREFS_FIELD))

    def get_history_prefs(self) -> HistoryPrefs | None:
        """Return the ``history_prefs`` section, or ``None`` when absent."""

        return cast("HistoryPrefs | None", self._section(HISTORY_PREFS_FIELD))

    def _section(self, name: str) -> Any:
        if isinstance(self.bundle, Mapping):
            value = self.bundle.get(name)
        else:
            value = getattr(self.bundle, name, None)

        if value is None:
            return None
        if isinstance(value, _NON_RECORD_TYPES):
            raise PrefsTypeMismatchError(name, value)
        return value


__all__ = (
    "GENERAL_PREFS_FIELD",
    "HISTORY_PREFS_FIELD",
    "GeneralPrefs",
    "HistoryPrefs",
    "PrefsView",
)
