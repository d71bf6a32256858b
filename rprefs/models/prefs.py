"""Models describing preference sections returned by the API."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from ..core.prefs import PrefsView

SectionName = Literal["general", "history"]


class PrefsSections(BaseModel):
    """Both preference sections projected out of a bundle."""

    general_prefs: dict[str, Any] | None = Field(
        default=None, description="General application preferences, when present"
    )
    history_prefs: dict[str, Any] | None = Field(
        default=None, description="History preferences, when present"
    )

    @classmethod
    def from_view(cls, view: PrefsView) -> "PrefsSections":
        return cls(
            general_prefs=_as_dict(view.get_general_prefs()),
            history_prefs=_as_dict(view.get_history_prefs()),
        )


class PrefsSection(BaseModel):
    """A single named preference section."""

    name: SectionName = Field(..., description="Which section was requested")
    value: dict[str, Any] | None = Field(
        default=None, description="Section contents, or null when absent"
    )


def _as_dict(section: Any) -> dict[str, Any] | None:
    return None if section is None else dict(section)
