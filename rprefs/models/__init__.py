"""Shared Pydantic models used across the application."""

from .common import ErrorDetail, ResponseEnvelope
from .prefs import PrefsSection, PrefsSections, SectionName

__all__ = (
    "ErrorDetail",
    "ResponseEnvelope",
    "PrefsSection",
    "PrefsSections",
    "SectionName",
)
