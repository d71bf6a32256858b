"""Errors raised while reading preference bundles."""

from __future__ import annotations

from typing import Any


class PrefsError(RuntimeError):
    """Base exception for preference bundle failures."""

    def __init__(self, message: str, *, code: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class PrefsTypeMismatchError(PrefsError):
    """Raised when a preference section holds something other than a record."""

    def __init__(self, field: str, observed: object) -> None:
        observed_type = type(observed).__name__
        super().__init__(
            f"Preference section '{field}' is a {observed_type}, expected an object",
            code="prefs.type_mismatch",
            details={"field": field, "observed_type": observed_type},
        )


class PrefsSourceError(PrefsError):
    """Raised when the upstream bundle could not be retrieved or decoded."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="prefs.source_failure", details=details)


class PrefsPayloadError(PrefsError):
    """Raised when a decoded payload is not a JSON object."""

    def __init__(self, observed: object) -> None:
        observed_type = type(observed).__name__
        super().__init__(
            "Preference payload must be a JSON object",
            code="prefs.invalid_payload",
            details={"observed_type": observed_type},
        )


class PrefsSourceNotConfiguredError(PrefsError):
    """Raised when no upstream preference source URL has been configured."""

    def __init__(self) -> None:
        super().__init__(
            "No preference source URL is configured",
            code="prefs.source_unconfigured",
        )


__all__ = [
    "PrefsError",
    "PrefsTypeMismatchError",
    "PrefsSourceError",
    "PrefsPayloadError",
    "PrefsSourceNotConfiguredError",
]
