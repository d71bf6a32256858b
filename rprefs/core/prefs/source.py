"""Retrieval and decoding of preference bundles delivered as JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from ..settings import Settings
from .exceptions import PrefsPayloadError, PrefsSourceError, PrefsSourceNotConfiguredError
from .view import PrefsView

logger = logging.getLogger(__name__)


def decode_bundle(raw: str | bytes) -> PrefsView:
    """Decode a JSON payload and wrap the resulting object in a view."""

    try:
        parsed = json.loads(raw)
    except ValueError as exc:
        raise PrefsSourceError(
            "Preference payload is not valid JSON", details={"reason": str(exc)}
        ) from exc
    return _view_from(parsed)


def _view_from(parsed: Any) -> PrefsView:
    if not isinstance(parsed, Mapping):
        raise PrefsPayloadError(parsed)
    return PrefsView(parsed)


class PrefsSource:
    """Fetches the preferences bundle from the configured upstream URL."""

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        headers: dict[str, str] = {"Accept": "application/json"}
        if settings.prefs_source_token:
            headers["Authorization"] = f"Bearer {settings.prefs_source_token}"
        self._client = httpx.AsyncClient(
            timeout=settings.request_timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def url(self) -> str | None:
        return self._settings.prefs_source_url

    async def __aenter__(self) -> "PrefsSource":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self) -> PrefsView:
        """Retrieve the bundle and return a view over the decoded object."""

        url = self.url
        if not url:
            raise PrefsSourceNotConfiguredError()

        try:
            response = await self._client.get(url)
        except httpx.RequestError as exc:
            logger.warning("Preference source %s unreachable: %s", url, exc)
            raise PrefsSourceError(
                "Preference source request failed", details={"url": url}
            ) from exc

        if response.status_code >= 400:
            logger.debug(
                "Preference source %s responded with error %s: %s",
                url,
                response.status_code,
                response.text,
            )
            raise PrefsSourceError(
                f"Preference source responded with status {response.status_code}",
                details={"url": url, "status_code": response.status_code},
            )

        try:
            parsed = response.json()
        except ValueError as exc:
            raise PrefsSourceError(
                "Preference source returned invalid JSON", details={"url": url}
            ) from exc

        view = _view_from(parsed)
        logger.info("Fetched preference bundle", extra={"url": url, "keys": len(parsed)})
        return view


__all__ = ("PrefsSource", "decode_bundle")
