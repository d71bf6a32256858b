"""Routes projecting general and history preferences out of a bundle."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Body, Depends

from ...core.prefs import PrefsError, PrefsSource, PrefsView
from ...core.settings import Settings, get_settings
from ...models.common import ResponseEnvelope
from ...models.prefs import PrefsSection, PrefsSections

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prefs", tags=["prefs"])


async def get_prefs_source(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[PrefsSource]:
    async with PrefsSource(settings) as source:
        yield source


@router.post(
    "/project",
    response_model=ResponseEnvelope[PrefsSections],
    summary="Project preference sections out of a supplied bundle",
)
async def project_prefs(
    bundle: dict[str, Any] = Body(..., description="Decoded preferences bundle"),
) -> ResponseEnvelope[PrefsSections]:
    try:
        payload = PrefsSections.from_view(PrefsView(bundle))
    except PrefsError as exc:
        return ResponseEnvelope.from_error(exc)
    return ResponseEnvelope.success_payload(payload)


@router.get(
    "",
    response_model=ResponseEnvelope[PrefsSections],
    summary="Fetch the upstream bundle and return both sections",
)
async def read_prefs(
    source: PrefsSource = Depends(get_prefs_source),
) -> ResponseEnvelope[PrefsSections]:
    try:
        view = await source.fetch()
        payload = PrefsSections.from_view(view)
    except PrefsError as exc:
        logger.info("Preference fetch failed: %s", exc.code)
        return ResponseEnvelope.from_error(exc)
    return ResponseEnvelope.success_payload(payload)


@router.get(
    "/general",
    response_model=ResponseEnvelope[PrefsSection],
    summary="Fetch the upstream bundle and return general preferences",
)
async def read_general_prefs(
    source: PrefsSource = Depends(get_prefs_source),
) -> ResponseEnvelope[PrefsSection]:
    try:
        view = await source.fetch()
        value = view.get_general_prefs()
    except PrefsError as exc:
        logger.info("Preference fetch failed: %s", exc.code)
        return ResponseEnvelope.from_error(exc)
    return ResponseEnvelope.success_payload(PrefsSection(name="general", value=value))


@router.get(
    "/history",
    response_model=ResponseEnvelope[PrefsSection],
    summary="Fetch the upstream bundle and return history preferences",
)
async def read_history_prefs(
    source: PrefsSource = Depends(get_prefs_source),
) -> ResponseEnvelope[PrefsSection]:
    try:
        view = await source.fetch()
        value = view.get_history_prefs()
    except PrefsError as exc:
        logger.info("Preference fetch failed: %s", exc.code)
        return ResponseEnvelope.from_error(exc)
    return ResponseEnvelope.success_payload(PrefsSection(name="history", value=value))


__all__ = ("router", "get_prefs_source")
