from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

import rprefs.core.settings as settings_module
from rprefs.api.routes.prefs import get_prefs_source
from rprefs.core.prefs import PrefsSource
from rprefs.main import create_application

SOURCE_URL = "https://prefs.mock/api/prefs"

SAMPLE_BUNDLE: dict[str, Any] = {
    "general_prefs": {"theme": "dark", "save_workspace": "ask"},
    "history_prefs": {"maxItems": 50, "always_save": True},
}


@pytest.fixture()
def runtime_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("RPREFS_PREFS_SOURCE_URL", SOURCE_URL)
    monkeypatch.delenv("RPREFS_PREFS_SOURCE_TOKEN", raising=False)
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


@pytest.fixture()
def upstream() -> dict[str, Any]:
    """Mutable description of what the fake preference server returns."""

    return {"status_code": 200, "json": SAMPLE_BUNDLE, "requests": []}


@pytest.fixture()
def mock_transport(upstream: dict[str, Any]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        upstream["requests"].append(request)
        if "content" in upstream:
            return httpx.Response(upstream["status_code"], content=upstream["content"])
        return httpx.Response(upstream["status_code"], json=upstream["json"])

    return httpx.MockTransport(handler)


@pytest.fixture()
def client(runtime_environment: None, mock_transport: httpx.MockTransport) -> Iterator[TestClient]:
    application = create_application()

    async def _source_override() -> AsyncIterator[PrefsSource]:
        settings = settings_module.get_settings()
        async with PrefsSource(settings, transport=mock_transport) as source:
            yield source

    application.dependency_overrides[get_prefs_source] = _source_override

    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture()
def make_settings() -> Callable[..., settings_module.Settings]:
    def _factory(**overrides: Any) -> settings_module.Settings:
        values: dict[str, Any] = {"prefs_source_url": SOURCE_URL}
        values.update(overrides)
        return settings_module.Settings(**values)

    return _factory
