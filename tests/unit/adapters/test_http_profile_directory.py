"""Tests for HttpProfileDirectory — uses httpx.MockTransport (no network)."""

import httpx
import pytest

from app.adapters.profiles.http_directory import HttpProfileDirectory
from app.domain.entities.profile import Profile


def _directory(handler) -> HttpProfileDirectory:
    return HttpProfileDirectory(
        base_url="http://profiles.test/api/", timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_returns_profile_on_success():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(
            200, json={"id": "u4", "name": "Dan", "email": "dan@x", "role": "qa"}
        )

    profile = await _directory(handler).get_by_id("u4")
    assert profile == Profile(id="u4", name="Dan", email="dan@x", role="qa")
    assert seen == ["/api/profiles/u4"]


@pytest.mark.asyncio
async def test_not_found_returns_none():
    profile = await _directory(lambda r: httpx.Response(404)).get_by_id("nobody")
    assert profile is None


@pytest.mark.asyncio
async def test_server_error_is_raised():
    with pytest.raises(httpx.HTTPStatusError):
        await _directory(lambda r: httpx.Response(503)).get_by_id("u4")


@pytest.mark.asyncio
async def test_non_object_payload_returns_none():
    profile = await _directory(lambda r: httpx.Response(200, json=["u4"])).get_by_id("u4")
    assert profile is None


@pytest.mark.asyncio
async def test_missing_fields_and_id_fallback():
    profile = await _directory(lambda r: httpx.Response(200, json={"name": "Dan"})).get_by_id("u4")
    assert profile == Profile(id="u4", name="Dan")


@pytest.mark.asyncio
async def test_actor_id_is_path_escaped():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path)
        return httpx.Response(404)

    await _directory(handler).get_by_id("a/b")
    assert seen == [b"/api/profiles/a%2Fb"]
