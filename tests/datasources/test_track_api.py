"""
Unit tests for the TrackAPI data source
"""

import httpx
import pytest

from catalog_gateway.datasources import (
    AuthorRecord,
    ModuleRecord,
    TrackAPI,
    TrackRecord,
    UpstreamHTTPError,
    UpstreamTransportError,
)


class TestTrackAPIRequests:
    """Each operation issues exactly one request to its endpoint."""

    @pytest.mark.asyncio
    async def test_get_tracks_for_home(self, track_api_factory, track_payload):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[track_payload, {**track_payload, "id": "c_1"}])

        api = track_api_factory(handler)
        tracks = await api.get_tracks_for_home()

        assert [t.id for t in tracks] == ["c_0", "c_1"]
        assert all(isinstance(t, TrackRecord) for t in tracks)
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert str(seen[0].url) == "https://catalog.test/tracks"

    @pytest.mark.asyncio
    async def test_get_track_decodes_camel_case(self, track_api_factory, track_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/track/c_0"
            return httpx.Response(200, json=track_payload)

        track = await track_api_factory(handler).get_track("c_0")

        assert track.id == "c_0"
        assert track.author_id == "cat-1"
        assert track.length == 2377
        assert track.modules_count == 10
        assert track.number_of_views == 163

    @pytest.mark.asyncio
    async def test_get_author(self, track_api_factory, author_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/author/cat-1"
            return httpx.Response(200, json=author_payload)

        author = await track_api_factory(handler).get_author("cat-1")

        assert author == AuthorRecord(
            id="cat-1",
            name="Henri, le Chat Noir",
            photo="https://images.unsplash.com/photo-1442291928580-fb5d0856a8f1",
        )

    @pytest.mark.asyncio
    async def test_get_track_modules(self, track_api_factory, module_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/track/c_0/modules"
            return httpx.Response(200, json=[module_payload])

        modules = await track_api_factory(handler).get_track_modules("c_0")

        assert len(modules) == 1
        assert isinstance(modules[0], ModuleRecord)
        assert modules[0].video_url == "https://youtu.be/t0hhFXzO1dY"

    @pytest.mark.asyncio
    async def test_get_module(self, track_api_factory, module_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/module/l_0"
            return httpx.Response(200, json=module_payload)

        module = await track_api_factory(handler).get_module("l_0")

        assert module.id == "l_0"
        assert module.length == 163

    @pytest.mark.asyncio
    async def test_increment_track_views_sends_bodyless_patch(
        self, track_api_factory, track_payload
    ):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={**track_payload, "numberOfViews": 164})

        track = await track_api_factory(handler).increment_track_views("c_0")

        assert track.number_of_views == 164
        assert len(seen) == 1
        assert seen[0].method == "PATCH"
        assert seen[0].url.path == "/track/c_0/numberOfViews"
        assert seen[0].content == b""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("module_track_id", "raw_path"),
        [
            ("..", b"/track/%2E%2E/modules"),
            (".", b"/track/%2E/modules"),
        ],
    )
    async def test_dot_ids_stay_inside_their_endpoint(
        self, track_api_factory, module_payload, module_track_id, raw_path
    ):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[module_payload])

        await track_api_factory(handler).get_track_modules(module_track_id)

        assert seen[0].url.raw_path == raw_path

    @pytest.mark.asyncio
    async def test_ids_are_escaped_as_single_path_segment(self, track_api_factory, author_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.raw_path == b"/author/a%2Fb%3Fc"
            return httpx.Response(200, json=author_payload)

        await track_api_factory(handler).get_author("a/b?c")


class TestTrackAPIErrors:
    """Upstream failures surface as typed errors and are never retried."""

    @pytest.mark.asyncio
    async def test_non_2xx_raises_http_error_with_status_and_body(self, track_api_factory):
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(404, text="Not found")

        with pytest.raises(UpstreamHTTPError) as exc_info:
            await track_api_factory(handler).get_track("999")

        assert exc_info.value.status == 404
        assert exc_info.value.body == "Not found"
        assert exc_info.value.method == "GET"
        assert exc_info.value.url == "https://catalog.test/track/999"
        assert calls == 1

    @pytest.mark.asyncio
    async def test_server_error_is_not_retried(self, track_api_factory):
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(503, text="Service Unavailable")

        with pytest.raises(UpstreamHTTPError):
            await track_api_factory(handler).get_tracks_for_home()

        assert calls == 1

    @pytest.mark.asyncio
    async def test_network_fault_raises_transport_error(self, track_api_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamTransportError) as exc_info:
            await track_api_factory(handler).get_tracks_for_home()

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert exc_info.value.method == "GET"

    @pytest.mark.asyncio
    async def test_timeout_is_a_transport_error(self, track_api_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamTransportError):
            await track_api_factory(handler).increment_track_views("c_0")


class TestTrackAPIConstruction:
    def test_base_url_without_trailing_slash_keeps_its_path(self):
        api = TrackAPI("https://catalog.test/api")

        assert str(api.resolve_url("track/1")) == "https://catalog.test/api/track/1"

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        async with TrackAPI("https://catalog.test/") as api:
            client = api._client

        assert client.is_closed

    @pytest.mark.asyncio
    async def test_shared_client_is_left_open(self):
        client = httpx.AsyncClient()
        try:
            async with TrackAPI("https://catalog.test/", client=client):
                pass
            assert not client.is_closed
        finally:
            await client.aclose()
