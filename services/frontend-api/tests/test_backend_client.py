"""
Unit tests for BackendServiceClient
"""

import httpx
import pytest

from frontend_api.utils.backend_client import (
    BackendServiceClient, OriginError, OriginSuccess, TransportFailure, describe_exception
)


def make_backend_client(handler) -> BackendServiceClient:
    return BackendServiceClient(
        base_url="http://backend-api-svc/",
        transport=httpx.MockTransport(handler)
    )


class TestResultClassification:

    @pytest.mark.asyncio
    async def test_success(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, text='{"ok": true}')

        client = make_backend_client(handler)
        await client.start()
        try:
            result = await client.get("/api/backend/info")
        finally:
            await client.stop()

        assert result == OriginSuccess(status_code=200, body='{"ok": true}')
        assert seen == ["http://backend-api-svc/api/backend/info"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [201, 204])
    async def test_any_2xx_is_success(self, status_code):
        client = make_backend_client(lambda request: httpx.Response(status_code))

        result = await client.get("/api/backend/data")

        assert isinstance(result, OriginSuccess)
        assert result.status_code == status_code

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_success_is_origin_error(self, status_code):
        client = make_backend_client(lambda request: httpx.Response(status_code, text="nope"))

        result = await client.get("/api/backend/data")

        assert result == OriginError(status_code=status_code, body="nope")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [301, 302, 307, 308])
    async def test_redirects_are_followed(self, status_code):
        seen = []

        def handler(request):
            seen.append(request.url.path)
            if request.url.path == "/api/backend/data":
                return httpx.Response(status_code, headers={"Location": "/api/backend/data2"})
            return httpx.Response(200, text="moved")

        result = await make_backend_client(handler).get("/api/backend/data")

        assert result == OriginSuccess(status_code=200, body="moved")
        assert seen == ["/api/backend/data", "/api/backend/data2"]

    @pytest.mark.asyncio
    async def test_timeout_is_transport_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = await make_backend_client(handler).get("/api/backend/info")

        assert result == TransportFailure(message="timed out")

    @pytest.mark.asyncio
    async def test_any_exception_is_transport_failure(self):
        def handler(request):
            raise ValueError("bad things")

        result = await make_backend_client(handler).get("/api/backend/info")

        assert result == TransportFailure(message="bad things")

    @pytest.mark.asyncio
    async def test_unreachable_address(self):
        # Nothing listens on port 1
        client = BackendServiceClient(base_url="http://127.0.0.1:1")

        result = await client.get("/api/backend/data")

        assert isinstance(result, TransportFailure)
        assert result.message


class TestLifecycle:

    def test_defaults(self):
        client = BackendServiceClient(base_url="http://backend-api-svc/")
        assert client.base_url == "http://backend-api-svc"
        assert client.timeout == 30.0

    @pytest.mark.asyncio
    async def test_start_and_stop(self):
        client = make_backend_client(lambda request: httpx.Response(200))

        await client.start()
        shared = client._client
        await client.start()
        assert client._client is shared
        assert shared.timeout.read == 30.0
        assert shared.follow_redirects

        await client.stop()
        assert client._client is None
        assert shared.is_closed

    @pytest.mark.asyncio
    async def test_stop_without_start(self):
        client = make_backend_client(lambda request: httpx.Response(200))
        await client.stop()
        assert client._client is None


def test_describe_exception_falls_back_to_class_name():
    assert describe_exception(httpx.ConnectError("")) == "ConnectError"
    assert describe_exception(RuntimeError("boom")) == "boom"
