"""Tests for RequestIdMiddleware via the standard `client` fixture."""

import uuid

from httpx import AsyncClient


class TestRequestIdMiddleware:
    async def test_response_includes_request_id_header(self, client: AsyncClient) -> None:
        res = await client.get("/health")
        assert "x-request-id" in res.headers

    async def test_generated_request_id_is_valid_uuid(self, client: AsyncClient) -> None:
        res = await client.get("/health")
        uuid.UUID(res.headers["x-request-id"])

    async def test_client_supplied_request_id_is_echoed_back(self, client: AsyncClient) -> None:
        my_id = str(uuid.uuid4())
        res = await client.post("/tools/detect_stack", json={"files": []}, headers={"X-Request-ID": my_id})
        assert res.headers["x-request-id"] == my_id

    async def test_request_id_present_on_404(self, client: AsyncClient) -> None:
        res = await client.post("/tools/nope", json={})
        assert "x-request-id" in res.headers
