"""Integration-test fixtures.

A JSON-RPC fullnode stub served through httpx.MockTransport, backed by the
in-memory chain from tests/conftest.py, so SuiRpcReader runs its real
request/response path without network access.
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from src.ix_scallop.infrastructure.sui_reader import SuiRpcReader


class FullnodeStub:
    def __init__(self, chain: Any, page_size: int = 50) -> None:
        self.chain = chain
        self.page_size = page_size
        self.requests: list[dict[str, Any]] = []
        self.fail_with: httpx.Response | None = None

    async def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        if self.fail_with is not None:
            return self.fail_with

        method, params = body["method"], body["params"]
        if method == "suix_getOwnedObjects":
            owner, query, cursor, _limit = params
            items = await self.chain.get_owned_objects(owner, query["filter"]["StructType"])
            start = int(cursor or 0)
            end = start + self.page_size
            result: dict[str, Any] = {
                "data": [{"data": item} for item in items[start:end]],
                "nextCursor": str(end) if end < len(items) else None,
                "hasNextPage": end < len(items),
            }
        elif method == "sui_getObject":
            data = await self.chain.get_object(params[0])
            result = {"data": data} if data else {"error": {"code": "notExists", "object_id": params[0]}}
        elif method == "suix_getDynamicFieldObject":
            parent_id, name = params
            data = await self.chain.get_dynamic_field_object(parent_id, name["type"], name["value"])
            result = {"data": data} if data else {"error": {"code": "dynamicFieldNotFound"}}
        else:
            return httpx.Response(
                200,
                json={"jsonrpc": "2.0", "id": body["id"], "error": {"code": -32601, "message": "Method not found"}},
            )
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    def methods(self) -> list[str]:
        return [req["method"] for req in self.requests]


@pytest.fixture
def fullnode(chain: Any) -> FullnodeStub:
    return FullnodeStub(chain)


@pytest_asyncio.fixture
async def sui_http(fullnode: FullnodeStub) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.MockTransport(fullnode.handle)
    async with httpx.AsyncClient(transport=transport, base_url="http://fullnode.test") as client:
        yield client


@pytest.fixture
def reader(sui_http: httpx.AsyncClient) -> SuiRpcReader:
    return SuiRpcReader(sui_http)
