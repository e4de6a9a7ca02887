"""SuiRpcReader: concrete implementation of SuiReaderProtocol over JSON-RPC.

Object-level "not found" answers (`result.error`) map to None; transport
failures and JSON-RPC errors raise RpcError. No retries.
"""

import itertools
import logging
from typing import Any

import httpx

from src.ix_common.errors import RpcError
from src.ix_common.sui_client import get_sui_client

logger = logging.getLogger(__name__)

_OBJECT_OPTIONS = {"showContent": True, "showType": True}
_PAGE_LIMIT = 50


class SuiRpcReader:
    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client
        self._ids = itertools.count(1)

    async def get_owned_objects(
        self, owner: str, struct_type: str
    ) -> list[dict[str, Any]]:
        objects: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            page = await self._call(
                "suix_getOwnedObjects",
                [
                    owner,
                    {"filter": {"StructType": struct_type}, "options": _OBJECT_OPTIONS},
                    cursor,
                    _PAGE_LIMIT,
                ],
            )
            objects.extend(item["data"] for item in page.get("data", []) if item.get("data"))
            if not page.get("hasNextPage"):
                break
            cursor = page.get("nextCursor")
        logger.debug("owner=%s type=%s owns %d objects", owner, struct_type, len(objects))
        return objects

    async def get_object(self, object_id: str) -> dict[str, Any] | None:
        result = await self._call("sui_getObject", [object_id, _OBJECT_OPTIONS])
        return result.get("data")

    async def get_dynamic_field_object(
        self, parent_id: str, name_type: str, name_value: str
    ) -> dict[str, Any] | None:
        result = await self._call(
            "suix_getDynamicFieldObject",
            [parent_id, {"type": name_type, "value": name_value}],
        )
        return result.get("data")

    async def _call(self, method: str, params: list[Any]) -> dict[str, Any]:
        client = self._client or await get_sui_client()
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        try:
            resp = await client.post("", json=payload)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise RpcError(method, str(exc)) from exc
        body = resp.json()
        if "error" in body:
            raise RpcError(method, body["error"].get("message", "unknown error"))
        return body.get("result") or {}
