"""Chain reader Protocol: dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the JSON-RPC implementation. Every method
returns the raw `data` object of the fullnode response (or None when the
object does not exist); shape checking happens in the resolver.
"""

from typing import Any, Protocol


class SuiReaderProtocol(Protocol):
    async def get_owned_objects(
        self, owner: str, struct_type: str
    ) -> list[dict[str, Any]]: ...

    async def get_object(self, object_id: str) -> dict[str, Any] | None: ...

    async def get_dynamic_field_object(
        self, parent_id: str, name_type: str, name_value: str
    ) -> dict[str, Any] | None: ...
