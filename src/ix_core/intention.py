"""Intention base types and the canonical intention encoding.

An intention is a sub-type tag plus the minimal data a user supplies.
Canonical encoding: compact JSON, camelCase keys sorted, defaults and
unset optionals dropped, e.g. {"amount":"10000000"}.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.ix_common.enums import TransactionSubType, TransactionType
from src.ix_core.address_registry import AddressRegistry
from src.ix_core.transaction import TransactionBatch


class IntentionData(BaseModel):
    """Base for user-supplied intention fields; immutable once built."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class IntentionEnvelope(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tx_type: str
    tx_sub_type: str
    intention_data: dict[str, Any]

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True), separators=(",", ":"))


def canonical_json(data: BaseModel) -> str:
    """Deterministic encoding of a data model, independent of field order."""
    payload = data.model_dump(mode="json", by_alias=True, exclude_defaults=True)
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


DataT = TypeVar("DataT", bound=IntentionData)


class BaseIntention(ABC, Generic[DataT]):
    tx_type: ClassVar[TransactionType] = TransactionType.OTHER
    tx_sub_type: ClassVar[TransactionSubType]
    data_model: ClassVar[type[IntentionData]]

    def __init__(self, data: DataT) -> None:
        self.data = data

    @classmethod
    def from_data(cls, data: DataT | dict[str, Any]) -> Self:
        if isinstance(data, dict):
            data = cls.data_model.model_validate(data)  # type: ignore[assignment]
        return cls(data)  # type: ignore[arg-type]

    def serialize(self) -> str:
        return canonical_json(self.data)

    def envelope(self) -> IntentionEnvelope:
        return IntentionEnvelope(
            tx_type=self.tx_type.value,
            tx_sub_type=self.tx_sub_type.value,
            intention_data=json.loads(self.serialize()),
        )

    @abstractmethod
    async def build(
        self, batch: TransactionBatch, registry: AddressRegistry, reader: Any = None
    ) -> TransactionBatch:
        """Append this intention's calls to `batch` and return it."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.data == other.data  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.serialize()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize()})"
