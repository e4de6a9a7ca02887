"""Strict shapes for the on-chain objects the resolver reads.

Fullnode JSON is duck-typed; every read is validated against one of these
models and a ValidationError is treated as "object absent".
"""

import logging
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

FieldsT = TypeVar("FieldsT", bound=BaseModel)


class MoveContent(BaseModel, Generic[FieldsT]):
    data_type: Literal["moveObject"] = Field(alias="dataType")
    fields: FieldsT


class SuiObject(BaseModel, Generic[FieldsT]):
    object_id: str = Field(alias="objectId")
    content: MoveContent[FieldsT]


class UID(BaseModel):
    id: str


class TableFields(BaseModel):
    id: UID


class TableRef(BaseModel):
    """`Table<K, V>` as rendered inside a parent object's fields."""
    fields: TableFields


class OwnershipFields(BaseModel):
    of: str


class Ownership(BaseModel):
    fields: OwnershipFields


class ObligationKeyFields(BaseModel):
    id: UID
    ownership: Ownership


class ObligationFields(BaseModel):
    lock_key: dict[str, Any] | None = None


class IncentivePoolsFields(BaseModel):
    ve_sca_bind: TableRef                  # TypedID<VeScaKey> → TypedID<Obligation>
    obligation_ve_sca_bind: TableRef       # TypedID<Obligation> → TypedID<VeScaKey>


class TypedIdFields(BaseModel):
    id: str


class TypedId(BaseModel):
    fields: TypedIdFields


class TypedIdEntryFields(BaseModel):
    """Dynamic field entry of a bind table."""
    value: TypedId


class VeScaKeyFields(BaseModel):
    id: UID


class VeScaValueFields(BaseModel):
    locked_sca_amount: int
    unlock_at: int       # seconds


class VeScaValue(BaseModel):
    fields: VeScaValueFields


class VeScaEntryFields(BaseModel):
    value: VeScaValue


def parse_object(
    data: dict[str, Any] | None, fields_model: type[FieldsT]
) -> SuiObject[FieldsT] | None:
    """Validate a fullnode object; None when missing or of unexpected shape."""
    if not data:
        return None
    try:
        return SuiObject[fields_model].model_validate(data)  # type: ignore[valid-type]
    except ValidationError as exc:
        logger.debug(
            "Unexpected %s shape for %s: %d errors",
            fields_model.__name__,
            data.get("objectId"),
            exc.error_count(),
        )
        return None
