"""Shared test fixtures: a test address book and an in-memory Sui chain."""

from collections import defaultdict
from typing import Any

import pytest

from src.ix_core.address_registry import AddressRegistry
from src.ix_core.transaction import TransactionBatch
from src.ix_scallop.application.resolver import StateResolver

TEST_ADDRESSES: dict[str, Any] = {
    "core": {"object": "0xcore", "obligationAccessStore": "0xaccess"},
    "borrowIncentive": {
        "id": "0xbi",
        "object": "0xbiobj",
        "query": "0xquery",
        "config": "0xconfig",
        "incentivePools": "0xpools",
        "incentiveAccounts": "0xaccounts",
    },
    "vesca": {
        "id": "0xvesca",
        "object": "0xvescaobj",
        "table": "0xvtable",
        "treasury": "0xvtreasury",
        "config": "0xvconfig",
    },
}
TEST_COINS = {"sui": "0x2::sui::SUI", "sca": "0xsca::sca::SCA"}

OBLIGATION_KEY_TYPE = "0xcore::obligation::ObligationKey"
VE_SCA_KEY_TYPE = "0xvescaobj::ve_sca::VeScaKey"
OBLIGATION_TYPED_ID = "0xbiobj::typed_id::TypedID<0xcore::obligation::Obligation>"
VE_SCA_TYPED_ID = "0xbiobj::typed_id::TypedID<0xvescaobj::ve_sca::VeScaKey>"


def move_object(object_id: str, fields: dict[str, Any], type_: str = "0x0::test::Obj") -> dict:
    """Fullnode `data` object as returned with showContent."""
    return {
        "objectId": object_id,
        "version": "1",
        "type": type_,
        "content": {"dataType": "moveObject", "type": type_, "hasPublicTransfer": True, "fields": fields},
    }


class FakeChain:
    """In-memory SuiReaderProtocol answering with fullnode-shaped JSON."""

    OBLIGATION_BIND_TABLE = "0xbind_obligation"
    VE_SCA_BIND_TABLE = "0xbind_vesca"

    def __init__(self) -> None:
        self.owned: dict[tuple[str, str], list[dict]] = defaultdict(list)
        self.objects: dict[str, dict] = {
            "0xpools": move_object(
                "0xpools",
                {
                    "id": {"id": "0xpools"},
                    "ve_sca_bind": {"type": "0x2::table::Table", "fields": {"id": {"id": self.VE_SCA_BIND_TABLE}, "size": "0"}},
                    "obligation_ve_sca_bind": {"type": "0x2::table::Table", "fields": {"id": {"id": self.OBLIGATION_BIND_TABLE}, "size": "0"}},
                },
            )
        }
        self.fields: dict[tuple[str, str, str], dict] = {}

    def add_obligation(self, owner: str, obligation_id: str, key: str, locked: bool = False) -> None:
        self.owned[(owner, OBLIGATION_KEY_TYPE)].append(
            move_object(
                key,
                {"id": {"id": key}, "ownership": {"type": "Ownership", "fields": {"owner": key, "of": obligation_id}}},
                OBLIGATION_KEY_TYPE,
            )
        )
        lock_key = {"type": "0xbi::incentive::Lock", "fields": {"dummy_field": False}} if locked else None
        self.objects[obligation_id] = move_object(
            obligation_id, {"id": {"id": obligation_id}, "lock_key": lock_key}
        )

    def bind_ve_sca(self, obligation_id: str, ve_sca_key: str) -> None:
        self.fields[(self.OBLIGATION_BIND_TABLE, OBLIGATION_TYPED_ID, obligation_id)] = move_object(
            f"{obligation_id}_bind", {"value": {"type": "TypedID", "fields": {"id": ve_sca_key}}}
        )
        self.fields[(self.VE_SCA_BIND_TABLE, VE_SCA_TYPED_ID, ve_sca_key)] = move_object(
            f"{ve_sca_key}_bind", {"value": {"type": "TypedID", "fields": {"id": obligation_id}}}
        )

    def add_ve_sca(self, owner: str, key: str, amount: int, unlock_at_s: int) -> None:
        self.owned[(owner, VE_SCA_KEY_TYPE)].append(move_object(key, {"id": {"id": key}}, VE_SCA_KEY_TYPE))
        self.fields[("0xvtable", "0x2::object::ID", key)] = move_object(
            f"{key}_vesca",
            {"value": {"type": "VeSca", "fields": {"locked_sca_amount": str(amount), "unlock_at": str(unlock_at_s)}}},
        )

    async def get_owned_objects(self, owner: str, struct_type: str) -> list[dict]:
        return list(self.owned.get((owner, struct_type), []))

    async def get_object(self, object_id: str) -> dict | None:
        return self.objects.get(object_id)

    async def get_dynamic_field_object(self, parent_id: str, name_type: str, name_value: str) -> dict | None:
        return self.fields.get((parent_id, name_type, name_value))


@pytest.fixture
def registry() -> AddressRegistry:
    return AddressRegistry("testnet", TEST_ADDRESSES, TEST_COINS)


@pytest.fixture
def chain() -> FakeChain:
    return FakeChain()


@pytest.fixture
def resolver(registry: AddressRegistry, chain: FakeChain) -> StateResolver:
    return StateResolver(registry, chain)


@pytest.fixture
def batch() -> TransactionBatch:
    return TransactionBatch(sender="0xalice")
