"""StateResolver: fills in on-chain state the caller did not supply.

Reads only; every method may run concurrently with the others. Absence of
an optional binding or veSCA account is a normal outcome (None), while a
sender with no obligation at all is an error.
"""

import asyncio
import logging

from src.ix_common.errors import (
    NoPositionFoundError,
    PositionRefMismatchError,
    SenderRequiredError,
)
from src.ix_core.address_registry import AddressRegistry
from src.ix_scallop.application.chain_schemas import (
    IncentivePoolsFields,
    ObligationFields,
    ObligationKeyFields,
    TypedIdEntryFields,
    VeScaEntryFields,
    VeScaKeyFields,
    parse_object,
)
from src.ix_scallop.domain.models import ObligationInfo, ObligationRef, VeScaBinding, VeScaInfo
from src.ix_scallop.domain.repository import SuiReaderProtocol
from src.ix_scallop.infrastructure.sui_reader import SuiRpcReader

logger = logging.getLogger(__name__)

_OBJECT_ID_TYPE = "0x2::object::ID"


class StateResolver:
    def __init__(
        self, registry: AddressRegistry, reader: SuiReaderProtocol | None = None
    ) -> None:
        self._registry = registry
        self._reader: SuiReaderProtocol = reader or SuiRpcReader()

    # --- Obligations ---

    async def is_locked(self, obligation_id: str) -> bool:
        """True when the obligation is staked (holds a lock key)."""
        obligation = parse_object(
            await self._reader.get_object(obligation_id), ObligationFields
        )
        if obligation is None:
            logger.warning("Obligation %s unreadable, treating as unlocked", obligation_id)
            return False
        return obligation.content.fields.lock_key is not None

    async def list_positions(self, owner: str) -> list[ObligationInfo]:
        """All obligations owned by `owner`, in fullnode enumeration order."""
        key_type = f"{self._registry.get('core.object')}::obligation::ObligationKey"
        keys = [
            parsed
            for parsed in (
                parse_object(raw, ObligationKeyFields)
                for raw in await self._reader.get_owned_objects(owner, key_type)
            )
            if parsed is not None
        ]
        obligation_ids = [key.content.fields.ownership.fields.of for key in keys]
        locks = await asyncio.gather(*(self.is_locked(oid) for oid in obligation_ids))
        return [
            ObligationInfo(obligation_id=oid, obligation_key=key.object_id, locked=locked)
            for key, oid, locked in zip(keys, obligation_ids, locks)
        ]

    async def resolve_position(
        self, owner: str | None, ref: ObligationRef | None = None
    ) -> ObligationInfo:
        """Resolve the obligation a call should address.

        - id and key both given: trusted as-is, only lock status is fetched.
        - otherwise the owner's obligations are enumerated and the one matching
          either given identifier is picked; with no reference, the first one.
        - a partial reference that matches none of the owned obligations raises
          PositionRefMismatchError; earlier releases fell back to the first
          obligation instead.
        """
        ref = ref or ObligationRef()
        if ref.is_complete:
            locked = await self.is_locked(ref.obligation_id)  # type: ignore[arg-type]
            return ObligationInfo(
                obligation_id=ref.obligation_id,  # type: ignore[arg-type]
                obligation_key=ref.obligation_key,  # type: ignore[arg-type]
                locked=locked,
            )

        if owner is None:
            raise SenderRequiredError()
        positions = await self.list_positions(owner)
        if not positions:
            raise NoPositionFoundError(owner)
        if ref.is_empty:
            return positions[0]

        for position in positions:
            if (
                position.obligation_id == ref.obligation_id
                or position.obligation_key == ref.obligation_key
            ):
                return position
        raise PositionRefMismatchError(
            owner, f"id={ref.obligation_id} key={ref.obligation_key}"
        )

    # --- veSCA binding ---

    async def resolve_auxiliary_binding(self, obligation_id: str) -> VeScaBinding | None:
        """veSCA key bound to `obligation_id`, or None when unbound."""
        key_type = self._typed_id(f"{self._registry.get('core.object')}::obligation::Obligation")
        ve_sca_key = await self._bind_table_lookup("obligation_ve_sca_bind", key_type, obligation_id)
        if ve_sca_key is None:
            return None
        return VeScaBinding(obligation_id=obligation_id, ve_sca_key=ve_sca_key)

    async def resolve_bound_obligation(self, ve_sca_key: str) -> str | None:
        """Obligation id bound to `ve_sca_key`, or None when unbound."""
        key_type = self._typed_id(f"{self._registry.get('vesca.object')}::ve_sca::VeScaKey")
        return await self._bind_table_lookup("ve_sca_bind", key_type, ve_sca_key)

    # --- veSCA accounts ---

    async def list_auxiliary_accounts(self, owner: str) -> list[VeScaInfo]:
        key_type = f"{self._registry.get('vesca.object')}::ve_sca::VeScaKey"
        keys = [
            parsed.object_id
            for parsed in (
                parse_object(raw, VeScaKeyFields)
                for raw in await self._reader.get_owned_objects(owner, key_type)
            )
            if parsed is not None
        ]
        accounts = await asyncio.gather(*(self._get_ve_sca(key) for key in keys))
        return [account for account in accounts if account is not None]

    async def resolve_auxiliary_account(
        self, owner: str | None, ve_sca_key: str | None = None
    ) -> VeScaInfo | None:
        """The given veSCA account, or the sender's first one; None if none."""
        if ve_sca_key:
            return await self._get_ve_sca(ve_sca_key)
        if owner is None:
            raise SenderRequiredError()
        accounts = await self.list_auxiliary_accounts(owner)
        return accounts[0] if accounts else None

    # --- helpers ---

    def _typed_id(self, inner_type: str) -> str:
        return f"{self._registry.get('borrowIncentive.object')}::typed_id::TypedID<{inner_type}>"

    async def _bind_table_lookup(self, table_field: str, key_type: str, key: str) -> str | None:
        pools = parse_object(
            await self._reader.get_object(self._registry.get("borrowIncentive.incentivePools")),
            IncentivePoolsFields,
        )
        if pools is None:
            return None
        table_id = getattr(pools.content.fields, table_field).fields.id.id
        entry = parse_object(
            await self._reader.get_dynamic_field_object(table_id, key_type, key),
            TypedIdEntryFields,
        )
        if entry is None:
            return None
        return entry.content.fields.value.fields.id

    async def _get_ve_sca(self, ve_sca_key: str) -> VeScaInfo | None:
        entry = parse_object(
            await self._reader.get_dynamic_field_object(
                self._registry.get("vesca.table"), _OBJECT_ID_TYPE, ve_sca_key
            ),
            VeScaEntryFields,
        )
        if entry is None:
            return None
        value = entry.content.fields.value.fields
        return VeScaInfo(
            key_id=ve_sca_key,
            object_id=entry.object_id,
            locked_sca_amount=value.locked_sca_amount,
            unlock_at=value.unlock_at * 1000,
        )
