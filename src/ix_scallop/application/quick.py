"""BorrowIncentiveQuickMethods: resolving, conflict-aware borrow-incentive calls.

Quick methods resolve the obligation (and veSCA binding) and scan the batch
before appending anything, so a failed resolution leaves the batch exactly
as it was. Each quick method appends at most one borrow-incentive call.
"""

import logging

from src.ix_common.enums import ProtocolGeneration
from src.ix_common.errors import BindingMismatchError
from src.ix_core.address_registry import AddressRegistry
from src.ix_core.inspector import has_queued_call, object_argument_predicate
from src.ix_core.transaction import ResultArg, TransactionBatch
from src.ix_scallop.application.builder import USER_MODULE, BorrowIncentiveCallBuilder
from src.ix_scallop.application.resolver import StateResolver
from src.ix_scallop.domain.models import ObligationInfo, ObligationRef

logger = logging.getLogger(__name__)


class BorrowIncentiveQuickMethods:
    def __init__(
        self,
        registry: AddressRegistry,
        batch: TransactionBatch,
        resolver: StateResolver | None = None,
    ) -> None:
        self._batch = batch
        self._resolver = resolver or StateResolver(registry)
        self.normal = BorrowIncentiveCallBuilder(registry, batch)
        # unstake target -> index of the obligation argument
        self._unstake_targets = {
            f"{self.normal.ids.package}::{USER_MODULE}::unstake": 4,
            f"{self.normal.legacy_ids.package}::{USER_MODULE}::unstake": 3,
        }

    async def _require_obligation(
        self, obligation_id: str | None, obligation_key: str | None
    ) -> ObligationInfo:
        return await self._resolver.resolve_position(
            self._batch.sender, ObligationRef(obligation_id, obligation_key)
        )

    def _should_stake(self, obligation: ObligationInfo) -> bool:
        """Unlocked, or an unstake of this obligation was queued earlier in this batch."""
        if not obligation.locked:
            return True
        return has_queued_call(
            self._batch,
            object_argument_predicate(self._unstake_targets, obligation.obligation_id),
        )

    async def stake_quick(
        self, obligation_id: str | None = None, obligation_key: str | None = None
    ) -> None:
        obligation = await self._require_obligation(obligation_id, obligation_key)
        if not self._should_stake(obligation):
            logger.info("Stake skipped: obligation %s already staked", obligation.obligation_id)
            return
        self.normal.stake(obligation.obligation_id, obligation.obligation_key)

    async def unstake_quick(
        self,
        obligation_id: str | None = None,
        obligation_key: str | None = None,
        generation: ProtocolGeneration = ProtocolGeneration.CURRENT,
    ) -> None:
        obligation = await self._require_obligation(obligation_id, obligation_key)
        if not obligation.locked:
            logger.info("Unstake skipped: obligation %s not staked", obligation.obligation_id)
            return
        if generation is ProtocolGeneration.LEGACY:
            self.normal.legacy_unstake(obligation.obligation_id, obligation.obligation_key)
        else:
            self.normal.unstake(obligation.obligation_id, obligation.obligation_key)

    async def stake_with_ve_sca_quick(
        self,
        obligation_id: str | None = None,
        obligation_key: str | None = None,
        ve_sca_key: str | None = None,
    ) -> None:
        obligation = await self._require_obligation(obligation_id, obligation_key)
        if not self._should_stake(obligation):
            logger.info("Stake skipped: obligation %s already staked", obligation.obligation_id)
            return

        binding = await self._resolver.resolve_auxiliary_binding(obligation.obligation_id)
        bound_key = binding.ve_sca_key if binding else None
        if ve_sca_key and ve_sca_key != bound_key:
            logger.warning(
                "veSCA key %s does not match binding %s of obligation %s",
                ve_sca_key,
                bound_key,
                obligation.obligation_id,
            )
            raise BindingMismatchError(ve_sca_key, bound_key)

        if bound_key:
            self.normal.stake_with_ve_sca(
                obligation.obligation_id, obligation.obligation_key, bound_key
            )
        else:
            self.normal.stake(obligation.obligation_id, obligation.obligation_key)

    async def claim_quick(
        self,
        reward_coin_name: str,
        obligation_id: str | None = None,
        obligation_key: str | None = None,
        generation: ProtocolGeneration = ProtocolGeneration.CURRENT,
    ) -> ResultArg:
        """Redeem rewards regardless of lock status; returns the reward coin handle."""
        obligation = await self._require_obligation(obligation_id, obligation_key)
        if generation is ProtocolGeneration.LEGACY:
            return self.normal.legacy_claim(
                obligation.obligation_id, obligation.obligation_key, reward_coin_name
            )
        return self.normal.claim(
            obligation.obligation_id, obligation.obligation_key, reward_coin_name
        )
