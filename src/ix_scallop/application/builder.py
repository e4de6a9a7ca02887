"""BorrowIncentiveCallBuilder: normal (non-resolving) borrow-incentive calls.

Every method appends exactly one Move call built from already resolved ids.
Argument order is the contract's parameter order and must not change.

Current generation (address book ids, config object first, clock last):
    stake             config, pools, accounts, key, obligation, access_store, clock
    stake_with_ve_sca config, pools, accounts, key, obligation, access_store,
                      vesca.config, vesca.treasury, vesca.table, ve_sca_key, clock
    unstake           config, pools, accounts, key, obligation, clock
    redeem_rewards    config, pools, accounts, key, obligation, clock   <RewardCoin>

Legacy generation (fixed ids, no config object):
    unstake           pools, accounts, key, obligation, clock           <SUI>
    redeem_rewards    pools, accounts, key, obligation, clock           <RewardCoin>
"""

from src.ix_core.address_registry import AddressRegistry
from src.ix_core.transaction import (
    SUI_CLOCK_OBJECT_ID,
    SUI_TYPE_ARG,
    ResultArg,
    TransactionBatch,
    obj,
)
from src.ix_scallop.domain.models import BorrowIncentiveIds, LegacyBorrowIncentiveIds, VeScaIds

USER_MODULE = "user"


class BorrowIncentiveCallBuilder:
    def __init__(self, registry: AddressRegistry, batch: TransactionBatch) -> None:
        self._registry = registry
        self._batch = batch
        self.ids = BorrowIncentiveIds.from_registry(registry)
        self.legacy_ids = LegacyBorrowIncentiveIds()

    def _target(self, package: str, function: str) -> str:
        return f"{package}::{USER_MODULE}::{function}"

    # --- Current generation ---

    def stake(self, obligation_id: str, obligation_key: str) -> None:
        ids = self.ids
        self._batch.move_call(
            self._target(ids.package, "stake"),
            [
                obj(ids.config),
                obj(ids.incentive_pools),
                obj(ids.incentive_accounts),
                obj(obligation_key),
                obj(obligation_id),
                obj(ids.obligation_access_store),
                obj(SUI_CLOCK_OBJECT_ID),
            ],
        )

    def stake_with_ve_sca(
        self, obligation_id: str, obligation_key: str, ve_sca_key: str
    ) -> None:
        ids = self.ids
        ve_sca = VeScaIds.from_registry(self._registry)
        self._batch.move_call(
            self._target(ids.package, "stake_with_ve_sca"),
            [
                obj(ids.config),
                obj(ids.incentive_pools),
                obj(ids.incentive_accounts),
                obj(obligation_key),
                obj(obligation_id),
                obj(ids.obligation_access_store),
                obj(ve_sca.config),
                obj(ve_sca.treasury),
                obj(ve_sca.table),
                obj(ve_sca_key),
                obj(SUI_CLOCK_OBJECT_ID),
            ],
        )

    def unstake(self, obligation_id: str, obligation_key: str) -> None:
        ids = self.ids
        self._batch.move_call(
            self._target(ids.package, "unstake"),
            [
                obj(ids.config),
                obj(ids.incentive_pools),
                obj(ids.incentive_accounts),
                obj(obligation_key),
                obj(obligation_id),
                obj(SUI_CLOCK_OBJECT_ID),
            ],
        )

    def claim(
        self, obligation_id: str, obligation_key: str, reward_coin_name: str
    ) -> ResultArg:
        """Redeem rewards; returns the handle of the reward coin."""
        ids = self.ids
        return self._batch.move_call(
            self._target(ids.package, "redeem_rewards"),
            [
                obj(ids.config),
                obj(ids.incentive_pools),
                obj(ids.incentive_accounts),
                obj(obligation_key),
                obj(obligation_id),
                obj(SUI_CLOCK_OBJECT_ID),
            ],
            [self._registry.coin_type(reward_coin_name)],
        )

    # --- Legacy generation ---

    def legacy_unstake(self, obligation_id: str, obligation_key: str) -> None:
        legacy = self.legacy_ids
        self._batch.move_call(
            self._target(legacy.package, "unstake"),
            [
                obj(legacy.incentive_pools),
                obj(legacy.incentive_accounts),
                obj(obligation_key),
                obj(obligation_id),
                obj(SUI_CLOCK_OBJECT_ID),
            ],
            [SUI_TYPE_ARG],
        )

    def legacy_claim(
        self, obligation_id: str, obligation_key: str, reward_coin_name: str
    ) -> ResultArg:
        legacy = self.legacy_ids
        return self._batch.move_call(
            self._target(legacy.package, "redeem_rewards"),
            [
                obj(legacy.incentive_pools),
                obj(legacy.incentive_accounts),
                obj(obligation_key),
                obj(obligation_id),
                obj(SUI_CLOCK_OBJECT_ID),
            ],
            [self._registry.coin_type(reward_coin_name)],
        )

    # --- Plumbing ---

    def transfer_to(self, objects: list[ResultArg], recipient: str) -> None:
        self._batch.transfer_objects(list(objects), recipient)
