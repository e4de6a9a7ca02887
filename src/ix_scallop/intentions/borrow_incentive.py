"""Borrow-incentive intentions: stake, unstake, stake with veSCA, claim."""

from abc import abstractmethod
from typing import Any

from src.ix_common.enums import TransactionSubType
from src.ix_common.errors import SenderRequiredError
from src.ix_core.address_registry import AddressRegistry
from src.ix_core.intention import BaseIntention, DataT
from src.ix_core.transaction import TransactionBatch
from src.ix_scallop.application.quick import BorrowIncentiveQuickMethods
from src.ix_scallop.application.resolver import StateResolver
from src.ix_scallop.application.schemas import (
    ClaimIncentiveRewardIntentionData,
    StakeObligationIntentionData,
    StakeObligationWithVeScaIntentionData,
    UnstakeObligationIntentionData,
)


class BorrowIncentiveIntention(BaseIntention[DataT]):
    async def build(
        self, batch: TransactionBatch, registry: AddressRegistry, reader: Any = None
    ) -> TransactionBatch:
        quick = BorrowIncentiveQuickMethods(registry, batch, StateResolver(registry, reader))
        await self._apply(quick, batch)
        return batch

    @abstractmethod
    async def _apply(self, quick: BorrowIncentiveQuickMethods, batch: TransactionBatch) -> None: ...


class StakeObligationIntention(BorrowIncentiveIntention[StakeObligationIntentionData]):
    tx_sub_type = TransactionSubType.STAKE_OBLIGATION
    data_model = StakeObligationIntentionData

    async def _apply(self, quick: BorrowIncentiveQuickMethods, batch: TransactionBatch) -> None:
        await quick.stake_quick(self.data.obligation_id, self.data.obligation_key)


class UnstakeObligationIntention(BorrowIncentiveIntention[UnstakeObligationIntentionData]):
    tx_sub_type = TransactionSubType.UNSTAKE_OBLIGATION
    data_model = UnstakeObligationIntentionData

    async def _apply(self, quick: BorrowIncentiveQuickMethods, batch: TransactionBatch) -> None:
        await quick.unstake_quick(
            self.data.obligation_id, self.data.obligation_key, self.data.generation
        )


class StakeObligationWithVeScaIntention(
    BorrowIncentiveIntention[StakeObligationWithVeScaIntentionData]
):
    tx_sub_type = TransactionSubType.STAKE_OBLIGATION_WITH_VE_SCA
    data_model = StakeObligationWithVeScaIntentionData

    async def _apply(self, quick: BorrowIncentiveQuickMethods, batch: TransactionBatch) -> None:
        await quick.stake_with_ve_sca_quick(
            self.data.obligation_id, self.data.obligation_key, self.data.ve_sca_key
        )


class ClaimIncentiveRewardIntention(BorrowIncentiveIntention[ClaimIncentiveRewardIntentionData]):
    """Redeem rewards and send the reward coin back to the sender."""

    tx_sub_type = TransactionSubType.CLAIM_INCENTIVE_REWARD
    data_model = ClaimIncentiveRewardIntentionData

    async def _apply(self, quick: BorrowIncentiveQuickMethods, batch: TransactionBatch) -> None:
        if batch.sender is None:
            raise SenderRequiredError()
        reward = await quick.claim_quick(
            self.data.reward_coin_name,
            self.data.obligation_id,
            self.data.obligation_key,
            self.data.generation,
        )
        quick.normal.transfer_to([reward], batch.sender)


BORROW_INCENTIVE_INTENTIONS: dict[TransactionSubType, type[BorrowIncentiveIntention[Any]]] = {
    cls.tx_sub_type: cls
    for cls in (
        StakeObligationIntention,
        UnstakeObligationIntention,
        StakeObligationWithVeScaIntention,
        ClaimIncentiveRewardIntention,
    )
}
