"""ScallopBorrowIncentiveHelper: entry point used by wallet integrations.

Maps sub-type tags to intention classes, builds a fresh batch for a
serialized intention and turns a built batch back into an envelope:
    {"txType":"Other","txSubType":"StakeObligation","intentionData":{...}}
"""

import logging
from typing import Any

from src.ix_common.enums import TransactionSubType
from src.ix_common.errors import UnknownIntentionError
from src.ix_core.address_registry import AddressRegistry
from src.ix_core.intention import IntentionEnvelope
from src.ix_core.transaction import TransactionBatch
from src.ix_scallop.application.codec import decode
from src.ix_scallop.domain.repository import SuiReaderProtocol
from src.ix_scallop.infrastructure.address_book import get_address_registry
from src.ix_scallop.intentions.borrow_incentive import (
    BORROW_INCENTIVE_INTENTIONS,
    BorrowIncentiveIntention,
)

logger = logging.getLogger(__name__)


class ScallopBorrowIncentiveHelper:
    application = "scallop"

    def __init__(
        self,
        registry: AddressRegistry | None = None,
        reader: SuiReaderProtocol | None = None,
    ) -> None:
        self._registry = registry or get_address_registry()
        self._reader = reader

    @property
    def supported_sub_types(self) -> list[str]:
        return [sub_type.value for sub_type in BORROW_INCENTIVE_INTENTIONS]

    def get_intention(self, tx_sub_type: str, data: dict[str, Any]) -> BorrowIncentiveIntention:
        try:
            intention_cls = BORROW_INCENTIVE_INTENTIONS[TransactionSubType(tx_sub_type)]
        except ValueError:
            raise UnknownIntentionError(f"unsupported sub type {tx_sub_type}") from None
        return intention_cls.from_data(data)

    async def build(
        self, tx_sub_type: str, data: dict[str, Any], sender: str
    ) -> TransactionBatch:
        intention = self.get_intention(tx_sub_type, data)
        batch = TransactionBatch(sender=sender)
        await intention.build(batch, self._registry, self._reader)
        logger.info("Built %s for %s: %d calls", tx_sub_type, sender, len(batch))
        return batch

    def deserialize(self, batch: TransactionBatch) -> IntentionEnvelope:
        return decode(batch, self._registry).envelope()
