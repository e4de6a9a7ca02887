# src/ix_scallop/application/schemas.py
from src.ix_common.enums import ProtocolGeneration
from src.ix_core.intention import IntentionData


class ObligationIntentionData(IntentionData):
    obligation_id: str | None = None
    obligation_key: str | None = None


class StakeObligationIntentionData(ObligationIntentionData):
    pass


class UnstakeObligationIntentionData(ObligationIntentionData):
    generation: ProtocolGeneration = ProtocolGeneration.CURRENT


class StakeObligationWithVeScaIntentionData(ObligationIntentionData):
    ve_sca_key: str | None = None


class ClaimIncentiveRewardIntentionData(ObligationIntentionData):
    reward_coin_name: str
    generation: ProtocolGeneration = ProtocolGeneration.CURRENT
