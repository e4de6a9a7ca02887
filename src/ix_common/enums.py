"""Global enums: values are part of the serialized intention envelope."""

from enum import Enum


class TransactionType(str, Enum):
    OTHER = "Other"


class TransactionSubType(str, Enum):
    STAKE_OBLIGATION = "StakeObligation"
    UNSTAKE_OBLIGATION = "UnstakeObligation"
    STAKE_OBLIGATION_WITH_VE_SCA = "StakeObligationWithVeSca"
    CLAIM_INCENTIVE_REWARD = "ClaimIncentiveReward"


class ProtocolGeneration(str, Enum):
    """Deployed borrow-incentive contract generation a call is addressed to."""
    CURRENT = "current"
    LEGACY = "legacy"


class SuiNetwork(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
