"""IntentionCodec: canonical encoding and batch → intention decoding.

Decoding matches each queued Move call against the known borrow-incentive
call shapes (target package + function + argument count) and reads the
user-facing fields back out of the argument list. Ids the quick layer
resolved show up in the decoded intention; they cannot be told apart from
ids the user supplied.
"""

import logging
from dataclasses import dataclass

from pydantic import BaseModel

from src.ix_common.enums import ProtocolGeneration, TransactionSubType
from src.ix_common.errors import ConfigMissingError, UnknownIntentionError
from src.ix_core.address_registry import AddressRegistry
from src.ix_core.intention import canonical_json
from src.ix_core.transaction import MoveCall, ObjectArg, TransactionBatch, TransferObjects
from src.ix_scallop.application.builder import USER_MODULE
from src.ix_scallop.domain.models import LEGACY_BORROW_INCENTIVE_PACKAGE_ID
from src.ix_scallop.intentions.borrow_incentive import (
    BorrowIncentiveIntention,
    ClaimIncentiveRewardIntention,
    StakeObligationIntention,
    StakeObligationWithVeScaIntention,
    UnstakeObligationIntention,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallShape:
    sub_type: TransactionSubType
    generation: ProtocolGeneration
    function: str
    arity: int
    key_index: int
    obligation_index: int
    ve_sca_key_index: int | None = None
    has_reward_type: bool = False


_CURRENT = ProtocolGeneration.CURRENT
_LEGACY = ProtocolGeneration.LEGACY

CALL_SHAPES: dict[tuple[ProtocolGeneration, str], CallShape] = {
    (shape.generation, shape.function): shape
    for shape in (
        CallShape(TransactionSubType.STAKE_OBLIGATION, _CURRENT, "stake", 7, 3, 4),
        CallShape(
            TransactionSubType.STAKE_OBLIGATION_WITH_VE_SCA, _CURRENT, "stake_with_ve_sca",
            11, 3, 4, ve_sca_key_index=9,
        ),
        CallShape(TransactionSubType.UNSTAKE_OBLIGATION, _CURRENT, "unstake", 6, 3, 4),
        CallShape(
            TransactionSubType.CLAIM_INCENTIVE_REWARD, _CURRENT, "redeem_rewards",
            6, 3, 4, has_reward_type=True,
        ),
        CallShape(TransactionSubType.UNSTAKE_OBLIGATION, _LEGACY, "unstake", 5, 2, 3),
        CallShape(
            TransactionSubType.CLAIM_INCENTIVE_REWARD, _LEGACY, "redeem_rewards",
            5, 2, 3, has_reward_type=True,
        ),
    )
}

# Highest first: a claim batch also carries its transfer, a migration batch
# carries a legacy unstake before the stake.
_PRIORITY = (
    TransactionSubType.CLAIM_INCENTIVE_REWARD,
    TransactionSubType.STAKE_OBLIGATION_WITH_VE_SCA,
    TransactionSubType.STAKE_OBLIGATION,
    TransactionSubType.UNSTAKE_OBLIGATION,
)


def encode(data: BaseModel) -> str:
    """Canonical text of the user-supplied fields, e.g. {"amount":"10000000"}."""
    return canonical_json(data)


def _object_id(call: MoveCall, index: int) -> str:
    arg = call.arguments[index]
    if not isinstance(arg, ObjectArg):
        raise UnknownIntentionError(f"{call.target} argument {index} is not an object")
    return arg.object_id


def _classify(call: MoveCall, generations: dict[str, ProtocolGeneration]) -> CallShape:
    parts = call.target.split("::")
    generation = generations.get(parts[0])
    shape = None
    if generation is not None and len(parts) == 3 and parts[1] == USER_MODULE:
        shape = CALL_SHAPES.get((generation, parts[2]))
    if shape is None:
        raise UnknownIntentionError(f"unrecognized target {call.target}")
    if len(call.arguments) != shape.arity:
        raise UnknownIntentionError(
            f"{call.target} has {len(call.arguments)} arguments, expected {shape.arity}"
        )
    return shape


def _to_intention(
    shape: CallShape, call: MoveCall, registry: AddressRegistry
) -> BorrowIncentiveIntention:
    obligation = {
        "obligation_id": _object_id(call, shape.obligation_index),
        "obligation_key": _object_id(call, shape.key_index),
    }
    if shape.sub_type is TransactionSubType.STAKE_OBLIGATION:
        return StakeObligationIntention.from_data(obligation)
    if shape.sub_type is TransactionSubType.STAKE_OBLIGATION_WITH_VE_SCA:
        return StakeObligationWithVeScaIntention.from_data(
            {**obligation, "ve_sca_key": _object_id(call, shape.ve_sca_key_index)}  # type: ignore[arg-type]
        )
    if shape.sub_type is TransactionSubType.UNSTAKE_OBLIGATION:
        return UnstakeObligationIntention.from_data({**obligation, "generation": shape.generation})

    if not call.type_arguments:
        raise UnknownIntentionError(f"{call.target} has no reward type argument")
    try:
        reward_coin_name = registry.coin_name(call.type_arguments[0])
    except ConfigMissingError as exc:
        raise UnknownIntentionError(f"unknown reward coin {call.type_arguments[0]}") from exc
    return ClaimIncentiveRewardIntention.from_data(
        {**obligation, "reward_coin_name": reward_coin_name, "generation": shape.generation}
    )


def decode(batch: TransactionBatch, registry: AddressRegistry) -> BorrowIncentiveIntention:
    """Recover the borrow-incentive intention a built batch expresses."""
    generations = {
        registry.get("borrowIncentive.id"): _CURRENT,
        LEGACY_BORROW_INCENTIVE_PACKAGE_ID: _LEGACY,
    }
    matched: list[tuple[CallShape, MoveCall]] = []
    for call in batch.calls:
        if isinstance(call, TransferObjects):
            continue
        matched.append((_classify(call, generations), call))

    if not matched:
        raise UnknownIntentionError("batch holds no borrow incentive call")

    for sub_type in _PRIORITY:
        for shape, call in reversed(matched):
            if shape.sub_type is sub_type:
                intention = _to_intention(shape, call, registry)
                logger.debug("Decoded %d calls as %r", len(batch), intention)
                return intention
    raise UnknownIntentionError("no decodable call")  # pragma: no cover
