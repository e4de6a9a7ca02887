"""Scan calls already queued in the current batch (not historical chain state)."""

from collections.abc import Callable, Mapping

from src.ix_core.transaction import MoveCall, ObjectArg, QueuedCall, TransactionBatch

CallPredicate = Callable[[QueuedCall], bool]


def has_queued_call(batch: TransactionBatch, predicate: CallPredicate) -> bool:
    return any(predicate(call) for call in batch.calls)


def object_argument_predicate(targets: Mapping[str, int], object_id: str) -> CallPredicate:
    """Match Move calls to one of `targets` that pass `object_id` at the mapped argument index.

    Only exact targets are recognized: a generation whose package id is not
    listed here is not detected.
    """

    def _matches(call: QueuedCall) -> bool:
        # TransferObjects never targets a package
        if not isinstance(call, MoveCall):
            return False
        index = targets.get(call.target)
        if index is None or index >= len(call.arguments):
            return False
        return call.arguments[index] == ObjectArg(object_id)

    return _matches
