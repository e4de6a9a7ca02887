"""Tests for the transaction batch model and the batch inspector."""

import dataclasses

import pytest

from src.ix_core.inspector import has_queued_call, object_argument_predicate
from src.ix_core.transaction import (
    MoveCall,
    ObjectArg,
    PureArg,
    ResultArg,
    TransactionBatch,
    TransferObjects,
    obj,
)


class TestBatch:
    def test_move_call_returns_result_handle(self) -> None:
        batch = TransactionBatch(sender="0xalice")
        first = batch.move_call("0x1::m::f", [obj("0xA")])
        second = batch.move_call("0x1::m::g")
        assert first == ResultArg(0)
        assert second == ResultArg(1)
        assert len(batch) == 2

    def test_calls_are_frozen(self) -> None:
        batch = TransactionBatch()
        batch.move_call("0x1::m::f", [obj("0xA")], ["0x2::sui::SUI"])
        call = batch.calls[0]
        assert isinstance(call, MoveCall)
        assert call.arguments == (ObjectArg("0xA"),)
        assert call.type_arguments == ("0x2::sui::SUI",)
        with pytest.raises(dataclasses.FrozenInstanceError):
            call.target = "0x1::m::h"  # type: ignore[misc]

    def test_calls_view_is_a_tuple(self) -> None:
        batch = TransactionBatch()
        batch.move_call("0x1::m::f")
        assert isinstance(batch.calls, tuple)

    def test_transfer_objects(self) -> None:
        batch = TransactionBatch(sender="0xalice")
        coin = batch.move_call("0x1::m::f")
        batch.transfer_objects([coin], "0xalice")
        transfer = batch.calls[1]
        assert transfer == TransferObjects(objects=(ResultArg(0),), recipient=PureArg("0xalice"))

    def test_wire_shape(self) -> None:
        batch = TransactionBatch(sender="0xalice")
        batch.move_call("0x1::m::f", [obj("0xA")], ["0x2::sui::SUI"])
        wire = batch.to_wire()
        assert wire["sender"] == "0xalice"
        assert wire["transactions"] == [
            {
                "target": "0x1::m::f",
                "arguments": [{"kind": "Object", "objectId": "0xA"}],
                "typeArguments": ["0x2::sui::SUI"],
            }
        ]


class TestInspector:
    TARGETS = {"0xnew::user::unstake": 4, "0xold::user::unstake": 3}

    def test_matches_object_at_mapped_index(self) -> None:
        predicate = object_argument_predicate(self.TARGETS, "0xP")
        batch = TransactionBatch()
        batch.move_call("0xold::user::unstake", [ObjectArg(i) for i in ("0xa", "0xb", "0xK", "0xP", "0x6")])
        assert has_queued_call(batch, predicate)

    def test_other_object_does_not_match(self) -> None:
        predicate = object_argument_predicate(self.TARGETS, "0xP")
        batch = TransactionBatch()
        batch.move_call(
            "0xnew::user::unstake",
            [ObjectArg(i) for i in ("0xc", "0xa", "0xb", "0xK2", "0xQ", "0x6")],
        )
        assert not has_queued_call(batch, predicate)

    def test_ignores_other_functions_and_packages(self) -> None:
        predicate = object_argument_predicate(self.TARGETS, "0xP")
        batch = TransactionBatch()
        args = [ObjectArg(i) for i in ("0xc", "0xa", "0xb", "0xK", "0xP", "0x6")]
        batch.move_call("0xnew::user::stake", args)
        batch.move_call("0xthird::user::unstake", args)
        batch.move_call("0xnew::user::unstake", [ObjectArg("0xP")])
        batch.transfer_objects([ResultArg(0)], "0xalice")
        assert not has_queued_call(batch, predicate)

    def test_empty_batch(self) -> None:
        predicate = object_argument_predicate(self.TARGETS, "0xP")
        assert not has_queued_call(TransactionBatch(), predicate)
