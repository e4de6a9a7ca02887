"""Programmable transaction batch: pure dataclasses, no network dependency.

A batch is an append-only ordered list of queued calls. Queued calls and
their arguments are frozen; the only mutation is appending a new call.
Wire shape of a Move call:
    {"target": "<pkg>::<module>::<function>", "arguments": [...], "typeArguments": [...]}
"""

from dataclasses import dataclass, field
from typing import Any, Union

SUI_CLOCK_OBJECT_ID = "0x6"
SUI_TYPE_ARG = "0x2::sui::SUI"


@dataclass(frozen=True)
class ObjectArg:
    """Reference to an on-chain object by id."""
    object_id: str

    def to_wire(self) -> dict[str, Any]:
        return {"kind": "Object", "objectId": self.object_id}


@dataclass(frozen=True)
class PureArg:
    """Plain BCS-encodable value (address, amount, ...)."""
    value: Any

    def to_wire(self) -> dict[str, Any]:
        return {"kind": "Pure", "value": self.value}


@dataclass(frozen=True)
class ResultArg:
    """Handle to the return value of an earlier call in the same batch."""
    index: int

    def to_wire(self) -> dict[str, Any]:
        return {"kind": "Result", "index": self.index}


Argument = Union[ObjectArg, PureArg, ResultArg]


@dataclass(frozen=True)
class MoveCall:
    target: str
    arguments: tuple[Argument, ...] = ()
    type_arguments: tuple[str, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "arguments": [arg.to_wire() for arg in self.arguments],
            "typeArguments": list(self.type_arguments),
        }


@dataclass(frozen=True)
class TransferObjects:
    objects: tuple[Argument, ...]
    recipient: Argument

    def to_wire(self) -> dict[str, Any]:
        return {
            "kind": "TransferObjects",
            "objects": [arg.to_wire() for arg in self.objects],
            "address": self.recipient.to_wire(),
        }


QueuedCall = Union[MoveCall, TransferObjects]


@dataclass
class TransactionBatch:
    """Calls assembled into one atomic transaction, owned by a single session."""

    sender: str | None = None
    _calls: list[QueuedCall] = field(default_factory=list, repr=False)

    @property
    def calls(self) -> tuple[QueuedCall, ...]:
        return tuple(self._calls)

    def __len__(self) -> int:
        return len(self._calls)

    def move_call(
        self,
        target: str,
        arguments: list[Argument] | None = None,
        type_arguments: list[str] | None = None,
    ) -> ResultArg:
        """Append a Move call and return a handle to its result."""
        call = MoveCall(
            target=target,
            arguments=tuple(arguments or ()),
            type_arguments=tuple(type_arguments or ()),
        )
        return self._append(call)

    def transfer_objects(self, objects: list[Argument], recipient: str) -> ResultArg:
        return self._append(TransferObjects(objects=tuple(objects), recipient=PureArg(recipient)))

    def to_wire(self) -> dict[str, Any]:
        return {
            "sender": self.sender,
            "transactions": [call.to_wire() for call in self._calls],
        }

    def _append(self, call: QueuedCall) -> ResultArg:
        self._calls.append(call)
        return ResultArg(len(self._calls) - 1)


def obj(object_id: str) -> ObjectArg:
    return ObjectArg(object_id)
