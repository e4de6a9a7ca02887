"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Configuration / address registry
  2xxx: On-chain state resolution
  3xxx: Call building
  4xxx: Intention codec
  9xxx: System / transport
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Configuration ---

class ConfigMissingError(AppError):
    def __init__(self, key: str, network: str) -> None:
        self.key = key
        super().__init__(1001, f"Address key not configured for {network}: {key}")


# --- 2xxx: Resolution ---

class NoPositionFoundError(AppError):
    def __init__(self, owner: str) -> None:
        super().__init__(2001, f"No obligation found for sender {owner}")


class PositionRefMismatchError(AppError):
    def __init__(self, owner: str, detail: str) -> None:
        super().__init__(2002, f"Obligation reference not owned by {owner}: {detail}")


class SenderRequiredError(AppError):
    def __init__(self) -> None:
        super().__init__(2003, "Transaction batch has no sender")


# --- 3xxx: Build ---

class BindingMismatchError(AppError):
    def __init__(self, provided: str, bound: str | None) -> None:
        super().__init__(
            3001,
            f"Bound veSCA key {bound} is not equal to the provided veSCA key {provided}",
        )


# --- 4xxx: Codec ---

class UnknownIntentionError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Unknown intention: {detail}")


# --- 9xxx: System ---

class RpcError(AppError):
    def __init__(self, method: str, detail: str) -> None:
        super().__init__(9001, f"Sui RPC {method} failed: {detail}")
