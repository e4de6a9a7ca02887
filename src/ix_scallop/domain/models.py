"""Domain models for ix_scallop: pure dataclasses, no network dependency."""

from dataclasses import dataclass

from src.ix_core.address_registry import AddressRegistry

# Legacy borrow-incentive deployment; never listed in the address book
LEGACY_BORROW_INCENTIVE_PACKAGE_ID = (
    "0xc63072e7f5f4983a2efaf5bdba1480d5e7d74d57948e1c7cc436f8e22cbeb410"
)


@dataclass(frozen=True)
class ObligationRef:
    """Caller-supplied obligation reference; either side may be omitted."""
    obligation_id: str | None = None
    obligation_key: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.obligation_id and self.obligation_key)

    @property
    def is_empty(self) -> bool:
        return not self.obligation_id and not self.obligation_key


@dataclass(frozen=True)
class ObligationInfo:
    obligation_id: str
    obligation_key: str
    locked: bool


@dataclass(frozen=True)
class VeScaBinding:
    obligation_id: str
    ve_sca_key: str


@dataclass(frozen=True)
class VeScaInfo:
    key_id: str
    object_id: str
    locked_sca_amount: int
    unlock_at: int          # ms since epoch


@dataclass(frozen=True)
class BorrowIncentiveIds:
    """Current-generation ids, resolved from the address registry."""
    package: str
    query: str
    config: str
    incentive_pools: str
    incentive_accounts: str
    obligation_access_store: str

    @classmethod
    def from_registry(cls, registry: AddressRegistry) -> "BorrowIncentiveIds":
        return cls(
            package=registry.get("borrowIncentive.id"),
            query=registry.get("borrowIncentive.query"),
            config=registry.get("borrowIncentive.config"),
            incentive_pools=registry.get("borrowIncentive.incentivePools"),
            incentive_accounts=registry.get("borrowIncentive.incentiveAccounts"),
            obligation_access_store=registry.get("core.obligationAccessStore"),
        )


@dataclass(frozen=True)
class LegacyBorrowIncentiveIds:
    """Legacy-generation ids; fixed, the legacy contract has no config object."""
    package: str = LEGACY_BORROW_INCENTIVE_PACKAGE_ID
    incentive_pools: str = "0x64972b713ccec45ec3964809e477cea6f97350c0c50ca3aec85bb631639266ec"
    incentive_accounts: str = "0x3c0b707068bdcea8bb859d751ad3e2149a9f83c13fcf4054ef91372a00bccdd3"


@dataclass(frozen=True)
class VeScaIds:
    table: str
    treasury: str
    config: str

    @classmethod
    def from_registry(cls, registry: AddressRegistry) -> "VeScaIds":
        return cls(
            table=registry.get("vesca.table"),
            treasury=registry.get("vesca.treasury"),
            config=registry.get("vesca.config"),
        )
