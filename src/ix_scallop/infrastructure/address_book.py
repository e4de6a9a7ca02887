"""Bundled Scallop address book and the process-wide registry factory.

Mainnet snapshot of the ids the borrow-incentive app addresses. Deployments
move; point ADDRESS_BOOK_PATH at a refreshed JSON book to override.
"""

from config.settings import settings
from src.ix_common.enums import SuiNetwork
from src.ix_core.address_registry import AddressRegistry

_SCA_PKG = "0x7016aae72cfc67f2fadf55769c0a7dd54291a583b63051a5ed71081cce836ac6"

ADDRESS_BOOKS: dict[str, dict] = {
    "mainnet": {
        "addresses": {
            "core": {
                "object": "0xefe8b36d5b2e43728cc323298626b83177803521d195cfb11e15b910e892fddf",
                "obligationAccessStore": (
                    "0x733e30b7c94d619d78cb8f5bc4bfbb759ced9a531239028caabb2474e5be59c9"
                ),
            },
            "borrowIncentive": {
                "id": "0x74922703605ba49ee7b6ea3d5b17b0a3af7bbb0b8fa0eeb6b0e5fca65cf22d3e",
                "object": "0x002875153e09f8145ab63527bc85c00f2bd102e12f9573c47f8cdf1a1cb62934",
                "query": "0x8e4a0a9d6c7e7f68fb4d4c2bc2b5ab3da1b2a0ad5b1bc9c8e6fb8a7d57fc2ba1",
                "config": "0xdf5d04b4691cc67e82fd4db8394d89ff44823a9de29716c924f74bb4f11cc1f7",
                "incentivePools": "0x6547e143d406b5ccd5f46aae482497de279cc1a68c406f701df70a05f9212ab4",
                "incentiveAccounts": (
                    "0xc4701fdbc1c92f9a636d334d66012b3027659e9fb8aff27279a82edfb6b77d02"
                ),
            },
            "vesca": {
                "id": "0xb220d034bdf335d77ae5bfbf6daf059c2cc7a1f719b12bfed75d1736fac038c8",
                "object": "0xcfe2d87aa5712b67cad2732edb6a2201bfdf592377e5c0968b7cb02099bd8e21",
                "table": "0xe3153b2bf124be0b86cb8bd468346a861efd0da52fc42197b54d2f616488a311",
                "treasury": "0xe8c112c09b88158f81531f1a9b4cd8bf9ab60b2fed1b2d1e06a3e2e9c8dcc5fe",
                "config": "0xe0a2ff281e73c1d53cfa85807080f87e833e4f1a7f93dcf8800b3865269a76b9",
            },
        },
        "coins": {
            "sui": "0x2::sui::SUI",
            "sca": f"{_SCA_PKG}::sca::SCA",
        },
    },
}

_registry: AddressRegistry | None = None


def get_address_registry() -> AddressRegistry:
    """Get or load the registry for SUI_NETWORK."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        network = SuiNetwork(settings.SUI_NETWORK).value
        if settings.ADDRESS_BOOK_PATH:
            _registry = AddressRegistry.from_json_file(settings.ADDRESS_BOOK_PATH, network)
        else:
            book = ADDRESS_BOOKS.get(network, {})
            _registry = AddressRegistry(network, book.get("addresses", {}), book.get("coins", {}))
    return _registry
