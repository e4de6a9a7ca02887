"""AddressRegistry: read-only symbolic key → on-chain id mapping.

Keys are dotted paths ("borrowIncentive.id", "core.obligationAccessStore").
An unknown key is a configuration error, never a default.
Loaded once per process; the mapping is frozen after load.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from src.ix_common.errors import ConfigMissingError

logger = logging.getLogger(__name__)


def _flatten(tree: dict[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for name, value in tree.items():
        key = f"{prefix}{name}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{key}."))
        else:
            flat[key] = str(value)
    return flat


class AddressRegistry:
    def __init__(
        self,
        network: str,
        addresses: dict[str, Any],
        coins: dict[str, str] | None = None,
    ) -> None:
        self.network = network
        self._addresses = MappingProxyType(_flatten(addresses))
        self._coin_types = MappingProxyType(dict(coins or {}))
        self._coin_names = MappingProxyType({v: k for k, v in self._coin_types.items()})

    def get(self, key: str) -> str:
        try:
            return self._addresses[key]
        except KeyError:
            raise ConfigMissingError(key, self.network) from None

    def coin_type(self, coin_name: str) -> str:
        """Coin name ("sui", "sca") → Move coin type."""
        try:
            return self._coin_types[coin_name]
        except KeyError:
            raise ConfigMissingError(f"coins.{coin_name}", self.network) from None

    def coin_name(self, coin_type: str) -> str:
        """Move coin type → coin name; inverse of coin_type()."""
        try:
            return self._coin_names[coin_type]
        except KeyError:
            raise ConfigMissingError(f"coins[{coin_type}]", self.network) from None

    @classmethod
    def from_json_file(cls, path: str | Path, network: str) -> "AddressRegistry":
        """Load {"addresses": {...}, "coins": {...}} from a JSON file."""
        with open(path, encoding="utf-8") as fh:
            book = json.load(fh)
        logger.info("Loaded %s address book from %s", network, path)
        return cls(network, book.get("addresses", {}), book.get("coins", {}))
