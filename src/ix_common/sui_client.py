"""Sui fullnode HTTP client factory: shared by every on-chain reader.

One pooled httpx.AsyncClient per process; closed explicitly on shutdown.
"""

import httpx

from config.settings import settings

_sui_client: httpx.AsyncClient | None = None


async def get_sui_client() -> httpx.AsyncClient:
    """Get or create the fullnode connection pool."""
    global _sui_client  # noqa: PLW0603
    if _sui_client is None:
        _sui_client = httpx.AsyncClient(
            base_url=settings.SUI_RPC_URL,
            timeout=settings.RPC_TIMEOUT_SECONDS,
            headers={"Content-Type": "application/json"},
        )
    return _sui_client


async def close_sui_client() -> None:
    """Close the fullnode connection pool."""
    global _sui_client  # noqa: PLW0603
    if _sui_client is not None:
        await _sui_client.aclose()
        _sui_client = None
