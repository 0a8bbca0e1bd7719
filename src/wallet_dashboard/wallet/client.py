"""Process-wide chain client.

The chain client itself (light client or RPC connection) lives outside this
package; this module only holds the single instance the process uses.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol, Union

from wallet_dashboard.errors import ClientNotInitializedError

logger = logging.getLogger("wallet_dashboard.wallet.client")


@dataclass(frozen=True)
class BlockInfo:
    number: int
    hash: str


class ChainClient(Protocol):
    chain_name: str

    async def get_free_balance(self, address: str) -> int:
        """Free balance of *address* in base units."""
        ...

    async def finalized_block(self) -> BlockInfo: ...


ClientFactory = Callable[[], Union[ChainClient, Awaitable[ChainClient]]]

# Module-level state, set once by init_client
_client: ChainClient | None = None
_init_lock: asyncio.Lock | None = None
_init_lock_loop: asyncio.AbstractEventLoop | None = None


def _get_init_lock() -> asyncio.Lock:
    """Return the init lock for the running loop, replacing it when the loop changes."""
    global _init_lock, _init_lock_loop
    loop = asyncio.get_running_loop()
    if _init_lock is None or _init_lock_loop is not loop:
        _init_lock = asyncio.Lock()
        _init_lock_loop = loop
    return _init_lock


async def init_client(factory: ClientFactory) -> ChainClient:
    """Create the process-wide client on first call; later calls reuse it.

    *factory* may be a plain callable or return an awaitable.
    """
    global _client
    async with _get_init_lock():
        if _client is not None:
            return _client
        client = factory()
        if inspect.isawaitable(client):
            client = await client
        _client = client
        logger.info(f"Chain client initialized for {client.chain_name}")
        return client


def get_client() -> ChainClient:
    if _client is None:
        raise ClientNotInitializedError(
            "Chain client not initialized. Call init_client() first."
        )
    return _client


def is_initialized() -> bool:
    return _client is not None


def reset_client() -> None:
    """Forget the current client (shutdown and tests)."""
    global _client
    _client = None
