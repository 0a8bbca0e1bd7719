"""Chain definitions for supported Substrate networks."""

from __future__ import annotations

from dataclasses import dataclass

from wallet_dashboard.wallet.units import AmountCodec


@dataclass(frozen=True)
class Chain:
    """A Substrate-based relay chain and its native token."""

    name: str
    token_symbol: str
    decimals: int
    ss58_format: int
    rpc_url: str
    explorer_url: str

    @property
    def codec(self) -> AmountCodec:
        """Amount codec at this chain's native token precision."""
        return AmountCodec(self.decimals)


CHAINS: dict[str, Chain] = {
    "polkadot": Chain(
        name="polkadot",
        token_symbol="DOT",
        decimals=10,
        ss58_format=0,
        rpc_url="wss://rpc.polkadot.io",
        explorer_url="https://polkadot.subscan.io",
    ),
    "kusama": Chain(
        name="kusama",
        token_symbol="KSM",
        decimals=12,
        ss58_format=2,
        rpc_url="wss://kusama-rpc.polkadot.io",
        explorer_url="https://kusama.subscan.io",
    ),
    "westend": Chain(
        name="westend",
        token_symbol="WND",
        decimals=12,
        ss58_format=42,
        rpc_url="wss://westend-rpc.polkadot.io",
        explorer_url="https://westend.subscan.io",
    ),
}


def get_chain(name: str) -> Chain:
    """Get a chain by name. Raises ``KeyError`` if not found."""
    if name not in CHAINS:
        raise KeyError(
            f"Unknown chain '{name}'. Available: {list_chain_names()}"
        )
    return CHAINS[name]


def list_chain_names() -> list[str]:
    """Return the names of all supported chains."""
    return list(CHAINS.keys())
