"""High-level wallet manager used by the dashboard and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wallet_dashboard.config import AppConfig
from wallet_dashboard.errors import AccountNotFoundError, InvalidFormatError
from wallet_dashboard.wallet.address import decode_address
from wallet_dashboard.wallet.chains import Chain, get_chain
from wallet_dashboard.wallet.client import get_client
from wallet_dashboard.wallet.extensions import (
    InjectedAccount,
    LegacyAccountSource,
    ProviderDirectory,
    Signer,
)
from wallet_dashboard.wallet.signer import SignerResolver
from wallet_dashboard.wallet.static import StaticAccountSource, StaticProviderDirectory

logger = logging.getLogger("wallet_dashboard.wallet.manager")


@dataclass
class TransferRequest:
    """A validated transfer, ready to be encoded and signed by the chain client."""

    source: str
    dest: str
    value: int
    amount: str
    symbol: str
    signer: Signer


class WalletManager:
    """Orchestrates account providers, signer resolution and the chain client."""

    def __init__(
        self,
        chain: Chain,
        providers: ProviderDirectory,
        legacy: LegacyAccountSource,
        app_name: str = "Polkadot Wallet Dashboard",
    ) -> None:
        self.chain = chain
        self.providers = providers
        self.legacy = legacy
        self.app_name = app_name
        self.resolver = SignerResolver(providers, legacy)
        self.accounts: list[InjectedAccount] = []
        self.selected: str | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "WalletManager":
        """Build a manager over the watch-only accounts in *config*."""
        accounts = config.wallet.accounts
        return cls(
            chain=get_chain(config.wallet.chain),
            providers=StaticProviderDirectory(accounts),
            legacy=StaticAccountSource(accounts),
            app_name=config.wallet.app_name,
        )

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    async def connect(self) -> list[InjectedAccount]:
        """Enable the extensions and load their accounts.

        The first account becomes the selected one.
        """
        enabled = await self.legacy.enable(self.app_name)
        self.accounts = await self.legacy.list_all_accounts()
        self.selected = self.accounts[0].address if self.accounts else None
        logger.info(
            f"Connected {len(self.accounts)} account(s) from {len(enabled)} extension(s)"
        )
        return self.accounts

    def select(self, address: str) -> None:
        if not any(a.address == address for a in self.accounts):
            raise AccountNotFoundError(address)
        self.selected = address

    def _require_address(self, address: str | None) -> str:
        address = address or self.selected
        if address is None:
            raise AccountNotFoundError("<no account selected>")
        return address

    # ------------------------------------------------------------------
    # Balances
    # ------------------------------------------------------------------

    async def get_balance(self, address: str | None = None) -> dict:
        """Get the free balance of *address* (default: the selected account)."""
        address = self._require_address(address)
        decode_address(address)
        free = await get_client().get_free_balance(address)
        return {
            "address": address,
            "free": str(free),
            "formatted": self.chain.codec.format(free),
            "symbol": self.chain.token_symbol,
        }

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    async def prepare_transfer(
        self,
        to_address: str,
        amount: str,
        from_address: str | None = None,
    ) -> TransferRequest:
        """Validate a transfer and resolve the signer that will authorize it."""
        source = self._require_address(from_address)
        decode_address(to_address)
        value = self.chain.codec.parse(amount)
        if value == 0:
            raise InvalidFormatError("Transfer amount must be greater than zero")

        signer = await self.resolver.resolve(source)
        logger.info(
            f"Prepared transfer of {self.chain.codec.format(value)} "
            f"{self.chain.token_symbol} from {source} to {to_address}"
        )
        return TransferRequest(
            source=source,
            dest=to_address,
            value=value,
            amount=self.chain.codec.format(value),
            symbol=self.chain.token_symbol,
            signer=signer,
        )

    async def sign_message(self, message: bytes, address: str | None = None) -> bytes:
        """Resolve a signer for *address* and sign *message* with it."""
        address = self._require_address(address)
        signer = await self.resolver.resolve(address)
        return await signer.sign_bytes(message)
