"""Watch-only account providers built from the config file.

These stand in for browser extensions when the dashboard runs as a local
service: accounts are listed, but there is no key material, so any signer
resolved for them refuses to sign.
"""

from __future__ import annotations

import logging

from wallet_dashboard.config import AccountConfig
from wallet_dashboard.wallet.extensions import (
    InjectedAccount,
    ProviderAccount,
    RawSigner,
)

logger = logging.getLogger("wallet_dashboard.wallet.static")

CONFIG_PROVIDER_ID = "config"


class StaticProvider:
    """A connected provider whose accounts carry no ready-made signer."""

    def __init__(self, accounts: list[AccountConfig]) -> None:
        self._accounts = accounts

    def list_accounts(self) -> list[ProviderAccount]:
        return [ProviderAccount(address=a.address, name=a.name) for a in self._accounts]


class StaticProviderDirectory:
    def __init__(self, accounts: list[AccountConfig]) -> None:
        self._accounts = list(accounts)

    def list_available_provider_ids(self) -> list[str]:
        return [CONFIG_PROVIDER_ID] if self._accounts else []

    async def connect(self, provider_id: str) -> StaticProvider:
        if provider_id != CONFIG_PROVIDER_ID:
            raise KeyError(f"Unknown provider '{provider_id}'")
        return StaticProvider(self._accounts)


class StaticAccountSource:
    """Legacy account source listing the configured accounts."""

    def __init__(self, accounts: list[AccountConfig]) -> None:
        self._accounts = list(accounts)

    async def enable(self, app_name: str) -> list[str]:
        logger.info(f"Config accounts enabled for '{app_name}' ({len(self._accounts)} accounts)")
        return [CONFIG_PROVIDER_ID] if self._accounts else []

    async def list_all_accounts(self) -> list[InjectedAccount]:
        return [
            InjectedAccount(
                address=a.address,
                name=a.name,
                source=CONFIG_PROVIDER_ID,
                key_type=a.key_type,
            )
            for a in self._accounts
        ]

    async def raw_signer_for(self, address: str) -> RawSigner | None:
        return None
