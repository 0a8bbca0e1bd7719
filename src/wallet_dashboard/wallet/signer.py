"""Locate a signer for an account across extension providers.

Resolution tries every injected provider in discovery order and returns the
first ready-made signer for the address. When none is found it rebuilds a
signer from the legacy account list: the public key comes from the address,
the key algorithm from the account's declared key type, and signing is
delegated to the extension's ``sign_raw``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Optional

from eth_utils import decode_hex, encode_hex

from wallet_dashboard.errors import AccountNotFoundError, UnsupportedSigningError
from wallet_dashboard.wallet.address import decode_address
from wallet_dashboard.wallet.extensions import (
    InjectedAccount,
    LegacyAccountSource,
    ProviderDirectory,
    RawSigner,
    Signer,
    SignRawPayload,
)

logger = logging.getLogger("wallet_dashboard.wallet.signer")


class KeyAlgorithm(str, Enum):
    ED25519 = "Ed25519"
    SR25519 = "Sr25519"
    ECDSA = "Ecdsa"

    @classmethod
    def from_key_type(cls, key_type: str | None) -> "KeyAlgorithm":
        """Map an extension ``type`` tag to an algorithm (sr25519 by default)."""
        if key_type == "ecdsa":
            return cls.ECDSA
        if key_type == "ed25519":
            return cls.ED25519
        return cls.SR25519


@dataclass
class SignerHandle:
    """Signer rebuilt from a public key and a byte-signing callback."""

    public_key: bytes
    algorithm: KeyAlgorithm
    _sign: Callable[[bytes], Awaitable[bytes]] = field(repr=False)

    async def sign_bytes(self, data: bytes) -> bytes:
        return await self._sign(data)


def _raw_signing_callback(
    address: str, raw_signer: Optional[RawSigner]
) -> Callable[[bytes], Awaitable[bytes]]:
    async def sign(message: bytes) -> bytes:
        sign_raw = getattr(raw_signer, "sign_raw", None)
        if sign_raw is None:
            raise UnsupportedSigningError(
                f"Extension signer for {address} does not support sign_raw"
            )
        result = await sign_raw(
            SignRawPayload(address=address, data=encode_hex(message), type="bytes")
        )
        return decode_hex(result.signature)

    return sign


def _find_account(accounts: list[InjectedAccount], address: str) -> InjectedAccount | None:
    # First match wins when several extensions expose the same address
    return next((a for a in accounts if a.address == address), None)


async def _find_ready_made_signer(
    address: str, providers: ProviderDirectory
) -> Signer | None:
    for provider_id in providers.list_available_provider_ids():
        try:
            provider = await providers.connect(provider_id)
            accounts = provider.list_accounts()
        except Exception as exc:
            logger.debug(f"Skipping provider {provider_id}: {exc}")
            continue

        match = next((a for a in accounts if a.address == address), None)
        if match is not None and match.signer is not None:
            logger.debug(f"Using ready-made signer from {provider_id} for {address}")
            return match.signer
    return None


async def resolve_signer(
    address: str,
    providers: ProviderDirectory,
    legacy: LegacyAccountSource,
    *,
    address_codec: Callable[[str], bytes] = decode_address,
) -> Signer:
    """Return a signer able to sign bytes for *address*.

    Parameters
    ----------
    address:
        SS58 address of the account.
    providers:
        Injected-extension directory, tried first in discovery order.
        Connection failures are logged and skipped.
    legacy:
        Fallback account source used when no provider exposes a ready-made
        signer for *address*.
    address_codec:
        Decodes *address* to public key bytes for the fallback signer.

    Raises
    ------
    AccountNotFoundError
        If neither path knows the address.
    InvalidAddressError
        If the fallback path cannot decode the address.
    """
    signer = await _find_ready_made_signer(address, providers)
    if signer is not None:
        return signer

    account = _find_account(await legacy.list_all_accounts(), address)
    if account is None:
        raise AccountNotFoundError(address)

    algorithm = KeyAlgorithm.from_key_type(account.key_type)
    public_key = address_codec(address)
    raw_signer = await legacy.raw_signer_for(address)

    logger.info(
        f"Built fallback {algorithm.value} signer for {address} (source={account.source})"
    )
    return SignerHandle(
        public_key=public_key,
        algorithm=algorithm,
        _sign=_raw_signing_callback(address, raw_signer),
    )


async def get_signer_for_address(address: str, legacy: LegacyAccountSource) -> RawSigner | None:
    """Return the legacy extension signer for *address* as-is."""
    account = _find_account(await legacy.list_all_accounts(), address)
    if account is None:
        raise AccountNotFoundError(address)
    return await legacy.raw_signer_for(address)


class SignerResolver:
    """Holds the provider collaborators and resolves signers on demand.

    Nothing is cached: every :meth:`resolve` call rediscovers providers.
    """

    def __init__(
        self,
        providers: ProviderDirectory,
        legacy: LegacyAccountSource,
        address_codec: Callable[[str], bytes] = decode_address,
    ) -> None:
        self.providers = providers
        self.legacy = legacy
        self.address_codec = address_codec

    async def resolve(self, address: str) -> Signer:
        return await resolve_signer(
            address, self.providers, self.legacy, address_codec=self.address_codec
        )
