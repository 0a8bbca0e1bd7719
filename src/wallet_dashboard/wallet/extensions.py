"""Interfaces to extension-style account providers.

Two families of provider APIs are modelled:

* the *injected extension* API, where each provider is connected
  individually and may hand out ready-made signers per account, and
* the *legacy* API, a flat account list merged across every enabled
  extension plus a raw byte-signing capability per account.

Both are plain :class:`typing.Protocol` definitions so that real bridges and
test doubles are interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Protocol, runtime_checkable

from pydantic import BaseModel


class InjectedAccount(BaseModel):
    """An account listed by the legacy API."""

    address: str
    name: Optional[str] = None
    source: str                      # provider id the account came from
    key_type: Optional[str] = None   # "sr25519", "ed25519", "ecdsa" or unset


@dataclass(frozen=True)
class SignRawPayload:
    """Request for the legacy ``signRaw`` call."""

    address: str
    data: str                        # 0x-prefixed hex
    type: Literal["bytes", "payload"] = "bytes"


@dataclass(frozen=True)
class SignRawResult:
    id: int
    signature: str                   # 0x-prefixed hex


@runtime_checkable
class Signer(Protocol):
    """Anything that can sign bytes on behalf of one account."""

    @property
    def public_key(self) -> bytes: ...

    async def sign_bytes(self, data: bytes) -> bytes: ...


@dataclass
class ProviderAccount:
    """An account exposed by a connected provider."""

    address: str
    name: Optional[str] = None
    signer: Optional[Signer] = None


class ConnectedProvider(Protocol):
    def list_accounts(self) -> list[ProviderAccount]: ...


class ProviderDirectory(Protocol):
    """Discovery and connection of injected extensions."""

    def list_available_provider_ids(self) -> list[str]: ...

    async def connect(self, provider_id: str) -> ConnectedProvider: ...


class RawSigner(Protocol):
    async def sign_raw(self, payload: SignRawPayload) -> SignRawResult: ...


class LegacyAccountSource(Protocol):
    """Flat, cross-extension account list with raw signing."""

    async def enable(self, app_name: str) -> list[str]:
        """Authorize *app_name* with every extension; return enabled provider ids."""
        ...

    async def list_all_accounts(self) -> list[InjectedAccount]: ...

    async def raw_signer_for(self, address: str) -> RawSigner | None:
        """Return the extension signer that owns *address*, if any."""
        ...
