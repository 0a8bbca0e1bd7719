"""Shared fixtures and fake extension providers."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from eth_utils import decode_hex, encode_hex

from wallet_dashboard.wallet import client as client_module
from wallet_dashboard.wallet.client import BlockInfo
from wallet_dashboard.wallet.extensions import (
    InjectedAccount,
    ProviderAccount,
    SignRawPayload,
    SignRawResult,
)

ALICE = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
ALICE_PUBLIC_KEY = bytes.fromhex(
    "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"
)
BOB = "5FHneW46xGXgs5mUiveU4sbTyGBzmstUspZC92UhjJM694ty"
BOB_PUBLIC_KEY = bytes.fromhex(
    "8eaf04151687736326c9fea17e25fc5287613693c912909cb226aa4794f26a48"
)


@dataclass
class FakeSigner:
    """Ready-made signer handed out by a connected provider."""

    public_key: bytes
    tag: bytes = b"ready:"

    async def sign_bytes(self, data: bytes) -> bytes:
        return self.tag + data


class FakeProvider:
    def __init__(self, accounts: list[ProviderAccount]):
        self.accounts = accounts

    def list_accounts(self) -> list[ProviderAccount]:
        return self.accounts


class FakeDirectory:
    """Provider directory; a value that is an exception fails to connect."""

    def __init__(self, providers: dict[str, FakeProvider | Exception]):
        self.providers = providers
        self.connected: list[str] = []

    def list_available_provider_ids(self) -> list[str]:
        return list(self.providers)

    async def connect(self, provider_id: str) -> FakeProvider:
        self.connected.append(provider_id)
        provider = self.providers[provider_id]
        if isinstance(provider, Exception):
            raise provider
        return provider


@dataclass
class FakeRawSigner:
    payloads: list[SignRawPayload] = field(default_factory=list)

    async def sign_raw(self, payload: SignRawPayload) -> SignRawResult:
        self.payloads.append(payload)
        return SignRawResult(id=len(self.payloads), signature=encode_hex(b"raw:" + decode_hex(payload.data)))


class FakeLegacySource:
    def __init__(
        self,
        accounts: list[InjectedAccount] | None = None,
        raw_signers: dict[str, object] | None = None,
    ):
        self.accounts = accounts or []
        self.raw_signers = raw_signers or {}
        self.enabled_by: list[str] = []
        self.list_calls = 0

    async def enable(self, app_name: str) -> list[str]:
        self.enabled_by.append(app_name)
        return sorted({a.source for a in self.accounts})

    async def list_all_accounts(self) -> list[InjectedAccount]:
        self.list_calls += 1
        return self.accounts

    async def raw_signer_for(self, address: str):
        return self.raw_signers.get(address)


class FakeChainClient:
    chain_name = "westend"

    def __init__(self, balances: dict[str, int] | None = None):
        self.balances = balances or {}

    async def get_free_balance(self, address: str) -> int:
        return self.balances.get(address, 0)

    async def finalized_block(self) -> BlockInfo:
        return BlockInfo(number=1234, hash="0xabc")


@pytest.fixture(autouse=True)
def _reset_chain_client():
    client_module.reset_client()
    yield
    client_module.reset_client()


@pytest.fixture
def alice_account() -> InjectedAccount:
    return InjectedAccount(address=ALICE, name="Alice", source="polkadot-js")


@pytest.fixture
def bob_account() -> InjectedAccount:
    return InjectedAccount(address=BOB, name="Bob", source="talisman", key_type="ed25519")
