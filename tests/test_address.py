"""Tests for SS58 address decoding."""

from __future__ import annotations

import pytest

from tests.conftest import ALICE, ALICE_PUBLIC_KEY, BOB, BOB_PUBLIC_KEY
from wallet_dashboard.errors import InvalidAddressError
from wallet_dashboard.wallet.address import decode_address, encode_address, is_valid_address


def test_decode_known_dev_accounts() -> None:
    assert decode_address(ALICE) == ALICE_PUBLIC_KEY
    assert decode_address(BOB) == BOB_PUBLIC_KEY


def test_decode_hex_public_key() -> None:
    assert decode_address("0x" + ALICE_PUBLIC_KEY.hex()) == ALICE_PUBLIC_KEY


def test_encode_for_another_network_keeps_the_key() -> None:
    polkadot_alice = encode_address(ALICE_PUBLIC_KEY, ss58_format=0)
    assert polkadot_alice != ALICE
    assert polkadot_alice.startswith("1")
    assert decode_address(polkadot_alice) == ALICE_PUBLIC_KEY
    assert encode_address(ALICE_PUBLIC_KEY, ss58_format=42) == ALICE


@pytest.mark.parametrize(
    "bad",
    [
        "",
        "not-an-address",
        ALICE[:-1] + "Z",   # checksum mismatch
        "0x1234",           # wrong key length
        "0xzz",
    ],
)
def test_decode_rejects_invalid_addresses(bad: str) -> None:
    with pytest.raises(InvalidAddressError):
        decode_address(bad)
    assert not is_valid_address(bad)


def test_encode_rejects_wrong_key_length() -> None:
    with pytest.raises(InvalidAddressError):
        encode_address(b"\x01" * 20)
