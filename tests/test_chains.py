"""Tests for chain definitions."""

from __future__ import annotations

import pytest

from wallet_dashboard.wallet.chains import get_chain, list_chain_names


def test_westend_uses_twelve_decimals() -> None:
    westend = get_chain("westend")
    assert westend.token_symbol == "WND"
    assert westend.codec.parse("1") == 10**12


def test_polkadot_codec_uses_ten_decimals() -> None:
    assert get_chain("polkadot").codec.format(10**10) == "1"


def test_unknown_chain_raises_key_error() -> None:
    with pytest.raises(KeyError, match="Available"):
        get_chain("ethereum")
    assert list_chain_names() == ["polkadot", "kusama", "westend"]
