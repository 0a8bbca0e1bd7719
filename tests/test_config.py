"""Tests for configuration loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.conftest import ALICE
from wallet_dashboard.config import (
    AccountConfig,
    AppConfig,
    get_config_dir,
    load_config,
    load_or_default,
    save_config,
)


def test_defaults() -> None:
    config = AppConfig()
    assert config.dashboard.port == 8420
    assert config.wallet.chain == "westend"
    assert config.wallet.accounts == []


def test_load_expands_environment_variables(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("DASHBOARD_ACCOUNT", ALICE)
    path = tmp_path / "config.yaml"
    path.write_text(
        "wallet:\n"
        "  chain: kusama\n"
        "  accounts:\n"
        "    - address: ${DASHBOARD_ACCOUNT}\n"
        "      name: Alice\n"
        "      key_type: ed25519\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.wallet.chain == "kusama"
    assert config.wallet.accounts[0].address == ALICE
    assert config.wallet.accounts[0].key_type == "ed25519"


def test_unknown_chain_is_rejected(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("wallet:\n  chain: ethereum\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


def test_save_then_load(tmp_path) -> None:
    config = AppConfig()
    config.wallet.accounts.append(AccountConfig(address=ALICE, name="Alice"))
    save_config(config, tmp_path / "nested" / "config.yaml")

    loaded = load_or_default(tmp_path / "nested")
    assert loaded == config


def test_load_or_default_without_file(tmp_path) -> None:
    assert load_or_default(tmp_path) == AppConfig()
    assert get_config_dir(tmp_path) == tmp_path / ".wallet-dashboard"
