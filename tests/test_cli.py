"""Tests for the wallet-dashboard CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from tests.conftest import ALICE, ALICE_PUBLIC_KEY
from wallet_dashboard.cli.app import app
from wallet_dashboard.config import AccountConfig, AppConfig, WalletConfig, save_config

runner = CliRunner()


def test_amount_parse() -> None:
    result = runner.invoke(app, ["amount", "parse", "1.5"])
    assert result.exit_code == 0
    assert result.output.strip() == "1500000000000"


def test_amount_parse_other_chain() -> None:
    result = runner.invoke(app, ["amount", "parse", "1.5", "--chain", "polkadot"])
    assert result.exit_code == 0
    assert result.output.strip() == "15000000000"


def test_amount_parse_rejects_extra_precision() -> None:
    result = runner.invoke(app, ["amount", "parse", "0.0000000000001"])
    assert result.exit_code == 1
    assert "Too many decimal places" in result.output


def test_amount_format() -> None:
    result = runner.invoke(app, ["amount", "format", "1500000000000"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.5 WND"


def test_address_decode() -> None:
    result = runner.invoke(app, ["address", "decode", ALICE])
    assert result.exit_code == 0
    assert ALICE_PUBLIC_KEY.hex() in result.output.replace("\n", "").replace("│", "").replace(" ", "")

    result = runner.invoke(app, ["address", "decode", "bogus"])
    assert result.exit_code == 1


def test_chains() -> None:
    result = runner.invoke(app, ["chains"])
    assert result.exit_code == 0
    assert "westend" in result.output
    assert "WND" in result.output


def test_accounts_and_watch_only_sign(tmp_path) -> None:
    config = AppConfig(wallet=WalletConfig(accounts=[AccountConfig(address=ALICE, name="Alice")]))
    save_config(config, tmp_path / "config.yaml")

    result = runner.invoke(app, ["--config-dir", str(tmp_path), "accounts"])
    assert result.exit_code == 0
    assert "Alice" in result.output

    result = runner.invoke(app, ["--config-dir", str(tmp_path), "sign", ALICE, "hello"])
    assert result.exit_code == 1
    assert "sign_raw" in result.output


def test_accounts_without_config(tmp_path) -> None:
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "accounts"])
    assert result.exit_code == 0
    assert "No accounts" in result.output


def test_sign_rejects_malformed_hex_message(tmp_path) -> None:
    config = AppConfig(wallet=WalletConfig(accounts=[AccountConfig(address=ALICE, name="Alice")]))
    save_config(config, tmp_path / "config.yaml")

    result = runner.invoke(app, ["--config-dir", str(tmp_path), "sign", ALICE, "0xzz"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid hex message" in result.output
