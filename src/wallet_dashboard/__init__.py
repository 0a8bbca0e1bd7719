"""Wallet Dashboard - balances, amounts and signers for Polkadot-family wallets."""

from wallet_dashboard.wallet.signer import resolve_signer
from wallet_dashboard.wallet.units import format_amount, parse_amount

__version__ = "0.1.0"

__all__ = ["format_amount", "parse_amount", "resolve_signer", "__version__"]
