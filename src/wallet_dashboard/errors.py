"""Exception hierarchy for Wallet Dashboard.

Codec errors subclass :class:`ValueError` so callers that only care about
"bad input" can catch the builtin.
"""

from __future__ import annotations


class WalletDashboardError(Exception):
    """Base class for all errors raised by this package."""


# ---------------------------------------------------------------------------
# Amount codec
# ---------------------------------------------------------------------------


class InvalidFormatError(WalletDashboardError, ValueError):
    """The amount string is not ``digits[.digits]``."""


class TooManyDecimalsError(WalletDashboardError, ValueError):
    """The amount has more fractional digits than the token precision."""

    def __init__(self, digits: int, decimals: int):
        super().__init__(
            f"Too many decimal places: got {digits}, at most {decimals} allowed"
        )
        self.digits = digits
        self.decimals = decimals


# ---------------------------------------------------------------------------
# Signer resolution
# ---------------------------------------------------------------------------


class AccountNotFoundError(WalletDashboardError, LookupError):
    """No provider or legacy source exposes the requested address."""

    def __init__(self, address: str):
        super().__init__(f"Account not found in extension: {address}")
        self.address = address


class InvalidAddressError(WalletDashboardError, ValueError):
    """The address does not decode to a public key."""


class UnsupportedSigningError(WalletDashboardError):
    """The extension signer for an account cannot sign raw bytes."""


class ClientNotInitializedError(WalletDashboardError, RuntimeError):
    """The chain client was used before :func:`init_client` ran."""
