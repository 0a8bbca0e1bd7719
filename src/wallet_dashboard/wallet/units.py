"""Exact conversion between decimal amount strings and on-chain base units.

Amounts are handled as Python integers end to end. A string with more
fractional digits than the token supports is rejected, never rounded.
"""

from __future__ import annotations

import re

from wallet_dashboard.errors import InvalidFormatError, TooManyDecimalsError

WND_DECIMALS = 12

_AMOUNT_RE = re.compile(r"\d*(?:\.\d*)?", re.ASCII)


def _check_decimals(decimals: int) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValueError(f"decimals must be a non-negative integer, got {decimals!r}")
    return decimals


def format_amount(amount: int, decimals: int = WND_DECIMALS) -> str:
    """Render *amount* base units as a decimal string.

    ``format_amount(1_500_000_000_000) == "1.5"``. Whole amounts have no
    fractional part and the fraction never ends in ``0``.
    """
    _check_decimals(decimals)
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidFormatError(f"Amount must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidFormatError(f"Amount cannot be negative: {amount}")

    integer_part, fractional_part = divmod(amount, 10**decimals)
    if fractional_part == 0:
        return str(integer_part)

    fraction = str(fractional_part).rjust(decimals, "0").rstrip("0")
    return f"{integer_part}.{fraction}"


def parse_amount(text: str, decimals: int = WND_DECIMALS) -> int:
    """Parse a decimal string into base units.

    Parameters
    ----------
    text:
        ``digits``, ``digits.``, ``.digits`` or ``digits.digits``.
        Surrounding whitespace is ignored and an empty string means zero.
    decimals:
        Number of base-unit digits per whole token.

    Raises
    ------
    InvalidFormatError
        If *text* is not a plain unsigned decimal number.
    TooManyDecimalsError
        If the fractional part is longer than *decimals*.
    """
    _check_decimals(decimals)
    trimmed = text.strip()
    if trimmed == "":
        return 0

    if not _AMOUNT_RE.fullmatch(trimmed):
        raise InvalidFormatError(f"Invalid amount format: {text!r}")

    integer_str, _, fractional_str = trimmed.partition(".")
    integer_str = integer_str or "0"

    if len(fractional_str) > decimals:
        raise TooManyDecimalsError(len(fractional_str), decimals)

    combined = (integer_str + fractional_str.ljust(decimals, "0")).lstrip("0")
    return int(combined or "0")


class AmountCodec:
    """Amount formatting and parsing bound to a fixed precision."""

    def __init__(self, decimals: int = WND_DECIMALS) -> None:
        self.decimals = _check_decimals(decimals)

    @property
    def base_units_per_token(self) -> int:
        return 10**self.decimals

    def format(self, amount: int) -> str:
        return format_amount(amount, self.decimals)

    def parse(self, text: str) -> int:
        return parse_amount(text, self.decimals)

    def __repr__(self) -> str:
        return f"AmountCodec(decimals={self.decimals})"


def format_wnd(plancks: int) -> str:
    """Format a WND amount given in plancks."""
    return format_amount(plancks, WND_DECIMALS)


def parse_wnd(text: str) -> int:
    """Parse a WND amount string into plancks."""
    return parse_amount(text, WND_DECIMALS)
