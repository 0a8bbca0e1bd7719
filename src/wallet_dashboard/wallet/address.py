"""SS58 address codec backed by ``scalecodec``."""

from __future__ import annotations

from eth_utils import decode_hex
from scalecodec.utils.ss58 import ss58_decode, ss58_encode

from wallet_dashboard.errors import InvalidAddressError

# sr25519/ed25519 keys are 32 bytes, compressed ecdsa keys 33
_PUBLIC_KEY_LENGTHS = (32, 33)


def decode_address(address: str) -> bytes:
    """Decode an SS58 address (or a ``0x`` hex public key) to raw key bytes.

    Raises
    ------
    InvalidAddressError
        If the checksum, alphabet or length is wrong.
    """
    if not isinstance(address, str) or not address.strip():
        raise InvalidAddressError(f"Invalid address: {address!r}")

    address = address.strip()
    try:
        if address.startswith("0x"):
            public_key = decode_hex(address)
        else:
            public_key = bytes.fromhex(ss58_decode(address))
    except (ValueError, IndexError, TypeError) as exc:
        raise InvalidAddressError(f"Invalid address {address!r}: {exc}") from exc

    if len(public_key) not in _PUBLIC_KEY_LENGTHS:
        raise InvalidAddressError(
            f"Invalid address {address!r}: decodes to {len(public_key)} bytes, "
            f"expected one of {_PUBLIC_KEY_LENGTHS}"
        )
    return public_key


def encode_address(public_key: bytes, ss58_format: int = 42) -> str:
    """Encode raw public key bytes as an SS58 address for *ss58_format*."""
    if len(public_key) not in _PUBLIC_KEY_LENGTHS:
        raise InvalidAddressError(
            f"Public key must be one of {_PUBLIC_KEY_LENGTHS} bytes, got {len(public_key)}"
        )
    return ss58_encode(public_key, ss58_format=ss58_format)


def is_valid_address(address: str) -> bool:
    try:
        decode_address(address)
    except InvalidAddressError:
        return False
    return True
