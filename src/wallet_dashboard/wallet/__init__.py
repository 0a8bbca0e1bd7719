"""Wallet layer for Wallet Dashboard.

Provides exact token amount conversion, SS58 address decoding, and signer
resolution across extension-style account providers, with a legacy
raw-signing fallback for extensions that do not hand out signers directly.
"""
