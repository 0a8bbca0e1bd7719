"""Command-line interface for Wallet Dashboard."""
