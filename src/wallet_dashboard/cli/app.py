"""CLI for Wallet Dashboard - amounts, addresses and signers from the terminal."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wallet_dashboard.config import get_config_dir, load_or_default
from wallet_dashboard.errors import WalletDashboardError

app = typer.Typer(
    name="wallet-dashboard",
    help="Polkadot wallet dashboard: balances, exact amounts and extension signers.",
    no_args_is_help=True,
)
console = Console()

_config_dir: Path | None = None


def _version_callback(value: bool):
    if value:
        from wallet_dashboard import __version__
        console.print(f"wallet-dashboard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config_dir: Path = typer.Option(
        None,
        "--config-dir",
        help="Directory holding config.yaml (default: ./.wallet-dashboard)",
        envvar="WALLET_DASHBOARD_DIR",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Polkadot wallet dashboard: balances, exact amounts and extension signers."""
    global _config_dir
    _config_dir = config_dir
    if verbose:
        from rich.logging import RichHandler
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load_manager():
    from wallet_dashboard.wallet.manager import WalletManager

    return WalletManager.from_config(load_or_default(_config_dir))


def _fail(exc: Exception) -> None:
    console.print(f"[red]{exc}[/red]")
    raise typer.Exit(1)


# ------------------------------------------------------------------
# chains
# ------------------------------------------------------------------


@app.command("chains")
def chains():
    """List supported chains and their token precision."""
    from wallet_dashboard.wallet.chains import CHAINS

    table = Table(title="Supported Chains")
    table.add_column("Chain", style="cyan")
    table.add_column("Symbol")
    table.add_column("Decimals", justify="right")
    table.add_column("SS58", justify="right")
    table.add_column("Explorer", style="dim")
    for chain in CHAINS.values():
        table.add_row(
            chain.name,
            chain.token_symbol,
            str(chain.decimals),
            str(chain.ss58_format),
            chain.explorer_url,
        )
    console.print(table)


# ------------------------------------------------------------------
# amount sub-commands
# ------------------------------------------------------------------

amount_app = typer.Typer(
    name="amount",
    help="Convert between token amounts and base units.",
    no_args_is_help=True,
)
app.add_typer(amount_app, name="amount")


@amount_app.command("parse")
def amount_parse(
    amount: str = typer.Argument(help="Decimal amount (e.g. 1.5)"),
    chain: str = typer.Option("westend", "--chain", "-c", help="Chain whose token precision to use"),
):
    """Convert a decimal amount to base units."""
    from wallet_dashboard.wallet.chains import get_chain

    try:
        chain_info = get_chain(chain)
        value = chain_info.codec.parse(amount)
    except (KeyError, WalletDashboardError) as e:
        _fail(e)
    console.print(f"{value}")


@amount_app.command("format")
def amount_format(
    base_units: int = typer.Argument(help="Amount in base units"),
    chain: str = typer.Option("westend", "--chain", "-c", help="Chain whose token precision to use"),
):
    """Convert base units to a decimal amount."""
    from wallet_dashboard.wallet.chains import get_chain

    try:
        chain_info = get_chain(chain)
        text = chain_info.codec.format(base_units)
    except (KeyError, WalletDashboardError) as e:
        _fail(e)
    console.print(f"{text} {chain_info.token_symbol}")


# ------------------------------------------------------------------
# address
# ------------------------------------------------------------------

address_app = typer.Typer(
    name="address",
    help="Inspect SS58 addresses.",
    no_args_is_help=True,
)
app.add_typer(address_app, name="address")


@address_app.command("decode")
def address_decode(
    address: str = typer.Argument(help="SS58 address"),
    chain: str = typer.Option(None, "--chain", "-c", help="Also re-encode for this chain"),
):
    """Show the public key behind an address."""
    from wallet_dashboard.wallet.address import decode_address, encode_address
    from wallet_dashboard.wallet.chains import get_chain

    try:
        public_key = decode_address(address)
        lines = [f"Public key: [cyan]0x{public_key.hex()}[/cyan]"]
        if chain:
            chain_info = get_chain(chain)
            lines.append(f"{chain_info.name}: {encode_address(public_key, chain_info.ss58_format)}")
    except (KeyError, WalletDashboardError) as e:
        _fail(e)
    console.print(Panel("\n".join(lines), title=address))


# ------------------------------------------------------------------
# accounts / sign
# ------------------------------------------------------------------


@app.command("accounts")
def accounts():
    """List the accounts available to the dashboard."""
    manager = _load_manager()
    accs = asyncio.run(manager.connect())

    if not accs:
        console.print(
            f"[dim]No accounts. Add them under wallet.accounts in "
            f"{(_config_dir or get_config_dir()) / 'config.yaml'}.[/dim]"
        )
        return

    table = Table(title="Accounts")
    table.add_column("Name")
    table.add_column("Address", style="cyan")
    table.add_column("Key Type")
    table.add_column("Source", style="dim")
    for a in accs:
        table.add_row(a.name or "-", a.address, a.key_type or "sr25519", a.source)
    console.print(table)


@app.command("sign")
def sign(
    address: str = typer.Argument(help="Account address to sign with"),
    message: str = typer.Argument(help="Message as 0x-prefixed hex or plain text"),
):
    """Resolve a signer for an account and sign a message."""
    from eth_utils import decode_hex, encode_hex

    manager = _load_manager()
    try:
        data = decode_hex(message) if message.startswith("0x") else message.encode("utf-8")
    except ValueError as e:
        _fail(ValueError(f"Invalid hex message {message!r}: {e}"))

    async def _sign():
        await manager.connect()
        return await manager.sign_message(data, address)

    try:
        signature = asyncio.run(_sign())
    except WalletDashboardError as e:
        _fail(e)
    console.print(Panel(
        f"Signature: [cyan]{encode_hex(signature)}[/cyan]",
        title=f"Signed by {address}",
    ))


# ------------------------------------------------------------------
# dashboard
# ------------------------------------------------------------------


@app.command("dashboard")
def dashboard(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from config)"),
):
    """Launch the web dashboard."""
    from wallet_dashboard.dashboard.server import run_dashboard

    config = load_or_default(_config_dir)
    host = host or config.dashboard.host
    port = port or config.dashboard.port
    console.print(f"[bold green]Starting dashboard at http://{host}:{port}[/bold green]")
    run_dashboard(host=host, port=port, config_dir=_config_dir)


if __name__ == "__main__":
    app()
