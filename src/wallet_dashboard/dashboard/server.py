"""FastAPI web dashboard for Wallet Dashboard."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response

from wallet_dashboard import __version__
from wallet_dashboard.config import load_or_default
from wallet_dashboard.errors import (
    AccountNotFoundError,
    InvalidAddressError,
    InvalidFormatError,
    TooManyDecimalsError,
    WalletDashboardError,
)
from wallet_dashboard.wallet.address import decode_address, encode_address
from wallet_dashboard.wallet.chains import CHAINS, get_chain
from wallet_dashboard.wallet.client import ClientFactory, get_client, init_client, is_initialized
from wallet_dashboard.wallet.manager import WalletManager

logger = logging.getLogger("wallet_dashboard.dashboard")

STATIC_DIR = Path(__file__).parent / "static"

_manager: WalletManager | None = None
_config_dir: Path | None = None
_client_factory: ClientFactory | None = None


def set_wallet_manager(manager: WalletManager | None) -> None:
    """Inject the WalletManager instance (startup and tests)."""
    global _manager
    _manager = manager


def set_client_factory(factory: ClientFactory | None) -> None:
    """Set the factory used to build the chain client at startup."""
    global _client_factory
    _client_factory = factory


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _manager
    if _manager is None:
        config = load_or_default(_config_dir)
        _manager = WalletManager.from_config(config)
    await _manager.connect()
    if _client_factory is not None:
        await init_client(_client_factory)
    logger.info(f"Dashboard started for chain '{_manager.chain.name}'")
    yield


_app = FastAPI(title="Polkadot Wallet Dashboard", lifespan=lifespan)


# ------------------------------------------------------------------
# Static page
# ------------------------------------------------------------------


@_app.get("/")
async def index():
    return HTMLResponse((STATIC_DIR / "index.html").read_text())


@_app.get("/app.js")
async def app_js():
    return Response(
        content=(STATIC_DIR / "app.js").read_text(),
        media_type="application/javascript",
    )


# ------------------------------------------------------------------
# API routes
# ------------------------------------------------------------------


@_app.get("/api/status")
async def api_status():
    status = {
        "version": __version__,
        "chain": _manager.chain.name if _manager else None,
        "selected": _manager.selected if _manager else None,
        "client": None,
        "finalized": None,
    }
    if is_initialized():
        client = get_client()
        block = await client.finalized_block()
        status["client"] = client.chain_name
        status["finalized"] = {"number": block.number, "hash": block.hash}
    return status


@_app.get("/api/chains")
async def api_chains():
    return [
        {
            "name": c.name,
            "symbol": c.token_symbol,
            "decimals": c.decimals,
            "ss58_format": c.ss58_format,
        }
        for c in CHAINS.values()
    ]


@_app.get("/api/accounts")
async def api_accounts():
    if not _manager:
        return {"error": "Wallet not loaded"}
    return {
        "selected": _manager.selected,
        "accounts": [a.model_dump() for a in _manager.accounts],
    }


@_app.post("/api/accounts/select")
async def api_select_account(body: dict):
    if not _manager:
        return {"error": "Wallet not loaded"}
    address = body.get("address")
    if not isinstance(address, str) or not address:
        return JSONResponse(status_code=400, content={"error": "Missing 'address'"})
    try:
        _manager.select(address)
    except AccountNotFoundError as e:
        return _error(404, e)
    return {"selected": _manager.selected}


@_app.get("/api/balance/{address}")
async def api_balance(address: str):
    if not _manager:
        return {"error": "Wallet not loaded"}
    if not is_initialized():
        return JSONResponse(status_code=503, content={"error": "Chain client not initialized"})
    try:
        return await _manager.get_balance(address)
    except InvalidAddressError as e:
        return _error(400, e)


@_app.get("/api/amount/parse")
async def api_parse_amount(
    amount: str = Query(...),
    chain: str = Query("westend"),
):
    try:
        chain_info = get_chain(chain)
    except KeyError as e:
        return _error(404, e)
    try:
        value = chain_info.codec.parse(amount)
    except (InvalidFormatError, TooManyDecimalsError) as e:
        return _error(400, e)
    return {"amount": amount, "base_units": str(value), "symbol": chain_info.token_symbol}


@_app.get("/api/amount/format")
async def api_format_amount(
    base_units: str = Query(...),
    chain: str = Query("westend"),
):
    try:
        chain_info = get_chain(chain)
    except KeyError as e:
        return _error(404, e)
    if not base_units.isascii() or not base_units.isdigit():
        return _error(400, InvalidFormatError(f"Invalid base unit amount: {base_units!r}"))
    return {
        "base_units": base_units,
        "amount": chain_info.codec.format(int(base_units)),
        "symbol": chain_info.token_symbol,
    }


@_app.get("/api/address/{address}")
async def api_address(address: str, chain: str = Query("westend")):
    try:
        chain_info = get_chain(chain)
        public_key = decode_address(address)
    except KeyError as e:
        return _error(404, e)
    except WalletDashboardError as e:
        return _error(400, e)
    return {
        "address": address,
        "public_key": "0x" + public_key.hex(),
        "chain_address": encode_address(public_key, chain_info.ss58_format),
    }


# ------------------------------------------------------------------
# Runner
# ------------------------------------------------------------------


def run_dashboard(
    host: str = "127.0.0.1",
    port: int = 8420,
    config_dir: Path | None = None,
    client_factory: ClientFactory | None = None,
) -> None:
    global _config_dir
    _config_dir = config_dir
    if client_factory is not None:
        set_client_factory(client_factory)
    uvicorn.run(_app, host=host, port=port, log_level="info")
