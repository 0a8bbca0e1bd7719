"""Configuration system for Wallet Dashboard.

Loads settings from `.wallet-dashboard/config.yaml` and supports environment
variable expansion (``${VAR}``) in any string value.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from wallet_dashboard.wallet.chains import list_chain_names


# ---------------------------------------------------------------------------
# Environment-variable expansion helper
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def _expand_env_vars(value: str) -> str:
    """Replace ``${VAR_NAME}`` placeholders with their environment values.

    If the variable is not set the placeholder is left as-is so that
    validation can catch it later.
    """

    def _replace(match: re.Match) -> str:
        var_name = match.group(1)
        return os.environ.get(var_name, match.group(0))

    return _ENV_VAR_RE.sub(_replace, value)


def _expand_env_recursive(obj: object) -> object:
    if isinstance(obj, str):
        return _expand_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _expand_env_recursive(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_recursive(item) for item in obj]
    return obj


# ---------------------------------------------------------------------------
# Pydantic v2 models
# ---------------------------------------------------------------------------


class DashboardConfig(BaseModel):
    """Web dashboard settings."""

    port: int = 8420
    host: str = "127.0.0.1"


class AccountConfig(BaseModel):
    """A watch-only account listed in the config file."""

    address: str
    name: Optional[str] = None
    key_type: Optional[str] = None  # sr25519 (default), ed25519, ecdsa


class WalletConfig(BaseModel):
    """Wallet and extension settings."""

    app_name: str = "Polkadot Wallet Dashboard"
    chain: str = "westend"
    accounts: list[AccountConfig] = Field(default_factory=list)

    @field_validator("chain")
    @classmethod
    def _known_chain(cls, value: str) -> str:
        if value not in list_chain_names():
            raise ValueError(
                f"Unknown chain '{value}'. Available: {list_chain_names()}"
            )
        return value


class AppConfig(BaseModel):
    """Root configuration object."""

    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    wallet: WalletConfig = Field(default_factory=WalletConfig)


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

CONFIG_FILENAME = "config.yaml"


def get_config_dir(base: Path | None = None) -> Path:
    """Return the ``.wallet-dashboard/`` directory (no auto-create).

    Parameters
    ----------
    base:
        Parent directory that contains (or will contain) the folder.
        Defaults to the current working directory.
    """
    if base is None:
        base = Path.cwd()
    return base / ".wallet-dashboard"


def load_config(path: Path) -> AppConfig:
    """Load and validate a configuration from a YAML file.

    Environment variable placeholders (``${VAR}``) are expanded before
    validation.
    """
    raw_text = path.read_text(encoding="utf-8")
    raw_data = yaml.safe_load(raw_text) or {}
    expanded = _expand_env_recursive(raw_data)
    return AppConfig.model_validate(expanded)


def load_or_default(config_dir: Path | None = None) -> AppConfig:
    """Load ``config.yaml`` from *config_dir*, or return defaults if absent."""
    if config_dir is None:
        config_dir = get_config_dir()
    path = config_dir / CONFIG_FILENAME
    if not path.exists():
        return AppConfig()
    return load_config(path)


def save_config(config: AppConfig, path: Path) -> None:
    """Serialize an :class:`AppConfig` to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="python", exclude_none=True)
    with open(path, "w", encoding="utf-8") as fh:
        yaml.dump(data, fh, default_flow_style=False, sort_keys=False)
