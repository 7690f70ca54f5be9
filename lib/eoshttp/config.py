from __future__ import annotations

import tomllib
from typing import Any
from urllib.parse import urlsplit

from platformdirs import user_config_dir

from .config_types import ClientConfig
from .errors import ConfigError

APP_NAME = "eoshttp"
CONFIG_FILENAME = "config.toml"

_LOCAL_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0", "::1"}


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def normalize_host(raw: str | None) -> str:
    """Return ``raw`` as a base URL that paths can be appended to."""
    value = (raw or "").strip().rstrip("/")
    if not value or "://" in value:
        return value
    hostname = urlsplit(f"//{value}").hostname or ""
    scheme = "http" if hostname in _LOCAL_HOSTS else "https"
    return f"{scheme}://{value}"


def from_toml(data: dict[str, Any], profile: str | None = None) -> ClientConfig:
    """Build a ClientConfig from parsed TOML.

    An explicit ``profile`` wins over ``active_profile``; values found in the
    selected profile override the top-level ``host``/``bearer`` keys.
    """
    host = str(data.get("host") or "")
    bearer = str(data.get("bearer") or "")

    selected = profile or data.get("active_profile")
    if selected:
        profiles_raw = data.get("profiles") or {}
        prof = profiles_raw.get(str(selected)) if isinstance(profiles_raw, dict) else None
        if not isinstance(prof, dict):
            raise ConfigError(f"Profile '{selected}' is not defined.")
        host = str(prof.get("host") or host)
        bearer = str(prof.get("bearer") or bearer)

    host = normalize_host(host)
    if not host:
        raise ConfigError("host is not configured.")
    return ClientConfig(bearer=bearer, host=host)


def load_config(path: str | None = None, profile: str | None = None) -> ClientConfig:
    path = path or config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Config file is not valid TOML: {path}: {e}") from e
    return from_toml(data, profile)
