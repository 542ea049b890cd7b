from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "aeries"
CONFIG_FILENAME = "config.toml"
ENV_URL = "AERIES_URL"
ENV_CERT = "AERIES_CERT"
ENV_VERIFY_CERTS = "AERIES_VERIFY_CERTS"

_WARNED_BASE_URL_SCHEME = False
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    base_url: str
    certificate: str = ""
    verify_certs: bool = True


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url="", certificate="", verify_certs=True)


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    """Add a missing scheme and the trailing "/" that API paths are resolved against."""
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/") + "/"
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def parse_bool(value: Any, default: bool = True) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value or "").strip().lower()
    if not text:
        return default
    return text not in _FALSE_VALUES


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "certificate": cfg.certificate,
        "verify_certs": cfg.verify_certs,
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    return AppConfig(
        base_url=normalize_base_url(str(data.get("base_url") or ""), warn=True),
        certificate=str(data.get("certificate") or "").strip(),
        verify_certs=parse_bool(data.get("verify_certs"), default=True),
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_env(cfg: AppConfig) -> AppConfig:
    """Environment variables win over the saved config file."""
    url = os.getenv(ENV_URL, "").strip()
    cert = os.getenv(ENV_CERT, "").strip()
    verify = os.getenv(ENV_VERIFY_CERTS)
    return replace(
        cfg,
        base_url=normalize_base_url(url) if url else cfg.base_url,
        certificate=cert or cfg.certificate,
        verify_certs=parse_bool(verify, default=cfg.verify_certs) if verify is not None else cfg.verify_certs,
    )


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
