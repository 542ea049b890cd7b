from __future__ import annotations

from aeries_client import AeriesClient
from aeries_client.config_types import ClientConfig

from .config import AppConfig, apply_env, normalize_base_url


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> AeriesClient:
    effective_cfg = apply_env(cfg)
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    return AeriesClient(
        ClientConfig(
            base_url=base_url or None,
            certificate=effective_cfg.certificate or None,
            verify_certs=effective_cfg.verify_certs,
        )
    )
