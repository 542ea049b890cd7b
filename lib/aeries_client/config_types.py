from __future__ import annotations
from dataclasses import dataclass

DEFAULT_API_VERSION = "v3"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str | None
    certificate: str | None = None
    verify_certs: bool = True
    timeout_s: float | None = None

    @classmethod
    def from_options(
            cls,
            *,
            certificate: str | None = None,
            url: str | None = None,
            verify_certs: bool = True,
    ) -> "ClientConfig":
        return cls(base_url=url, certificate=certificate, verify_certs=verify_certs)
