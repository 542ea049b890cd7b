from __future__ import annotations

import logging
from typing import Any

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import NetworkError, ParseError
from .result import ApiResult

log = logging.getLogger(__name__)

# Status reported when no response object exists at all.
NO_RESPONSE_STATUS = 500


def _client_kwargs(cfg: ClientConfig) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "headers": {
            "User-Agent": f"aeries-client/{__version__}",
            "Accept": "application/json",
            "AERIES-CERT": cfg.certificate or "",
        },
        "verify": cfg.verify_certs,
        "follow_redirects": True,
    }
    if cfg.timeout_s is not None:
        kwargs["timeout"] = cfg.timeout_s
    return kwargs


def _network_result(url: httpx.URL, exc: httpx.RequestError) -> ApiResult:
    log.debug("GET %s failed: %s", url, exc)
    err = NetworkError(str(exc) or exc.__class__.__name__)
    err.__cause__ = exc
    return ApiResult(err, None, NO_RESPONSE_STATUS)


def _response_result(url: httpx.URL, r: httpx.Response) -> ApiResult:
    log.debug("GET %s -> %s (%d bytes)", url, r.status_code, len(r.content))
    if not r.content:
        return ApiResult(None, None, r.status_code)
    try:
        data = r.json()
    except ValueError as e:
        text = r.text
        err = ParseError(f"response body is not valid JSON: {e}", text)
        err.__cause__ = e
        return ApiResult(err, text, r.status_code)
    return ApiResult(None, data, r.status_code)


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.Client(transport=http_transport, **_client_kwargs(cfg))

    def close(self) -> None:
        self._client.close()

    def get(self, url: httpx.URL) -> ApiResult:
        try:
            r = self._client.get(url)
        except httpx.RequestError as e:
            return _network_result(url, e)
        return _response_result(url, r)


class AsyncTransport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(transport=http_transport, **_client_kwargs(cfg))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: httpx.URL) -> ApiResult:
        try:
            r = await self._client.get(url)
        except httpx.RequestError as e:
            return _network_result(url, e)
        return _response_result(url, r)
