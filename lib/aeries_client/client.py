from __future__ import annotations

from typing import Any

import httpx

from .config_types import DEFAULT_API_VERSION, ClientConfig
from .endpoints import EndpointsMixin
from .result import ApiCallback, ApiResult
from .transport import NO_RESPONSE_STATUS, AsyncTransport, Transport
from .urls import Segment, build_api_url, with_query


class _BaseClient(EndpointsMixin):
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def certificate(self) -> str | None:
        return self._cfg.certificate

    @property
    def url(self) -> str | None:
        return self._cfg.base_url

    @property
    def api_version(self) -> str:
        return DEFAULT_API_VERSION

    def make_api_url(self, version: str | None, *segments: Segment) -> httpx.URL:
        """Build ``<base_url>api/<version>/<segments>/``; ``None`` segments are omitted."""
        return build_api_url(self._cfg.base_url, version, *segments)

    def _url_for(self, version: str | None, segments: tuple[Segment, ...], params: dict[str, Any] | None):
        url = self.make_api_url(version, *segments)
        if params:
            url = with_query(url, params)
        return url


class AeriesClient(_BaseClient):
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        super().__init__(cfg)
        self._http_transport = http_transport
        self._t = Transport(cfg, http_transport=http_transport)

    @_BaseClient.config.setter
    def config(self, cfg: ClientConfig) -> None:
        self._t.close()
        self._cfg = cfg
        self._t = Transport(cfg, http_transport=self._http_transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "AeriesClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def make_api_call(self, url: httpx.URL, callback: ApiCallback | None = None) -> ApiResult:
        return self._t.get(url).deliver(callback)

    def _get(self, version, *segments, params=None, callback=None) -> ApiResult:
        return self.make_api_call(self._url_for(version, segments, params), callback=callback)

    def _reject(self, error, callback=None) -> ApiResult:
        return ApiResult(error, None, NO_RESPONSE_STATUS).deliver(callback)


class AsyncAeriesClient(_BaseClient):
    """Awaitable variant; every accessor returns a coroutine resolving to an ``ApiResult``."""

    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(cfg)
        self._http_transport = http_transport
        self._t = AsyncTransport(cfg, http_transport=http_transport)

    def replace_config(self, cfg: ClientConfig) -> AsyncTransport:
        """Swap in a new config; returns the old transport, which the caller must ``aclose()``."""
        old = self._t
        self._cfg = cfg
        self._t = AsyncTransport(cfg, http_transport=self._http_transport)
        return old

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> "AsyncAeriesClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def make_api_call(self, url: httpx.URL, callback: ApiCallback | None = None) -> ApiResult:
        result = await self._t.get(url)
        return result.deliver(callback)

    async def _get(self, version, *segments, params=None, callback=None) -> ApiResult:
        return await self.make_api_call(self._url_for(version, segments, params), callback=callback)

    async def _reject(self, error, callback=None) -> ApiResult:
        return ApiResult(error, None, NO_RESPONSE_STATUS).deliver(callback)
