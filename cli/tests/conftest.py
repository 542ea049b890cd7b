from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from aeries_client import AeriesClient, ClientConfig

BASE_URL = "https://demo.aeries.net/aeries/"
CERT = "477abe9e7d27439681d62f4e0de1f5e1"


class Recorder:
    """MockTransport handler that answers every request with one canned response."""

    def __init__(self, status: int = 200, body: object = None, content: bytes | None = None):
        self.status = status
        self.body = body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, content=json.dumps(self.body).encode("utf-8"))

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder(200, [{"SchoolCode": 990, "Name": "Aeries Demo High"}])


@pytest.fixture
def make_client() -> Callable[..., AeriesClient]:
    def _make(handler, **cfg_kwargs) -> AeriesClient:
        cfg = ClientConfig(base_url=cfg_kwargs.pop("base_url", BASE_URL), certificate=CERT, **cfg_kwargs)
        return AeriesClient(cfg, http_transport=httpx.MockTransport(handler))

    return _make
