from __future__ import annotations

from typing import Any, Mapping, Union

import httpx

from .config_types import DEFAULT_API_VERSION

# A path segment; None marks an optional segment the caller left out.
Segment = Union[str, int, None]


def clean_segment(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return str(value).strip("/")


def build_api_path(version: str | None, *segments: Segment) -> str:
    """Compose ``api/<version>/<seg>/.../`` with every piece normalized.

    ``None`` segments are skipped entirely, as are segments that are
    nothing but separators, so the result never holds ``//``.
    """
    parts = [clean_segment(version or DEFAULT_API_VERSION) or DEFAULT_API_VERSION]
    for segment in segments:
        if segment is None:
            continue
        text = clean_segment(segment)
        if text:
            parts.append(text)
    return "api/" + "".join(f"{p}/" for p in parts)


def build_api_url(base_url: str | None, version: str | None, *segments: Segment) -> httpx.URL:
    return httpx.URL(base_url or "").join(build_api_path(version, *segments))


def with_query(url: httpx.URL, params: Mapping[str, Any] | None) -> httpx.URL:
    """Return ``url`` with its query string replaced by ``params``."""
    filtered = {k: v for k, v in (params or {}).items() if v is not None}
    return url.copy_with(params=filtered)
