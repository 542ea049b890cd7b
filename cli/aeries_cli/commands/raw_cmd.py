from __future__ import annotations

import typer
from aeries_client.urls import with_query

from .. import console
from ..config import load_config
from ..http import make_client
from ..output import run_call


def _parse_params(pairs: list[str] | None) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            console.err(f"Invalid --param {pair!r}, expected key=value.")
            raise typer.Exit(code=2)
        params[key.strip()] = value
    return params


def url(
        segments: list[str] = typer.Argument(None, help="Path segments, e.g. schools 990 students."),
        api_version: str = typer.Option("", "--api-version", help="API version (default v3)."),
        param: list[str] = typer.Option(None, "--param", help="Query parameter key=value (repeatable)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
) -> None:
    """Print the endpoint URL for a path without calling it."""
    params = _parse_params(param)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        built = client.make_api_url(api_version or None, *(segments or []))
    finally:
        client.close()
    if params:
        built = with_query(built, params)
    console.console.print(str(built), markup=False, highlight=False, soft_wrap=True)


def get(
        segments: list[str] = typer.Argument(None, help="Path segments, e.g. schools 990 students."),
        api_version: str = typer.Option("", "--api-version", help="API version (default v3)."),
        param: list[str] = typer.Option(None, "--param", help="Query parameter key=value (repeatable)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
) -> None:
    """GET any endpoint and print the JSON body."""
    params = _parse_params(param)

    def _call(client):
        target = client.make_api_url(api_version or None, *(segments or []))
        if params:
            target = with_query(target, params)
        return client.make_api_call(target)

    run_call(base_url, _call)
