from __future__ import annotations

from typing import Callable

import typer
from aeries_client import AeriesClient, ApiResult
from aeries_client.errors import AeriesClientError, ApiError, AuthError, ParseError

from . import console
from .config import load_config
from .http import make_client


def finish(result: ApiResult) -> None:
    """Print the body of a result or exit with code 2 on any error."""
    try:
        body = result.raise_for_error()
    except AuthError as e:
        console.err(f"Unauthorized ({e.status_code}). Check the configured certificate.")
        raise typer.Exit(code=2)
    except ApiError as e:
        console.err(f"Request failed with {e.status_code}: {e}")
        raise typer.Exit(code=2)
    except ParseError as e:
        console.err(str(e))
        console.console.print(e.raw, markup=False, highlight=False)
        raise typer.Exit(code=2)
    except AeriesClientError as e:
        console.err(f"Request failed: {e}")
        raise typer.Exit(code=2)
    if body is None:
        console.info(f"No content (status {result.status_code}).")
        return
    console.print_json(body)


def run_call(base_url: str | None, call: Callable[[AeriesClient], ApiResult]) -> None:
    client = make_client(load_config(), base_url_override=base_url)
    try:
        result = call(client)
    finally:
        client.close()
    finish(result)
