"""Shared HTTP plumbing for CLI commands talking to a running server."""

import os
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import NoReturn

import httpx

from sampurnan.cli.console import console


def get_server_url() -> str:
    return os.environ.get("SAMPURNAN_SERVER", "http://localhost:8000").rstrip("/")


def api_url(path: str) -> str:
    return f"{get_server_url()}/api/v1{path}"


def admin_headers() -> dict[str, str]:
    token = os.environ.get("SAMPURNAN_ADMIN_TOKEN", "")
    if not token:
        fail("SAMPURNAN_ADMIN_TOKEN is not set", hint="Export the server's admin token first.")
    return {"Authorization": f"Bearer {token}"}


def fail(message: str, *, hint: str | None = None) -> NoReturn:
    console.error(message, hint=hint)
    sys.exit(1)


def error_message(response: httpx.Response) -> str:
    """The server's ``message`` field when the body carries one, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body.get("detail") or body)
    return response.text


@contextmanager
def server_errors(on_status: Callable[[httpx.HTTPStatusError], None] | None = None) -> Iterator[None]:
    """Turn transport and status errors into one console line and exit code 1."""
    try:
        yield
    except httpx.ConnectError:
        fail(
            f"Could not connect to server at {get_server_url()}",
            hint="Is the server running? Start it with: sampurnan serve",
        )
    except httpx.HTTPStatusError as e:
        if on_status is not None:
            on_status(e)
        fail(f"{e.response.status_code} - {error_message(e.response)}")
    except httpx.ReadError:
        fail("Connection lost while reading response")
