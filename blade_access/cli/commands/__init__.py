"""CLI command modules."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console

from blade_access.client import BladeClient
from blade_access.exceptions import BladeAccessError

console = Console()

TOKEN_ENVVAR = "BLADE_ACCESS_TOKEN"


@contextmanager
def open_client() -> Iterator[BladeClient]:
    """Yield a client; access-layer errors are printed and exit with status 1."""
    client = BladeClient()
    try:
        yield client
    except BladeAccessError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e
    finally:
        client.close()
