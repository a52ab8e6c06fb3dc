"""Usage commands for the blade-access CLI."""

from __future__ import annotations

import typer
from rich.table import Table

from . import console, open_client

app = typer.Typer(help="View usage from the third-party service")


@app.command()
def show(
    token: str = typer.Option(..., help="Session token of the service account"),
    user_id: str = typer.Option(None, help="Owner of the session (optional)"),
) -> None:
    """Show request usage per model."""
    with open_client() as client:
        outcome = client.usage.get(user_id, token)

    if not outcome.ok or outcome.data is None:
        console.print(f"[red]Could not load usage: {outcome.message}[/red]")
        raise typer.Exit(1)

    data = outcome.data
    console.print("\n[bold]Usage Statistics[/bold]\n")
    if data.get("startOfMonth"):
        console.print(f"  Period start: {data['startOfMonth']}")

    table = Table()
    table.add_column("Model", style="cyan")
    table.add_column("Requests")
    table.add_column("Limit")

    for model, stats in data.items():
        if not isinstance(stats, dict):
            continue
        limit = stats.get("maxRequestUsage")
        table.add_row(model, str(stats.get("numRequests", 0)), "-" if limit is None else str(limit))

    console.print(table)


@app.command()
def me(
    user_id: str = typer.Option(..., help="Owner of the session"),
    token: str = typer.Option(..., help="Session token of the service account"),
) -> None:
    """Show the profile behind a session."""
    with open_client() as client:
        outcome = client.usage.profile(user_id, token)

    if not outcome.ok or outcome.data is None:
        console.print(f"[red]Could not load profile: {outcome.message}[/red]")
        raise typer.Exit(1)

    for key in ("email", "name", "sub"):
        if outcome.data.get(key):
            console.print(f"  {key}: {outcome.data[key]}")
