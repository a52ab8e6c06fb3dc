"""Account commands for the blade-access CLI."""

from __future__ import annotations

from datetime import datetime, timezone

import typer

from . import TOKEN_ENVVAR, console, open_client

app = typer.Typer(help="Activate card keys and inspect the account")

_token_option = typer.Option(..., envvar=TOKEN_ENVVAR, help="Session token from 'auth login'")


@app.command()
def activate(
    card_key: str = typer.Argument(..., help="Card key to redeem"),
    token: str = _token_option,
) -> None:
    """Redeem a card key."""
    with open_client() as client:
        outcome = client.account.activate(token, card_key)

    result = outcome.data
    console.print(f"[green]{outcome.message or 'Activated.'}[/green]")
    if result is not None:
        expires = datetime.fromtimestamp(result.expire_time / 1000, tz=timezone.utc)
        console.print(f"  Level: {result.level}")
        console.print(f"  Expires: {expires:%Y-%m-%d %H:%M} UTC")


@app.command()
def info(token: str = _token_option) -> None:
    """Show balance and credits of the account."""
    with open_client() as client:
        user = client.account.user_info(token)

    console.print(f"\n[bold]{user.username}[/bold]\n")
    console.print(f"  Balance: {user.balance}")
    console.print(f"  Bonus: {user.bonus}")
    console.print(f"  Credits: {user.credits}")


@app.command()
def detail(token: str = _token_option) -> None:
    """Show the account's email and user id (needs the legacy backend)."""
    with open_client() as client:
        outcome = client.account.detail(token)

    if not outcome.ok or outcome.data is None:
        console.print(f"[red]{outcome.message or 'Could not load account.'}[/red]")
        raise typer.Exit(1)

    console.print(f"  Email: {outcome.data.email}")
    console.print(f"  User ID: {outcome.data.user_id}")
