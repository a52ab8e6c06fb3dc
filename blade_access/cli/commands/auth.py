"""Authentication commands for the blade-access CLI."""

from __future__ import annotations

import typer

from blade_access.types import Credentials

from . import console, open_client

app = typer.Typer(help="Log in and look up tenants")


@app.command()
def tenant(account: str = typer.Argument(..., help="Account name")) -> None:
    """Show the tenant an account belongs to."""
    with open_client() as client:
        tenant_id = client.auth.get_tenant_id(account)
    console.print(tenant_id)


@app.command()
def login(
    account: str = typer.Argument(..., help="Account name"),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Account password"),
    tenant_id: str = typer.Option(None, "--tenant", help="Skip the tenant lookup"),
    sms_code: str = typer.Option(None, help="SMS code for two-factor login"),
) -> None:
    """Log in and print the session token.

    The token is not stored; export it as BLADE_ACCESS_TOKEN for other commands.
    """
    credentials = Credentials(account=account, password=password, tenant_id=tenant_id, sms_code=sms_code)
    with open_client() as client:
        token = client.auth.login(credentials)
    console.print("[green]Logged in.[/green]")
    typer.echo(token)
