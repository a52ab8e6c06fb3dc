"""Entry point of the ``blade-access`` command."""

from __future__ import annotations

try:
    import typer
except ImportError:
    import sys

    sys.exit("The blade-access command needs the cli extra: pip install 'blade-access[cli]'")

from .commands import account, auth, usage

app = typer.Typer(
    name="blade-access",
    help="Log in to the Blade backend, redeem card keys and read request usage.",
    no_args_is_help=True,
)

app.add_typer(auth.app, name="auth")
app.add_typer(account.app, name="account")
app.add_typer(usage.app, name="usage")


def _print_version() -> None:
    from blade_access import __version__

    typer.echo(f"blade-access {__version__}")


@app.callback(invoke_without_command=True)
def root(
    show_version: bool = typer.Option(False, "--version", help="Print the installed version and exit."),
) -> None:
    if show_version:
        _print_version()
        raise typer.Exit()


@app.command("version")
def version_command() -> None:
    """Print the installed version."""
    _print_version()


if __name__ == "__main__":
    app()
