"""Click CLI for the Google Admin MCP server."""

from __future__ import annotations

import sys

import click
from dotenv import load_dotenv

from . import __version__
from .config import get_settings
from .exceptions import AuthenticationError
from .mcp_server import run
from .utils.google import CredentialLoader

load_dotenv()


@click.group()
@click.version_option(__version__, prog_name="google-admin-mcp")
def cli() -> None:
    """Google Admin MCP Server CLI."""


@cli.command("serve")
@click.option(
    "--transport",
    type=click.Choice(["stdio"], case_sensitive=False),
    default="stdio",
    show_default=True,
    help="MCP transport to serve on",
)
def serve_cmd(transport: str) -> None:
    """Run the MCP server."""
    run(get_settings(), transport=transport.lower())


@cli.command("check-credentials")
def check_credentials_cmd() -> None:
    """Load GOOGLE_TOKEN_JSON once and report whether it is usable."""
    loader = CredentialLoader(get_settings().google)
    try:
        credential_type = loader.credential_type()
    except AuthenticationError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    click.echo(f"Credentials OK ({credential_type})")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
