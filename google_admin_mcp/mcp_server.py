"""Google Admin MCP Server.

This module provides an MCP server exposing Google Workspace user management
tools (list, create, suspend, unsuspend and get users) over stdio.
"""

import logging

from fastmcp import FastMCP

from .config import AppSettings, get_settings
from .exceptions import AuthenticationError
from .services import UserService
from .tools import UserTools
from .utils.google import CredentialLoader

logger = logging.getLogger(__name__)

# Tool name -> UserTools method, description and tag
TOOLS = (
    ("listUsers", "list_users", "List users from Google Admin Directory", "list"),
    ("addUser", "add_user", "Create a new user in Google Admin Directory", "add"),
    ("suspendUser", "suspend_user", "Suspend a user in Google Admin Directory", "suspend"),
    (
        "unsuspendUser",
        "unsuspend_user",
        "Unsuspend a user in Google Admin Directory",
        "unsuspend",
    ),
    ("getUser", "get_user", "Get a specific user from Google Admin Directory", "get"),
)
TOOL_NAMES = tuple(name for name, *_ in TOOLS)


def create_server(
    settings: AppSettings | None = None, service: UserService | None = None
) -> FastMCP:
    """Build the MCP server with its tools bound to `service`.

    When no service is given one is built from `settings`, which default to the
    process settings read from the environment.
    """
    settings = settings or get_settings()
    if service is None:
        service = UserService(CredentialLoader(settings.google))
    tools = UserTools(service)

    mcp = FastMCP(settings.server_name)
    for name, method, description, tag in TOOLS:
        mcp.tool(
            name=name,
            description=description,
            tags={"users", tag, "google workspace"},
        )(getattr(tools, method))

    return mcp


def check_credentials(loader: CredentialLoader) -> bool:
    """Validate the configured credential at startup without failing hard."""
    try:
        credential_type = loader.credential_type()
    except AuthenticationError as e:
        logger.warning(f"{e} Tool calls will fail until this is fixed.")
        return False
    logger.info(f"Loaded Google credentials ({credential_type})")
    return True


def configure_logging(level: str) -> None:
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(settings: AppSettings | None = None, transport: str = "stdio") -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    loader = CredentialLoader(settings.google)
    check_credentials(loader)
    mcp = create_server(settings, UserService(loader))
    mcp.run(transport=transport)


if __name__ == "__main__":
    run()
