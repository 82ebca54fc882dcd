"""Google Admin MCP exceptions.

Errors raised by the credential loader and the directory operations. Tools
convert them into MCP tool errors.
"""


class GoogleAdminError(Exception):
    """Base exception for Google Admin MCP."""


class AuthenticationError(GoogleAdminError):
    """The configured credential could not be loaded."""

    MESSAGE = (
        "Failed to load authentication token. "
        "Please ensure GOOGLE_TOKEN_JSON is set and valid."
    )

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class DirectoryOperationError(GoogleAdminError):
    """A Directory API call failed."""

    def __init__(self, action: str, detail: str) -> None:
        self.action = action
        self.detail = detail
        super().__init__(f"Failed to {action}: {detail}")
