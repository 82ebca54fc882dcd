from collections.abc import Callable
from typing import Annotated

from anyio import to_thread
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field, ValidationError

from ..exceptions import GoogleAdminError
from ..models import AddUserRequest, ListUsersRequest, UserKeyRequest
from ..services import UserService

UserKey = Annotated[
    str, Field(min_length=1, description="The user's primary email address or unique ID.")
]


def _validate(model: type[BaseModel], **arguments: str) -> BaseModel:
    try:
        return model(**arguments)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ToolError(f"Invalid arguments: {details}") from e


async def _run(operation: Callable[[BaseModel], str], request: BaseModel) -> str:
    # Directory calls block on HTTP, keep them off the event loop
    try:
        return await to_thread.run_sync(operation, request)
    except GoogleAdminError as e:
        raise ToolError(str(e)) from e


class UserTools:
    """MCP-facing user tools.

    Arguments are validated into request models before the service is called,
    so invalid calls never reach the credential loader or the network.
    """

    def __init__(self, service: UserService):
        self.service = service

    async def list_users(
        self,
        domain: Annotated[
            str, Field(min_length=1, description="The domain to list users from.")
        ],
    ) -> str:
        """List users from Google Admin Directory (first 10, ordered by email)."""
        request = _validate(ListUsersRequest, domain=domain)
        return await _run(self.service.list_users, request)

    async def add_user(
        self,
        primaryEmail: Annotated[
            str, Field(description="The new user's primary email address.")
        ],
        firstName: Annotated[str, Field(min_length=1, description="First name.")],
        lastName: Annotated[str, Field(min_length=1, description="Last name.")],
    ) -> str:
        """Create a new user with a generated initial password."""
        request = _validate(
            AddUserRequest,
            primaryEmail=primaryEmail,
            firstName=firstName,
            lastName=lastName,
        )
        return await _run(self.service.add_user, request)

    async def suspend_user(self, userKey: UserKey) -> str:
        """Suspend a user account."""
        return await _run(
            self.service.suspend_user, _validate(UserKeyRequest, userKey=userKey)
        )

    async def unsuspend_user(self, userKey: UserKey) -> str:
        """Unsuspend a user account."""
        return await _run(
            self.service.unsuspend_user, _validate(UserKeyRequest, userKey=userKey)
        )

    async def get_user(self, userKey: UserKey) -> str:
        """Get detailed information about a specific user."""
        return await _run(
            self.service.get_user, _validate(UserKeyRequest, userKey=userKey)
        )
