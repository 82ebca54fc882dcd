"""User service for Google Admin MCP."""

import json
import logging
from collections.abc import Callable

from google.auth.credentials import Credentials
from googleapiclient.errors import HttpError

from ..exceptions import DirectoryOperationError
from ..models import AddUserRequest, ListUsersRequest, UserKeyRequest
from ..repositories.google_client import GoogleAdminClient
from ..schema.users import (
    format_created_user,
    format_suspension,
    format_user_details,
    format_user_list,
)
from ..utils.google import CredentialLoader, generate_secure_password

logger = logging.getLogger(__name__)

LIST_PAGE_SIZE = 10
LIST_ORDER_BY = "email"


def error_detail(error: Exception) -> str:
    """Return the message text of an upstream error."""
    if isinstance(error, HttpError):
        try:
            payload = json.loads(error.content.decode("utf-8"))
            message = payload.get("error", {}).get("message")
        except (ValueError, AttributeError):
            message = None
        return message or getattr(error, "reason", None) or str(error)
    return str(error)


class UserService:
    """Service for managing Google Workspace users.

    Every operation loads a fresh credential handle and builds its own client;
    no state is shared between calls.
    """

    def __init__(
        self,
        loader: CredentialLoader,
        client_factory: Callable[[Credentials], GoogleAdminClient] = GoogleAdminClient,
        password_factory: Callable[[], str] = generate_secure_password,
    ):
        self.loader = loader
        self.client_factory = client_factory
        self.password_factory = password_factory

    def _failed(self, action: str, error: Exception) -> DirectoryOperationError:
        logger.error(f"Error trying to {action}: {error}")
        return DirectoryOperationError(action, error_detail(error))

    def list_users(self, request: ListUsersRequest) -> str:
        """List the first page of users in a domain, ordered by email.

        Returns:
            "No users found." or a "Users:" header followed by one
            ``email (full name)`` line per user.
        """
        logger.info(f"Listing users for domain: {request.domain}")
        credentials = self.loader.load_credentials()
        try:
            users = self.client_factory(credentials).list_users(
                request.domain, maxResults=LIST_PAGE_SIZE, orderBy=LIST_ORDER_BY
            )
        except Exception as e:
            raise self._failed("list users", e) from e
        return format_user_list(users)

    def add_user(self, request: AddUserRequest) -> str:
        """Create a new user with a generated initial password.

        The password must be changed at first login and is only ever returned
        in the confirmation text.
        """
        logger.info(f"Creating user: {request.primaryEmail}")
        credentials = self.loader.load_credentials()
        password = self.password_factory()
        body = {
            "primaryEmail": request.primaryEmail,
            "password": password,
            "name": {
                "givenName": request.firstName,
                "familyName": request.lastName,
                "fullName": f"{request.firstName} {request.lastName}",
            },
            "changePasswordAtNextLogin": True,
        }
        try:
            user = self.client_factory(credentials).insert_user(body)
        except Exception as e:
            raise self._failed("create user", e) from e
        return format_created_user(user, password)

    def _set_suspended(self, request: UserKeyRequest, suspended: bool) -> str:
        action = "suspend user" if suspended else "unsuspend user"
        logger.info(f"Trying to {action}: {request.userKey}")
        credentials = self.loader.load_credentials()
        try:
            user = self.client_factory(credentials).update_user(
                request.userKey, {"suspended": suspended}
            )
        except Exception as e:
            raise self._failed(action, e) from e
        return format_suspension(user, suspended)

    def suspend_user(self, request: UserKeyRequest) -> str:
        """Suspend a user account."""
        return self._set_suspended(request, True)

    def unsuspend_user(self, request: UserKeyRequest) -> str:
        """Unsuspend a user account."""
        return self._set_suspended(request, False)

    def get_user(self, request: UserKeyRequest) -> str:
        """Get detailed information about a specific user."""
        logger.info(f"Getting user: {request.userKey}")
        credentials = self.loader.load_credentials()
        try:
            user = self.client_factory(credentials).get_user(request.userKey)
        except Exception as e:
            raise self._failed("get user", e) from e
        return format_user_details(user)
