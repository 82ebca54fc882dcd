from .models import (
    AddUserRequest,
    ListUsersRequest,
    UserKeyRequest,
)

__all__ = [
    "ListUsersRequest",
    "AddUserRequest",
    "UserKeyRequest",
]
