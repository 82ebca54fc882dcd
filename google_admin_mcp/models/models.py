"""Pydantic models for request validation.

This module defines request schemas for the Google Admin tools using Pydantic v2.
Every field is required and must be non-empty once surrounding whitespace is
stripped, so invalid calls are rejected before any credential is loaded.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ListUsersRequest(BaseModel):
    """Request model for listing users."""

    model_config = ConfigDict(frozen=True)

    domain: NonEmptyStr


class AddUserRequest(BaseModel):
    """Request model for adding a new user."""

    model_config = ConfigDict(frozen=True)

    primaryEmail: EmailStr
    firstName: NonEmptyStr
    lastName: NonEmptyStr


class UserKeyRequest(BaseModel):
    """Request model for user key operations (email address or unique ID)."""

    model_config = ConfigDict(frozen=True)

    userKey: NonEmptyStr
