from __future__ import annotations

import base64
import json
import os
import sys
from typing import Any

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from google_admin_mcp.config import get_settings  # noqa: E402
from google_admin_mcp.exceptions import AuthenticationError  # noqa: E402

AUTHORIZED_USER_INFO: dict[str, str] = {
    "type": "authorized_user",
    "client_id": "client-id.apps.googleusercontent.com",
    "client_secret": "client-secret",
    "refresh_token": "refresh-token",
}


def encode_token(info: Any) -> str:
    return base64.b64encode(json.dumps(info).encode("utf-8")).decode("ascii")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    # Keep stray .env files and credentials out of the tests
    monkeypatch.chdir(tmp_path)
    for name in ("GOOGLE_TOKEN_JSON", "GOOGLE_ADMIN_EMAIL", "GOOGLE_SCOPES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()


class FakeLoader:
    """Credential loader double counting how often credentials were loaded."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.loads = 0

    def load_credentials(self) -> object:
        self.loads += 1
        if self.fail:
            raise AuthenticationError()
        return object()

    def credential_type(self) -> str:
        self.load_credentials()
        return "authorized_user"


class FakeDirectoryClient:
    """In-memory stand-in for GoogleAdminClient."""

    def __init__(
        self,
        users: list[dict[str, Any]] | None = None,
        user: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.users = users or []
        self.user = user or {}
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error

    def list_users(self, domain: str, maxResults: int = 10, orderBy: str = "email"):
        self._record("list_users", domain, maxResults=maxResults, orderBy=orderBy)
        return self.users

    def insert_user(self, body: dict[str, Any]) -> dict[str, Any]:
        self._record("insert_user", body)
        return {**body, **self.user}

    def get_user(self, user_key: str) -> dict[str, Any]:
        self._record("get_user", user_key)
        return self.user

    def update_user(self, user_key: str, update_body: dict[str, Any]) -> dict[str, Any]:
        self._record("update_user", user_key, update_body)
        return {**self.user, **update_body}


@pytest.fixture
def fake_loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
def fake_client() -> FakeDirectoryClient:
    return FakeDirectoryClient()
