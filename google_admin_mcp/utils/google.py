import base64
import binascii
import json
import logging
import random
import re
import secrets
import string
from typing import Any

from google.auth.credentials import Credentials
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account

from ..config import GoogleAdminSettings
from ..exceptions import AuthenticationError

logger = logging.getLogger(__name__)

PASSWORD_LENGTH = 12
PASSWORD_SYMBOLS = "!@#$%^&*"
PASSWORD_CHARSET = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits + PASSWORD_SYMBOLS
)
PASSWORD_CLASSES = ("[A-Z]", "[a-z]", "[0-9]", "[!@#$%^&*]")

REDACTED_KEYS = (
    "private_key",
    "private_key_id",
    "client_id",
    "client_email",
    "client_secret",
    "refresh_token",
)


def decode_token_json(token_json: str | None) -> dict[str, Any]:
    """
    Decode a base64 encoded JSON credential descriptor.

    Raises:
        ValueError: If the value is missing, is not base64, is not JSON or does
            not hold a JSON object.
    """
    # Line wrapped output of `base64` and `base64.encodebytes` is accepted
    compact = "".join((token_json or "").split())
    if not compact:
        raise ValueError("GOOGLE_TOKEN_JSON environment variable is not set")
    try:
        decoded = base64.b64decode(compact, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"GOOGLE_TOKEN_JSON is not valid base64: {e}") from e
    info = json.loads(decoded)
    if not isinstance(info, dict):
        raise ValueError("GOOGLE_TOKEN_JSON must decode to a JSON object")
    return info


def redact(info: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a credential descriptor that is safe to log."""
    redacted = info.copy()
    for key in REDACTED_KEYS:
        if redacted.get(key):
            redacted[key] = "[REDACTED]"
    return redacted


class CredentialLoader:
    """Builds Google credentials from the configured token.

    The decoded descriptor is cached after the first successful load. A new
    credentials object is created on every call so google-auth applies its own
    expiry and refresh rules when the handle is used.
    """

    def __init__(self, settings: GoogleAdminSettings):
        self.settings = settings
        self._info: dict[str, Any] | None = None

    def _load_info(self) -> dict[str, Any]:
        if self._info is None:
            info = decode_token_json(self.settings.TOKEN_JSON)
            logger.debug(f"Google credential descriptor: {redact(info)}")
            self._info = info
        return self._info

    def _from_info(self, info: dict[str, Any]) -> Credentials:
        credential_type = info.get("type")
        scopes = self.settings.SCOPES

        if credential_type == "service_account":
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=scopes
            )
            # If using domain-wide delegation, add subject
            if self.settings.ADMIN_EMAIL:
                credentials = credentials.with_subject(self.settings.ADMIN_EMAIL)
            return credentials

        if credential_type == "authorized_user":
            return user_credentials.Credentials.from_authorized_user_info(info, scopes)

        raise ValueError(f"Unsupported credential type: {credential_type!r}")

    def load_credentials(self) -> Credentials:
        """
        Load Google credentials from the configured base64 JSON token.

        Returns:
            Credentials: service account credentials (delegated to ADMIN_EMAIL
                when configured) or authorized user credentials, scoped to the
                configured directory scopes.

        Raises:
            AuthenticationError: If the token is missing, cannot be decoded, or
                describes credentials google-auth cannot parse. The cause is
                logged and chained, never put in the message.
        """
        try:
            credentials = self._from_info(self._load_info())
        except (ValueError, KeyError, TypeError, GoogleAuthError) as e:
            logger.error(f"Error loading token: {e}")
            raise AuthenticationError() from e
        logger.debug("Successfully created Google credentials")
        return credentials

    def credential_type(self) -> str:
        """Validate the token and return its credential type."""
        self.load_credentials()
        return str(self._load_info().get("type"))


def _class_representative(pattern: str, charset: str) -> str:
    return re.search(pattern, charset).group(0)


def generate_secure_password(rng: random.Random | None = None) -> str:
    """Generate a random password meeting complexity requirements.

    The password is 12 characters long and contains at least one uppercase
    letter, lowercase letter, digit and symbol from ``!@#$%^&*``. Each class is
    seeded with the first character of the charset in that class; the rest is
    drawn uniformly from the whole charset and the result is shuffled.
    """
    rng = rng or secrets.SystemRandom()
    # Ensure at least one of each required character type
    password = [_class_representative(p, PASSWORD_CHARSET) for p in PASSWORD_CLASSES]
    # Fill the rest with random characters
    password.extend(
        rng.choice(PASSWORD_CHARSET) for _ in range(PASSWORD_LENGTH - len(password))
    )
    # Shuffle the password
    return "".join(rng.sample(password, len(password)))
