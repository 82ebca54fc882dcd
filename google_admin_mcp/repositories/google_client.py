import logging

from google.auth.credentials import Credentials
from googleapiclient.discovery import build

logger = logging.getLogger(__name__)


class GoogleAdminClient:
    """Client for interacting with Google Admin Directory API."""

    def __init__(self, credentials: Credentials):
        """Initialize the Google Admin client."""
        self.credentials = credentials
        self.service = build(
            "admin", "directory_v1", credentials=credentials, cache_discovery=False
        )

    def list_users(
        self, domain: str, maxResults: int = 10, orderBy: str = "email"
    ) -> list[dict]:
        """List users in a domain (first page only)."""
        logger.debug(f"Listing users in domain: {domain}")
        response = (
            self.service.users()
            .list(domain=domain, maxResults=maxResults, orderBy=orderBy)
            .execute()
        )
        return response.get("users", [])

    def insert_user(self, body: dict) -> dict:
        """Create a new user."""
        return self.service.users().insert(body=body).execute()

    def get_user(self, user_key: str) -> dict:
        """Get detailed information about a specific user."""
        return self.service.users().get(userKey=user_key).execute()

    def update_user(self, user_key: str, update_body: dict) -> dict:
        """Update a user's information."""
        return (
            self.service.users()
            .update(userKey=user_key, body=update_body)
            .execute()
        )
