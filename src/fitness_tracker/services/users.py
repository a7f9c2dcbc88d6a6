"""User identity resolution."""

from dataclasses import dataclass
from typing import Protocol

from fitness_tracker.domain.models import UserRecord


class IdentityProvider(Protocol):
    """Resolves access tokens issued by the auth service."""

    def get_user(self, access_token: str) -> UserRecord | None:
        """Return the user the token belongs to, or None if it is invalid."""


@dataclass
class UserService:
    """Application service for identifying the requesting user."""

    identity_provider: IdentityProvider

    def authenticate(self, access_token: str | None) -> UserRecord | None:
        """Return the user for an access token, if the token is valid."""
        if not access_token or not access_token.strip():
            return None
        return self.identity_provider.get_user(access_token.strip())
