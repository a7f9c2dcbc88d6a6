"""Supabase Auth-backed identity provider."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthApiError, Client

from fitness_tracker.domain.models import UserRecord
from fitness_tracker.services.users import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Validates access tokens with Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> UserRecord | None:
        """Return the user for a Supabase access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError:
            logger.warning("Access token rejected by Supabase Auth", exc_info=True)
            return None
        user = getattr(response, "user", None)
        if user is None:
            return None
        return UserRecord(id=UUID(str(user.id)), email=getattr(user, "email", None))
