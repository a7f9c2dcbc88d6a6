"""Shared FastAPI dependencies."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from fastapi import Cookie, Header, HTTPException, Request, status

from fitness_tracker.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

BEARER_PREFIX = "bearer "

logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
    token: str | None = Cookie(default=None),
) -> UserRecord:
    """Resolve the requesting user from a bearer token or auth cookie."""
    container = get_container(request)
    access_token = _bearer_token(authorization) or token
    try:
        user = container.user_service.authenticate(access_token)
    except Exception as exc:
        logger.exception("Failed to verify access token")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to verify access token",
        ) from exc
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required"
        )
    return user


def _bearer_token(header: str | None) -> str | None:
    if not header or not header.lower().startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX) :].strip() or None


def resolve_timestamp(value: datetime | None, container: AppContainer) -> datetime:
    """Default to now and read naive timestamps in the server timezone."""
    now = container.clock.now()
    if value is None:
        return now
    if value.tzinfo is None:
        return value.replace(tzinfo=now.tzinfo)
    return value
