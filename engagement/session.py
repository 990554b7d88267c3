"""Explicit session value passed into the adapter and binder."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Session:
    """An authenticated identity. Unauthenticated callers pass None instead."""
    user_id: str


def session_from_user(user) -> Optional[Session]:
    """Return a Session for an authenticated Django user, else None."""
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return Session(user_id=str(user.pk))


def session_from_request(request) -> Optional[Session]:
    """Return the Session for the request's user, or None when anonymous."""
    return session_from_user(getattr(request, "user", None))
