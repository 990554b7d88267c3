"""Likes, saves and views for any target kind, on top of a relation store."""

import logging
from dataclasses import dataclass
from typing import Optional

from engagement.results import ErrorKind, RemoteStoreError, Result
from engagement.stores import RelationStore, StoreOutcome, get_relation_store
from engagement.targets import Namespace, Target, supports

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleState:
    """
    Confirmed state after a toggle.

    `count` is the server-side count re-read after the write, or None when
    that read failed. `conflict` is True when the write found the row already
    in the requested state (a concurrent toggle got there first).
    """
    active: bool
    count: Optional[int] = None
    conflict: bool = False


@dataclass(frozen=True)
class InteractionSnapshot:
    liked: bool = False
    saved: bool = False
    like_count: int = 0
    view_count: int = 0


class InteractionService:
    """
    One adapter for every entity kind; the target picks the relation table.

    Reads never raise: they log and fall back to a safe value. Toggles need a
    session and report failures through the returned Result.
    """

    def __init__(self, store: Optional[RelationStore] = None):
        self.store = store if store is not None else get_relation_store()

    def is_liked(self, target: Target, session) -> Result[bool]:
        return self._has(target, Namespace.LIKE, session)

    def is_saved(self, target: Target, session) -> Result[bool]:
        return self._has(target, Namespace.SAVE, session)

    def like_count(self, target: Target, cached: int = 0) -> Result[int]:
        return self._count(target, Namespace.LIKE, cached)

    def view_count(self, target: Target, cached: int = 0) -> Result[int]:
        return self._count(target, Namespace.VIEW, cached)

    def toggle_like(self, target: Target, session) -> Result[ToggleState]:
        return self._toggle(target, Namespace.LIKE, session)

    def toggle_save(self, target: Target, session) -> Result[ToggleState]:
        return self._toggle(target, Namespace.SAVE, session)

    def record_view(self, target: Target, session) -> Result[int]:
        """Record a view (anonymous allowed) and return the refreshed view count."""
        table = target.table(Namespace.VIEW)
        user_id = session.user_id if session is not None else None
        try:
            outcome = self.store.insert(table, user_id, target.entity_id)
        except RemoteStoreError as e:
            logger.error("Error tracking view for %s: %s", target, e)
            return Result.failure(ErrorKind.REMOTE_WRITE_FAILED)
        if outcome is StoreOutcome.CONFLICT:
            logger.debug("Repeat view of %s by %s", target, user_id)
        return self.view_count(target)

    def load_interactions(self, target: Target, session) -> Result[InteractionSnapshot]:
        """Load everything a component shows on mount, defaulting any part that fails."""
        liked = self.is_liked(target, session)
        saved = self.is_saved(target, session)
        likes = self.like_count(target)
        reads = [liked, saved, likes]
        view_count = 0
        if supports(target.kind, Namespace.VIEW):
            views = self.view_count(target)
            reads.append(views)
            view_count = views.value

        snapshot = InteractionSnapshot(
            liked=liked.value,
            saved=saved.value,
            like_count=likes.value,
            view_count=view_count,
        )
        if all(read.ok for read in reads):
            return Result.success(snapshot)
        return Result.failure(ErrorKind.REMOTE_READ_FAILED, value=snapshot)

    def _has(self, target, namespace, session):
        table = target.table(namespace)
        if session is None:
            return Result.success(False)
        try:
            return Result.success(self.store.exists(table, session.user_id, target.entity_id))
        except RemoteStoreError as e:
            logger.error("Error loading %s state for %s: %s", namespace.value, target, e)
            return Result.failure(ErrorKind.REMOTE_READ_FAILED, value=False)

    def _count(self, target, namespace, cached):
        table = target.table(namespace)
        try:
            return Result.success(self.store.count(table, target.entity_id))
        except RemoteStoreError as e:
            logger.error("Error loading %s count for %s: %s", namespace.value, target, e)
            return Result.failure(ErrorKind.REMOTE_READ_FAILED, value=cached)

    def _toggle(self, target, namespace, session):
        table = target.table(namespace)
        if session is None:
            return Result.failure(ErrorKind.AUTH_REQUIRED)

        user_id = session.user_id
        try:
            if self.store.exists(table, user_id, target.entity_id):
                active = False
                conflict = self.store.delete(table, user_id, target.entity_id) is StoreOutcome.NOT_FOUND
            else:
                active = True
                conflict = self.store.insert(table, user_id, target.entity_id) is StoreOutcome.CONFLICT
        except RemoteStoreError as e:
            logger.error("Error toggling %s on %s for %s: %s", namespace.value, target, user_id, e)
            return Result.failure(ErrorKind.REMOTE_WRITE_FAILED)

        if conflict:
            logger.debug(
                "%s on %s for %s was already %s",
                namespace.value, target, user_id, "set" if active else "cleared",
            )

        try:
            count = self.store.count(table, target.entity_id)
        except RemoteStoreError as e:
            logger.warning("Could not refresh %s count for %s: %s", namespace.value, target, e)
            count = None
        return Result.success(ToggleState(active=active, count=count, conflict=conflict))
