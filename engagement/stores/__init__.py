"""Relation store backends and the factory that picks one from settings."""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from engagement.firebase_admin_client import get_firestore_client
from engagement.stores.base import RelationStore, StoreOutcome
from engagement.stores.firestore import FirestoreRelationStore
from engagement.stores.orm import OrmRelationStore

logger = logging.getLogger(__name__)


def get_relation_store() -> RelationStore:
    """Return the store named by ENGAGEMENT_BACKEND ("orm" or "firestore")."""
    backend = getattr(settings, "ENGAGEMENT_BACKEND", "orm")
    if backend == "firestore":
        client = get_firestore_client()
        if client is not None:
            return FirestoreRelationStore(
                client, timeout=getattr(settings, "ENGAGEMENT_REMOTE_TIMEOUT", None)
            )
        logger.warning("Firestore backend selected but no client is available; using the ORM store.")
    elif backend != "orm":
        raise ImproperlyConfigured(f"Unknown ENGAGEMENT_BACKEND {backend!r}")
    return OrmRelationStore()


__all__ = [
    "RelationStore",
    "StoreOutcome",
    "OrmRelationStore",
    "FirestoreRelationStore",
    "get_relation_store",
]
