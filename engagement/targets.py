"""Interaction targets and the relation tables that back each namespace."""

import uuid
from dataclasses import dataclass
from enum import Enum

from engagement.results import UnsupportedInteraction


class EntityKind(Enum):
    """Kinds of content a user can like, save or view."""
    PROJECT = "project"
    SNIPPET = "snippet"
    COMMUNITY_POST = "community_post"

    @property
    def slug(self) -> str:
        """URL segment used for this kind."""
        return _SLUGS[self]

    @classmethod
    def from_slug(cls, slug: str) -> "EntityKind":
        """Resolve a URL slug; raise LookupError for unknown slugs."""
        for kind, kind_slug in _SLUGS.items():
            if kind_slug == slug:
                return kind
        raise LookupError(f"Unknown entity kind slug: {slug!r}")


_SLUGS = {
    EntityKind.PROJECT: "projects",
    EntityKind.SNIPPET: "snippets",
    EntityKind.COMMUNITY_POST: "community-posts",
}


class Namespace(Enum):
    """Independent relation namespaces."""
    LIKE = "like"
    SAVE = "save"
    VIEW = "view"


RELATION_TABLES = {
    (EntityKind.PROJECT, Namespace.LIKE): "project_likes",
    (EntityKind.SNIPPET, Namespace.LIKE): "snippet_likes",
    (EntityKind.COMMUNITY_POST, Namespace.LIKE): "community_post_likes",
    (EntityKind.PROJECT, Namespace.SAVE): "saved_projects",
    (EntityKind.SNIPPET, Namespace.SAVE): "saved_snippets",
    (EntityKind.COMMUNITY_POST, Namespace.SAVE): "saved_community_posts",
    (EntityKind.PROJECT, Namespace.VIEW): "project_views",
    (EntityKind.SNIPPET, Namespace.VIEW): "snippet_views",
}


def supports(kind: EntityKind, namespace: Namespace) -> bool:
    """Return True when the kind has a relation table for the namespace."""
    return (kind, namespace) in RELATION_TABLES


def relation_table(kind: EntityKind, namespace: Namespace) -> str:
    """Return the relation table name for a kind/namespace pair."""
    try:
        return RELATION_TABLES[(kind, namespace)]
    except KeyError:
        raise UnsupportedInteraction(
            f"{kind.value} does not support {namespace.value} interactions"
        ) from None


@dataclass(frozen=True)
class Target:
    """The (kind, entity id) pair an interaction refers to."""
    kind: EntityKind
    entity_id: uuid.UUID

    @classmethod
    def of(cls, kind, entity_id) -> "Target":
        """Build a target from loose input; raise ValueError on a bad id."""
        if not isinstance(kind, EntityKind):
            kind = EntityKind(kind)
        if not isinstance(entity_id, uuid.UUID):
            entity_id = uuid.UUID(str(entity_id))
        return cls(kind=kind, entity_id=entity_id)

    def table(self, namespace: Namespace) -> str:
        return relation_table(self.kind, namespace)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.entity_id}"
