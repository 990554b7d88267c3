"""Contract every relation backend implements."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
from uuid import UUID


class StoreOutcome(Enum):
    SUCCESS = "success"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


class RelationStore(ABC):
    """
    Presence/absence relation rows keyed by (table, user_id, entity_id).

    Implementations raise RemoteStoreError for any backend failure. A
    duplicate insert returns CONFLICT and deleting an absent row returns
    NOT_FOUND; neither is an error.
    """

    @abstractmethod
    def exists(self, table: str, user_id: str, entity_id: UUID) -> bool:
        ...

    @abstractmethod
    def count(self, table: str, entity_id: UUID) -> int:
        ...

    @abstractmethod
    def insert(self, table: str, user_id: Optional[str], entity_id: UUID) -> StoreOutcome:
        ...

    @abstractmethod
    def delete(self, table: str, user_id: str, entity_id: UUID) -> StoreOutcome:
        ...
