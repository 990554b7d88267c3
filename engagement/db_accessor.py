from typing import Any, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor wrapping the queryset calls a relation store needs."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def filter(self, **lookup: Any) -> QuerySet:
        """Return the queryset matching lookup."""
        return self.model.objects.filter(**lookup)

    def exists(self, **lookup: Any) -> bool:
        """Return True when any object matches lookup."""
        return self.filter(**lookup).exists()

    def count(self, **lookup: Any) -> int:
        """Return how many objects match lookup."""
        return self.filter(**lookup).count()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.filter(**lookup).delete()
        return count
