"""
Abstract relation rows shared by every like, save and view table.

A relation row links a user to a target entity. Rows are only ever created
or deleted; presence of a row is the whole fact ("liked", "saved", "viewed").
The target entity lives in another service, so it is referenced by its UUID
rather than a foreign key.
"""

from django.conf import settings
from django.db import models


class UserRelation(models.Model):
    """Presence row unique per (user, entity)."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    entity_id = models.UUIDField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        constraints = [
            models.UniqueConstraint(
                fields=["user", "entity_id"],
                name="uniq_%(class)s_user_entity",
            ),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.entity_id}"


class ViewRelation(models.Model):
    """
    View row. Signed-in viewers are unique per entity; anonymous views
    (null user) are recorded every time.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
    )
    entity_id = models.UUIDField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        constraints = [
            models.UniqueConstraint(
                fields=["user", "entity_id"],
                name="uniq_%(class)s_user_entity",
            ),
        ]

    def __str__(self):
        return f"{self.user_id or 'anonymous'} viewed {self.entity_id}"
