"""Relation store backed by the project database."""

from django.db import DatabaseError, IntegrityError, transaction

from engagement.db_accessor import DB_Accessor
from engagement.models import RELATION_MODELS
from engagement.results import RemoteStoreError
from engagement.stores.base import RelationStore, StoreOutcome


class OrmRelationStore(RelationStore):
    """Store relation rows in the per-table Django models."""

    def __init__(self, models=None):
        self.models = models or RELATION_MODELS
        self._accessors = {}

    def _accessor(self, table):
        if table not in self._accessors:
            try:
                model = self.models[table]
            except KeyError:
                raise LookupError(f"No relation model for table {table!r}") from None
            self._accessors[table] = DB_Accessor(model)
        return self._accessors[table]

    def exists(self, table, user_id, entity_id):
        accessor = self._accessor(table)
        try:
            return accessor.exists(user_id=user_id, entity_id=entity_id)
        except DatabaseError as e:
            raise RemoteStoreError(f"exists on {table} failed: {e}") from e

    def count(self, table, entity_id):
        accessor = self._accessor(table)
        try:
            return accessor.count(entity_id=entity_id)
        except DatabaseError as e:
            raise RemoteStoreError(f"count on {table} failed: {e}") from e

    def insert(self, table, user_id, entity_id):
        accessor = self._accessor(table)
        try:
            # savepoint so a unique violation leaves the outer transaction usable
            with transaction.atomic():
                accessor.create(user_id=user_id, entity_id=entity_id)
        except IntegrityError as e:
            # only a duplicate row is benign; FK or NOT NULL failures are real write errors
            if user_id is not None and self.exists(table, user_id, entity_id):
                return StoreOutcome.CONFLICT
            raise RemoteStoreError(f"insert into {table} failed: {e}") from e
        except DatabaseError as e:
            raise RemoteStoreError(f"insert into {table} failed: {e}") from e
        return StoreOutcome.SUCCESS

    def delete(self, table, user_id, entity_id):
        accessor = self._accessor(table)
        try:
            deleted = accessor.delete(user_id=user_id, entity_id=entity_id)
        except DatabaseError as e:
            raise RemoteStoreError(f"delete from {table} failed: {e}") from e
        return StoreOutcome.SUCCESS if deleted else StoreOutcome.NOT_FOUND
