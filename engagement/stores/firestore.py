"""Relation store backed by Cloud Firestore through firebase_admin."""

import logging
from contextlib import contextmanager

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from engagement.results import RemoteStoreError
from engagement.stores.base import RelationStore, StoreOutcome

logger = logging.getLogger(__name__)


@contextmanager
def _remote_call(operation, table):
    """Translate Google API failures (including deadlines) into RemoteStoreError."""
    try:
        yield
    except (google_exceptions.GoogleAPICallError, google_exceptions.RetryError) as e:
        logger.warning("Firestore %s on %s failed: %s", operation, table, e)
        raise RemoteStoreError(f"{operation} on {table} failed: {e}") from e


class FirestoreRelationStore(RelationStore):
    """
    One collection per relation table.

    Signed-in rows use the document id ``"{user_id}:{entity_id}"`` so the
    document key itself enforces one row per user and entity. Anonymous rows
    (views only) get generated ids.
    """

    def __init__(self, client, timeout=None):
        self.client = client
        self.timeout = timeout

    @staticmethod
    def document_id(user_id, entity_id):
        return f"{user_id}:{entity_id}"

    def _document(self, table, user_id, entity_id):
        return self.client.collection(table).document(self.document_id(user_id, entity_id))

    def exists(self, table, user_id, entity_id):
        with _remote_call("exists", table):
            snapshot = self._document(table, user_id, entity_id).get(timeout=self.timeout)
        return bool(snapshot.exists)

    def count(self, table, entity_id):
        query = self.client.collection(table).where(
            filter=FieldFilter("entity_id", "==", str(entity_id))
        )
        with _remote_call("count", table):
            results = query.count(alias="total").get(timeout=self.timeout)
        if not results:
            return 0
        return int(results[0][0].value)

    def insert(self, table, user_id, entity_id):
        data = {
            "user_id": user_id,
            "entity_id": str(entity_id),
            "created_at": firestore.SERVER_TIMESTAMP,
        }
        if user_id is None:
            document = self.client.collection(table).document()
        else:
            document = self._document(table, user_id, entity_id)
        with _remote_call("insert", table):
            try:
                document.create(data, timeout=self.timeout)
            except google_exceptions.Conflict:
                return StoreOutcome.CONFLICT
        return StoreOutcome.SUCCESS

    def delete(self, table, user_id, entity_id):
        document = self._document(table, user_id, entity_id)
        with _remote_call("delete", table):
            try:
                document.delete(
                    option=self.client.write_option(exists=True),
                    timeout=self.timeout,
                )
            except google_exceptions.NotFound:
                return StoreOutcome.NOT_FOUND
        return StoreOutcome.SUCCESS
