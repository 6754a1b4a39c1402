from __future__ import annotations

from typing import Any, Sequence

from ..core.constants import DEFAULT_STORAGE_NAMESPACE
from ..core.enums import Collection
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import RecordStore, decode_collection, encode_collection, store_key


class MySQLRecordStore(RecordStore):
    """One ``kv_collections`` row per namespaced collection key."""

    def __init__(self, conn_factory: DatabaseConnection, namespace: str = DEFAULT_STORAGE_NAMESPACE):
        self._conn_factory = conn_factory
        self._namespace = namespace

    def get(self, collection: Collection) -> list[dict[str, Any]]:
        key = store_key(self._namespace, collection)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payload
                FROM kv_collections
                WHERE store_key=%s
                """,
                (key,),
            )
            r = fetchone(cur)
        if not r:
            return []
        return decode_collection(r.get("payload"), key=key)

    def put(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        key = store_key(self._namespace, collection)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_collections(store_key, payload, version)
                VALUES(%s, %s, 1)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload), version=version+1
                """,
                (key, encode_collection(items)),
            )

    def version(self, collection: Collection) -> int:
        """Write counter of a collection, 0 when it was never written."""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT version FROM kv_collections WHERE store_key=%s",
                (store_key(self._namespace, collection),),
            )
            r = fetchone(cur)
        return int(r["version"]) if r else 0
