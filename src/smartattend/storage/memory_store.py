from __future__ import annotations

from typing import Any, Sequence

from ..core.constants import DEFAULT_STORAGE_NAMESPACE
from ..core.enums import Collection
from .repository import RecordStore, decode_collection, encode_collection, store_key


class InMemoryRecordStore(RecordStore):
    """Process-local store keeping serialized payloads.

    Payloads are stored as JSON text so readers get fresh copies and never
    alias the stored state.
    """

    def __init__(self, namespace: str = DEFAULT_STORAGE_NAMESPACE, *, raw: dict[str, str] | None = None):
        self._namespace = namespace
        self._raw: dict[str, str] = dict(raw or {})

    @property
    def raw(self) -> dict[str, str]:
        return self._raw

    def get(self, collection: Collection) -> list[dict[str, Any]]:
        key = store_key(self._namespace, collection)
        return decode_collection(self._raw.get(key), key=key)

    def put(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        self._raw[store_key(self._namespace, collection)] = encode_collection(items)
