from .memory_store import InMemoryRecordStore
from .repository import RecordStore, decode_collection, store_key

__all__ = ["InMemoryRecordStore", "RecordStore", "decode_collection", "store_key"]
