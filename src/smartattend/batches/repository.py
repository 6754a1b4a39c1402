from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from ..core.enums import Collection
from ..storage.repository import RecordStore
from .model import Batch

logger = logging.getLogger(__name__)


class BatchRepository:
    def __init__(self, store: RecordStore):
        self._store = store
        self._write_lock = threading.Lock()

    def list_all(self) -> Sequence[Batch]:
        batches = []
        for d in self._store.get(Collection.BATCHES):
            try:
                batches.append(Batch.from_dict(d))
            except (KeyError, ValueError, TypeError):
                logger.warning("Skipping malformed batch entry %r", d.get("name"))
        return batches

    def get_by_id(self, batch_id: str) -> Optional[Batch]:
        for batch in self.list_all():
            if batch.id == batch_id:
                return batch
        return None

    def add(self, batch: Batch) -> None:
        with self._write_lock:
            items = self._store.get(Collection.BATCHES)
            items.append(batch.to_dict())
            self._store.put(Collection.BATCHES, items)
