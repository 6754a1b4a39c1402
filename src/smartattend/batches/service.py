from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import utc_now_iso
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEMO_BATCHES
from ..core.exceptions import NotFoundError
from .model import Batch
from .repository import BatchRepository

logger = logging.getLogger(__name__)


class BatchService:
    def __init__(self, batches: BatchRepository):
        self._batches = batches

    def create_batch(self, name: str, description: Optional[str] = None) -> Batch:
        batch = Batch(
            id=str(uuid.uuid4()),
            name=require_non_empty(name, "Batch name"),
            created_at=utc_now_iso(),
            description=optional_text(description),
        )
        self._batches.add(batch)
        logger.info("Created batch %s (%s)", batch.id, batch.name)
        return batch

    def list_batches(self) -> Sequence[Batch]:
        return self._batches.list_all()

    def get_batch(self, batch_id: str) -> Batch:
        batch = self._batches.get_by_id(batch_id)
        if not batch:
            raise NotFoundError(f"Batch {batch_id} not found")
        return batch

    def seed_demo_batches(self) -> list[Batch]:
        """Create the demo batches, only when no batch exists yet."""

        if self._batches.list_all():
            return []
        return [self.create_batch(name, description) for name, description in DEMO_BATCHES]
