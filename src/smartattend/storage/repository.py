from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol, Sequence

from ..core.enums import Collection

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Key-value persistence for the three logical collections.

    Every call reads or writes a whole collection. ``put`` replaces the
    stored collection, it never appends.
    """

    def get(self, collection: Collection) -> list[dict[str, Any]]:
        raise NotImplementedError

    def put(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        raise NotImplementedError


def store_key(namespace: str, collection: Collection) -> str:
    return f"{namespace}_{collection.value}"


def encode_collection(items: Sequence[dict[str, Any]]) -> str:
    return json.dumps(list(items), ensure_ascii=False)


def decode_collection(payload: Optional[str], *, key: str = "") -> list[dict[str, Any]]:
    """Tolerant read: absent, empty or corrupt payloads decode to ``[]``."""

    if not payload:
        return []
    try:
        data = json.loads(payload)
    except (TypeError, ValueError):
        logger.warning("Corrupt payload for %s, reading as empty", key or "collection")
        return []
    if not isinstance(data, list):
        logger.warning("Payload for %s is not a list, reading as empty", key or "collection")
        return []
    return [item for item in data if isinstance(item, dict)]
