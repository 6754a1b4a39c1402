from __future__ import annotations

import uuid

import pytest

from smartattend.batches.repository import BatchRepository
from smartattend.batches.service import BatchService
from smartattend.core.exceptions import NotFoundError, ValidationError
from smartattend.storage.memory_store import InMemoryRecordStore


@pytest.fixture()
def service():
    return BatchService(BatchRepository(InMemoryRecordStore()))


def test_create_batch_assigns_uuid_and_timestamp(service):
    batch = service.create_batch("  CS 2024 - A ", "Morning Batch")

    assert uuid.UUID(batch.id)
    assert batch.name == "CS 2024 - A"
    assert batch.description == "Morning Batch"
    assert batch.created_at.endswith("Z")
    assert service.get_batch(batch.id) == batch


def test_batch_ids_are_unique(service):
    ids = {service.create_batch(f"Batch {i}").id for i in range(20)}
    assert len(ids) == 20


def test_create_batch_requires_name(service):
    with pytest.raises(ValidationError):
        service.create_batch("   ")


def test_list_batches_keeps_creation_order(service):
    service.create_batch("A")
    service.create_batch("B")

    assert [b.name for b in service.list_batches()] == ["A", "B"]


def test_get_unknown_batch(service):
    with pytest.raises(NotFoundError):
        service.get_batch("missing")


def test_seed_demo_batches_only_once(service):
    created = service.seed_demo_batches()

    assert [b.name for b in created] == ["Computer Science 2024 - A", "Business Admin 2024 - B"]
    assert service.seed_demo_batches() == []
    assert len(service.list_batches()) == 2


def test_batch_entries_without_id_are_skipped_on_read():
    store = InMemoryRecordStore(raw={"smartattend_batches": '[{"name": "broken"}, {"id": "b1", "name": "A"}]'})
    service = BatchService(BatchRepository(store))

    assert [b.id for b in service.list_batches()] == ["b1"]
    assert service.get_batch("b1").name == "A"
