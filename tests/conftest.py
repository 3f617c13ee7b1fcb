"""Shared test fixtures for the check-in desk tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from adapters.output.storage.blob_repository import BlobCheckInRepository
from adapters.output.storage.memory_store import InMemoryBlobStore, InMemoryKeyValueStore
from adapters.output.storage.namespaced_kv_repository import NamespacedKVCheckInRepository
from app.domain.services.checkin_service import CheckInService


FIXED_NOW = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def kv_repository(kv_store):
    return NamespacedKVCheckInRepository(kv_store)


@pytest.fixture
def blob_repository(blob_store):
    return BlobCheckInRepository(blob_store)


@pytest.fixture(params=["kv", "blob"])
def repository(request, kv_repository, blob_repository):
    """Both persistence variants behind the same contract."""
    return kv_repository if request.param == "kv" else blob_repository


@pytest.fixture
def service(repository):
    return CheckInService(repository)


@pytest.fixture
def failing_kv_store():
    store = AsyncMock()
    store.set = AsyncMock(side_effect=ConnectionError("storage unavailable"))
    store.get = AsyncMock(side_effect=ConnectionError("storage unavailable"))
    store.list = AsyncMock(side_effect=ConnectionError("storage unavailable"))
    return store


@pytest.fixture
def failing_blob_store():
    store = MagicMock()
    store.get_item = MagicMock(return_value=None)
    store.set_item = MagicMock(side_effect=OSError("quota exceeded"))
    return store


@pytest.fixture
def john_smith():
    return {
        "guestName": "John Smith",
        "roomNumber": "101",
        "checkInDate": "2024-03-01",
        "checkOutDate": "",
        "notes": "",
    }
