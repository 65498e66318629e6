import threading
from datetime import datetime, timedelta, timezone

import pytest

from maintenance_tracker.core.exceptions import NotFoundError, ValidationError
from maintenance_tracker.models.maintenance_request import RequestStatus
from maintenance_tracker.services.request_store import (
    DEMO_REQUESTS,
    MaintenanceRequestStore,
    seed_demo_requests,
)


class FixedClock:
    """Clock returning a set time, advanced manually."""

    def __init__(self):
        self.now = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def clocked_store(clock):
    return MaintenanceRequestStore(clock=clock)


def test_create_assigns_increasing_ids(store):
    """Test that each create gets an id greater than all previous ones."""
    ids = [store.create(asset=f"Asset {n}", description="Check").id for n in range(5)]

    assert ids == [1, 2, 3, 4, 5]
    assert store.next_id == 6


def test_create_defaults_status(store):
    """Test that a missing or empty status becomes Pending."""
    assert store.create(asset="Boiler", description="Leaking").status == "Pending"
    assert store.create(asset="Boiler", description="Leaking", status="").status == "Pending"


def test_create_accepts_free_text_status(store):
    """Test that status is not restricted to the UI values."""
    request = store.create(asset="Boiler", description="Leaking", status="Waiting on parts")

    assert request.status == "Waiting on parts"


def test_create_sets_created_at(clocked_store, clock):
    request = clocked_store.create(asset="Boiler", description="Leaking")

    assert request.created_at == clock.now


def test_create_keeps_untrimmed_values(store):
    """Test that values are validated trimmed but stored as given."""
    request = store.create(asset="  Boiler ", description="Leaking\n")

    assert request.asset == "  Boiler "
    assert request.description == "Leaking\n"


@pytest.mark.parametrize("asset, description", [("", "Leaking"), ("Boiler", ""), ("  ", "Leaking"), ("Boiler", "\t")])
def test_create_rejects_empty_fields(store, asset, description):
    """Test that empty fields fail without consuming an id."""
    with pytest.raises(ValidationError, match="Asset and description are required"):
        store.create(asset=asset, description=description)

    assert len(store) == 0
    assert store.next_id == 1


def test_get(store, boiler_request):
    assert store.get(boiler_request.id) == boiler_request


def test_get_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        store.get(42)

    assert exc_info.value.request_id == 42
    assert exc_info.value.status_code == 404


def test_update_replaces_fields(store, boiler_request):
    updated = store.update(
        boiler_request.id, asset="Boiler 2", description="Pressure drop", status=RequestStatus.COMPLETED.value)

    assert updated.asset == "Boiler 2"
    assert updated.description == "Pressure drop"
    assert updated.status == "Completed"
    assert store.get(boiler_request.id) == updated


def test_update_preserves_id_and_created_at(clocked_store, clock):
    """Test that id and created_at are carried over from the stored record."""
    original = clocked_store.create(asset="Boiler", description="Leaking")
    clock.now += timedelta(hours=1)

    updated = clocked_store.update(original.id, asset="Boiler", description="Still leaking")

    assert updated.id == original.id
    assert updated.created_at == original.created_at


def test_update_empty_status_keeps_existing(store):
    request = store.create(asset="Boiler", description="Leaking", status="In Progress")

    assert store.update(request.id, asset="Boiler", description="Leaking", status="").status == "In Progress"
    assert store.update(request.id, asset="Boiler", description="Leaking").status == "In Progress"


def test_update_not_found(store):
    with pytest.raises(NotFoundError):
        store.update(7, asset="Boiler", description="Leaking")


def test_update_rejects_empty_fields(store, boiler_request):
    """Test that a rejected update leaves the record unchanged."""
    with pytest.raises(ValidationError):
        store.update(boiler_request.id, asset="Boiler", description=" ")

    assert store.get(boiler_request.id) == boiler_request


def test_update_unknown_id_checked_before_fields(store):
    """Test that an unknown id is reported even when the fields are also empty."""
    with pytest.raises(NotFoundError):
        store.update(7, asset="", description="")


def test_updated_record_is_new_object(store, boiler_request):
    """Test that earlier reads are not changed by a later update."""
    store.update(boiler_request.id, asset="Boiler", description="Fixed", status="Completed")

    assert boiler_request.description == "Leaking"
    assert boiler_request.status == "Pending"


def test_delete(store, boiler_request):
    store.delete(boiler_request.id)

    assert len(store) == 0
    with pytest.raises(NotFoundError):
        store.get(boiler_request.id)
    with pytest.raises(NotFoundError):
        store.delete(boiler_request.id)


def test_ids_never_reused(store):
    first = store.create(asset="Boiler", description="Leaking")
    store.delete(first.id)

    second = store.create(asset="Boiler", description="Leaking")

    assert second.id == first.id + 1


def test_list_newest_first(clocked_store, clock):
    for asset in ("Boiler", "Chiller", "Pump"):
        clocked_store.create(asset=asset, description="Check")
        clock.now += timedelta(minutes=5)

    requests = clocked_store.list()

    assert [r.asset for r in requests] == ["Pump", "Chiller", "Boiler"]
    assert all(a.created_at >= b.created_at for a, b in zip(requests, requests[1:]))


def test_list_ties_broken_by_id_descending(clocked_store):
    """Test that requests with identical timestamps are ordered by id descending."""
    for asset in ("Boiler", "Chiller", "Pump"):
        clocked_store.create(asset=asset, description="Check")

    assert [r.id for r in clocked_store.list()] == [3, 2, 1]


def test_list_orders_by_created_at_not_id(clocked_store, clock):
    """Test that a later-created request with an earlier timestamp sorts after."""
    clocked_store.create(asset="Boiler", description="Check")
    clock.now -= timedelta(days=1)
    clocked_store.create(asset="Chiller", description="Check")

    assert [r.asset for r in clocked_store.list()] == ["Boiler", "Chiller"]


def test_seed_demo_requests(store):
    created = seed_demo_requests(store)

    assert [r.id for r in created] == [1, 2]
    assert [r.asset for r in created] == [fields["asset"] for fields in DEMO_REQUESTS]
    assert "HVAC" in created[0].asset
    assert "Elevator" in created[1].asset
    assert len(store) == 2


def test_concurrent_creates_get_unique_ids(store):
    """Test that parallel writers and readers never lose or duplicate a create."""
    workers = 8
    per_worker = 50
    errors = []

    def writer(n):
        try:
            for i in range(per_worker):
                store.create(asset=f"Asset {n}-{i}", description="Check")
        except Exception as e:  # pragma: no cover - reported below
            errors.append(e)

    def reader():
        try:
            for _ in range(per_worker):
                listed = store.list()
                assert len({r.id for r in listed}) == len(listed)
        except Exception as e:  # pragma: no cover - reported below
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(workers)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    ids = sorted(r.id for r in store.list())
    assert ids == list(range(1, workers * per_worker + 1))
    assert store.next_id == workers * per_worker + 1
