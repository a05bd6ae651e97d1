from __future__ import annotations

import re
import threading
from datetime import datetime, timezone

import pytest

from luxebite.store import DocumentNotFound, InMemoryDocumentStore
from luxebite.store.references import reference_number


def test_add_and_get_round_trip():
    store = InMemoryDocumentStore()
    doc_id = store.add("orders", {"total": 10})
    assert store.get("orders", doc_id) == {"total": 10, "id": doc_id}


def test_get_missing_is_none():
    assert InMemoryDocumentStore().get("orders", "nope") is None


def test_documents_are_copied():
    store = InMemoryDocumentStore()
    data = {"total": 10}
    doc_id = store.add("orders", data)
    data["total"] = 99
    store.get("orders", doc_id)["total"] = 42
    assert store.get("orders", doc_id)["total"] == 10


def test_nested_values_are_not_shared():
    store = InMemoryDocumentStore()
    data = {"items": [{"quantity": 1}]}
    doc_id = store.add("orders", data)

    data["items"][0]["quantity"] = 99
    store.get("orders", doc_id)["items"][0]["quantity"] = 42
    store.list("orders")[0]["items"].append({"quantity": 7})

    assert store.get("orders", doc_id)["items"] == [{"quantity": 1}]


def test_update_copies_nested_fields():
    store = InMemoryDocumentStore()
    doc_id = store.add("orders", {"items": []})
    items = [{"quantity": 2}]
    store.update("orders", doc_id, {"items": items})
    items[0]["quantity"] = 99
    assert store.get("orders", doc_id)["items"] == [{"quantity": 2}]


def test_update_merges_fields():
    store = InMemoryDocumentStore()
    doc_id = store.add("orders", {"status": "pending", "total": 10})
    store.update("orders", doc_id, {"status": "ready"})
    assert store.get("orders", doc_id) == {"status": "ready", "total": 10, "id": doc_id}


def test_update_missing_raises():
    with pytest.raises(DocumentNotFound):
        InMemoryDocumentStore().update("orders", "nope", {"status": "ready"})


def test_collections_are_separate():
    store = InMemoryDocumentStore()
    store.add("orders", {"n": 1})
    assert store.list("reservations") == []
    assert len(store.list("orders")) == 1


def test_clear():
    store = InMemoryDocumentStore()
    store.add("orders", {"n": 1})
    store.clear()
    assert store.list("orders") == []


# ── Subscriptions ────────────────────────────────────────────────────────


def test_subscriber_receives_snapshots():
    store = InMemoryDocumentStore()
    snapshots = []
    store.subscribe("orders", snapshots.append)
    doc_id = store.add("orders", {"status": "pending"})
    store.update("orders", doc_id, {"status": "ready"})
    assert len(snapshots) == 2
    assert snapshots[-1][0]["status"] == "ready"


def test_subscriber_only_sees_its_collection():
    store = InMemoryDocumentStore()
    snapshots = []
    store.subscribe("reservations", snapshots.append)
    store.add("orders", {"n": 1})
    assert snapshots == []


def test_unsubscribe_stops_notifications():
    store = InMemoryDocumentStore()
    snapshots = []
    unsubscribe = store.subscribe("orders", snapshots.append)
    store.add("orders", {"n": 1})
    unsubscribe()
    store.add("orders", {"n": 2})
    assert len(snapshots) == 1


def test_failing_listener_does_not_break_write():
    store = InMemoryDocumentStore()

    def broken(_docs):
        raise RuntimeError("listener crashed")

    store.subscribe("orders", broken)
    doc_id = store.add("orders", {"n": 1})
    assert store.get("orders", doc_id) is not None


def test_snapshots_do_not_share_nested_state():
    store = InMemoryDocumentStore()
    snapshots = []
    store.subscribe("orders", snapshots.append)
    store.subscribe("orders", lambda docs: docs[0]["items"].clear())
    doc_id = store.add("orders", {"items": [{"quantity": 1}]})

    assert snapshots[0][0]["items"] == [{"quantity": 1}]
    assert store.get("orders", doc_id)["items"] == [{"quantity": 1}]


def test_snapshot_reflects_the_write_that_triggered_it():
    store = InMemoryDocumentStore()
    doc_id = store.add("orders", {"status": "pending"})
    seen = []

    def advance(docs):
        seen.append(docs[0]["status"])
        if docs[0]["status"] == "confirmed":
            store.update("orders", doc_id, {"status": "preparing"})

    store.subscribe("orders", advance)
    store.update("orders", doc_id, {"status": "confirmed"})

    # The write made from inside the listener is delivered after the one
    # that triggered it, so the last snapshot is the current state.
    assert seen == ["confirmed", "preparing"]
    assert store.get("orders", doc_id)["status"] == "preparing"


def test_writes_from_many_threads_end_on_current_state():
    store = InMemoryDocumentStore()
    doc_id = store.add("orders", {"n": 0})
    last = []
    store.subscribe("orders", lambda docs: last.append(docs[0]["n"]))

    def bump(value):
        store.update("orders", doc_id, {"n": value})

    threads = [threading.Thread(target=bump, args=(i,)) for i in range(1, 21)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(last) == 20
    assert last[-1] == store.get("orders", doc_id)["n"]


# ── Reference numbers ────────────────────────────────────────────────────


def test_reference_number_format():
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    ref = reference_number("ORD", now)
    assert re.fullmatch(r"ORD-\d{9}", ref)
    assert ref[4:10] == str(int(now.timestamp() * 1000))[-6:]
