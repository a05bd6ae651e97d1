from __future__ import annotations

import copy
import logging
import threading
import uuid
from collections import defaultdict, deque
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Document = dict[str, Any]
Listener = Callable[[list[Document]], None]


class DocumentNotFound(LookupError):
    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"{collection}/{doc_id} does not exist")
        self.collection = collection
        self.doc_id = doc_id


class InMemoryDocumentStore:
    """Collections of JSON-like documents keyed by generated ids.

    Stands in for the hosted document database. Documents are deep-copied on
    the way in and on the way out, so callers never share state with the
    store, nested lists and dicts included.

    Listeners registered with :meth:`subscribe` receive a full snapshot of
    the collection after every write to it. Snapshots are taken under the
    write lock and queued; whichever caller finds the queue idle drains it,
    so listeners see snapshots in the order the writes were applied, even
    when a listener writes back to the store.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._collections: dict[str, dict[str, Document]] = defaultdict(dict)
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._outbox: deque[tuple[str, list[Listener], list[Document]]] = deque()
        self._draining = False

    def add(self, collection: str, data: Document) -> str:
        doc_id = uuid.uuid4().hex
        with self._lock:
            self._collections[collection][doc_id] = {**copy.deepcopy(data), "id": doc_id}
            self._enqueue(collection)
        self._drain()
        return doc_id

    def get(self, collection: str, doc_id: str) -> Document | None:
        with self._lock:
            doc = self._collections[collection].get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def update(self, collection: str, doc_id: str, fields: Document) -> None:
        with self._lock:
            doc = self._collections[collection].get(doc_id)
            if doc is None:
                raise DocumentNotFound(collection, doc_id)
            doc.update(copy.deepcopy(fields))
            self._enqueue(collection)
        self._drain()

    def list(self, collection: str) -> list[Document]:
        with self._lock:
            return copy.deepcopy(list(self._collections[collection].values()))

    def subscribe(self, collection: str, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable removes it again."""
        with self._lock:
            self._listeners[collection].append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners[collection]:
                    self._listeners[collection].remove(listener)

        return unsubscribe

    def clear(self) -> None:
        with self._lock:
            self._collections.clear()

    def _enqueue(self, collection: str) -> None:
        # Caller holds self._lock.
        listeners = list(self._listeners[collection])
        if listeners:
            snapshot = copy.deepcopy(list(self._collections[collection].values()))
            self._outbox.append((collection, listeners, snapshot))

    def _drain(self) -> None:
        with self._lock:
            if self._draining:
                return
            self._draining = True
        while True:
            with self._lock:
                if not self._outbox:
                    self._draining = False
                    return
                collection, listeners, snapshot = self._outbox.popleft()
            for listener in listeners:
                try:
                    listener(copy.deepcopy(snapshot))
                except Exception:
                    logger.warning("Listener on %s failed", collection, exc_info=True)
