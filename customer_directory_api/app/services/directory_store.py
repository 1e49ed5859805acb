"""
In‑memory directory of customer records.

``DirectoryStore`` owns the mapping from customer id to record.  One
store is created per application (see ``main.create_app``) and handed
to the request handlers through a FastAPI dependency; nothing else
reaches into it.

Requests may be served from the event loop and from worker threads at
the same time, so every operation runs under a single
``threading.RLock``.  Stored records are frozen ``CustomerRead``
instances: an update builds a new record and swaps it in while holding
the lock, so readers only ever see the old record or the new one.
Because all operations on an id go through the same lock they behave
as if executed one after another; in particular a delete can never be
undone by an update that lost the race.

Records are kept in a plain ``dict``, which preserves insertion order
for ``list_all``.  Updating a record keeps its original position.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable, Dict, List, Optional

from customer_directory_api.app.core.errors import CustomerConflictError, CustomerNotFoundError
from customer_directory_api.app.schemas.customer import CustomerCreate, CustomerRead
from customer_directory_api.app.services.validation import normalize_customer_id


logger = logging.getLogger(__name__)


def _random_id() -> str:
    return str(uuid.uuid4())


class DirectoryStore:
    """Concurrency‑safe keyed collection of customer records."""

    # How many times ``create`` draws a new id after a collision before
    # giving up.  With uuid4 a single collision is already unrealistic.
    max_id_attempts: int = 5

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self._records: Dict[str, CustomerRead] = {}
        self._lock = threading.RLock()
        self._id_factory = id_factory or _random_id

    def create(self, fields: CustomerCreate) -> CustomerRead:
        """Insert a new record under a freshly generated id.

        Generating the id, checking it against live records and
        inserting happen under one lock acquisition, so two concurrent
        creates can never end up with the same id.  A colliding id is
        regenerated, never overwritten.
        """
        with self._lock:
            customer_id = self._allocate_id()
            record = CustomerRead(
                id=customer_id,
                name=fields.name,
                email=fields.email,
                telephone=fields.telephone,
            )
            self._records[customer_id] = record
        logger.info("Created customer %s", customer_id)
        return record

    def list_all(self) -> List[CustomerRead]:
        """Return every live record in insertion order."""
        with self._lock:
            return list(self._records.values())

    def get(self, customer_id: str) -> CustomerRead:
        """Return the record with ``customer_id``.

        Raises ``CustomerNotFoundError`` for unknown or malformed ids.
        """
        key = self._key(customer_id)
        with self._lock:
            record = self._records.get(key) if key else None
        if record is None:
            logger.debug("Customer %s not found", customer_id)
            raise CustomerNotFoundError()
        return record

    def update(self, customer_id: str, fields: CustomerCreate) -> CustomerRead:
        """Replace name, email and telephone of an existing record.

        The id never changes.  Raises ``CustomerNotFoundError`` when no
        live record has ``customer_id``.
        """
        key = self._key(customer_id)
        with self._lock:
            if key is None or key not in self._records:
                logger.debug("Customer %s not found for update", customer_id)
                raise CustomerNotFoundError()
            record = CustomerRead(
                id=key,
                name=fields.name,
                email=fields.email,
                telephone=fields.telephone,
            )
            self._records[key] = record
        logger.info("Updated customer %s", key)
        return record

    def delete(self, customer_id: str) -> None:
        """Remove the record with ``customer_id``.

        Deleting is not idempotent: once a record is gone, deleting it
        again raises ``CustomerNotFoundError``.
        """
        key = self._key(customer_id)
        with self._lock:
            removed = self._records.pop(key, None) if key else None
        if removed is None:
            logger.debug("Customer %s not found for delete", customer_id)
            raise CustomerNotFoundError()
        logger.info("Deleted customer %s", key)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        """Drop every record."""
        with self._lock:
            self._records.clear()
        logger.info("Cleared customer directory")

    def _allocate_id(self) -> str:
        # Caller holds the lock.
        for _ in range(self.max_id_attempts):
            candidate = normalize_customer_id(self._id_factory())
            if candidate is not None and candidate not in self._records:
                return candidate
            logger.warning("Discarded unusable customer id %r; regenerating", candidate)
        raise CustomerConflictError()

    @staticmethod
    def _key(customer_id: str) -> Optional[str]:
        return normalize_customer_id(customer_id)
