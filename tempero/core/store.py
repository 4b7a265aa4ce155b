"""
In-memory record store.

Holds the four entity collections (customers, suppliers, sales, expenses)
keyed by generated uuid4 ids. One instance is created per application and
handed to the services; tests build their own.

Every method runs under a single re-entrant lock. Services that read, compute
and write back (the ledger) wrap the whole sequence in ``transaction()`` so
two requests never interleave on the same customer balance.
"""

import enum
import threading
import uuid
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, Iterator, List, Optional

from tempero.logger_config import logger
from tempero.models import Customer, Expense, Sale, Supplier


class EntityKind(str, enum.Enum):
    customers = "customers"
    suppliers = "suppliers"
    sales = "sales"
    expenses = "expenses"


ENTITY_TYPES = {
    EntityKind.customers: Customer,
    EntityKind.suppliers: Supplier,
    EntityKind.sales: Sale,
    EntityKind.expenses: Expense,
}

# Fields that may change after creation, per kind
UPDATABLE_FIELDS = {
    EntityKind.customers: frozenset({"total_debt"}),
    EntityKind.suppliers: frozenset(),
    EntityKind.sales: frozenset({"payment_status", "paid_amount"}),
    EntityKind.expenses: frozenset(),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class MemoryStore:
    """Keyed collections for customers, suppliers, sales and expenses."""

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.clock = clock or _utcnow
        self.id_factory = id_factory or _new_id
        self._lock = threading.RLock()
        self._collections: Dict[EntityKind, dict] = {kind: {} for kind in EntityKind}

    @contextmanager
    def transaction(self) -> Iterator["MemoryStore"]:
        """Hold the store lock for a multi-step read-modify-write."""
        with self._lock:
            yield self

    # ================= READ ===================

    def list(self, kind: EntityKind) -> List:
        """All entries of a kind: customers by debt desc, the rest newest first."""
        kind = EntityKind(kind)
        with self._lock:
            entries = [replace(entry) for entry in self._collections[kind].values()]

        if kind is EntityKind.customers:
            return sorted(entries, key=lambda c: c.total_debt, reverse=True)

        # reversed() so that equal timestamps keep the latest insert first
        return sorted(reversed(entries), key=lambda e: e.created_at, reverse=True)

    def get(self, kind: EntityKind, entity_id) -> Optional[object]:
        """Single entry by id, or None. Unknown or malformed ids are just absent."""
        kind = EntityKind(kind)
        with self._lock:
            entry = self._collections[kind].get(entity_id) if isinstance(entity_id, str) else None
            return replace(entry) if entry is not None else None

    def find(self, kind: EntityKind, predicate: Callable[[object], bool]) -> List:
        """Entries of a kind matching predicate, in the same order as list()."""
        return [entry for entry in self.list(kind) if predicate(entry)]

    def first(self, kind: EntityKind, predicate: Callable[[object], bool]) -> Optional[object]:
        """Earliest created entry matching predicate, or None."""
        kind = EntityKind(kind)
        with self._lock:
            for entry in self._collections[kind].values():
                if predicate(entry):
                    return replace(entry)
        return None

    def count(self, kind: EntityKind) -> int:
        with self._lock:
            return len(self._collections[EntityKind(kind)])

    # ================= WRITE ===================

    def create(self, kind: EntityKind, **fields):
        """Store a new entry with a fresh id and created_at stamp."""
        kind = EntityKind(kind)
        if "id" in fields or "created_at" in fields:
            raise ValueError("id and created_at are assigned by the store")

        with self._lock:
            entity_id = self.id_factory()
            while entity_id in self._collections[kind]:
                entity_id = self.id_factory()

            entry = ENTITY_TYPES[kind](id=entity_id, created_at=self.clock(), **fields)
            self._collections[kind][entity_id] = entry
            logger.debug(f"Stored {kind.value} {entity_id}")
            return replace(entry)

    def update(self, kind: EntityKind, entity_id: str, **fields) -> bool:
        """
        Change mutable fields of an existing entry in place.
        Does nothing when the id is unknown; returns whether anything changed.
        """
        kind = EntityKind(kind)
        not_allowed = set(fields) - UPDATABLE_FIELDS[kind]
        if not_allowed:
            raise ValueError(f"Cannot update {', '.join(sorted(not_allowed))} on {kind.value}")

        with self._lock:
            entry = self._collections[kind].get(entity_id)
            if entry is None:
                logger.debug(f"Update skipped, {kind.value} {entity_id} not found")
                return False
            for name, value in fields.items():
                setattr(entry, name, value)
            return True
