from typing import List, Optional

from tempero.core.store import EntityKind, MemoryStore
from tempero.logger_config import logger
from tempero.models import Supplier


def get_supplier_by_id(store: MemoryStore, supplier_id: str) -> Optional[Supplier]:
    """Get supplier by ID."""
    return store.get(EntityKind.suppliers, supplier_id)


def get_all_suppliers(store: MemoryStore, search: Optional[str] = None) -> List[Supplier]:
    """Get all suppliers, newest first, with optional search filtering."""
    suppliers = store.list(EntityKind.suppliers)

    if search and search.strip():
        term = search.strip().casefold()
        suppliers = [
            s for s in suppliers
            if term in s.name.casefold() or (s.category and term in s.category.casefold())
        ]

    return suppliers


def create_supplier(
    store: MemoryStore,
    name: str,
    phone: Optional[str] = None,
    category: Optional[str] = None,
) -> Supplier:
    """Create a new supplier."""
    name = name.strip()
    if not name:
        raise ValueError("Supplier name is required")

    supplier = store.create(
        EntityKind.suppliers,
        name=name,
        phone=phone or None,
        category=category or None,
    )
    logger.info(f"Supplier {supplier.id} ({supplier.name}) created")
    return supplier
