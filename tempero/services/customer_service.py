from decimal import Decimal
from typing import List, Optional

from tempero.common.money import ZERO, to_money
from tempero.core.store import EntityKind, MemoryStore
from tempero.logger_config import logger
from tempero.models import Customer


def get_customer_by_id(store: MemoryStore, customer_id: str) -> Optional[Customer]:
    """Get customer by ID."""
    return store.get(EntityKind.customers, customer_id)


def get_customer_by_name(store: MemoryStore, name: str) -> Optional[Customer]:
    """
    Get customer by name (case-insensitive exact match).
    When several names collide, the one created first wins.
    """
    wanted = name.casefold()
    return store.first(EntityKind.customers, lambda c: c.name.casefold() == wanted)


def get_all_customers(
    store: MemoryStore,
    search: Optional[str] = None,
    with_debt: bool = False,
) -> List[Customer]:
    """Get all customers, highest debt first, with optional search filtering."""
    customers = store.list(EntityKind.customers)

    if with_debt:
        customers = [c for c in customers if c.total_debt > ZERO]

    if search and search.strip():
        term = search.strip().casefold()
        customers = [
            c for c in customers
            if term in c.name.casefold() or (c.phone and term in c.phone)
        ]

    return customers


def create_customer(store: MemoryStore, name: str, phone: Optional[str] = None) -> Customer:
    """Create a new customer with no debt."""
    name = name.strip()
    if not name:
        raise ValueError("Customer name is required")

    customer = store.create(EntityKind.customers, name=name, phone=phone or None, total_debt=ZERO)
    logger.info(f"Customer {customer.id} ({customer.name}) created")
    return customer


def set_customer_debt(store: MemoryStore, customer_id: str, debt: Decimal) -> bool:
    """Persist a new outstanding balance; unknown ids are ignored."""
    debt = to_money(debt)
    if not store.update(EntityKind.customers, customer_id, total_debt=debt):
        return False
    logger.info(f"Customer {customer_id} debt set to {debt}")
    return True
