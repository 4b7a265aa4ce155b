"""
Sales and the customer ledger.

A customer's total_debt is only ever changed here. Creating a sale adds its
pending amount to the customer's debt; amending the payment swaps the sale's
old pending amount for the new one. Both run inside one store transaction.
"""

from decimal import Decimal
from typing import List, Optional, Union

from tempero.common.errors import NotFoundError, ValidationError
from tempero.common.money import ZERO, MoneyLike, optional_money, to_money
from tempero.core.store import EntityKind, MemoryStore
from tempero.logger_config import logger
from tempero.models import PaymentStatus, Sale
from tempero.services.customer_service import (
    create_customer,
    get_customer_by_id,
    get_customer_by_name,
    set_customer_debt,
)


def _check_amounts(amount: Decimal, paid_amount: Decimal) -> None:
    if amount <= ZERO:
        raise ValidationError("Amount must be greater than zero")
    if paid_amount < ZERO:
        raise ValidationError("Paid amount cannot be negative")
    if paid_amount > amount:
        raise ValidationError("Paid amount cannot exceed the sale amount")


def get_sale_by_id(store: MemoryStore, sale_id: str) -> Optional[Sale]:
    """Get sale by ID."""
    return store.get(EntityKind.sales, sale_id)


def get_all_sales(store: MemoryStore, search: Optional[str] = None) -> List[Sale]:
    """Get all sales, newest first; search matches customer name or description."""
    sales = store.list(EntityKind.sales)

    if search and search.strip():
        term = search.strip().casefold()
        sales = [
            s for s in sales
            if term in s.customer_name.casefold() or term in s.description.casefold()
        ]

    return sales


def get_sales_by_customer(store: MemoryStore, customer_id: str) -> List[Sale]:
    """Sales bound to one customer, newest first."""
    return store.find(EntityKind.sales, lambda s: s.customer_id == customer_id)


def create_sale(
    store: MemoryStore,
    customer_name: str,
    description: str,
    amount: MoneyLike,
    payment_status: Union[PaymentStatus, str],
    paid_amount: Optional[MoneyLike] = None,
) -> Sale:
    """
    Record a sale, resolving the customer by name (case-insensitive) and
    creating it when unseen. Unpaid and partially paid sales add their
    pending amount to the customer's debt.
    """
    status = PaymentStatus(payment_status)
    amount = to_money(amount)
    paid = optional_money(paid_amount)
    if paid is None:
        paid = ZERO
    _check_amounts(amount, paid)

    customer_name = customer_name.strip()
    if not customer_name:
        raise ValidationError("Customer name is required")
    if not description.strip():
        raise ValidationError("Description is required")

    with store.transaction():
        customer = get_customer_by_name(store, customer_name)
        if customer is None:
            customer = create_customer(store, name=customer_name, phone=None)

        sale = store.create(
            EntityKind.sales,
            customer_id=customer.id,
            customer_name=customer_name,
            description=description.strip(),
            amount=amount,
            payment_status=status,
            paid_amount=paid,
        )

        # pago is taken as settled; the paid amount is not cross-checked
        if status.leaves_debt:
            pending = amount - paid
            set_customer_debt(store, customer.id, customer.total_debt + pending)

    logger.info(
        f"Sale {sale.id} created for customer {customer.id}: "
        f"amount={amount} paid={paid} status={status.value}"
    )
    return sale


def update_sale_payment_status(
    store: MemoryStore,
    sale_id: str,
    status: Union[PaymentStatus, str],
    paid_amount: Optional[MoneyLike] = None,
) -> Sale:
    """
    Amend a sale's payment status and paid amount.

    The customer's debt is moved by the change in this sale's pending amount
    (old pending out, new pending in) and clamped at zero. Omitting
    paid_amount keeps the current one. Raises NotFoundError for unknown ids.
    """
    status = PaymentStatus(status)
    new_paid = optional_money(paid_amount)

    with store.transaction():
        sale = get_sale_by_id(store, sale_id)
        if sale is None:
            logger.warning(f"Payment update for unknown sale {sale_id}")
            raise NotFoundError("Sale", sale_id)

        old_paid = sale.paid_amount
        if new_paid is None:
            new_paid = old_paid
        _check_amounts(sale.amount, new_paid)

        store.update(EntityKind.sales, sale.id, payment_status=status, paid_amount=new_paid)

        if sale.customer_id:
            customer = get_customer_by_id(store, sale.customer_id)
            if customer is not None:
                old_pending = sale.amount - old_paid
                new_pending = sale.amount - new_paid
                new_debt = max(ZERO, customer.total_debt - old_pending + new_pending)
                set_customer_debt(store, customer.id, new_debt)

        updated = get_sale_by_id(store, sale.id)

    logger.info(
        f"Sale {sale_id} payment updated: status={status.value} paid {old_paid} -> {new_paid}"
    )
    return updated
