from typing import List, Optional, Union

from tempero.common.errors import ValidationError
from tempero.common.money import ZERO, MoneyLike, to_money
from tempero.core.store import EntityKind, MemoryStore
from tempero.logger_config import logger
from tempero.models import Expense, ExpenseCategory, PaymentStatus


def get_expense_by_id(store: MemoryStore, expense_id: str) -> Optional[Expense]:
    """Get expense by ID."""
    return store.get(EntityKind.expenses, expense_id)


def get_all_expenses(
    store: MemoryStore,
    category: Optional[Union[ExpenseCategory, str]] = None,
    search: Optional[str] = None,
) -> List[Expense]:
    """List expenses newest first, with filters: category, search (description, supplier)."""
    if category is not None:
        expenses = get_expenses_by_category(store, category)
    else:
        expenses = store.list(EntityKind.expenses)

    if search and search.strip():
        term = search.strip().casefold()
        expenses = [
            e for e in expenses
            if term in e.description.casefold()
            or (e.supplier_name and term in e.supplier_name.casefold())
        ]

    return expenses


def get_expenses_by_category(
    store: MemoryStore, category: Union[ExpenseCategory, str]
) -> List[Expense]:
    """Expenses of one category, newest first."""
    category = ExpenseCategory(category)
    return store.find(EntityKind.expenses, lambda e: e.category == category)


def create_expense(
    store: MemoryStore,
    category: Union[ExpenseCategory, str],
    description: str,
    amount: MoneyLike,
    payment_status: Union[PaymentStatus, str] = PaymentStatus.pago,
    supplier_name: Optional[str] = None,
) -> Expense:
    """Create an expense. Expenses never touch any other record."""
    amount = to_money(amount)
    if amount <= ZERO:
        raise ValidationError("Amount must be greater than zero")
    if not description.strip():
        raise ValidationError("Description is required")

    expense = store.create(
        EntityKind.expenses,
        category=ExpenseCategory(category),
        description=description.strip(),
        amount=amount,
        payment_status=PaymentStatus(payment_status),
        supplier_name=(supplier_name or "").strip() or None,
        supplier_id=None,
    )
    logger.info(f"Expense {expense.id} created: {expense.category.value} {amount}")
    return expense
