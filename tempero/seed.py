"""
Demo data for the dashboard.

Everything goes through the services, so seeded customer debts follow the
same ledger rules as real sales.
"""

import random
from decimal import Decimal
from typing import Optional

from faker import Faker

from tempero.core.store import EntityKind, MemoryStore
from tempero.logger_config import logger
from tempero.models import ExpenseCategory, PaymentStatus
from tempero.services.expense_service import create_expense
from tempero.services.sale_service import create_sale, update_sale_payment_status
from tempero.services.supplier_service import create_supplier

DISHES = [
    "Prato feito", "Feijoada", "Marmitex", "Moqueca", "Picanha na chapa",
    "Frango grelhado", "Parmegiana", "Suco natural", "Sobremesa do dia",
]

SUPPLIER_CATEGORIES = ["Carnes", "Hortifruti", "Bebidas", "Laticínios", "Limpeza"]


def _money(rng: random.Random, low: int, high: int) -> Decimal:
    cents = rng.randint(low * 100, high * 100)
    return Decimal(cents) / 100


def seed_store(
    store: MemoryStore,
    customers: int = 8,
    suppliers: int = 5,
    sales: int = 30,
    expenses: int = 20,
    seed: Optional[int] = None,
) -> dict:
    """Fill a store with fake suppliers, expenses and sales. Returns the record counts in the store."""
    fake = Faker("pt_BR")
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)

    supplier_names = []
    for _ in range(suppliers):
        supplier = create_supplier(
            store,
            name=fake.company(),
            phone=fake.phone_number(),
            category=rng.choice(SUPPLIER_CATEGORIES),
        )
        supplier_names.append(supplier.name)

    categories = list(ExpenseCategory)
    for _ in range(expenses):
        category = rng.choice(categories)
        create_expense(
            store,
            category=category,
            description=fake.sentence(nb_words=4).rstrip("."),
            amount=_money(rng, 20, 800),
            payment_status=rng.choice([PaymentStatus.pago, PaymentStatus.fiado]),
            supplier_name=(
                rng.choice(supplier_names)
                if supplier_names and category is ExpenseCategory.fornecedores
                else None
            ),
        )

    customer_names = [fake.first_name() for _ in range(max(customers, 1))]
    for _ in range(sales):
        amount = _money(rng, 15, 250)
        status = rng.choice(list(PaymentStatus))
        if status is PaymentStatus.pago:
            paid = amount
        elif status is PaymentStatus.parcial:
            paid = (amount * Decimal(rng.randint(10, 90)) / 100).quantize(Decimal("0.01"))
        else:
            paid = Decimal("0")

        sale = create_sale(
            store,
            customer_name=rng.choice(customer_names),
            description=rng.choice(DISHES),
            amount=amount,
            payment_status=status,
            paid_amount=paid,
        )

        # some credit sales get settled later
        if status is not PaymentStatus.pago and rng.random() < 0.2:
            update_sale_payment_status(store, sale.id, PaymentStatus.pago, amount)

    counts = {kind.value: store.count(kind) for kind in EntityKind}
    logger.info(f"Seeded demo data: {counts}")
    return counts
