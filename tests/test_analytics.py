from decimal import Decimal

from tempero.core.store import MemoryStore
from tempero.models import ExpenseCategory, PaymentStatus
from tempero.services.analytics_service import AnalyticsService
from tempero.services.expense_service import (
    create_expense,
    get_all_expenses,
    get_expenses_by_category,
)
from tempero.services.sale_service import create_sale, update_sale_payment_status


def test_sale_totals(store: MemoryStore):
    create_sale(store, "Maria", "Almoço", "50.00", PaymentStatus.pago, "50.00")
    create_sale(store, "João", "Jantar", "30.00", PaymentStatus.parcial, "10.00")
    analytics = AnalyticsService(store)

    assert analytics.total_sales() == Decimal("80.00")
    assert analytics.total_received() == Decimal("60.00")
    assert analytics.total_pending() == Decimal("20.00")


def test_totals_follow_amendments(store: MemoryStore):
    sale = create_sale(store, "Maria", "Almoço", "50.00", PaymentStatus.fiado)
    analytics = AnalyticsService(store)
    assert analytics.total_pending() == Decimal("50.00")

    update_sale_payment_status(store, sale.id, PaymentStatus.pago, "50.00")

    assert analytics.total_pending() == Decimal("0.00")
    assert analytics.total_received() == Decimal("50.00")


def test_summary_net_profit_uses_received_cash(store: MemoryStore):
    create_sale(store, "Maria", "Almoço", "100.00", PaymentStatus.parcial, "70.00")
    create_expense(store, ExpenseCategory.ingredientes, "Arroz e feijão", "45.50")

    summary = AnalyticsService(store).summary()

    assert summary == {
        "total_sales": Decimal("100.00"),
        "total_received": Decimal("70.00"),
        "total_pending": Decimal("30.00"),
        "total_expenses": Decimal("45.50"),
        "net_profit": Decimal("24.50"),
    }


def test_empty_store_totals_are_zero(store: MemoryStore):
    summary = AnalyticsService(store).summary()

    assert all(value == Decimal("0.00") for value in summary.values())
    assert AnalyticsService(store).expenses_by_category() == []


def test_decimal_sums_do_not_drift(store: MemoryStore):
    for _ in range(10):
        create_expense(store, ExpenseCategory.outros, "Troco", "0.10")

    assert str(AnalyticsService(store).total_expenses()) == "1.00"


def test_expenses_by_category_omits_empty_categories(store: MemoryStore):
    create_expense(store, ExpenseCategory.ingredientes, "Carne", "300.00")
    create_expense(store, ExpenseCategory.ingredientes, "Verduras", "100.00")
    create_expense(store, ExpenseCategory.aluguel, "Aluguel março", "600.00")

    rows = AnalyticsService(store).expenses_by_category()
    by_category = {row["category"]: row for row in rows}

    assert set(by_category) == {ExpenseCategory.ingredientes, ExpenseCategory.aluguel}
    assert ExpenseCategory.salarios not in by_category
    assert by_category[ExpenseCategory.ingredientes]["total"] == Decimal("400.00")
    assert by_category[ExpenseCategory.ingredientes]["percentage"] == Decimal("40.0")
    assert by_category[ExpenseCategory.aluguel]["percentage"] == Decimal("60.0")


def test_expenses_filtered_by_category_newest_first(store: MemoryStore):
    older = create_expense(store, ExpenseCategory.manutencao, "Geladeira", "250.00")
    create_expense(store, ExpenseCategory.salarios, "Cozinheiro", "1800.00")
    newer = create_expense(store, "manutencao", "Fogão", "90.00")

    expenses = get_expenses_by_category(store, ExpenseCategory.manutencao)

    assert [e.id for e in expenses] == [newer.id, older.id]
    assert get_expenses_by_category(store, ExpenseCategory.aluguel) == []


def test_expense_supplier_is_free_text(store: MemoryStore):
    expense = create_expense(
        store,
        ExpenseCategory.fornecedores,
        "Entrega de bebidas",
        "180.00",
        PaymentStatus.fiado,
        supplier_name="Distribuidora Sol",
    )

    assert expense.supplier_id is None
    assert expense.supplier_name == "Distribuidora Sol"
    assert [e.id for e in get_all_expenses(store, search="sol")] == [expense.id]


def test_top_debtors(store: MemoryStore):
    create_sale(store, "Ana", "Café", "5.00", PaymentStatus.fiado)
    create_sale(store, "Bruno", "Almoço", "70.00", PaymentStatus.fiado)
    create_sale(store, "Clara", "Jantar", "30.00", PaymentStatus.fiado)
    create_sale(store, "Davi", "Jantar", "30.00", PaymentStatus.pago, "30.00")

    analytics = AnalyticsService(store)

    assert [c.name for c in analytics.top_debtors()] == ["Bruno", "Clara", "Ana"]
    assert [c.name for c in analytics.top_debtors(limit=1)] == ["Bruno"]
