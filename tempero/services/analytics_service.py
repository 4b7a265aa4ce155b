from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from tempero.common.money import ZERO, money_sum, to_money
from tempero.core.store import EntityKind, MemoryStore
from tempero.logger_config import logger
from tempero.models import Customer, ExpenseCategory


class AnalyticsService:
    """
    Totals over the sales and expenses in the store.
    Nothing is cached; every call scans the current records.
    """
    def __init__(self, store: MemoryStore):
        self.store = store

    # ================= SALES ===================

    def total_sales(self) -> Decimal:
        return money_sum(s.amount for s in self.store.list(EntityKind.sales))

    def total_received(self) -> Decimal:
        return money_sum(s.paid_amount for s in self.store.list(EntityKind.sales))

    def total_pending(self) -> Decimal:
        return money_sum(s.amount - s.paid_amount for s in self.store.list(EntityKind.sales))

    # ================= EXPENSES ===================

    def total_expenses(self) -> Decimal:
        return money_sum(e.amount for e in self.store.list(EntityKind.expenses))

    def summary(self) -> Dict[str, Decimal]:
        """
        Dashboard figures. Net profit is cash received minus expenses,
        so credit still owed by customers does not count as profit.
        """
        with self.store.transaction():
            total_sales = self.total_sales()
            total_received = self.total_received()
            total_pending = self.total_pending()
            total_expenses = self.total_expenses()

        return {
            "total_sales": total_sales,
            "total_received": total_received,
            "total_pending": total_pending,
            "total_expenses": total_expenses,
            "net_profit": to_money(total_received - total_expenses),
        }

    def expenses_by_category(self) -> List[dict]:
        """
        Total per category for categories that have expenses, each with its
        share of all expenses in percent (one decimal place).
        """
        totals: Dict[ExpenseCategory, Decimal] = {}
        for expense in self.store.list(EntityKind.expenses):
            totals[expense.category] = totals.get(expense.category, ZERO) + expense.amount

        grand_total = money_sum(totals.values())
        logger.debug(f"Expenses by category over {len(totals)} categories, total {grand_total}")

        rows = []
        for category, total in totals.items():
            percentage = (total * 100 / grand_total) if grand_total > ZERO else ZERO
            rows.append({
                "category": category,
                "total": to_money(total),
                "percentage": percentage.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP),
            })
        return rows

    # ================= CUSTOMERS ===================

    def top_debtors(self, limit: int = 3) -> List[Customer]:
        """Customers that owe money, highest debt first."""
        debtors = [c for c in self.store.list(EntityKind.customers) if c.total_debt > ZERO]
        return debtors[:limit]
