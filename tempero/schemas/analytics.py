from tempero.models import ExpenseCategory
from tempero.schemas.base import CamelModel, Money


class AnalyticsSummaryResponse(CamelModel):
    total_sales: Money
    total_received: Money
    total_pending: Money
    total_expenses: Money
    net_profit: Money


class ExpenseCategoryTotal(CamelModel):
    category: ExpenseCategory
    total: Money
    # share of all expenses, in percent
    percentage: float
