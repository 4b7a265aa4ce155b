import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tempero.models.sale import PaymentStatus


class ExpenseCategory(str, enum.Enum):
    """Fixed expense categories of the restaurant."""
    ingredientes = "ingredientes"
    fornecedores = "fornecedores"
    agua_luz_gas = "agua_luz_gas"
    salarios = "salarios"
    aluguel = "aluguel"
    manutencao = "manutencao"
    outros = "outros"


@dataclass
class Expense:
    id: str
    category: ExpenseCategory
    description: str
    amount: Decimal
    created_at: datetime
    payment_status: PaymentStatus = PaymentStatus.pago
    supplier_name: Optional[str] = None
    # never populated; expenses point at suppliers by free-text name only
    supplier_id: Optional[str] = None
