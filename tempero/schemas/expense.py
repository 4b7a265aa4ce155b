from decimal import Decimal
from pydantic import Field
from typing import Optional
from datetime import datetime

from tempero.models import ExpenseCategory, PaymentStatus
from tempero.schemas.base import MONEY_DIGITS, CamelModel, Money


class ExpenseCreate(CamelModel):
    category: ExpenseCategory
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, max_digits=MONEY_DIGITS, decimal_places=2)
    payment_status: PaymentStatus = PaymentStatus.pago
    supplier_name: Optional[str] = Field(None, max_length=255)


class ExpenseResponse(CamelModel):
    id: str
    supplier_id: Optional[str] = None
    supplier_name: Optional[str] = None
    category: ExpenseCategory
    description: str
    amount: Money
    payment_status: PaymentStatus
    created_at: datetime
