from decimal import Decimal
from pydantic import Field, field_validator, model_validator
from typing import Optional
from datetime import datetime

from tempero.models import PaymentStatus
from tempero.schemas.base import MONEY_DIGITS, CamelModel, Money, blank_to_none


class SaleCreate(CamelModel):
    customer_name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, max_digits=MONEY_DIGITS, decimal_places=2)
    payment_status: PaymentStatus = PaymentStatus.pago
    paid_amount: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2)

    @field_validator("paid_amount", mode="before")
    @classmethod
    def blank_paid_amount(cls, value):
        return blank_to_none(value)

    @model_validator(mode="after")
    def check_paid_amount(self):
        """A sale cannot be paid beyond its amount."""
        if self.paid_amount is not None and self.paid_amount > self.amount:
            raise ValueError("paidAmount cannot exceed amount")
        return self


class SalePaymentUpdate(CamelModel):
    """Amend a sale's payment; omitting paidAmount keeps the current one."""
    status: PaymentStatus
    paid_amount: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2)

    @field_validator("paid_amount", mode="before")
    @classmethod
    def blank_paid_amount(cls, value):
        return blank_to_none(value)


class SaleResponse(CamelModel):
    id: str
    customer_id: Optional[str] = None
    customer_name: str
    description: str
    amount: Money
    payment_status: PaymentStatus
    paid_amount: Money
    created_at: datetime
