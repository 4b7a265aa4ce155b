import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tempero.common.money import ZERO


class PaymentStatus(str, enum.Enum):
    pago = "pago"        # paid in full
    fiado = "fiado"      # on credit, nothing paid yet
    parcial = "parcial"  # partially paid

    @property
    def leaves_debt(self) -> bool:
        return self in (PaymentStatus.fiado, PaymentStatus.parcial)


@dataclass
class Sale:
    """
    One sale to a customer.

    customer_name is a snapshot of the name given when the sale was recorded.
    """
    id: str
    customer_id: Optional[str]
    customer_name: str
    description: str
    amount: Decimal
    created_at: datetime
    payment_status: PaymentStatus = PaymentStatus.pago
    paid_amount: Decimal = field(default=ZERO)

    @property
    def pending_amount(self) -> Decimal:
        return self.amount - self.paid_amount
