from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tempero.common.money import ZERO


@dataclass
class Customer:
    """Restaurant customer; total_debt is the outstanding balance over all their sales."""
    id: str
    name: str
    created_at: datetime
    phone: Optional[str] = None
    total_debt: Decimal = field(default=ZERO)
