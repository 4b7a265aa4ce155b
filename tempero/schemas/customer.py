from pydantic import Field
from typing import Optional
from datetime import datetime

from tempero.schemas.base import CamelModel, Money


class CustomerBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=30)


class CustomerCreate(CustomerBase):
    pass


class CustomerResponse(CustomerBase):
    id: str
    total_debt: Money
    created_at: datetime
