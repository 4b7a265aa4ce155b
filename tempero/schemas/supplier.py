from pydantic import Field
from typing import Optional
from datetime import datetime

from tempero.schemas.base import CamelModel


class SupplierBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=30)
    category: Optional[str] = Field(None, max_length=100)


class SupplierCreate(SupplierBase):
    pass


class SupplierResponse(SupplierBase):
    id: str
    created_at: datetime
