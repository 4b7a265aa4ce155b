from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Supplier:
    id: str
    name: str
    created_at: datetime
    phone: Optional[str] = None
    category: Optional[str] = None
