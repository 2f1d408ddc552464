from decimal import Decimal
from typing import Optional

from pydantic import Field

from financial.schemas.base import CamelModel
from financial.schemas.category import CategorySimpleOut
from financial.schemas.user import UserSimpleOut


class TransactionIn(CamelModel):
    description: Optional[str] = None
    value: Decimal
    type: str = Field(..., description="income | expense")
    category_id: int
    user_id: int


class TransactionOut(CamelModel):
    id: int
    description: str
    value: float
    type: str
    date: Optional[str] = None  # dd/mm/yyyy of created_at
    category: Optional[CategorySimpleOut] = None
    user: Optional[UserSimpleOut] = None
