from typing import List, Optional

from pydantic import Field

from financial.schemas.base import CamelModel


class CategoryIn(CamelModel):
    # Left loose on purpose: length rules are reported by financial.validators
    description: Optional[str] = None
    finality: str = Field(..., description="income | expense | both")


class CategorySimpleOut(CamelModel):
    id: int
    description: str
    finality: str


class CategoryOut(CategorySimpleOut):
    transactions: List[dict] = []
