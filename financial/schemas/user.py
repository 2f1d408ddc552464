from typing import List, Optional

from financial.schemas.base import CamelModel


class UserIn(CamelModel):
    name: Optional[str] = None
    age: int


class UserSimpleOut(CamelModel):
    id: int
    name: str
    age: int


class UserOut(UserSimpleOut):
    transactions: List[dict] = []
