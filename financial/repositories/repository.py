"""Generic persistence gateway over one mapped entity class."""

from __future__ import annotations

from typing import Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import and_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from financial.db import Base

ModelT = TypeVar("ModelT", bound=Base)

Conditions = Sequence[ColumnElement[bool]]


class Repository(Generic[ModelT]):
    """CRUD for ``model``; writes stay pending until the unit of work commits."""

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def _select(self, conditions: Optional[Conditions] = None):
        stmt = select(self.model)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        # Store order
        return stmt.order_by(self.model.id.asc())

    @staticmethod
    def _page(stmt, page_number: int, page_size: int):
        page_number = max(int(page_number), 1)
        page_size = max(int(page_size), 1)
        return stmt.offset((page_number - 1) * page_size).limit(page_size)

    def find_by_id(self, id: int) -> Optional[ModelT]:
        return self.db.get(self.model, id)

    def find_all(self, page_number: int, page_size: int) -> List[ModelT]:
        stmt = self._page(self._select(), page_number, page_size)
        return list(self.db.scalars(stmt).all())

    def find_where(
        self, conditions: Conditions, page_number: int, page_size: int
    ) -> List[ModelT]:
        stmt = self._page(self._select(conditions), page_number, page_size)
        return list(self.db.scalars(stmt).all())

    def first_or_default(self, conditions: Optional[Conditions] = None) -> Optional[ModelT]:
        return self.db.scalars(self._select(conditions).limit(1)).first()

    def add(self, entity: ModelT) -> None:
        self.db.add(entity)

    def update(self, entity: ModelT) -> None:
        # Loaded entities are already tracked; merge covers detached ones
        if entity not in self.db:
            self.db.merge(entity)

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
