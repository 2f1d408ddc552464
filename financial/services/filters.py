"""List filters for the three entities.

Each filter object turns its optional fields into SQLAlchemy conditions that the
repository ANDs together. Unset fields add no condition, so an empty filter
matches everything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import extract
from sqlalchemy.sql.elements import ColumnElement

from financial.orm_models import Category, Transaction, User


@dataclass
class CategoryFilters:
    """``finality`` is a code; -1 (or None) means all finalities."""

    finality: Optional[int] = None

    def conditions(self) -> List[ColumnElement[bool]]:
        conditions = []
        if self.finality is not None and self.finality > -1:
            conditions.append(Category.finality == self.finality)
        return conditions


@dataclass
class TransactionFilters:
    """Month/year of ``created_at``; values <= 0 disable that part."""

    month: Optional[int] = None
    year: Optional[int] = None

    def conditions(self) -> List[ColumnElement[bool]]:
        conditions = []
        if self.month is not None and self.month > 0:
            conditions.append(extract("month", Transaction.created_at) == self.month)
        if self.year is not None and self.year > 0:
            conditions.append(extract("year", Transaction.created_at) == self.year)
        return conditions


@dataclass
class UserFilters:
    """Name substring plus inclusive age bounds; -1 means unbounded."""

    name: Optional[str] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None

    def conditions(self) -> List[ColumnElement[bool]]:
        conditions = []
        if self.name:
            conditions.append(User.name.contains(self.name, autoescape=True))
        if self.max_age is not None and self.max_age > -1:
            conditions.append(User.age <= self.max_age)
        if self.min_age is not None and self.min_age > -1:
            conditions.append(User.age >= self.min_age)
        return conditions
