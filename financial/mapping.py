"""Conversions between wire DTOs and ORM entities.

Controlled vocabularies (category finality, transaction type) are translated
here and nowhere else. Unknown strings raise ``MalformedInputError`` before any
validation runs.
"""

from __future__ import annotations

from typing import Optional

from financial.enums import Finality, TransactionType
from financial.errors import MalformedInputError
from financial.orm_models import Category, Transaction, User
from financial.schemas.category import CategoryIn, CategoryOut, CategorySimpleOut
from financial.schemas.transaction import TransactionIn, TransactionOut
from financial.schemas.user import UserIn, UserOut, UserSimpleOut
from financial.utils.time import format_day

_FINALITY_BY_NAME = {
    "income": Finality.INCOME,
    "expense": Finality.EXPENSE,
    "both": Finality.BOTH,
}
_FINALITY_NAMES = {code: name for name, code in _FINALITY_BY_NAME.items()}

_TYPE_BY_NAME = {
    "income": TransactionType.INCOME,
    "expense": TransactionType.EXPENSE,
}
_TYPE_NAMES = {code: name for name, code in _TYPE_BY_NAME.items()}


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def finality_from_str(value: Optional[str]) -> Finality:
    try:
        return _FINALITY_BY_NAME[_norm(value)]
    except KeyError:
        raise MalformedInputError(f"Invalid finality type: {value!r}") from None


def finality_to_str(code: int) -> str:
    try:
        return _FINALITY_NAMES[Finality(code)]
    except (KeyError, ValueError):
        raise MalformedInputError(f"Invalid finality type: {code!r}") from None


def transaction_type_from_str(value: Optional[str]) -> TransactionType:
    try:
        return _TYPE_BY_NAME[_norm(value)]
    except KeyError:
        raise MalformedInputError(f"Invalid transaction type: {value!r}") from None


def transaction_type_to_str(code: int) -> str:
    try:
        return _TYPE_NAMES[TransactionType(code)]
    except (KeyError, ValueError):
        raise MalformedInputError(f"Invalid transaction type: {code!r}") from None


# ---------------------------------------------------------------------------
# DTO -> entity
# ---------------------------------------------------------------------------


def category_from_dto(dto: CategoryIn, into: Optional[Category] = None) -> Category:
    finality = finality_from_str(dto.finality)
    category = into if into is not None else Category()
    category.description = dto.description
    category.finality = int(finality)
    return category


def user_from_dto(dto: UserIn, into: Optional[User] = None) -> User:
    user = into if into is not None else User()
    user.name = dto.name
    user.age = dto.age
    return user


def transaction_from_dto(
    dto: TransactionIn, into: Optional[Transaction] = None
) -> Transaction:
    """Full-field copy; ``created_at`` is never touched here."""
    txn_type = transaction_type_from_str(dto.type)
    txn = into if into is not None else Transaction()
    txn.description = dto.description
    txn.value = dto.value
    txn.type = int(txn_type)
    txn.category_id = dto.category_id
    txn.user_id = dto.user_id
    return txn


# ---------------------------------------------------------------------------
# entity -> read DTO
# ---------------------------------------------------------------------------


def category_to_simple(category: Category) -> dict:
    return CategorySimpleOut(
        id=category.id,
        description=category.description,
        finality=finality_to_str(category.finality),
    ).model_dump(by_alias=True)


def user_to_simple(user: User) -> dict:
    return UserSimpleOut(id=user.id, name=user.name, age=user.age).model_dump(
        by_alias=True
    )


def transaction_to_read(txn: Transaction) -> dict:
    return TransactionOut(
        id=txn.id,
        description=txn.description,
        value=float(txn.value),
        type=transaction_type_to_str(txn.type),
        date=format_day(txn.created_at),
        category=category_to_simple(txn.category) if txn.category else None,
        user=user_to_simple(txn.user) if txn.user else None,
    ).model_dump(by_alias=True)


def category_to_read(category: Category) -> dict:
    return CategoryOut(
        id=category.id,
        description=category.description,
        finality=finality_to_str(category.finality),
        transactions=[transaction_to_read(t) for t in category.transactions],
    ).model_dump(by_alias=True)


def user_to_read(user: User) -> dict:
    return UserOut(
        id=user.id,
        name=user.name,
        age=user.age,
        transactions=[transaction_to_read(t) for t in user.transactions],
    ).model_dump(by_alias=True)
