"""Field and cross-entity validation rules.

Each entity has an ordered tuple of rules; every rule runs and every failing
rule contributes its message, so callers get the full list in one pass. Rules
only read the entity: transactions must already have ``category`` and ``user``
attached (the services resolve them before validating).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional, Sequence

from financial.enums import ADULT_AGE, Finality, TransactionType
from financial.orm_models import Category, Transaction, User


@dataclass(frozen=True)
class ValidationRule:
    check: Callable[[Any], bool]
    message: str


def run_rules(entity: Any, rules: Sequence[ValidationRule]) -> List[str]:
    return [rule.message for rule in rules if not rule.check(entity)]


def _text_rules(
    getter: Callable[[Any], Optional[str]], label: str, minimum: int, maximum: int
) -> tuple:
    # Length checks stay quiet on empty input; "required" already covers it
    def required(e) -> bool:
        return bool((getter(e) or "").strip())

    def long_enough(e) -> bool:
        v = getter(e) or ""
        return not v.strip() or len(v) >= minimum

    def short_enough(e) -> bool:
        return len(getter(e) or "") <= maximum

    return (
        ValidationRule(required, f"{label} is required."),
        ValidationRule(long_enough, f"{label} must have at least {minimum} characters."),
        ValidationRule(short_enough, f"{label} must have at most {maximum} characters."),
    )


CENT = Decimal("0.01")


def _positive(value: Any) -> bool:
    # Compared at the stored precision (two decimal places)
    if value is None:
        return False
    try:
        return Decimal(str(value)).quantize(CENT) > 0
    except (InvalidOperation, ValueError):
        return False


def type_matches_finality(txn: Transaction) -> bool:
    category = txn.category
    if category is None:
        return False
    if txn.type == TransactionType.INCOME:
        return category.finality in (Finality.INCOME, Finality.BOTH)
    if txn.type == TransactionType.EXPENSE:
        return category.finality in (Finality.EXPENSE, Finality.BOTH)
    return False


def age_allows_type(txn: Transaction) -> bool:
    user = txn.user
    if user is None or user.age is None:
        return False
    return not (user.age < ADULT_AGE and txn.type == TransactionType.INCOME)


CATEGORY_RULES = _text_rules(lambda c: c.description, "Description", 2, 100)

USER_RULES = _text_rules(lambda u: u.name, "Name", 2, 100) + (
    ValidationRule(
        lambda u: u.age is not None and 0 <= u.age <= 150,
        "Age must be between 0 and 150.",
    ),
)

TRANSACTION_RULES = _text_rules(lambda t: t.description, "Description", 2, 300) + (
    ValidationRule(lambda t: _positive(t.value), "Value must be greater than zero."),
    ValidationRule(
        type_matches_finality,
        "Transaction type is not compatible with the selected category.",
    ),
    ValidationRule(lambda t: (t.category_id or 0) > 0, "Invalid category."),
    ValidationRule(lambda t: (t.user_id or 0) > 0, "Invalid user."),
    ValidationRule(
        age_allows_type,
        "A user under 18 cannot have income transactions.",
    ),
)


def validate_category(category: Category) -> List[str]:
    return run_rules(category, CATEGORY_RULES)


def validate_user(user: User) -> List[str]:
    return run_rules(user, USER_RULES)


def validate_transaction(txn: Transaction) -> List[str]:
    return run_rules(txn, TRANSACTION_RULES)
