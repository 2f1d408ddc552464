from decimal import Decimal

import pytest

from financial.enums import Finality, TransactionType
from financial.orm_models import Category, Transaction, User
from financial.validators import (
    validate_category,
    validate_transaction,
    validate_user,
)

TYPE_MSG = "Transaction type is not compatible with the selected category."
AGE_MSG = "A user under 18 cannot have income transactions."
VALUE_MSG = "Value must be greater than zero."


def _txn(
    *,
    type_=TransactionType.EXPENSE,
    finality=Finality.EXPENSE,
    age=25,
    value=Decimal("10.00"),
    description="Compra supermercado",
    with_category=True,
    with_user=True,
):
    t = Transaction(
        description=description,
        value=value,
        type=int(type_),
        category_id=1,
        user_id=1,
    )
    if with_category:
        t.category = Category(id=1, description="Cat", finality=int(finality))
    if with_user:
        t.user = User(id=1, name="Ana", age=age)
    return t


def test_valid_expense_passes():
    assert validate_transaction(_txn()) == []


def test_income_with_expense_category_rejected():
    errors = validate_transaction(_txn(type_=TransactionType.INCOME, finality=Finality.EXPENSE))
    assert errors == [TYPE_MSG]


def test_expense_with_income_category_rejected():
    errors = validate_transaction(_txn(type_=TransactionType.EXPENSE, finality=Finality.INCOME))
    assert TYPE_MSG in errors


@pytest.mark.parametrize("type_", [TransactionType.INCOME, TransactionType.EXPENSE])
def test_both_category_accepts_either_type(type_):
    assert validate_transaction(_txn(type_=type_, finality=Finality.BOTH)) == []


@pytest.mark.parametrize("finality", [Finality.INCOME, Finality.EXPENSE, Finality.BOTH])
def test_minor_cannot_own_income(finality):
    errors = validate_transaction(_txn(type_=TransactionType.INCOME, finality=finality, age=16))
    assert AGE_MSG in errors


def test_minor_may_own_expense():
    assert validate_transaction(_txn(type_=TransactionType.EXPENSE, age=10)) == []


def test_adult_income_with_compatible_category_accepted():
    assert validate_transaction(_txn(type_=TransactionType.INCOME, finality=Finality.INCOME, age=18)) == []


@pytest.mark.parametrize("value", [Decimal("0"), Decimal("-5"), None, Decimal("0.001"), Decimal("0.004")])
def test_non_positive_value_rejected(value):
    assert VALUE_MSG in validate_transaction(_txn(value=value))


def test_small_positive_value_passes_value_rule():
    assert VALUE_MSG not in validate_transaction(_txn(value=Decimal("0.01")))


def test_missing_category_fails_type_rule_instead_of_skipping():
    errors = validate_transaction(_txn(with_category=False))
    assert TYPE_MSG in errors


def test_missing_user_fails_age_rule_instead_of_skipping():
    errors = validate_transaction(_txn(with_user=False))
    assert AGE_MSG in errors


def test_all_violations_collected_in_rule_order():
    t = _txn(
        type_=TransactionType.INCOME,
        finality=Finality.EXPENSE,
        age=12,
        value=Decimal("0"),
        description="",
    )
    t.category_id = 0
    t.user_id = 0
    assert validate_transaction(t) == [
        "Description is required.",
        VALUE_MSG,
        TYPE_MSG,
        "Invalid category.",
        "Invalid user.",
        AGE_MSG,
    ]


def test_description_length_bounds():
    assert validate_transaction(_txn(description="a")) == [
        "Description must have at least 2 characters."
    ]
    assert validate_transaction(_txn(description="x" * 300)) == []
    assert validate_transaction(_txn(description="x" * 301)) == [
        "Description must have at most 300 characters."
    ]


def test_validation_does_not_mutate_input():
    t = _txn(type_=TransactionType.INCOME, age=10)
    before = (t.description, t.value, t.type, t.category_id, t.user_id, t.user.age)
    validate_transaction(t)
    validate_transaction(t)
    assert (t.description, t.value, t.type, t.category_id, t.user_id, t.user.age) == before


def test_category_rules():
    assert validate_category(Category(description="Salário", finality=0)) == []
    assert validate_category(Category(description="", finality=1)) == ["Description is required."]
    assert validate_category(Category(description=None, finality=1)) == ["Description is required."]
    assert validate_category(Category(description="x" * 101, finality=2)) == [
        "Description must have at most 100 characters."
    ]


def test_user_rules():
    assert validate_user(User(name="Ana", age=16)) == []
    assert validate_user(User(name="Ana", age=150)) == []
    assert validate_user(User(name="Ana", age=0)) == []
    assert validate_user(User(name="Ana", age=151)) == ["Age must be between 0 and 150."]
    assert validate_user(User(name="Ana", age=-1)) == ["Age must be between 0 and 150."]
    assert validate_user(User(name="", age=-1)) == [
        "Name is required.",
        "Age must be between 0 and 150.",
    ]
    assert validate_user(User(name="A", age=30)) == ["Name must have at least 2 characters."]
