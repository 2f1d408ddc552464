from __future__ import annotations

from enum import IntEnum


class Finality(IntEnum):
    """Which transaction types a category may classify (stored as int)."""

    INCOME = 0
    EXPENSE = 1
    BOTH = 2


class TransactionType(IntEnum):
    INCOME = 0
    EXPENSE = 1


# Minimum age for owning an income transaction
ADULT_AGE = 18
