from __future__ import annotations

import logging

from financial import metrics
from financial.mapping import transaction_from_dto, transaction_to_read
from financial.orm_models import Transaction
from financial.repositories import UnitOfWork
from financial.responses import ServiceResult, failure, success
from financial.schemas.transaction import TransactionIn
from financial.services.filters import TransactionFilters
from financial.validators import validate_transaction

log = logging.getLogger(__name__)


class TransactionService:
    """Create/update resolve category and user before validating.

    The cross-entity rules need the related rows' fields, so the order is
    fixed: map, resolve category (404), resolve user (404), attach, validate
    (400 with every violation), then persist and commit.
    """

    def __init__(self, unit: UnitOfWork):
        self.unit = unit

    def _resolve_and_validate(self, txn: Transaction) -> ServiceResult | None:
        category = self.unit.categories.find_by_id(txn.category_id)
        if category is None:
            return failure("Category not found", 404)
        user = self.unit.users.find_by_id(txn.user_id)
        if user is None:
            return failure("User not found", 404)

        txn.category = category
        txn.user = user

        errors = validate_transaction(txn)
        if errors:
            metrics.VALIDATION_FAILURES.labels(entity="transaction").inc()
            log.info("transaction rejected: %d violation(s)", len(errors))
            return failure("Transaction validation failed", 400, errors)
        return None

    def create_transaction(self, dto: TransactionIn) -> ServiceResult:
        txn = transaction_from_dto(dto)
        rejected = self._resolve_and_validate(txn)
        if rejected is not None:
            self.unit.rollback()
            return rejected
        self.unit.transactions.add(txn)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="transaction", op="create").inc()
        log.info(
            "transaction created id=%s category=%s user=%s",
            txn.id,
            txn.category_id,
            txn.user_id,
        )
        return success("Transaction created successfully", 201, {"id": txn.id})

    def get_transaction_by_id(self, id: int) -> ServiceResult:
        txn = self.unit.transactions.find_by_id(id)
        if txn is None:
            return failure("Transaction not found", 404)
        return success("Transaction found successfully", 200, transaction_to_read(txn))

    def get_transactions(
        self, page_number: int, page_size: int, month: int = 0, year: int = 0
    ) -> ServiceResult:
        filters = TransactionFilters(month=month, year=year)
        rows = self.unit.transactions.find_where(
            filters.conditions(), page_number, page_size
        )
        return success(
            "Transactions found successfully",
            200,
            [transaction_to_read(t) for t in rows],
        )

    def update_transaction(self, id: int, dto: TransactionIn) -> ServiceResult:
        txn = self.unit.transactions.find_by_id(id)
        if txn is None:
            return failure("Transaction not found", 404)
        transaction_from_dto(dto, into=txn)
        rejected = self._resolve_and_validate(txn)
        if rejected is not None:
            self.unit.rollback()
            return rejected
        self.unit.transactions.update(txn)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="transaction", op="update").inc()
        log.info("transaction updated id=%s", id)
        return success("Transaction updated successfully", 204)

    def delete_transaction(self, id: int) -> ServiceResult:
        txn = self.unit.transactions.find_by_id(id)
        if txn is None:
            return failure("Transaction not found", 404)
        self.unit.transactions.delete(txn)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="transaction", op="delete").inc()
        log.info("transaction deleted id=%s", id)
        return success("Transaction deleted successfully", 204)
