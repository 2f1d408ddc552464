from __future__ import annotations

import logging
from typing import Optional

from financial import metrics
from financial.mapping import user_from_dto, user_to_read
from financial.repositories import UnitOfWork
from financial.responses import ServiceResult, failure, success
from financial.schemas.user import UserIn
from financial.services.filters import UserFilters
from financial.validators import validate_user

log = logging.getLogger(__name__)


class UserService:
    def __init__(self, unit: UnitOfWork):
        self.unit = unit

    def create_user(self, dto: UserIn) -> ServiceResult:
        user = user_from_dto(dto)
        errors = validate_user(user)
        if errors:
            metrics.VALIDATION_FAILURES.labels(entity="user").inc()
            log.info("user rejected: %d violation(s)", len(errors))
            return failure("User validation failed", 400, errors)
        self.unit.users.add(user)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="user", op="create").inc()
        log.info("user created id=%s", user.id)
        return success("User created successfully", 201, {"id": user.id})

    def get_user_by_id(self, id: int) -> ServiceResult:
        user = self.unit.users.find_by_id(id)
        if user is None:
            return failure("User not found", 404)
        return success("User found successfully", 200, user_to_read(user))

    def get_all_users(
        self,
        page_number: int,
        page_size: int,
        name: Optional[str] = None,
        max_age: int = -1,
        min_age: int = -1,
    ) -> ServiceResult:
        filters = UserFilters(name=name, min_age=min_age, max_age=max_age)
        users = self.unit.users.find_where(filters.conditions(), page_number, page_size)
        return success("Users found successfully", 200, [user_to_read(u) for u in users])

    def update_user(self, id: int, dto: UserIn) -> ServiceResult:
        user = self.unit.users.find_by_id(id)
        if user is None:
            return failure("User not found", 404)
        user_from_dto(dto, into=user)
        errors = validate_user(user)
        if errors:
            self.unit.rollback()
            metrics.VALIDATION_FAILURES.labels(entity="user").inc()
            log.info("user %s update rejected: %d violation(s)", id, len(errors))
            return failure("User validation failed", 400, errors)
        self.unit.users.update(user)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="user", op="update").inc()
        log.info("user updated id=%s", id)
        return success("User updated successfully", 204)

    def delete_user(self, id: int) -> ServiceResult:
        # Transactions go with the user through the FK's ON DELETE CASCADE
        user = self.unit.users.find_by_id(id)
        if user is None:
            return failure("User not found", 404)
        self.unit.users.delete(user)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="user", op="delete").inc()
        log.info("user deleted id=%s", id)
        return success("User deleted successfully", 204)
