from __future__ import annotations

import logging

from financial import metrics
from financial.errors import ReferentialIntegrityError
from financial.mapping import category_from_dto, category_to_read
from financial.repositories import UnitOfWork
from financial.responses import ServiceResult, failure, success
from financial.schemas.category import CategoryIn
from financial.services.filters import CategoryFilters
from financial.validators import validate_category

log = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, unit: UnitOfWork):
        self.unit = unit

    def create_category(self, dto: CategoryIn) -> ServiceResult:
        category = category_from_dto(dto)
        errors = validate_category(category)
        if errors:
            metrics.VALIDATION_FAILURES.labels(entity="category").inc()
            log.info("category rejected: %d violation(s)", len(errors))
            return failure("Category validation failed", 400, errors)
        self.unit.categories.add(category)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="category", op="create").inc()
        log.info("category created id=%s", category.id)
        return success("Category created successfully", 201, {"id": category.id})

    def get_category_by_id(self, id: int) -> ServiceResult:
        category = self.unit.categories.find_by_id(id)
        if category is None:
            return failure("Category not found", 404)
        return success("Category found successfully", 200, category_to_read(category))

    def get_all_categories(
        self, page_number: int, page_size: int, finality: int = -1
    ) -> ServiceResult:
        filters = CategoryFilters(finality=finality)
        categories = self.unit.categories.find_where(
            filters.conditions(), page_number, page_size
        )
        return success(
            "Categories found successfully",
            200,
            [category_to_read(c) for c in categories],
        )

    def update_category(self, id: int, dto: CategoryIn) -> ServiceResult:
        category = self.unit.categories.find_by_id(id)
        if category is None:
            return failure("Category not found", 404)
        category_from_dto(dto, into=category)
        errors = validate_category(category)
        if errors:
            self.unit.rollback()
            metrics.VALIDATION_FAILURES.labels(entity="category").inc()
            log.info("category %s update rejected: %d violation(s)", id, len(errors))
            return failure("Category validation failed", 400, errors)
        self.unit.categories.update(category)
        self.unit.commit()
        metrics.ENTITY_WRITES.labels(entity="category", op="update").inc()
        log.info("category updated id=%s", id)
        return success("Category updated successfully", 204)

    def delete_category(self, id: int) -> ServiceResult:
        category = self.unit.categories.find_by_id(id)
        if category is None:
            return failure("Category not found", 404)
        self.unit.categories.delete(category)
        try:
            self.unit.commit()
        except ReferentialIntegrityError:
            log.info("category %s still referenced; delete rejected", id)
            return failure("Category is referenced by existing transactions", 409)
        metrics.ENTITY_WRITES.labels(entity="category", op="delete").inc()
        log.info("category deleted id=%s", id)
        return success("Category deleted successfully", 204)
