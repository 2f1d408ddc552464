"""FastAPI dependencies: one session and one unit of work per request."""

from fastapi import Depends
from sqlalchemy.orm import Session

from financial.db import get_db
from financial.repositories import UnitOfWork
from financial.services.category_service import CategoryService
from financial.services.transaction_service import TransactionService
from financial.services.user_service import UserService


def get_unit_of_work(db: Session = Depends(get_db)) -> UnitOfWork:
    return UnitOfWork(db)


def get_category_service(unit: UnitOfWork = Depends(get_unit_of_work)) -> CategoryService:
    return CategoryService(unit)


def get_user_service(unit: UnitOfWork = Depends(get_unit_of_work)) -> UserService:
    return UserService(unit)


def get_transaction_service(
    unit: UnitOfWork = Depends(get_unit_of_work),
) -> TransactionService:
    return TransactionService(unit)
