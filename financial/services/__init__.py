from financial.services.category_service import CategoryService
from financial.services.transaction_service import TransactionService
from financial.services.user_service import UserService

__all__ = ["CategoryService", "TransactionService", "UserService"]
