from financial.repositories.repository import Repository
from financial.repositories.unit_of_work import UnitOfWork

__all__ = ["Repository", "UnitOfWork"]
