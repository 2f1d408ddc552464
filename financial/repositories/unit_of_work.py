from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from financial.errors import ReferentialIntegrityError
from financial.orm_models import Category, Transaction, User
from financial.repositories.repository import Repository

log = logging.getLogger(__name__)


class UnitOfWork:
    """Three repositories over one session, flushed by a single commit."""

    def __init__(self, db: Session):
        self.db = db
        self.users: Repository[User] = Repository(db, User)
        self.categories: Repository[Category] = Repository(db, Category)
        self.transactions: Repository[Transaction] = Repository(db, Transaction)

    def commit(self) -> None:
        """Commit everything pending, or nothing.

        A foreign-key rejection is re-raised as ``ReferentialIntegrityError``;
        any other failure propagates unchanged after the rollback.
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            log.warning("commit rejected by store constraint: %s", exc.orig)
            raise ReferentialIntegrityError() from exc
        except Exception:
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()
