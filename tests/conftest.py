import os
import sys
import pathlib

import pytest

# ===========================================================================
# Pytest bootstrap: environment must be set BEFORE financial.* is imported
# ===========================================================================

_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

# Shared in-memory SQLite (StaticPool) so the test client and fixture sessions
# see the same data; foreign keys are switched on by financial.db.
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["APP_ENV"] = "test"
os.environ.setdefault("TZ", "UTC")

from fastapi.testclient import TestClient  # noqa: E402
from freezegun import freeze_time  # noqa: E402

import financial.db as app_db  # noqa: E402
import financial.orm_models  # noqa: E402,F401  # register tables
from financial.main import app  # noqa: E402
from financial.repositories import UnitOfWork  # noqa: E402


@pytest.fixture
def db_session():
    """
    Yields a SQLAlchemy session bound to the engine the app uses.
    The schema is recreated per test to avoid cross-test contamination.
    """
    app_db.Base.metadata.drop_all(bind=app_db.engine)
    app_db.Base.metadata.create_all(bind=app_db.engine)
    db = app_db.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def unit(db_session) -> UnitOfWork:
    return UnitOfWork(db_session)


@pytest.fixture
def client(db_session):
    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[app_db.get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def frozen_now():
    """Freeze time so "current month" defaults are deterministic (2025-09-15)."""
    with freeze_time("2025-09-15T12:00:00Z") as frozen:
        yield frozen
