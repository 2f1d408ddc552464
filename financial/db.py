from sqlalchemy import create_engine, event, make_url
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .config import settings


class Base(DeclarativeBase):
    """SQLAlchemy Declarative Base."""

    pass


def _connect_args(url: str):
    # For SQLite, disable same-thread check
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


def is_in_memory(url) -> bool:
    """True for a SQLite URL without a file, whatever form the URL renders in."""
    u = make_url(url)
    return u.get_backend_name() == "sqlite" and u.database in (None, "", ":memory:")


def make_engine(url: str):
    kwargs = dict(
        connect_args=_connect_args(url),
        pool_pre_ping=True,
        future=True,
        echo=False,
    )
    if not url.startswith("sqlite"):
        kwargs.update(
            dict(
                pool_recycle=1800,  # recycle idle connections (~30m)
                pool_size=5,
                max_overflow=10,
            )
        )
    if is_in_memory(url):
        # Share the same in-memory DB across connections (test client + fixtures).
        kwargs["poolclass"] = StaticPool  # type: ignore[assignment]

    eng = create_engine(url, **kwargs)

    if url.startswith("sqlite"):

        @event.listens_for(eng, "connect")
        def _sqlite_pragma(dbapi_conn, _):
            # SQLite ignores ON DELETE CASCADE/RESTRICT unless foreign keys are on
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            if not is_in_memory(url):
                cur.execute("PRAGMA journal_mode=WAL;")
            cur.close()

    return eng


engine = make_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
