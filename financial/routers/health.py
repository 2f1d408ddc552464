from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from financial import __version__
from financial.db import get_db

router = APIRouter(tags=["health"])


def _db_ping(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


@router.get("/health")
def health(db: Session = Depends(get_db)):
    ok = _db_ping(db)
    return JSONResponse(
        status_code=200 if ok else 503,
        content={"ok": ok, "db": "up" if ok else "down", "version": __version__},
    )
