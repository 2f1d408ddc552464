from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

__all__ = ["utc_now", "format_day"]


def utc_now() -> datetime:
    """Timezone-aware current UTC time (replaces datetime.utcnow)."""
    return datetime.now(timezone.utc)


def format_day(ts: Optional[datetime]) -> Optional[str]:
    """Calendar date as dd/mm/yyyy (the dashboard's display format)."""
    if ts is None:
        return None
    return ts.strftime("%d/%m/%Y")
