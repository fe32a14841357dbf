"""Date helpers."""
from datetime import datetime, timezone
from typing import Optional


def today_iso() -> str:
    """Today's UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def date_or_today(value: Optional[str]) -> str:
    """Use ``value`` unless it is missing or empty."""
    return value or today_iso()
