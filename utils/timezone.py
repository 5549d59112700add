"""UTC-everywhere time handling for invoice dates."""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """
    Current time in UTC.

    Use this instead of datetime.now() everywhere.
    """
    return datetime.now(timezone.utc)


def today_utc() -> str:
    """
    Date portion of the current UTC timestamp as YYYY-MM-DD.

    This is the value stored in invoices.date on every create and update.
    """
    return now_utc().date().isoformat()
