"""
Timezone helpers.
Records are stamped in UTC; clients localize for display.
"""
from datetime import datetime
import pytz


def get_utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(pytz.UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=pytz.UTC)
    return dt.astimezone(pytz.UTC)
