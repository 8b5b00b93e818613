from datetime import UTC, datetime

from sqlalchemy import DateTime


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime.

    Timestamp columns are TIMESTAMP WITH TIME ZONE (see ``TZDateTime``).
    """
    return datetime.now(UTC)


# Column type for every timestamp field: sa_type=TZDateTime
TZDateTime = DateTime(timezone=True)
