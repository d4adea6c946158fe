from datetime import datetime, timezone


def serialize_datetime(dt: datetime | None) -> str | None:
    """Serialize datetime to ISO format with UTC timezone."""
    if dt is None:
        return None
    # Ensure datetime has UTC timezone for proper frontend interpretation
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


def not_null(value):
    """Field validator body for partial updates of NOT NULL columns.

    Omitting the field leaves it unchanged; an explicit null is a 422.
    """
    if value is None:
        raise ValueError("may be omitted but not null")
    return value
