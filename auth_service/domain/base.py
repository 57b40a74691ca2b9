from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Current UTC time as a naive datetime.

    DateTime columns are stored without tzinfo, so all comparisons in the
    service are made between naive UTC values.
    """
    return datetime.now(UTC).replace(tzinfo=None)
