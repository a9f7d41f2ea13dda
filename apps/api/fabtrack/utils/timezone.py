"""
Timezone utilities.

Database stores UTC; the API returns ISO 8601 strings.
"""

from datetime import datetime, timezone

UTC = timezone.utc


def utc_now() -> datetime:
    """
    Current time in UTC (timezone-aware).

    Use this instead of datetime.utcnow(), which returns a naive datetime.
    """
    return datetime.now(UTC)
