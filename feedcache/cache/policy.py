"""Expiration policy for cached feed snapshots."""

from datetime import datetime, timedelta, timezone, tzinfo

MAX_CACHE_AGE_DAYS = 7


class FeedCachePolicy:
    """Decides whether a snapshot saved at ``timestamp`` is still valid.

    The max age is added in calendar days on the wall clock of ``tz``, so a
    daylight-saving change inside the window does not move the expiry by an
    hour. A snapshot is valid strictly before ``timestamp + 7 days``.
    Mixing an offset-aware and a naive datetime is never valid.
    """

    def __init__(self, tz: tzinfo = timezone.utc):
        self._tz = tz

    def validate(self, timestamp: datetime, against: datetime) -> bool:
        expiry = self.expiry(timestamp)
        if expiry is None:
            return False
        if against.tzinfo is None or expiry.tzinfo is None:
            if (against.tzinfo is None) != (expiry.tzinfo is None):
                return False
            return against < expiry
        # Same-zone datetimes compare by wall clock; compare instants instead.
        try:
            return against.astimezone(timezone.utc) < expiry.astimezone(timezone.utc)
        except OverflowError:
            return False

    def expiry(self, timestamp: datetime) -> datetime | None:
        """Return the first instant at which the snapshot is expired, or None on overflow."""
        try:
            local = timestamp.astimezone(self._tz) if timestamp.tzinfo else timestamp
            return local + timedelta(days=MAX_CACHE_AGE_DAYS)
        except OverflowError:
            return None
