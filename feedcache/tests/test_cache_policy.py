"""Tests for FeedCachePolicy."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from feedcache.cache.policy import MAX_CACHE_AGE_DAYS, FeedCachePolicy
from feedcache.tests.helpers import FIXED_NOW, max_age_ago

try:
    NEW_YORK = ZoneInfo("America/New_York")
except ZoneInfoNotFoundError:
    NEW_YORK = None


class TestFeedCachePolicy:
    def test_max_age_is_seven_days(self):
        assert MAX_CACHE_AGE_DAYS == 7

    def test_valid_before_max_age(self):
        policy = FeedCachePolicy()
        timestamp = max_age_ago(FIXED_NOW) + timedelta(seconds=1)
        assert policy.validate(timestamp, against=FIXED_NOW) is True

    def test_invalid_exactly_at_max_age(self):
        policy = FeedCachePolicy()
        assert policy.validate(max_age_ago(FIXED_NOW), against=FIXED_NOW) is False

    def test_invalid_past_max_age(self):
        policy = FeedCachePolicy()
        timestamp = max_age_ago(FIXED_NOW) - timedelta(microseconds=1)
        assert policy.validate(timestamp, against=FIXED_NOW) is False

    def test_valid_for_fresh_snapshot(self):
        assert FeedCachePolicy().validate(FIXED_NOW, against=FIXED_NOW) is True

    def test_invalid_on_overflow(self):
        timestamp = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)
        assert FeedCachePolicy().validate(timestamp, against=FIXED_NOW) is False
        assert FeedCachePolicy().expiry(timestamp) is None

    def test_naive_timestamps_use_naive_arithmetic(self):
        now = datetime(2024, 5, 8, 12, 0)
        policy = FeedCachePolicy()
        assert policy.validate(datetime(2024, 5, 1, 12, 0, 1), against=now) is True
        assert policy.validate(datetime(2024, 5, 1, 12, 0), against=now) is False

    def test_timestamp_in_other_zone_compares_by_instant(self):
        plus_two = timezone(timedelta(hours=2))
        timestamp = max_age_ago(FIXED_NOW).astimezone(plus_two)
        assert FeedCachePolicy().validate(timestamp, against=FIXED_NOW) is False

    @pytest.mark.skipif(NEW_YORK is None, reason="tz database not available")
    def test_adds_calendar_days_across_daylight_saving_change(self):
        # DST starts 2024-03-10 in New York; seven calendar days is 167 hours.
        policy = FeedCachePolicy(tz=NEW_YORK)
        timestamp = datetime(2024, 3, 8, 12, 0, tzinfo=NEW_YORK)
        expiry = datetime(2024, 3, 15, 12, 0, tzinfo=NEW_YORK)

        assert policy.expiry(timestamp) == expiry
        assert expiry.astimezone(timezone.utc) - timestamp.astimezone(timezone.utc) == timedelta(hours=167)
        assert policy.validate(timestamp, against=expiry - timedelta(seconds=1)) is True
        assert policy.validate(timestamp, against=expiry) is False
        # Raw 7 * 24h would still be valid here.
        half_hour_past = timestamp.astimezone(timezone.utc) + timedelta(hours=167, minutes=30)
        assert policy.validate(timestamp, against=half_hour_past) is False

    @pytest.mark.skipif(NEW_YORK is None, reason="tz database not available")
    def test_repeated_hour_after_expiry_is_invalid(self):
        # DST ends 2024-11-03 in New York; 01:10 EST (fold=1) is after 01:30 EDT.
        policy = FeedCachePolicy(tz=NEW_YORK)
        timestamp = datetime(2024, 10, 27, 1, 30, tzinfo=NEW_YORK)
        against = datetime(2024, 11, 3, 1, 10, fold=1, tzinfo=NEW_YORK)

        assert against.astimezone(timezone.utc) > policy.expiry(timestamp).astimezone(timezone.utc)
        assert policy.validate(timestamp, against=against) is False
        assert policy.validate(timestamp, against=against.replace(fold=0)) is True

    def test_naive_timestamp_against_aware_clock_is_invalid(self):
        policy = FeedCachePolicy()
        assert policy.validate(datetime(2024, 5, 1, 10, 0), against=FIXED_NOW) is False

    def test_aware_timestamp_against_naive_clock_is_invalid(self):
        policy = FeedCachePolicy()
        assert policy.validate(FIXED_NOW, against=datetime(2024, 5, 1, 10, 31)) is False
