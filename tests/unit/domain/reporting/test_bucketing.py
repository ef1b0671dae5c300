"""Unit tests for timestamp bucketing."""

from datetime import date, datetime, timedelta, timezone

import pytest

from fintrend.domain.reporting import Granularity, bucket_key
from fintrend.domain.reporting.exceptions import UnknownGranularityError
from fintrend.domain.reporting.services.bucketing import week_key


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestMonthlyKeys:
    def test_mid_month(self):
        assert bucket_key(utc(2025, 2, 15, 12), Granularity.MONTHLY) == "2025-02"

    def test_last_millisecond_of_month_stays_in_month(self):
        moment = utc(2025, 1, 31, 23, 59, 59, 999000)
        assert bucket_key(moment, "monthly") == "2025-01"

    def test_uses_utc_fields_not_local(self):
        berlin = timezone(timedelta(hours=1))
        # 00:30 on Feb 1st in Berlin is still January in UTC
        moment = datetime(2025, 2, 1, 0, 30, tzinfo=berlin)
        assert bucket_key(moment, Granularity.MONTHLY) == "2025-01"

    def test_naive_timestamp_is_read_as_utc(self):
        assert bucket_key(datetime(2025, 12, 31, 23, 0), "monthly") == "2025-12"


class TestQuarterAndHalfYearKeys:
    @pytest.mark.parametrize(
        ("month", "expected"),
        [
            (1, "2025-Q1"),
            (3, "2025-Q1"),
            (4, "2025-Q2"),
            (9, "2025-Q3"),
            (12, "2025-Q4"),
        ],
    )
    def test_quarters(self, month, expected):
        assert bucket_key(utc(2025, month, 10), Granularity.QUARTERLY) == expected

    @pytest.mark.parametrize(
        ("month", "expected"),
        [(1, "2025-H1"), (6, "2025-H1"), (7, "2025-H2"), (12, "2025-H2")],
    )
    def test_half_years(self, month, expected):
        assert bucket_key(utc(2025, month, 10), Granularity.HALF_YEARLY) == expected


class TestWeeklyKeys:
    def test_iso_week_in_middle_of_year(self):
        assert bucket_key(utc(2025, 2, 12), Granularity.WEEKLY) == "2025-W07"

    def test_late_december_can_belong_to_next_year(self):
        # Thursday of that week is 2025-01-02
        assert week_key(date(2024, 12, 30)) == "2025-W01"

    def test_early_january_can_belong_to_previous_year(self):
        assert week_key(date(2021, 1, 3)) == "2020-W53"

    def test_week_number_is_zero_padded(self):
        assert bucket_key(utc(2025, 1, 6), "weekly") == "2025-W02"

    def test_monday_and_sunday_share_a_week(self):
        monday = utc(2025, 3, 10)
        sunday = utc(2025, 3, 16, 23, 59)
        assert bucket_key(monday, "weekly") == bucket_key(sunday, "weekly")


class TestKeyOrdering:
    @pytest.mark.parametrize("granularity", list(Granularity))
    def test_lexicographic_order_matches_chronology(self, granularity):
        start = utc(2023, 11, 20)
        moments = [start + timedelta(days=5 * i) for i in range(120)]

        keys = [bucket_key(moment, granularity) for moment in moments]

        assert keys == sorted(keys)

    def test_same_input_same_key(self):
        moment = utc(2025, 8, 1, 8, 30)
        assert bucket_key(moment, "quarterly") == bucket_key(moment, "quarterly")


class TestGranularityParsing:
    def test_accepts_case_and_underscore_variants(self):
        assert Granularity.parse("Half_Yearly") is Granularity.HALF_YEARLY
        assert Granularity.parse(" WEEKLY ") is Granularity.WEEKLY

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownGranularityError) as exc_info:
            bucket_key(utc(2025, 1, 1), "daily")

        assert exc_info.value.details == {"value": "daily"}

    def test_months_per_bucket(self):
        assert Granularity.WEEKLY.months_per_bucket is None
        assert Granularity.QUARTERLY.months_per_bucket == 3
