"""
Tests for puzzles.rotation.day_bounds and is_expired.

Covers:
- IST calendar-day boundaries on either side of midnight
- start < end and both on the same IST day for a sweep of instants
- configurable offset
- expiry decision, including the exact-boundary case
"""

from datetime import datetime, timedelta, timezone

import pytest

from puzzles.models import DisplayPuzzle
from puzzles.rotation import check_expiry, day_bounds, is_expired

IST = timezone(timedelta(hours=5, minutes=30))
UTC = timezone.utc


class TestDayBounds:

    def test_midday_utc(self):
        bounds = day_bounds(datetime(2024, 3, 10, 6, 0, tzinfo=UTC))
        assert bounds.start == datetime(2024, 3, 10, 0, 0, tzinfo=IST)
        assert bounds.end == datetime(2024, 3, 10, 23, 59, 59, 999000, tzinfo=IST)

    def test_start_is_previous_utc_evening(self):
        bounds = day_bounds(datetime(2024, 3, 10, 6, 0, tzinfo=UTC))
        assert bounds.start.astimezone(UTC) == datetime(2024, 3, 9, 18, 30, tzinfo=UTC)

    def test_one_second_before_ist_midnight(self):
        bounds = day_bounds(datetime(2024, 3, 10, 18, 29, 59, tzinfo=UTC))
        assert bounds.end.date().isoformat() == "2024-03-10"

    def test_ist_midnight_starts_new_day(self):
        instant = datetime(2024, 3, 10, 18, 30, tzinfo=UTC)
        bounds = day_bounds(instant)
        assert bounds.start == instant
        assert bounds.start.date().isoformat() == "2024-03-11"

    def test_year_boundary(self):
        bounds = day_bounds(datetime(2023, 12, 31, 20, 0, tzinfo=UTC))
        assert bounds.start == datetime(2024, 1, 1, 0, 0, tzinfo=IST)

    def test_bounds_carry_fixed_offset(self):
        bounds = day_bounds(datetime(2024, 7, 1, 12, 0, tzinfo=UTC))
        assert bounds.start.utcoffset() == timedelta(hours=5, minutes=30)
        assert bounds.end.utcoffset() == timedelta(hours=5, minutes=30)

    def test_sweep_stays_within_same_ist_day(self):
        instant = datetime(2024, 2, 28, 0, 0, tzinfo=UTC)
        for _ in range(200):
            start, end = day_bounds(instant)
            local = instant.astimezone(IST)
            assert end > start
            assert start <= instant <= end
            assert start.date() == local.date() == end.date()
            instant += timedelta(minutes=17)

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValueError):
            day_bounds(datetime(2024, 3, 10, 12, 0))

    def test_offset_from_settings(self, settings):
        settings.PUZZLE_UTC_OFFSET_MINUTES = 0
        bounds = day_bounds(datetime(2024, 3, 10, 20, 0, tzinfo=UTC))
        assert bounds.start == datetime(2024, 3, 10, 0, 0, tzinfo=UTC)
        assert bounds.end == datetime(2024, 3, 10, 23, 59, 59, 999000, tzinfo=UTC)


class TestIsExpired:

    expiry = datetime(2024, 3, 10, 23, 59, 59, 999000, tzinfo=IST)

    def _display(self, expiry_date):
        return DisplayPuzzle(movie_name="Sholay", expiry_date=expiry_date)

    def test_absent_display_is_expired(self):
        assert is_expired(None, self.expiry) is True

    def test_missing_expiry_is_expired(self):
        assert is_expired(self._display(None), self.expiry) is True

    def test_after_expiry(self):
        assert is_expired(self._display(self.expiry), self.expiry + timedelta(milliseconds=1)) is True

    def test_exactly_at_expiry_is_not_expired(self):
        assert is_expired(self._display(self.expiry), self.expiry) is False

    def test_before_expiry(self):
        assert is_expired(self._display(self.expiry), self.expiry - timedelta(hours=3)) is False


@pytest.mark.django_db
class TestCheckExpiry:

    def test_empty_slot(self, now):
        status = check_expiry(now)
        assert status.expired is True
        assert status.puzzle is None

    def test_valid_puzzle(self, now, make_display):
        display = make_display("Lagaan", day_bounds(now).end)
        status = check_expiry(now)
        assert status.expired is False
        assert status.puzzle == display

    def test_stale_puzzle(self, now, make_display):
        make_display("Lagaan", now - timedelta(hours=1))
        assert check_expiry(now).expired is True
