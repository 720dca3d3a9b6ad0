from datetime import date, datetime, time

import pytest

from recruitment.errors import InvalidDateError
from recruitment.utils.dates import date_range, to_date, to_datetime


class TestDates:

    def test_bare_upper_bound_covers_the_day(self):
        start, end = date_range("2026-11-01", "2026-11-30")

        assert start == datetime(2026, 11, 1)
        assert end == datetime.combine(date(2026, 11, 30), time.max)

    def test_empty_bounds(self):
        assert date_range(None, "") == (None, None)

    def test_zulu_suffix(self):
        assert to_datetime("2026-11-05T09:30:00Z").hour == 9
        assert to_date("2026-11-05T09:30:00Z") == date(2026, 11, 5)

    @pytest.mark.parametrize("value", ["yesterday", "2026-13-45", "05/11/2026"])
    def test_malformed_values(self, value):
        with pytest.raises(InvalidDateError) as exc:
            to_datetime(value)

        assert exc.value.status_code == 400
        assert exc.value.message == f"Invalid date: {value}"

    def test_malformed_range_bound(self):
        with pytest.raises(InvalidDateError):
            date_range(date_to="not-a-date")
