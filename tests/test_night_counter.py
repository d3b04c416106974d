"""Unit tests for stay dates and night counting."""

import pytest

from hotel_desk.exceptions import InvalidArgumentError, InvalidDateRangeError
from hotel_desk.models import StayDate
from hotel_desk.services import NightCounter, count_nights


class TestStayDate:
    """Tests for StayDate parsing and ordering."""

    def test_parse(self):
        """Test parsing a DD/MM/YYYY date."""
        stay_date = StayDate.parse("05/01/2024")

        assert (stay_date.day, stay_date.month, stay_date.year) == (5, 1, 2024)
        assert str(stay_date) == "05/01/2024"

    def test_parse_single_digit_parts(self):
        """Test that day and month may have one digit."""
        assert str(StayDate.parse(" 5/1/2024 ")) == "05/01/2024"

    @pytest.mark.parametrize(
        "text", ["", "2024-01-05", "05/01/24", "aa/01/2024", "00/01/2024", "32/01/2024", "01/13/2024"]
    )
    def test_parse_rejects_malformed(self, text):
        """Test that malformed or out-of-range dates raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            StayDate.parse(text)

    def test_no_calendar_validation(self):
        """Test that a day missing from the calendar still parses."""
        assert StayDate.parse("30/02/2023").day == 30

    def test_ordering_is_year_month_day(self):
        """Test that later years win regardless of month and day."""
        assert StayDate.parse("31/12/2023") < StayDate.parse("01/01/2024")
        assert StayDate.parse("01/02/2024") < StayDate.parse("01/03/2024")
        assert StayDate.parse("01/03/2024") <= StayDate.parse("01/03/2024")


class TestNightCounter:
    """Tests for NightCounter.count."""

    def test_same_month(self):
        """Test the reference stay of 4 nights."""
        assert count_nights("01/01/2024", "05/01/2024") == 4

    def test_across_months_matches_month_table(self):
        """Test a stay spanning February on the fixed table."""
        # 3 nights left in January, 28 in February, 2 in March
        assert count_nights("28/01/2024", "02/03/2024") == 3 + 28 + 2

    def test_across_year_boundary(self):
        """Test a stay crossing New Year."""
        assert count_nights("30/12/2023", "02/01/2024") == 3

    def test_fixed_table_ignores_leap_years(self):
        """Test that 2024 February has 28 days in fixed_table mode."""
        assert count_nights("28/02/2024", "01/03/2024") == 1

    def test_calendar_mode_counts_leap_day(self):
        """Test that calendar mode uses real dates."""
        assert count_nights("28/02/2024", "01/03/2024", mode="calendar") == 2

    def test_calendar_mode_rejects_missing_day(self):
        """Test that calendar mode refuses dates that do not exist."""
        with pytest.raises(InvalidArgumentError):
            count_nights("30/02/2023", "02/03/2023", mode="calendar")

    @pytest.mark.parametrize(
        "check_in,check_out",
        [
            ("05/01/2024", "05/01/2024"),
            ("06/01/2024", "05/01/2024"),
            ("01/02/2024", "28/01/2024"),
            ("01/01/2025", "31/12/2024"),
        ],
    )
    def test_rejects_empty_or_reversed_range(self, check_in, check_out):
        """Test that check-out must be strictly after check-in."""
        with pytest.raises(InvalidDateRangeError) as exc_info:
            NightCounter.count(check_in, check_out)

        assert exc_info.value.check_in == check_in
        assert exc_info.value.check_out == check_out

    def test_accepts_parsed_dates(self):
        """Test that StayDate instances are accepted as-is."""
        start = StayDate.parse("01/01/2024")
        end = StayDate.parse("03/01/2024")

        assert NightCounter.count(start, end) == 2
