"""Tests for human-readable descriptions."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models import InvalidExpression
from cronlens import normalize, describe


def describe_raw(raw):
    return describe(normalize(raw))


class TestCommonPatterns:
    """Test the short forms for frequent expressions."""

    def test_every_n_minutes(self):
        assert describe_raw("*/5 * * * *") == "Every 5 minutes."
        assert describe_raw("* */15 * * * *") == "Every 15 minutes."

    def test_every_minute(self):
        assert describe_raw("* * * * *") == "Every minute."
        assert describe_raw("? ? ? ? ?") == "Every minute."
        assert describe_raw("*/1 * * * *") == "Every minute."

    def test_every_minute_ignores_seconds(self):
        """Test hours and minutes both unrestricted always read as every minute."""
        assert describe_raw("* * * * * *") == "Every minute."
        assert describe_raw("30 * * * * *") == "Every minute."

    def test_clock_time(self):
        assert describe_raw("0 3 * * *") == "At 03:00."
        assert describe_raw("30 0 3 * * *") == "At 03:00:30."


class TestComposedDescriptions:
    """Test clause composition."""

    def test_hour_step_with_minute(self):
        assert describe_raw("0 */2 * * *") == "Every 2 hours, at minute 0."

    def test_minute_of_every_hour(self):
        assert describe_raw("15 * * * *") == "At minute 15 of every hour."

    def test_every_minute_during_hours(self):
        assert describe_raw("* 3 * * *") == "Every minute during hour 3."
        assert describe_raw("0 * 3 * * *") == "Every minute during hour 3."
        assert describe_raw("* 9-17 * * 1-5") == (
            "Every minute during hours 9 to 17, on Monday to Friday."
        )
        assert describe_raw("0 * */2 * * *") == "Every minute, every 2 hours."

    def test_every_minute_during_hours_with_second(self):
        assert describe_raw("30 * 3 * * *") == "Every minute during hour 3, at second 30."

    def test_ranges_and_lists(self):
        assert describe_raw("10,20 3-5 * * *") == "At hours 3 to 5, minute 10, 20."

    def test_weekdays(self):
        assert describe_raw("0 17 * * 1-5") == "At 17:00, on Monday to Friday."

    def test_weekday_step(self):
        assert describe_raw("0 30 9 * * 1-5/2") == (
            "At 09:30, on every 2 days of the week from Monday to Friday."
        )

    def test_days_of_month(self):
        assert describe_raw("0 0 1,15 * *") == "At 00:00, on day 1, 15 of the month."

    def test_both_day_fields_use_or(self):
        """Test that the OR relationship is stated explicitly."""
        assert describe_raw("0 0 1 * 1") == "At 00:00, on day 1 of the month or on Monday."

    def test_sunday_alias_named(self):
        assert describe_raw("0 0 * * 7") == "At 00:00, on Sunday."

    def test_month_clause(self):
        assert describe_raw("0 0 1 1-3 *") == (
            "At 00:00, on day 1 of the month, only in January to March."
        )
        assert describe_raw("0 0 * 6 *") == "At 00:00, only in June."
        assert describe_raw("0 0 1 */3 *") == (
            "At 00:00, on day 1 of the month, every 3 months."
        )


class TestInvalidDescriptions:
    """Test that describing validates the expression."""

    @pytest.mark.parametrize("raw", [
        "*/0 * * * *",
        "70 * * * *",
        "0 0 32 * *",
        "0 0 * * 8",
        "0 0 * 5-2 *",
    ])
    def test_invalid_fields_raise(self, raw):
        with pytest.raises(InvalidExpression):
            describe_raw(raw)
