"""Tests for leave entitlement rules."""

import math
from datetime import UTC, date, datetime

import pytest

from nl_payroll.core.models import CAO
from nl_payroll.core.rules.leave import (
    calculate_absence_percentage,
    calculate_adv_days,
    calculate_expiry_date,
    calculate_monthly_holiday_accrual,
    calculate_working_hours,
    calculate_yearly_holiday_entitlement,
    format_expense_type,
    format_leave_type,
    get_days_until_expiry,
    should_warn_about_expiry,
)


class TestHolidayAccrual:
    """Tests for statutory holiday hours."""

    def test_yearly_entitlement_is_four_weeks(self):
        """Test four times the weekly hours."""
        assert calculate_yearly_holiday_entitlement(40) == 160
        assert calculate_yearly_holiday_entitlement(36) == 144

    def test_monthly_accrual(self):
        """Test one twelfth of the yearly entitlement."""
        assert calculate_monthly_holiday_accrual(36) == pytest.approx(12.0)
        assert calculate_monthly_holiday_accrual(40) == pytest.approx(13.3333, rel=1e-4)

    def test_cao_does_not_change_accrual(self):
        """Agreements do not alter the statutory minimum."""
        cao = CAO(code="BOUW", extra_days=10)
        assert calculate_yearly_holiday_entitlement(40, cao) == 160


class TestADVDays:
    """Tests for ADV days."""

    def test_no_cao(self):
        """Without an agreement there are no ADV days."""
        assert calculate_adv_days(40) == 0

    def test_construction_default(self):
        """The construction agreement grants 13 days by default."""
        assert calculate_adv_days(40, CAO(code="BOUW")) == 13

    def test_construction_explicit_days(self):
        """Explicit days take precedence."""
        assert calculate_adv_days(40, CAO(code="BOUW", extra_days=10)) == 10

    def test_construction_zero_days_falls_back(self):
        """Zero extra days falls back to the default."""
        assert calculate_adv_days(40, CAO(code="BOUW", extra_days=0)) == 13

    def test_other_cao(self):
        """Other agreements grant no ADV days."""
        assert calculate_adv_days(40, CAO(code="HORECA", extra_days=5)) == 0


class TestExpiry:
    """Tests for leave expiry."""

    def test_days_until_expiry_rounds_up(self):
        """Partial days count as a full day."""
        now = datetime(2025, 1, 1, 12, 0)
        assert get_days_until_expiry(date(2025, 1, 11), now) == 10

    def test_days_until_expiry_exact(self):
        """Test whole days."""
        assert get_days_until_expiry(date(2025, 1, 10), datetime(2025, 1, 1)) == 9

    def test_days_until_expiry_negative(self):
        """Expired leave gives a negative count."""
        assert get_days_until_expiry(date(2025, 1, 1), datetime(2025, 1, 11)) == -10

    def test_days_until_expiry_both_aware(self):
        """Timezone-aware moments are compared as such."""
        expiry = datetime(2025, 1, 11, tzinfo=UTC)
        now = datetime(2025, 1, 1, tzinfo=UTC)

        assert get_days_until_expiry(expiry, now) == 10

    def test_days_until_expiry_mixed_awareness(self):
        """An aware expiry against a naive now does not raise."""
        expiry = datetime(2030, 1, 1, tzinfo=UTC)

        assert 30 <= get_days_until_expiry(expiry, datetime(2029, 12, 1)) <= 32
        assert get_days_until_expiry(datetime(2020, 1, 1, tzinfo=UTC)) < 0

    def test_should_warn_about_aware_expiry(self):
        """The warning window works for aware expiry moments."""
        now = datetime(2025, 1, 1)

        assert should_warn_about_expiry(datetime(2025, 2, 1, tzinfo=UTC), now) is True
        assert should_warn_about_expiry(datetime(2026, 2, 1, tzinfo=UTC), now) is False

    @pytest.mark.parametrize(
        "expiry,expected",
        [
            (date(2025, 4, 1), True),  # 90 days
            (date(2025, 4, 2), False),  # 91 days
            (date(2025, 1, 2), True),
            (date(2025, 1, 1), False),
            (date(2024, 12, 1), False),
        ],
    )
    def test_should_warn_about_expiry(self, expiry, expected):
        """Warn only within the 90-day window."""
        assert should_warn_about_expiry(expiry, datetime(2025, 1, 1)) is expected

    def test_expiry_date_default_five_years(self):
        """Test default expiry."""
        assert calculate_expiry_date(date(2020, 6, 15)) == date(2025, 6, 15)

    def test_expiry_date_leap_day(self):
        """February 29 moves to March 1 in a non-leap year."""
        assert calculate_expiry_date(date(2024, 2, 29), 1) == date(2025, 3, 1)
        assert calculate_expiry_date(date(2024, 2, 29), 4) == date(2028, 2, 29)


class TestWorkingHours:
    """Tests for clock-time arithmetic."""

    def test_regular_day(self):
        """Test a normal shift."""
        assert calculate_working_hours("09:00", "17:30") == 8.5

    def test_overnight_is_not_wrapped(self):
        """Shifts past midnight give a negative result."""
        assert calculate_working_hours("22:00", "06:00") == -16

    def test_malformed_input(self):
        """Unparseable times give nan."""
        assert math.isnan(calculate_working_hours("abc", "17:00"))
        assert math.isnan(calculate_working_hours("09:00", "17"))


class TestAbsenceAndLabels:
    """Tests for absence percentage and label lookups."""

    def test_absence_percentage(self):
        """Test sick-day share."""
        assert calculate_absence_percentage(5, 20) == 25.0

    def test_absence_percentage_no_working_days(self):
        """Zero working days gives zero."""
        assert calculate_absence_percentage(5, 0) == 0.0

    def test_leave_labels(self):
        """Known types map to Dutch labels, unknown pass through."""
        assert format_leave_type("sick") == "Ziekte"
        assert format_leave_type("adv") == "ADV"
        assert format_leave_type("sabbatical") == "sabbatical"

    def test_expense_labels(self):
        """Known types map to Dutch labels, unknown pass through."""
        assert format_expense_type("travel") == "Reiskosten"
        assert format_expense_type("bike") == "bike"
