"""Tests for wage-tax and social-security calculation."""

from decimal import Decimal

import pytest

from nl_payroll.core.models import TaxTable
from nl_payroll.core.rules.tax_constants import (
    DEFAULT_TAX_YEAR,
    TAX_RATES,
    SocialSecurityRates,
    TaxBracket,
    TaxYearRates,
    available_tax_years,
    get_tax_rates,
)
from nl_payroll.core.services.tax_calculator import (
    calculate_bracket_tax,
    calculate_social_security,
    calculate_tax_withholding,
)
from nl_payroll.shared.exceptions import PayrollError, UnsupportedTaxYearError
from nl_payroll.shared.formatters import round_currency


class TestTaxRates:
    """Tests for the rate registry."""

    def test_default_year(self):
        """Test default year lookup."""
        rates = get_tax_rates()
        assert rates.year == DEFAULT_TAX_YEAR
        assert rates is TAX_RATES[DEFAULT_TAX_YEAR]

    def test_2025_figures(self):
        """Test 2025 constants."""
        rates = get_tax_rates(2025)

        assert rates.brackets[0].upper_limit == Decimal("38098")
        assert rates.brackets[0].rate == Decimal("0.3697")
        assert rates.brackets[-1].upper_limit is None
        assert rates.social_security.aow == Decimal("0.1758")
        assert rates.annual_tax_credit == Decimal("3362")
        assert rates.green_table_factor == Decimal("0.64")

    def test_unknown_year(self):
        """Unknown years raise a payroll error."""
        with pytest.raises(UnsupportedTaxYearError) as exc_info:
            get_tax_rates(1999)

        assert isinstance(exc_info.value, PayrollError)
        assert "1999" in str(exc_info.value)

    def test_available_years(self):
        """Test registry listing."""
        assert 2025 in available_tax_years()

    def test_brackets_must_end_unbounded(self):
        """A table whose last bracket has a limit is rejected."""
        with pytest.raises(ValueError):
            TaxYearRates(
                year=2099,
                brackets=(TaxBracket(upper_limit=Decimal("1000"), rate=Decimal("0.3")),),
                social_security=SocialSecurityRates(
                    aow=Decimal("0"), wlz=Decimal("0"), ww=Decimal("0")
                ),
                annual_tax_credit=Decimal("0"),
                green_table_factor=Decimal("1"),
            )


class TestBracketTax:
    """Tests for progressive bracket tax."""

    def test_first_bracket(self):
        """Test wage within the first bracket."""
        assert calculate_bracket_tax(Decimal("3000")) == Decimal("1109.1000")

    def test_second_bracket(self):
        """Test wage spanning two brackets."""
        expected = Decimal("38098") * Decimal("0.3697") + Decimal("1902") * Decimal("0.4950")
        assert calculate_bracket_tax(Decimal("40000")) == expected

    def test_zero_wage(self):
        """Test zero wage."""
        assert calculate_bracket_tax(Decimal("0")) == Decimal("0")


class TestTaxWithholding:
    """Tests for withholding per table."""

    def test_white_with_credit(self):
        """Test standard monthly wage."""
        assert calculate_tax_withholding(Decimal("3000"), TaxTable.WHITE, True) == Decimal("828.93")

    def test_white_without_credit(self):
        """Test without tax credit."""
        assert calculate_tax_withholding(Decimal("3000"), TaxTable.WHITE, False) == Decimal("1109.10")

    def test_green_table(self):
        """Green table withholds 64% of the bracket tax."""
        assert calculate_tax_withholding(Decimal("3000"), TaxTable.GREEN, False) == Decimal("709.82")
        assert calculate_tax_withholding(Decimal("3000"), TaxTable.GREEN, True) == Decimal("429.66")

    def test_special_table_uses_white_brackets(self):
        """The special table has no adjustment of its own."""
        assert calculate_tax_withholding(
            Decimal("3000"), TaxTable.SPECIAL, True
        ) == calculate_tax_withholding(Decimal("3000"), TaxTable.WHITE, True)

    def test_credit_floors_at_zero(self):
        """The credit never makes tax negative."""
        assert calculate_tax_withholding(Decimal("500"), TaxTable.WHITE, True) == Decimal("0.00")
        assert calculate_tax_withholding(Decimal("-100"), TaxTable.WHITE, True) == Decimal("0.00")

    def test_negative_wage_without_credit(self):
        """A negative wage gives negative tax."""
        assert calculate_tax_withholding(Decimal("-100"), TaxTable.WHITE, False) == Decimal("-36.97")

    def test_accepts_int_and_float(self):
        """Plain numbers are converted."""
        assert calculate_tax_withholding(3000, TaxTable.WHITE, True) == Decimal("828.93")
        assert calculate_tax_withholding(3000.0, "white", True) == Decimal("828.93")

    def test_monotonic_in_wage(self):
        """Higher wages never give lower tax."""
        previous = None
        for wage in range(0, 90000, 1500):
            tax = calculate_tax_withholding(Decimal(wage), TaxTable.WHITE, True)
            if previous is not None:
                assert tax >= previous
            previous = tax

    def test_green_scaling(self):
        """Without credit the green table is 0.64 times the unrounded bracket tax."""
        for cents in range(100000, 500000, 997):
            wage = Decimal(cents) / 100
            green = calculate_tax_withholding(wage, TaxTable.GREEN, False)
            assert green == round_currency(calculate_bracket_tax(wage) * Decimal("0.64"))

    def test_green_scaling_rounds_once(self):
        """Scaling happens before rounding, not on the rounded white amount."""
        wage = Decimal("1000.07")

        assert calculate_tax_withholding(wage, TaxTable.WHITE, False) == Decimal("369.73")
        assert calculate_tax_withholding(wage, TaxTable.GREEN, False) == Decimal("236.62")

    def test_unknown_year(self):
        """Unknown tax year propagates."""
        with pytest.raises(UnsupportedTaxYearError):
            calculate_tax_withholding(Decimal("3000"), TaxTable.WHITE, True, year=1999)


class TestSocialSecurity:
    """Tests for employee insurance premiums."""

    def test_components(self):
        """Test premiums on 3000."""
        premiums = calculate_social_security(Decimal("3000"))

        assert premiums.aow == Decimal("527.40")
        assert premiums.wlz == Decimal("297.00")
        assert premiums.ww == Decimal("82.20")
        assert premiums.total == Decimal("906.60")

    def test_total_is_sum_of_rounded_components(self):
        """Each component is rounded before summing."""
        premiums = calculate_social_security(Decimal("1234.57"))

        assert premiums.total == premiums.aow + premiums.wlz + premiums.ww
        for value in (premiums.aow, premiums.wlz, premiums.ww):
            assert value == value.quantize(Decimal("0.01"))

    def test_zero_wage(self):
        """Test zero wage."""
        assert calculate_social_security(Decimal("0")).total == Decimal("0")
