"""Wage-tax withholding and social-security calculators."""

from decimal import Decimal

from nl_payroll.core.models.enums import TaxTable
from nl_payroll.core.models.tax_return import SocialSecurityContributions
from nl_payroll.core.rules.tax_constants import get_tax_rates
from nl_payroll.shared.formatters import round_currency


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_bracket_tax(gross_wage: Decimal, year: int | None = None) -> Decimal:
    """Unrounded progressive tax on gross_wage for the white table.

    Each bracket taxes the part of the wage between the previous limit and
    its own. A negative wage falls in the first bracket and gives negative
    tax.
    """
    rates = get_tax_rates(year)
    gross_wage = _to_decimal(gross_wage)

    tax = Decimal("0")
    lower = Decimal("0")

    for bracket in rates.brackets:
        if bracket.upper_limit is None or gross_wage <= bracket.upper_limit:
            tax += (gross_wage - lower) * bracket.rate
            break
        tax += (bracket.upper_limit - lower) * bracket.rate
        lower = bracket.upper_limit

    return tax


def calculate_tax_withholding(
    gross_wage: Decimal | int | float,
    tax_table: TaxTable | str,
    has_tax_credit: bool,
    year: int | None = None,
) -> Decimal:
    """
    Calculate wage tax (loonheffing) to withhold.

    Args:
        gross_wage: Taxable wage for the period
        tax_table: white, green or special table
        has_tax_credit: Whether the monthly loonheffingskorting applies
        year: Tax year of the rate table (default year when omitted)

    Returns:
        Tax rounded to cents. Never below zero when the credit applies.
    """
    rates = get_tax_rates(year)
    tax = calculate_bracket_tax(_to_decimal(gross_wage), rates.year)

    if tax_table == TaxTable.GREEN:
        tax *= rates.green_table_factor

    if has_tax_credit:
        tax = max(Decimal("0"), tax - rates.monthly_tax_credit)

    return round_currency(tax)


def calculate_social_security(
    gross_wage: Decimal | int | float,
    year: int | None = None,
) -> SocialSecurityContributions:
    """
    Calculate AOW, WLZ and WW contributions.

    Every component is rounded to cents on its own; the total is the sum of
    the rounded components.

    Args:
        gross_wage: Wage the premiums are levied on
        year: Tax year of the rate table

    Returns:
        SocialSecurityContributions
    """
    premiums = get_tax_rates(year).social_security
    gross_wage = _to_decimal(gross_wage)

    aow = round_currency(gross_wage * premiums.aow)
    wlz = round_currency(gross_wage * premiums.wlz)
    ww = round_currency(gross_wage * premiums.ww)

    return SocialSecurityContributions(aow=aow, wlz=wlz, ww=ww, total=aow + wlz + ww)
