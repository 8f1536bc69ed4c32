"""Wage-tax and social-security rate tables.

Tables are versioned per tax year and looked up with :func:`get_tax_rates`;
calculators never read a year's figures directly, so adding a year only
means registering another :class:`TaxYearRates`.
Sources:
- https://www.belastingdienst.nl/wps/wcm/connect/nl/personeel-en-loon/content/hulpmiddel-loonbelastingtabellen
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from nl_payroll.shared.exceptions import UnsupportedTaxYearError


class TaxBracket(BaseModel):
    """One wage-tax bracket (schijf)."""

    upper_limit: Optional[Decimal] = Field(
        default=None, description="Inclusive upper wage limit, None for the last bracket"
    )
    rate: Decimal = Field(..., ge=0, le=1)

    model_config = {"frozen": True}


class SocialSecurityRates(BaseModel):
    """Premium rates for the employee insurances."""

    aow: Decimal = Field(..., ge=0, description="Algemene Ouderdomswet")
    wlz: Decimal = Field(..., ge=0, description="Wet langdurige zorg")
    ww: Decimal = Field(..., ge=0, description="Werkloosheidswet")

    model_config = {"frozen": True}


class TaxYearRates(BaseModel):
    """All rates that apply to a single tax year."""

    year: int
    brackets: tuple[TaxBracket, ...]
    social_security: SocialSecurityRates
    annual_tax_credit: Decimal = Field(..., ge=0, description="Loonheffingskorting per year")
    green_table_factor: Decimal = Field(..., ge=0)

    @model_validator(mode="after")
    def check_brackets(self) -> "TaxYearRates":
        """Brackets must ascend and only the last one may be unbounded."""
        if not self.brackets:
            raise ValueError("Tarieftabel heeft geen schijven")

        previous = Decimal("0")
        for bracket in self.brackets[:-1]:
            if bracket.upper_limit is None:
                raise ValueError("Alleen de laatste schijf mag onbegrensd zijn")
            if bracket.upper_limit <= previous:
                raise ValueError("Schijfgrenzen moeten oplopen")
            previous = bracket.upper_limit

        if self.brackets[-1].upper_limit is not None:
            raise ValueError("De laatste schijf moet onbegrensd zijn")

        return self

    @property
    def monthly_tax_credit(self) -> Decimal:
        """Tax credit applied per monthly wage payment."""
        return self.annual_tax_credit / 12

    model_config = {"frozen": True}


# === 2025 ===

RATES_2025 = TaxYearRates(
    year=2025,
    brackets=(
        TaxBracket(upper_limit=Decimal("38098"), rate=Decimal("0.3697")),
        TaxBracket(upper_limit=Decimal("75518"), rate=Decimal("0.4950")),
        TaxBracket(upper_limit=None, rate=Decimal("0.4950")),
    ),
    social_security=SocialSecurityRates(
        aow=Decimal("0.1758"),
        wlz=Decimal("0.0990"),
        ww=Decimal("0.0274"),
    ),
    annual_tax_credit=Decimal("3362"),
    # Green table (benefits paid by third parties) withholds 64% of white
    green_table_factor=Decimal("0.64"),
)

TAX_RATES: dict[int, TaxYearRates] = {
    2025: RATES_2025,
}

DEFAULT_TAX_YEAR = 2025


def get_tax_rates(year: int | None = None) -> TaxYearRates:
    """Look up the rate table of a tax year.

    Args:
        year: Tax year, defaults to DEFAULT_TAX_YEAR

    Returns:
        Registered TaxYearRates

    Raises:
        UnsupportedTaxYearError: If no table is registered for the year
    """
    if year is None:
        year = DEFAULT_TAX_YEAR

    try:
        return TAX_RATES[year]
    except KeyError:
        raise UnsupportedTaxYearError(year, sorted(TAX_RATES)) from None


def available_tax_years() -> list[int]:
    """Return the registered tax years in ascending order."""
    return sorted(TAX_RATES)
