"""Tax return (loonaangifte) models."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from nl_payroll.core.models.enums import PeriodType, TaxReturnStatus, TaxTable
from nl_payroll.core.models.validation import ValidationError


class PeriodData(BaseModel):
    """Boundaries of the period covered by an employee's figures."""

    start_date: date
    end_date: date
    days_worked: int = Field(
        default=0, description="Approximation: 21 working days per payroll record"
    )

    model_config = {"frozen": True}


class Wages(BaseModel):
    """Wage breakdown reported for the period."""

    gross_salary: Decimal = Field(default=Decimal("0"))
    overtime: Decimal = Field(default=Decimal("0"))
    bonuses: Decimal = Field(default=Decimal("0"))
    holiday_allowance: Decimal = Field(default=Decimal("0"))
    other_allowances: Decimal = Field(default=Decimal("0"))
    total: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}


class TaxDeductions(BaseModel):
    """Employee deductions reported for the period."""

    pension_employee: Decimal = Field(default=Decimal("0"))
    other_deductions: Decimal = Field(default=Decimal("0"))
    total: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}


class TaxBreakdown(BaseModel):
    """Wage tax figures."""

    taxable_wage: Decimal = Field(default=Decimal("0"))
    tax_withheld: Decimal = Field(default=Decimal("0"))
    tax_credit: bool = Field(default=False)
    tax_table: TaxTable = Field(default=TaxTable.WHITE)

    model_config = {"frozen": True}


class SocialSecurityContributions(BaseModel):
    """Employee insurance contributions, each rounded to cents."""

    aow: Decimal = Field(default=Decimal("0"), description="Old-age pension")
    wlz: Decimal = Field(default=Decimal("0"), description="Long-term care")
    ww: Decimal = Field(default=Decimal("0"), description="Unemployment insurance")
    total: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}


class EmployeeTaxData(BaseModel):
    """One employee's aggregated wage and tax figures for a filing period."""

    employee_id: str
    bsn: str
    full_name: str
    date_of_birth: Optional[date] = Field(default=None)
    period_data: PeriodData
    wages: Wages = Field(default_factory=Wages)
    deductions: TaxDeductions = Field(default_factory=TaxDeductions)
    tax: TaxBreakdown = Field(default_factory=TaxBreakdown)
    social_security: SocialSecurityContributions = Field(
        default_factory=SocialSecurityContributions
    )
    net_wage: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}


class TaxReturnPeriod(BaseModel):
    """Filing period of a tax return."""

    year: int
    type: PeriodType = Field(default=PeriodType.MONTHLY)
    month: Optional[int] = Field(default=None)
    quarter: Optional[int] = Field(default=None)

    @property
    def period_number(self) -> int:
        """Month or quarter number, 0 for annual returns."""
        return self.month or self.quarter or 0

    model_config = {"frozen": True}


class TaxReturnTotals(BaseModel):
    """Return-wide totals, each the sum over all employees."""

    total_gross_wages: Decimal = Field(default=Decimal("0"))
    total_tax_withheld: Decimal = Field(default=Decimal("0"))
    total_social_contributions: Decimal = Field(default=Decimal("0"))
    total_net_wages: Decimal = Field(default=Decimal("0"))
    number_of_employees: int = Field(default=0)

    model_config = {"frozen": True}


class TaxReturn(BaseModel):
    """A filing period's full loonaangifte."""

    id: str = Field(default="")
    company_id: str = Field(default="")
    period: TaxReturnPeriod
    status: TaxReturnStatus = Field(default=TaxReturnStatus.DRAFT)
    employee_data: list[EmployeeTaxData] = Field(default_factory=list)
    totals: TaxReturnTotals = Field(default_factory=TaxReturnTotals)
    xml_data: Optional[str] = Field(default=None)
    validation_errors: list[ValidationError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """True if any error-severity finding is attached."""
        return any(e.is_blocking for e in self.validation_errors)

    model_config = {"frozen": True}
