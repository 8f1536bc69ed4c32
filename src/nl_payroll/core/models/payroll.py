"""Period payroll records supplied by the payroll administration."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class GrossPay(BaseModel):
    """Gross pay breakdown for one pay period."""

    base_salary: Decimal = Field(default=Decimal("0"))
    overtime: Decimal = Field(default=Decimal("0"))
    irregular_hours: Decimal = Field(
        default=Decimal("0"), description="Onregelmatigheidstoeslag"
    )
    total: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}


class PayrollDeductions(BaseModel):
    """Deductions withheld from the employee."""

    pension: Decimal = Field(default=Decimal("0"))
    other: Decimal = Field(default=Decimal("0"))
    total: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}


class PayrollAllowances(BaseModel):
    """Allowances paid on top of the wage."""

    holiday: Decimal = Field(default=Decimal("0"), description="Vakantiegeld")
    travel: Decimal = Field(default=Decimal("0"), description="Reiskostenvergoeding")

    model_config = {"frozen": True}


class PayrollRecord(BaseModel):
    """Payroll calculation for one employee over one pay period."""

    employee_id: str = Field(default="")
    period_start: Optional[date] = Field(default=None)
    period_end: Optional[date] = Field(default=None)
    gross: GrossPay = Field(default_factory=GrossPay)
    deductions: PayrollDeductions = Field(default_factory=PayrollDeductions)
    allowances: PayrollAllowances = Field(default_factory=PayrollAllowances)
    net: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}
