"""Domain models for Dutch payroll and tax returns."""

from nl_payroll.core.models.calendar import PoortwachterMilestone, PublicHoliday
from nl_payroll.core.models.company import CAO, Company, ContactInfo, Employee, SalaryInfo
from nl_payroll.core.models.enums import (
    MilestoneStatus,
    PeriodType,
    Severity,
    TaxReturnStatus,
    TaxTable,
    ValidationCode,
)
from nl_payroll.core.models.payroll import (
    GrossPay,
    PayrollAllowances,
    PayrollDeductions,
    PayrollRecord,
)
from nl_payroll.core.models.tax_return import (
    EmployeeTaxData,
    PeriodData,
    SocialSecurityContributions,
    TaxBreakdown,
    TaxDeductions,
    TaxReturn,
    TaxReturnPeriod,
    TaxReturnTotals,
    Wages,
)
from nl_payroll.core.models.validation import ValidationError

__all__ = [
    "CAO",
    "Company",
    "ContactInfo",
    "Employee",
    "EmployeeTaxData",
    "GrossPay",
    "MilestoneStatus",
    "PayrollAllowances",
    "PayrollDeductions",
    "PayrollRecord",
    "PeriodData",
    "PeriodType",
    "PoortwachterMilestone",
    "PublicHoliday",
    "SalaryInfo",
    "Severity",
    "SocialSecurityContributions",
    "TaxBreakdown",
    "TaxDeductions",
    "TaxReturn",
    "TaxReturnPeriod",
    "TaxReturnStatus",
    "TaxReturnTotals",
    "TaxTable",
    "ValidationCode",
    "ValidationError",
    "Wages",
]
