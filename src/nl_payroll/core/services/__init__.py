"""Domain services for nl-payroll."""

from nl_payroll.core.services.tax_calculator import (
    calculate_bracket_tax,
    calculate_social_security,
    calculate_tax_withholding,
)
from nl_payroll.core.services.tax_return_generator import (
    PeriodDates,
    TaxReturnGenerator,
    aggregate_employee_tax_data,
    calculate_totals,
    generate_tax_return,
    get_filing_deadline,
    get_period_dates,
)

__all__ = [
    "PeriodDates",
    "TaxReturnGenerator",
    "aggregate_employee_tax_data",
    "calculate_bracket_tax",
    "calculate_social_security",
    "calculate_tax_withholding",
    "calculate_totals",
    "generate_tax_return",
    "get_filing_deadline",
    "get_period_dates",
]
