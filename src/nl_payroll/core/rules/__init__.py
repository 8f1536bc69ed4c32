"""Statutory rules: rate tables, public holidays, leave and sick-leave schedules."""

from nl_payroll.core.rules.holidays import (
    calculate_working_days,
    get_easter_date,
    get_public_holidays,
    get_whitsun_date,
    get_working_days_in_month,
    get_working_days_in_year,
    is_public_holiday,
)
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
from nl_payroll.core.rules.tax_constants import (
    DEFAULT_TAX_YEAR,
    TAX_RATES,
    SocialSecurityRates,
    TaxBracket,
    TaxYearRates,
    available_tax_years,
    get_tax_rates,
)

__all__ = [
    "DEFAULT_TAX_YEAR",
    "TAX_RATES",
    "SocialSecurityRates",
    "TaxBracket",
    "TaxYearRates",
    "available_tax_years",
    "calculate_absence_percentage",
    "calculate_adv_days",
    "calculate_expiry_date",
    "calculate_monthly_holiday_accrual",
    "calculate_working_days",
    "calculate_working_hours",
    "calculate_yearly_holiday_entitlement",
    "format_expense_type",
    "format_leave_type",
    "get_days_until_expiry",
    "get_easter_date",
    "get_public_holidays",
    "get_tax_rates",
    "get_whitsun_date",
    "get_working_days_in_month",
    "get_working_days_in_year",
    "is_public_holiday",
    "should_warn_about_expiry",
]
