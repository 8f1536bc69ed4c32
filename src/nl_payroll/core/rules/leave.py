"""Leave entitlement rules and related time arithmetic."""

import math
from datetime import date, datetime, timedelta
from typing import Optional

from nl_payroll.core.models.company import CAO

# Statutory minimum: four times the weekly working hours per year
STATUTORY_WEEKS_PER_YEAR = 4

# ADV days in the construction agreement when the CAO does not specify them
DEFAULT_BOUW_ADV_DAYS = 13

# Warn about expiring leave this many days in advance
EXPIRY_WARNING_DAYS = 90

# Statutory leave expires five years after the year it was accrued in
DEFAULT_EXPIRY_YEARS = 5

LEAVE_TYPE_LABELS = {
    "holiday": "Vakantie",
    "sick": "Ziekte",
    "special": "Bijzonder verlof",
    "unpaid": "Onbetaald verlof",
    "parental": "Ouderschapsverlof",
    "care": "Zorgverlof",
    "short_leave": "Kort verzuim",
    "adv": "ADV",
}

EXPENSE_TYPE_LABELS = {
    "travel": "Reiskosten",
    "meal": "Maaltijden",
    "accommodation": "Accommodatie",
    "phone": "Telefoon",
    "office": "Kantoor",
    "training": "Opleiding",
    "representation": "Representatie",
    "other": "Overig",
}


def calculate_monthly_holiday_accrual(
    hours_per_week: float, cao: Optional[CAO] = None
) -> float:
    """Holiday hours accrued per month.

    The CAO is accepted for future sector rules and currently ignored.
    """
    return STATUTORY_WEEKS_PER_YEAR * hours_per_week / 12


def calculate_yearly_holiday_entitlement(
    hours_per_week: float, cao: Optional[CAO] = None
) -> float:
    """Statutory holiday hours per year. The CAO is currently ignored."""
    return STATUTORY_WEEKS_PER_YEAR * hours_per_week


def calculate_adv_days(hours_per_week: float, cao: Optional[CAO] = None) -> int:
    """ADV days granted by the collective agreement.

    Only the construction agreement (BOUW) grants ADV days: its own number
    of extra days, or 13 when it does not specify one. Any other agreement
    grants none.
    """
    if cao is not None and cao.code == "BOUW":
        return cao.extra_days or DEFAULT_BOUW_ADV_DAYS
    return 0


def _as_datetime(value: date) -> datetime:
    """Naive local datetime; aware values are converted to local time first."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def get_days_until_expiry(expiry_date: date, now: Optional[datetime] = None) -> int:
    """Days left until expiry, rounded up. Negative once expired.

    Args:
        expiry_date: Expiry moment; a plain date means local midnight
        now: Reference moment, defaults to the current local time.
            Naive and timezone-aware values may be mixed.

    Returns:
        Ceiling of the remaining time in days
    """
    if now is None:
        now = datetime.now()

    remaining = _as_datetime(expiry_date) - _as_datetime(now)
    return math.ceil(remaining / timedelta(days=1))


def should_warn_about_expiry(expiry_date: date, now: Optional[datetime] = None) -> bool:
    """True when expiry is at most 90 days ahead and not yet reached."""
    days = get_days_until_expiry(expiry_date, now)
    return 0 < days <= EXPIRY_WARNING_DAYS


def calculate_expiry_date(base_date: date, years_to_add: int = DEFAULT_EXPIRY_YEARS) -> date:
    """Add whole years to a date.

    February 29 moves to March 1 when the target year has no leap day.
    """
    target_year = base_date.year + years_to_add
    try:
        return base_date.replace(year=target_year)
    except ValueError:
        return base_date.replace(year=target_year, month=3, day=1)


def _parse_minutes(value: str) -> float:
    """Minutes since midnight for "HH:MM"; nan when not parseable."""
    parts = value.split(":")
    try:
        hours = float(parts[0])
        minutes = float(parts[1])
    except (IndexError, ValueError):
        return math.nan
    return hours * 60 + minutes


def calculate_working_hours(start_time: str, end_time: str) -> float:
    """Hours between two "HH:MM" clock times.

    Shifts past midnight are not wrapped and give a negative result.
    Malformed times give nan.
    """
    return (_parse_minutes(end_time) - _parse_minutes(start_time)) / 60


def calculate_absence_percentage(sick_days: float, total_working_days: float) -> float:
    """Sick days as a percentage of working days (0 without working days)."""
    if total_working_days == 0:
        return 0.0
    return sick_days / total_working_days * 100


def format_leave_type(leave_type: str) -> str:
    """Dutch label of a leave type; unknown types are returned unchanged."""
    return LEAVE_TYPE_LABELS.get(leave_type, leave_type)


def format_expense_type(expense_type: str) -> str:
    """Dutch label of an expense type; unknown types are returned unchanged."""
    return EXPENSE_TYPE_LABELS.get(expense_type, expense_type)
