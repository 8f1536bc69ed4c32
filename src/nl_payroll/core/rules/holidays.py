"""Dutch public holidays and working-day counting."""

from calendar import monthrange
from datetime import date, datetime, timedelta

from nl_payroll.core.models.calendar import PublicHoliday

# Liberation Day is a day off only in lustrum years
LIBERATION_DAY_INTERVAL = 5


def _as_date(value: date) -> date:
    """Drop the time component of a datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def get_easter_date(year: int) -> date:
    """Compute Easter Sunday with the anonymous Gregorian algorithm.

    Args:
        year: Gregorian calendar year

    Returns:
        Date of Easter Sunday
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1

    return date(year, month, day)


def get_whitsun_date(year: int) -> date:
    """Whit Sunday (Pinksteren), seven weeks after Easter."""
    return get_easter_date(year) + timedelta(days=49)


def get_public_holidays(year: int) -> list[PublicHoliday]:
    """List the Dutch public holidays of a year in calendar order.

    Args:
        year: Calendar year

    Returns:
        Holidays including the Easter-based movable feasts, and Liberation
        Day when the year is divisible by five
    """
    easter = get_easter_date(year)
    whitsun = get_whitsun_date(year)

    holidays = [
        PublicHoliday(day=date(year, 1, 1), name="Nieuwjaarsdag"),
        PublicHoliday(day=easter - timedelta(days=2), name="Goede Vrijdag"),
        PublicHoliday(day=easter, name="Eerste Paasdag"),
        PublicHoliday(day=easter + timedelta(days=1), name="Tweede Paasdag"),
        PublicHoliday(day=date(year, 4, 27), name="Koningsdag"),
        PublicHoliday(day=easter + timedelta(days=39), name="Hemelvaartsdag"),
        PublicHoliday(day=whitsun, name="Eerste Pinksterdag"),
        PublicHoliday(day=whitsun + timedelta(days=1), name="Tweede Pinksterdag"),
        PublicHoliday(day=date(year, 12, 25), name="Eerste Kerstdag"),
        PublicHoliday(day=date(year, 12, 26), name="Tweede Kerstdag"),
    ]

    if year % LIBERATION_DAY_INTERVAL == 0:
        holidays.append(PublicHoliday(day=date(year, 5, 5), name="Bevrijdingsdag"))

    return holidays


def is_public_holiday(day: date) -> bool:
    """Check whether a date is a Dutch public holiday.

    Only year, month and day are compared; the time of a datetime is ignored.
    """
    day = _as_date(day)
    return any(holiday.day == day for holiday in get_public_holidays(day.year))


def calculate_working_days(
    start_date: date,
    end_date: date,
    exclude_weekends: bool = True,
) -> int:
    """Count working days from start to end, both inclusive.

    Public holidays never count. Weekend days count only when
    exclude_weekends is False. An end before the start yields 0.

    Args:
        start_date: First day of the range
        end_date: Last day of the range
        exclude_weekends: Skip Saturdays and Sundays

    Returns:
        Number of working days
    """
    current = _as_date(start_date)
    end = _as_date(end_date)
    count = 0

    while current <= end:
        # weekday(): Monday is 0, Saturday 5, Sunday 6
        if not exclude_weekends or current.weekday() < 5:
            if not is_public_holiday(current):
                count += 1
        current += timedelta(days=1)

    return count


def get_working_days_in_month(year: int, month: int) -> int:
    """Working days in a calendar month (month is 1-based)."""
    last_day = monthrange(year, month)[1]
    return calculate_working_days(date(year, month, 1), date(year, month, last_day))


def get_working_days_in_year(year: int) -> int:
    """Working days in a calendar year."""
    return calculate_working_days(date(year, 1, 1), date(year, 12, 31))
