"""Tax return (loonaangifte) aggregation from period payroll records."""

from calendar import monthrange
from datetime import date
from decimal import Decimal
from typing import Iterable, NamedTuple, Optional

from nl_payroll.core.analyzers.tax_return_validator import validate_tax_return
from nl_payroll.core.models.company import Company, Employee
from nl_payroll.core.models.enums import PeriodType, TaxReturnStatus
from nl_payroll.core.models.payroll import PayrollRecord
from nl_payroll.core.models.tax_return import (
    EmployeeTaxData,
    PeriodData,
    TaxBreakdown,
    TaxDeductions,
    TaxReturn,
    TaxReturnPeriod,
    TaxReturnTotals,
    Wages,
)
from nl_payroll.core.services.tax_calculator import (
    calculate_social_security,
    calculate_tax_withholding,
)
from nl_payroll.shared.logging_config import get_logger

logger = get_logger(__name__)

# Flat estimate of working days per payroll record (one record per month)
WORKING_DAYS_PER_RECORD = 21


class PeriodDates(NamedTuple):
    """First and last day of a filing period."""

    start_date: date
    end_date: date


def _month(year: int, month_index: int) -> tuple[int, int]:
    """Normalise a 0-based month index that may run outside 0..11."""
    year_offset, month_index = divmod(month_index, 12)
    return year + year_offset, month_index + 1


def _last_day(year: int, month: int) -> date:
    return date(year, month, monthrange(year, month)[1])


def get_period_dates(
    year: int,
    period_type: PeriodType | str,
    period_number: Optional[int] = None,
) -> PeriodDates:
    """
    Return the boundaries of a filing period.

    Args:
        year: Calendar year
        period_type: monthly, quarterly or annual
        period_number: 1-based month or quarter; ignored for annual periods

    Returns:
        PeriodDates. Without a period number, or for annual periods, the
        whole year. Numbers outside the year roll over into adjacent years.
    """
    if period_type == PeriodType.MONTHLY and period_number:
        start_year, start_month = _month(year, period_number - 1)
        return PeriodDates(
            date(start_year, start_month, 1),
            _last_day(start_year, start_month),
        )

    if period_type == PeriodType.QUARTERLY and period_number:
        start_year, start_month = _month(year, (period_number - 1) * 3)
        # Snap to the first month of the quarter that contains start_month
        start_month = (start_month - 1) // 3 * 3 + 1
        end_year, end_month = _month(start_year, start_month + 1)
        return PeriodDates(
            date(start_year, start_month, 1),
            _last_day(end_year, end_month),
        )

    return PeriodDates(date(year, 1, 1), date(year, 12, 31))


def get_filing_deadline(
    year: int,
    period_type: PeriodType | str,
    period_number: Optional[int] = None,
) -> date:
    """The return is due on the last day of the month after the period."""
    period_end = get_period_dates(year, period_type, period_number).end_date
    deadline_year, deadline_month = _month(period_end.year, period_end.month)
    return _last_day(deadline_year, deadline_month)


def aggregate_employee_tax_data(
    employee: Employee,
    payroll_records: list[PayrollRecord],
    period_start: date,
    period_end: date,
    year: int | None = None,
) -> EmployeeTaxData:
    """
    Aggregate an employee's payroll records into tax-return figures.

    Only base salary, overtime and irregular-hours pay form the taxable
    wage. The reported wage total is the sum of the records' gross totals,
    which also contain allowances.

    Args:
        employee: Employee the records belong to
        payroll_records: Payroll records within the period
        period_start: First day of the filing period
        period_end: Last day of the filing period
        year: Tax year of the rate table

    Returns:
        EmployeeTaxData for the period
    """
    total_gross = sum((r.gross.total for r in payroll_records), Decimal("0"))
    total_deductions = sum((r.deductions.total for r in payroll_records), Decimal("0"))
    total_net = sum((r.net for r in payroll_records), Decimal("0"))

    gross_salary = sum((r.gross.base_salary for r in payroll_records), Decimal("0"))
    overtime = sum((r.gross.overtime for r in payroll_records), Decimal("0"))
    irregular_hours = sum((r.gross.irregular_hours for r in payroll_records), Decimal("0"))

    taxable_wage = gross_salary + overtime + irregular_hours

    salary_info = employee.salary_info
    social_security = calculate_social_security(taxable_wage, year)
    tax_withheld = calculate_tax_withholding(
        taxable_wage, salary_info.tax_table, salary_info.tax_credit, year
    )

    return EmployeeTaxData(
        employee_id=employee.id,
        bsn=employee.bsn,
        full_name=employee.full_name,
        date_of_birth=employee.date_of_birth,
        period_data=PeriodData(
            start_date=period_start,
            end_date=period_end,
            days_worked=len(payroll_records) * WORKING_DAYS_PER_RECORD,
        ),
        wages=Wages(
            gross_salary=gross_salary,
            overtime=overtime,
            bonuses=Decimal("0"),
            holiday_allowance=sum(
                (r.allowances.holiday for r in payroll_records), Decimal("0")
            ),
            other_allowances=sum(
                (r.allowances.travel for r in payroll_records), Decimal("0")
            ),
            total=total_gross,
        ),
        deductions=TaxDeductions(
            pension_employee=sum(
                (r.deductions.pension for r in payroll_records), Decimal("0")
            ),
            other_deductions=sum(
                (r.deductions.other for r in payroll_records), Decimal("0")
            ),
            total=total_deductions,
        ),
        tax=TaxBreakdown(
            taxable_wage=taxable_wage,
            tax_withheld=tax_withheld,
            tax_credit=salary_info.tax_credit,
            tax_table=salary_info.tax_table,
        ),
        social_security=social_security,
        net_wage=total_net,
    )


def calculate_totals(employee_data: list[EmployeeTaxData]) -> TaxReturnTotals:
    """Sum the per-employee figures into return-wide totals."""
    return TaxReturnTotals(
        total_gross_wages=sum((e.wages.total for e in employee_data), Decimal("0")),
        total_tax_withheld=sum((e.tax.tax_withheld for e in employee_data), Decimal("0")),
        total_social_contributions=sum(
            (e.social_security.total for e in employee_data), Decimal("0")
        ),
        total_net_wages=sum((e.net_wage for e in employee_data), Decimal("0")),
        number_of_employees=len(employee_data),
    )


class TaxReturnGenerator:
    """Builds a validated tax return for one company and filing period."""

    def __init__(
        self,
        company: Company,
        year: int,
        period_type: PeriodType = PeriodType.MONTHLY,
        period_number: Optional[int] = None,
        tax_year: Optional[int] = None,
    ):
        self.company = company
        self.period = TaxReturnPeriod(
            year=year,
            type=period_type,
            month=period_number if period_type == PeriodType.MONTHLY else None,
            quarter=period_number if period_type == PeriodType.QUARTERLY else None,
        )
        self.period_dates = get_period_dates(year, period_type, period_number)
        self.tax_year = tax_year if tax_year is not None else year

    def generate(
        self, payroll: Iterable[tuple[Employee, list[PayrollRecord]]]
    ) -> TaxReturn:
        """Aggregate all employees, total them and attach validation findings.

        The return is VALIDATED when no error-severity finding exists,
        otherwise it stays DRAFT.
        """
        logger.info(
            "Building tax return",
            extra={
                "company_kvk": self.company.kvk,
                "period_year": self.period.year,
                "period_type": self.period.type.value,
                "period_number": self.period.period_number,
            },
        )

        employee_data: list[EmployeeTaxData] = []
        for employee, records in payroll:
            logger.debug(
                "Aggregating employee",
                extra={"employee_id": employee.id, "records": len(records)},
            )
            employee_data.append(
                aggregate_employee_tax_data(
                    employee,
                    records,
                    self.period_dates.start_date,
                    self.period_dates.end_date,
                    self.tax_year,
                )
            )

        tax_return = TaxReturn(
            company_id=self.company.id,
            period=self.period,
            employee_data=employee_data,
            totals=calculate_totals(employee_data),
        )

        findings = validate_tax_return(tax_return)
        status = TaxReturnStatus.DRAFT
        if not any(f.is_blocking for f in findings):
            status = TaxReturnStatus.VALIDATED

        if findings:
            logger.warning(
                "Tax return has validation findings",
                extra={"findings": [f.code.value for f in findings]},
            )

        return tax_return.model_copy(
            update={"validation_errors": findings, "status": status}
        )


def generate_tax_return(
    company: Company,
    payroll: Iterable[tuple[Employee, list[PayrollRecord]]],
    year: int,
    period_type: PeriodType = PeriodType.MONTHLY,
    period_number: Optional[int] = None,
    tax_year: Optional[int] = None,
) -> TaxReturn:
    """Convenience function to build a tax return."""
    generator = TaxReturnGenerator(company, year, period_type, period_number, tax_year)
    return generator.generate(payroll)
