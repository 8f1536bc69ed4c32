"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from nl_payroll.core.models import (
    CAO,
    Company,
    ContactInfo,
    Employee,
    GrossPay,
    PayrollAllowances,
    PayrollDeductions,
    PayrollRecord,
    SalaryInfo,
    TaxTable,
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def payroll_json_path(fixtures_dir: Path) -> Path:
    """Return path to sample payroll export."""
    return fixtures_dir / "payroll.json"


@pytest.fixture
def company() -> Company:
    """Employer with contact details."""
    return Company(
        id="c-1",
        name="Bouwbedrijf De Vries B.V.",
        kvk="12345678",
        tax_number="123456789L01",
        contact_info=ContactInfo(email="salaris@devries.nl", phone="0201234567"),
    )


@pytest.fixture
def employee() -> Employee:
    """Full-time employee with a valid BSN on the white table."""
    return Employee(
        id="e-1",
        first_name="Jan",
        last_name="Jansen",
        bsn="111222333",
        date_of_birth=date(1985, 3, 14),
        hours_per_week=40,
        cao=CAO(code="BOUW", name="Bouw & Infra"),
        salary_info=SalaryInfo(tax_table=TaxTable.WHITE, tax_credit=True),
    )


@pytest.fixture
def payroll_record() -> PayrollRecord:
    """January payroll: 3000 base salary plus 250 holiday allowance."""
    return PayrollRecord(
        employee_id="e-1",
        period_start=date(2025, 1, 1),
        period_end=date(2025, 1, 31),
        gross=GrossPay(base_salary=Decimal("3000"), total=Decimal("3250")),
        deductions=PayrollDeductions(pension=Decimal("150"), total=Decimal("150")),
        allowances=PayrollAllowances(holiday=Decimal("250")),
        net=Decimal("2300"),
    )
