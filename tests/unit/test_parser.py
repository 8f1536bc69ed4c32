"""Tests for the payroll file parser."""

from decimal import Decimal
from pathlib import Path

import pytest

from nl_payroll.core.models import PeriodType, TaxTable
from nl_payroll.infrastructure.parsers import load_payroll_file
from nl_payroll.shared.exceptions import (
    CorruptedFileError,
    ParseError,
    PayrollError,
    UnsupportedFileError,
)


class TestLoadPayrollFile:
    """Tests for load_payroll_file."""

    def test_load_sample(self, payroll_json_path: Path):
        """Test parsing the sample export."""
        payroll_file = load_payroll_file(payroll_json_path)

        assert payroll_file.company.kvk == "12345678"
        assert payroll_file.company.contact_info.email == "salaris@devries.nl"
        assert payroll_file.period.year == 2025
        assert payroll_file.period.type == PeriodType.MONTHLY
        assert payroll_file.period.period_number == 1
        assert len(payroll_file.employees) == 2

    def test_employee_fields(self, payroll_json_path: Path):
        """Nested models and defaults are filled in."""
        payroll_file = load_payroll_file(payroll_json_path)
        first, second = payroll_file.employees

        assert first.employee.full_name == "Jan Jansen"
        assert first.employee.cao.code == "BOUW"
        assert first.payroll_records[0].gross.total == Decimal("3250.00")
        assert first.payroll_records[0].allowances.holiday == Decimal("250.00")

        assert second.employee.date_of_birth is None
        assert second.employee.salary_info.tax_table == TaxTable.GREEN
        assert second.employee.salary_info.tax_credit is False
        assert second.payroll_records[0].deductions.total == Decimal("0")

    def test_payroll_pairs(self, payroll_json_path: Path):
        """Pairs feed the tax-return generator."""
        pairs = load_payroll_file(payroll_json_path).payroll()

        assert [employee.id for employee, _ in pairs] == ["e-1", "e-2"]
        assert len(pairs[0][1]) == 1

    def test_unsupported_extension(self, tmp_path: Path):
        """Only JSON exports are accepted."""
        path = tmp_path / "payroll.csv"
        path.write_text("kvk;naam\n")

        with pytest.raises(UnsupportedFileError):
            load_payroll_file(path)

    def test_missing_file(self, tmp_path: Path):
        """A missing file raises ParseError."""
        with pytest.raises(ParseError):
            load_payroll_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        """Malformed JSON is reported as corrupted."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(CorruptedFileError):
            load_payroll_file(path)

    def test_missing_required_field(self, tmp_path: Path):
        """A company without KvK number is rejected."""
        path = tmp_path / "incomplete.json"
        path.write_text(
            '{"company": {"tax_number": "123456789L01", '
            '"contact_info": {"email": "a@b.nl"}}}'
        )

        with pytest.raises(CorruptedFileError) as exc_info:
            load_payroll_file(path)

        assert isinstance(exc_info.value, PayrollError)
        assert "incomplete.json" in str(exc_info.value)
