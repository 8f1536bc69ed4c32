"""Parser for JSON payroll export files."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from nl_payroll.core.models.company import Company, Employee
from nl_payroll.core.models.payroll import PayrollRecord
from nl_payroll.core.models.tax_return import TaxReturnPeriod
from nl_payroll.shared.exceptions import CorruptedFileError, ParseError, UnsupportedFileError
from nl_payroll.shared.logging_config import get_logger

logger = get_logger(__name__)

SUPPORTED_SUFFIXES = (".json",)


class EmployeePayroll(BaseModel):
    """An employee together with the payroll records of the period."""

    employee: Employee
    payroll_records: list[PayrollRecord] = Field(default_factory=list)

    model_config = {"frozen": True}


class PayrollFile(BaseModel):
    """Contents of a payroll export: employer, optional period, employees."""

    company: Company
    period: Optional[TaxReturnPeriod] = Field(default=None)
    employees: list[EmployeePayroll] = Field(default_factory=list)

    def payroll(self) -> list[tuple[Employee, list[PayrollRecord]]]:
        """(employee, records) pairs as expected by the tax-return generator."""
        return [(e.employee, e.payroll_records) for e in self.employees]

    model_config = {"frozen": True}


def load_payroll_file(file_path: Path) -> PayrollFile:
    """Load and validate a payroll export.

    Args:
        file_path: Path to the .json file

    Returns:
        PayrollFile

    Raises:
        UnsupportedFileError: If the file is not JSON
        ParseError: If the file cannot be read
        CorruptedFileError: If the content does not match the expected structure
    """
    if file_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise UnsupportedFileError(
            f"Bestandsformaat niet ondersteund: {file_path.suffix}. "
            "Gebruik een JSON-export van de salarisadministratie."
        )

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParseError(f"Kan {file_path} niet lezen: {e}") from e

    try:
        payroll_file = PayrollFile.model_validate_json(content)
    except PydanticValidationError as e:
        raise CorruptedFileError(
            f"Ongeldige inhoud in {file_path.name}: {e.error_count()} fout(en)\n{e}"
        ) from e

    logger.info(
        "Payroll file loaded",
        extra={"path": str(file_path), "employees": len(payroll_file.employees)},
    )
    return payroll_file
