"""Tax return validator.

Computation never rejects incomplete data; this pass collects every
finding so a caller can show them all before deciding to submit.
"""

from nl_payroll.core.models.enums import Severity, ValidationCode
from nl_payroll.core.models.tax_return import EmployeeTaxData, TaxReturn
from nl_payroll.core.models.validation import ValidationError
from nl_payroll.shared.validators import validate_bsn


class TaxReturnValidator:
    """Checks a tax return for errors and warnings."""

    def __init__(self, tax_return: TaxReturn):
        self.tax_return = tax_return
        self.findings: list[ValidationError] = []

    def validate(self) -> list[ValidationError]:
        """Run all checks and return findings in a stable order."""
        self.findings = []

        self._check_has_employees()
        for employee in self.tax_return.employee_data:
            self._check_employee(employee)
        self._check_totals()

        return self.findings

    def _check_has_employees(self) -> None:
        if not self.tax_return.employee_data:
            self.findings.append(
                ValidationError(
                    field="employeeData",
                    code=ValidationCode.NO_EMPLOYEES,
                    message="Geen werknemers gevonden voor deze periode",
                    severity=Severity.ERROR,
                )
            )

    def _check_employee(self, employee: EmployeeTaxData) -> None:
        if not validate_bsn(employee.bsn):
            self.findings.append(
                ValidationError(
                    field="bsn",
                    code=ValidationCode.INVALID_BSN,
                    message=f"Ongeldig BSN nummer voor {employee.full_name}",
                    severity=Severity.ERROR,
                    employee_id=employee.employee_id,
                )
            )

        if employee.wages.total <= 0:
            self.findings.append(
                ValidationError(
                    field="wages",
                    code=ValidationCode.NO_WAGES,
                    message=f"Geen loon gevonden voor {employee.full_name}",
                    severity=Severity.WARNING,
                    employee_id=employee.employee_id,
                )
            )

        if employee.tax.tax_withheld < 0:
            self.findings.append(
                ValidationError(
                    field="tax",
                    code=ValidationCode.NEGATIVE_TAX,
                    message=f"Negatieve loonheffing voor {employee.full_name}",
                    severity=Severity.ERROR,
                    employee_id=employee.employee_id,
                )
            )

    def _check_totals(self) -> None:
        if self.tax_return.totals.total_gross_wages <= 0:
            self.findings.append(
                ValidationError(
                    field="totals",
                    code=ValidationCode.NO_TOTAL_WAGES,
                    message="Totaal bruto loon is 0 of negatief",
                    severity=Severity.ERROR,
                )
            )


def validate_tax_return(tax_return: TaxReturn) -> list[ValidationError]:
    """Convenience function to validate a tax return."""
    return TaxReturnValidator(tax_return).validate()


def has_blocking_errors(findings: list[ValidationError]) -> bool:
    """True if any finding has error severity."""
    return any(f.is_blocking for f in findings)
