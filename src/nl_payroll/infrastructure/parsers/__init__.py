"""Input file parsers for nl-payroll."""

from nl_payroll.infrastructure.parsers.payroll_file import (
    EmployeePayroll,
    PayrollFile,
    load_payroll_file,
)

__all__ = [
    "EmployeePayroll",
    "PayrollFile",
    "load_payroll_file",
]
