"""Validation passes over computed payroll data."""

from nl_payroll.core.analyzers.tax_return_validator import (
    TaxReturnValidator,
    has_blocking_errors,
    validate_tax_return,
)

__all__ = [
    "TaxReturnValidator",
    "has_blocking_errors",
    "validate_tax_return",
]
