"""Shared utilities for nl-payroll."""

from nl_payroll.shared.formatters import (
    format_amount,
    format_currency,
    format_percentage,
    round_currency,
)
from nl_payroll.shared.validators import (
    format_postal_code,
    mask_bsn,
    validate_bsn,
    validate_iban,
    validate_phone,
    validate_postal_code,
)

__all__ = [
    # Formatters
    "format_amount",
    "format_currency",
    "format_percentage",
    "round_currency",
    # Validators
    "format_postal_code",
    "mask_bsn",
    "validate_bsn",
    "validate_iban",
    "validate_phone",
    "validate_postal_code",
]
