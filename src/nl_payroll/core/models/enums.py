"""Enumerations for payroll domain models."""

from enum import Enum


class TaxTable(str, Enum):
    """Wage-tax table (loonbelastingtabel)."""

    WHITE = "white"
    GREEN = "green"
    SPECIAL = "special"


class PeriodType(str, Enum):
    """Filing period (aangiftetijdvak)."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"


class TaxReturnStatus(str, Enum):
    """Lifecycle of a tax return."""

    DRAFT = "draft"
    VALIDATED = "validated"
    SUBMITTED = "submitted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CORRECTED = "corrected"


class Severity(str, Enum):
    """Severity levels for validation findings."""

    ERROR = "error"
    WARNING = "warning"


class ValidationCode(str, Enum):
    """Machine-readable validation finding codes."""

    NO_EMPLOYEES = "NO_EMPLOYEES"
    INVALID_BSN = "INVALID_BSN"
    NO_WAGES = "NO_WAGES"
    NEGATIVE_TAX = "NEGATIVE_TAX"
    NO_TOTAL_WAGES = "NO_TOTAL_WAGES"


class MilestoneStatus(str, Enum):
    """Status of a Poortwachter reintegration milestone."""

    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"
