"""Validation finding model."""

from typing import Optional

from pydantic import BaseModel, Field

from nl_payroll.core.models.enums import Severity, ValidationCode


class ValidationError(BaseModel):
    """A finding produced by tax-return validation.

    This is returned as data, never raised.
    """

    field: str = Field(..., description="Name of the offending field")
    code: ValidationCode = Field(..., description="Machine-readable code")
    message: str = Field(..., description="Human-readable message (Dutch)")
    severity: Severity = Field(default=Severity.ERROR)
    employee_id: Optional[str] = Field(default=None)

    @property
    def is_blocking(self) -> bool:
        """Error findings block submission, warnings do not."""
        return self.severity == Severity.ERROR

    model_config = {"frozen": True}
