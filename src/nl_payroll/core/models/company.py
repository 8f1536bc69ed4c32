"""Employer and employee records read by the payroll engine."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from nl_payroll.core.models.enums import TaxTable


class ContactInfo(BaseModel):
    """Contact details of the submitting employer."""

    email: str = Field(..., description="Contact e-mail address")
    phone: str = Field(default="", description="Contact phone number")

    model_config = {"frozen": True}


class Company(BaseModel):
    """Employer (inhoudingsplichtige)."""

    id: str = Field(default="", description="Company identifier")
    name: str = Field(default="", description="Trade name")
    kvk: str = Field(..., description="Chamber of Commerce (KvK) number")
    tax_number: str = Field(..., description="Loonheffingennummer")
    contact_info: ContactInfo

    model_config = {"frozen": True}


class CAO(BaseModel):
    """Collective labour agreement (collectieve arbeidsovereenkomst)."""

    code: str = Field(..., description="CAO code, e.g. BOUW")
    name: Optional[str] = Field(default=None)
    sector: Optional[str] = Field(default=None)
    extra_days: Optional[int] = Field(
        default=None, description="ADV days granted by the agreement"
    )

    model_config = {"frozen": True}


class SalaryInfo(BaseModel):
    """Wage-tax settings of an employee."""

    tax_table: TaxTable = Field(default=TaxTable.WHITE)
    tax_credit: bool = Field(
        default=True, description="Apply loonheffingskorting"
    )

    model_config = {"frozen": True}


class Employee(BaseModel):
    """Employee as known to the payroll administration."""

    id: str = Field(..., description="Employee identifier")
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    bsn: str = Field(default="", description="Burgerservicenummer")
    date_of_birth: Optional[date] = Field(default=None)
    hours_per_week: float = Field(default=40, ge=0)
    cao: Optional[CAO] = Field(default=None)
    salary_info: SalaryInfo = Field(default_factory=SalaryInfo)

    @property
    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"

    model_config = {"frozen": True}
