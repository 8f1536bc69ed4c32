"""Calendar and absence models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from nl_payroll.core.models.enums import MilestoneStatus


class PublicHoliday(BaseModel):
    """A Dutch public holiday (feestdag)."""

    day: date
    name: str

    model_config = {"frozen": True}


class PoortwachterMilestone(BaseModel):
    """Reintegration milestone under the Wet verbetering poortwachter."""

    week: int = Field(..., ge=0, description="Weeks after the first sick day")
    action: str
    due_date: date
    status: MilestoneStatus = Field(default=MilestoneStatus.PENDING)
    completed_date: Optional[date] = Field(default=None)

    model_config = {"frozen": True}
