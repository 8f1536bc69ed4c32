"""Reintegration schedule for long-term sick leave (Wet verbetering poortwachter)."""

from datetime import date, timedelta
from typing import Optional

from nl_payroll.core.models.calendar import PoortwachterMilestone
from nl_payroll.core.models.enums import MilestoneStatus

# (week, action) pairs, counted from the first sick day
POORTWACHTER_MILESTONES: tuple[tuple[int, str], ...] = (
    (6, "Probleemanalyse: Werkgever en werknemer maken samen een probleemanalyse"),
    (8, "Plan van aanpak: Opstellen van een concreet plan van aanpak voor re-integratie"),
    (13, "Evaluatie 1: Eerste evaluatie van de voortgang en bijstelling plan indien nodig"),
    (26, "Evaluatie 2: Tweede evaluatie en actualisatie van het plan van aanpak"),
    (42, "Arbo-arts: Betrek de bedrijfsarts/arbodienst voor ondersteuning en advies"),
    (52, "Evaluatie 3: Jaarlijkse evaluatie van de re-integratie inspanningen"),
    (78, "Evaluatie 4: Voorbereiden voor mogelijke WIA aanvraag binnen 6 maanden"),
    (91, "WIA Voorbereiding: Start voorbereidingen voor WIA aanvraag (3 maanden voor 2 jaar)"),
    (104, "WIA Aanvraag: Indienen WIA aanvraag bij UWV (verplicht na 2 jaar ziekte)"),
)

ACTIVATION_WEEKS = 6
ARBO_WEEK = 42
WIA_PREPARATION_WEEKS = 91


def _today(current_date: Optional[date]) -> date:
    return current_date if current_date is not None else date.today()


def generate_poortwachter_milestones(start_date: date) -> list[PoortwachterMilestone]:
    """Build the full milestone schedule for a sick leave starting on start_date."""
    return [
        PoortwachterMilestone(
            week=week,
            action=action,
            due_date=start_date + timedelta(weeks=week),
            status=MilestoneStatus.PENDING,
        )
        for week, action in POORTWACHTER_MILESTONES
    ]


def update_milestone_status(
    milestone: PoortwachterMilestone,
    current_date: Optional[date] = None,
) -> PoortwachterMilestone:
    """Return a copy with the status recomputed for current_date."""
    current_date = _today(current_date)

    if milestone.completed_date is not None:
        status = MilestoneStatus.COMPLETED
    elif current_date > milestone.due_date:
        status = MilestoneStatus.OVERDUE
    else:
        status = MilestoneStatus.PENDING

    return milestone.model_copy(update={"status": status})


def get_overdue_milestones(
    milestones: list[PoortwachterMilestone],
    current_date: Optional[date] = None,
) -> list[PoortwachterMilestone]:
    """Milestones past their due date without completion."""
    current_date = _today(current_date)
    updated = [update_milestone_status(m, current_date) for m in milestones]
    return [m for m in updated if m.status == MilestoneStatus.OVERDUE]


def get_upcoming_milestones(
    milestones: list[PoortwachterMilestone],
    days_ahead: int = 7,
    current_date: Optional[date] = None,
) -> list[PoortwachterMilestone]:
    """Open milestones due within the next days_ahead days (inclusive)."""
    current_date = _today(current_date)
    horizon = current_date + timedelta(days=days_ahead)

    return [
        m
        for m in milestones
        if m.completed_date is None and current_date <= m.due_date <= horizon
    ]


def get_weeks_since_sick_leave(start_date: date, current_date: Optional[date] = None) -> int:
    """Whole weeks elapsed since the first sick day."""
    current_date = _today(current_date)
    return (current_date - start_date).days // 7


def should_activate_poortwachter(start_date: date, current_date: Optional[date] = None) -> bool:
    """The schedule applies once an employee has been sick for six weeks."""
    current_date = _today(current_date)
    return current_date - start_date >= timedelta(weeks=ACTIVATION_WEEKS)


def should_contact_arbo(
    milestones: list[PoortwachterMilestone],
    current_date: Optional[date] = None,
) -> bool:
    """True when the occupational-health milestone is due and still open."""
    current_date = _today(current_date)
    arbo = next((m for m in milestones if m.week == ARBO_WEEK), None)
    if arbo is None:
        return False
    return current_date >= arbo.due_date and arbo.completed_date is None


def should_start_wia_preparation(start_date: date, current_date: Optional[date] = None) -> bool:
    """WIA application preparation starts three months before the two-year mark."""
    return get_weeks_since_sick_leave(start_date, current_date) >= WIA_PREPARATION_WEEKS


def get_next_milestone(
    milestones: list[PoortwachterMilestone],
    current_date: Optional[date] = None,
) -> Optional[PoortwachterMilestone]:
    """Earliest open milestone due today or later."""
    current_date = _today(current_date)
    upcoming = [
        m for m in milestones if m.completed_date is None and m.due_date >= current_date
    ]
    return min(upcoming, key=lambda m: m.due_date, default=None)


def complete_milestone(
    milestone: PoortwachterMilestone,
    completion_date: Optional[date] = None,
) -> PoortwachterMilestone:
    """Mark a milestone as completed."""
    return milestone.model_copy(
        update={
            "completed_date": _today(completion_date),
            "status": MilestoneStatus.COMPLETED,
        }
    )


def get_milestone_completion_percentage(milestones: list[PoortwachterMilestone]) -> float:
    """Share of completed milestones in percent."""
    if not milestones:
        return 0.0
    completed = sum(1 for m in milestones if m.status == MilestoneStatus.COMPLETED)
    return completed / len(milestones) * 100
