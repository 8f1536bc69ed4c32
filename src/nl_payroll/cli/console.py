"""Rich console configuration for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from nl_payroll.core.models import MilestoneStatus, Severity, ValidationError

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "header": "bold blue",
        "value": "bold",
        "currency": "green",
        "finding_error": "red",
        "finding_warning": "yellow",
        "milestone_pending": "cyan",
        "milestone_completed": "green",
        "milestone_overdue": "red bold",
    }
)

# Global console instance
console = Console(theme=THEME)


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Fout:[/error] {message}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Waarschuwing:[/warning] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[info]{message}[/info]")


def print_finding(finding: ValidationError) -> None:
    """Print one tax-return validation finding, coloured by severity.

    The code and message are escaped, so brackets in employee names or
    codes are shown literally.
    """
    if finding.severity == Severity.ERROR:
        style, label = "finding_error", "Fout"
    else:
        style, label = "finding_warning", "Waarschuwing"
    text = escape(f"[{finding.code.value}] {finding.message}")
    console.print(f"  [{style}]{label}:[/{style}] {text}")


def milestone_style(status: MilestoneStatus) -> str:
    """Theme style name for a reintegration milestone status."""
    return f"milestone_{status.value}"
