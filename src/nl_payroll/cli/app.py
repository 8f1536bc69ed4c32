"""Main Typer application for nl-payroll."""

import logging
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from nl_payroll import __version__
from nl_payroll.cli.console import (
    console,
    milestone_style,
    print_error,
    print_finding,
    print_info,
    print_success,
)
from nl_payroll.core.analyzers import has_blocking_errors
from nl_payroll.core.models import CAO, PeriodType, TaxTable
from nl_payroll.core.rules import (
    calculate_adv_days,
    calculate_monthly_holiday_accrual,
    calculate_working_days,
    calculate_yearly_holiday_entitlement,
    get_public_holidays,
    get_tax_rates,
)
from nl_payroll.core.rules.poortwachter import (
    generate_poortwachter_milestones,
    update_milestone_status,
)
from nl_payroll.core.services import (
    calculate_social_security,
    calculate_tax_withholding,
    generate_tax_return,
    get_filing_deadline,
    get_period_dates,
)
from nl_payroll.infrastructure.parsers import load_payroll_file
from nl_payroll.infrastructure.reports import write_loonaangifte_xml
from nl_payroll.shared.exceptions import PayrollError
from nl_payroll.shared.formatters import format_currency, format_date, format_percentage
from nl_payroll.shared.logging_config import configure_logging, get_logger
from nl_payroll.shared.validators import mask_bsn, validate_bsn

logger = get_logger(__name__)

app = typer.Typer(
    name="nl-payroll",
    help="Loonheffing, loonaangifte en verlofkalender voor Nederlandse salarisadministratie",
    add_completion=True,
    no_args_is_help=True,
)

DAY_NAMES = ("ma", "di", "wo", "do", "vr", "za", "zo")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"nl-payroll v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Toont de versie en stopt",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Toont voortgangsmeldingen op stderr"),
    ] = False,
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Logregels als JSON"),
    ] = False,
) -> None:
    """nl-payroll - Nederlandse loonheffing en loonaangifte."""
    configure_logging(
        level=logging.INFO if verbose else None, json_format=json_logs, force=True
    )


@app.command()
def holidays(
    year: Annotated[int, typer.Argument(help="Kalenderjaar")],
) -> None:
    """Toont de officiële feestdagen van een jaar."""
    table = Table(show_header=True, header_style="bold", title=f"Feestdagen {year}")
    table.add_column("Datum")
    table.add_column("Dag", width=4)
    table.add_column("Feestdag", style="cyan")

    for holiday in sorted(get_public_holidays(year), key=lambda h: h.day):
        table.add_row(
            format_date(holiday.day),
            DAY_NAMES[holiday.day.weekday()],
            holiday.name,
        )

    console.print(table)


@app.command("working-days")
def working_days(
    start: Annotated[
        datetime, typer.Argument(help="Eerste dag (JJJJ-MM-DD)", formats=["%Y-%m-%d"])
    ],
    end: Annotated[
        datetime, typer.Argument(help="Laatste dag (JJJJ-MM-DD)", formats=["%Y-%m-%d"])
    ],
    include_weekends: Annotated[
        bool,
        typer.Option("--include-weekends", help="Tel zaterdag en zondag mee"),
    ] = False,
) -> None:
    """Telt werkdagen tussen twee datums (inclusief), zonder feestdagen."""
    count = calculate_working_days(
        start.date(), end.date(), exclude_weekends=not include_weekends
    )
    console.print(
        f"[header]Werkdagen[/header] {format_date(start.date())} t/m "
        f"{format_date(end.date())}: [value]{count}[/value]"
    )


@app.command("check-bsn")
def check_bsn(
    bsn: Annotated[str, typer.Argument(help="Burgerservicenummer (9 cijfers)")],
) -> None:
    """Controleert een BSN met de elfproef."""
    if validate_bsn(bsn):
        print_success(f"BSN {mask_bsn(bsn)} is geldig")
    else:
        print_error(f"BSN {mask_bsn(bsn)} voldoet niet aan de elfproef")
        raise typer.Exit(1)


@app.command()
def tax(
    wage: Annotated[float, typer.Argument(help="Bruto loon over het tijdvak")],
    table: Annotated[
        TaxTable, typer.Option("--table", "-t", help="Loonbelastingtabel")
    ] = TaxTable.WHITE,
    credit: Annotated[
        bool,
        typer.Option("--credit/--no-credit", help="Loonheffingskorting toepassen"),
    ] = True,
    tax_year: Annotated[
        Optional[int], typer.Option("--tax-year", "-y", help="Belastingjaar")
    ] = None,
) -> None:
    """Berekent loonheffing en werknemerspremies voor een bruto loon."""
    try:
        rates = get_tax_rates(tax_year)
        gross = Decimal(str(wage))
        withheld = calculate_tax_withholding(gross, table, credit, rates.year)
        premiums = calculate_social_security(gross, rates.year)
    except PayrollError as e:
        print_error(str(e))
        raise typer.Exit(1)

    result = Table(show_header=True, header_style="bold", title=f"Belastingjaar {rates.year}")
    result.add_column("Onderdeel", style="cyan")
    result.add_column("Tarief", justify="right")
    result.add_column("Bedrag", justify="right", style="currency")

    result.add_row("Bruto loon", "", format_currency(gross))
    result.add_row(f"Loonheffing ({table.value})", "", format_currency(withheld))
    result.add_row("AOW", format_percentage(rates.social_security.aow), format_currency(premiums.aow))
    result.add_row("WLZ", format_percentage(rates.social_security.wlz), format_currency(premiums.wlz))
    result.add_row("WW", format_percentage(rates.social_security.ww), format_currency(premiums.ww))
    result.add_row("[bold]Totaal premies[/bold]", "", f"[bold]{format_currency(premiums.total)}[/bold]")

    console.print(result)


@app.command()
def period(
    year: Annotated[int, typer.Argument(help="Kalenderjaar")],
    period_type: Annotated[
        PeriodType, typer.Option("--period-type", "-p", help="Soort tijdvak")
    ] = PeriodType.MONTHLY,
    number: Annotated[
        Optional[int], typer.Option("--period", "-n", help="Maand- of kwartaalnummer")
    ] = None,
) -> None:
    """Toont begin, einde en aangiftedeadline van een tijdvak."""
    dates = get_period_dates(year, period_type, number)
    deadline = get_filing_deadline(year, period_type, number)

    console.print(
        Panel.fit(
            f"[header]Begin:[/header] {format_date(dates.start_date)}\n"
            f"[header]Einde:[/header] {format_date(dates.end_date)}\n"
            f"[header]Werkdagen:[/header] {calculate_working_days(dates.start_date, dates.end_date)}\n"
            f"[header]Uiterste aangiftedatum:[/header] {format_date(deadline)}",
            title=f"Tijdvak {year} ({period_type.value})",
            border_style="blue",
        )
    )


@app.command()
def leave(
    hours_per_week: Annotated[float, typer.Argument(help="Contracturen per week")],
    cao: Annotated[
        Optional[str], typer.Option("--cao", help="CAO-code, bijvoorbeeld BOUW")
    ] = None,
    extra_days: Annotated[
        Optional[int], typer.Option("--adv-days", help="ADV-dagen volgens de CAO")
    ] = None,
) -> None:
    """Toont de wettelijke verlofopbouw voor een aantal contracturen."""
    agreement = CAO(code=cao, extra_days=extra_days) if cao else None

    table = Table(show_header=True, header_style="bold", title="Verlofopbouw")
    table.add_column("Onderdeel", style="cyan")
    table.add_column("Waarde", justify="right")

    table.add_row(
        "Vakantie-uren per maand",
        f"{calculate_monthly_holiday_accrual(hours_per_week, agreement):.2f}",
    )
    table.add_row(
        "Vakantie-uren per jaar",
        f"{calculate_yearly_holiday_entitlement(hours_per_week, agreement):.2f}",
    )
    table.add_row("ADV-dagen per jaar", str(calculate_adv_days(hours_per_week, agreement)))

    console.print(table)


@app.command()
def poortwachter(
    start: Annotated[
        datetime,
        typer.Argument(help="Eerste ziektedag (JJJJ-MM-DD)", formats=["%Y-%m-%d"]),
    ],
) -> None:
    """Toont het re-integratieschema (Wet verbetering poortwachter)."""
    today = date.today()
    milestones = [
        update_milestone_status(m, today)
        for m in generate_poortwachter_milestones(start.date())
    ]

    table = Table(show_header=True, header_style="bold", title="Poortwachter-schema")
    table.add_column("Week", justify="right", width=5)
    table.add_column("Uiterlijk")
    table.add_column("Actie", overflow="fold")
    table.add_column("Status")

    for m in milestones:
        style = milestone_style(m.status)
        table.add_row(
            str(m.week),
            format_date(m.due_date),
            m.action,
            f"[{style}]{m.status.value}[/{style}]",
        )

    console.print(table)


@app.command()
def aangifte(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="JSON-export met werkgever, werknemers en loonstroken",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Pad voor het XML-bestand"),
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", help="Aangiftejaar (overschrijft bestand)")
    ] = None,
    period_type: Annotated[
        Optional[PeriodType], typer.Option("--period-type", "-p", help="Soort tijdvak")
    ] = None,
    number: Annotated[
        Optional[int], typer.Option("--period", "-n", help="Maand- of kwartaalnummer")
    ] = None,
    tax_year: Annotated[
        Optional[int], typer.Option("--tax-year", help="Belastingjaar voor de tarieven")
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", help="Schrijf XML ook bij validatiefouten")
    ] = False,
) -> None:
    """Stelt de loonaangifte samen, valideert hem en schrijft de XML."""
    try:
        payroll_file = load_payroll_file(input_file)

        file_period = payroll_file.period
        year = year or (file_period.year if file_period else date.today().year)
        period_type = period_type or (file_period.type if file_period else PeriodType.MONTHLY)
        if number is None and file_period is not None:
            number = file_period.period_number or None

        tax_return = generate_tax_return(
            payroll_file.company,
            payroll_file.payroll(),
            year,
            period_type,
            number,
            tax_year,
        )
    except PayrollError as e:
        print_error(str(e))
        raise typer.Exit(1)

    company = payroll_file.company
    totals = tax_return.totals

    console.print()
    console.print(
        Panel.fit(
            f"[header]Werkgever:[/header] {company.name or company.kvk}\n"
            f"[header]Loonheffingennummer:[/header] {company.tax_number}\n"
            f"[header]Tijdvak:[/header] {tax_return.period.year} "
            f"{period_type.value} {tax_return.period.period_number}\n"
            f"[header]Werknemers:[/header] {totals.number_of_employees}",
            title="Loonaangifte",
            border_style="blue",
        )
    )

    employees = Table(show_header=True, header_style="bold")
    employees.add_column("Naam", style="cyan")
    employees.add_column("BSN")
    employees.add_column("Loon", justify="right")
    employees.add_column("Loonheffing", justify="right")
    employees.add_column("Premies", justify="right")
    employees.add_column("Netto", justify="right", style="currency")

    for emp in tax_return.employee_data:
        employees.add_row(
            emp.full_name,
            mask_bsn(emp.bsn),
            format_currency(emp.wages.total),
            format_currency(emp.tax.tax_withheld),
            format_currency(emp.social_security.total),
            format_currency(emp.net_wage),
        )
    employees.add_row(
        "[bold]Totaal[/bold]",
        "",
        f"[bold]{format_currency(totals.total_gross_wages)}[/bold]",
        f"[bold]{format_currency(totals.total_tax_withheld)}[/bold]",
        f"[bold]{format_currency(totals.total_social_contributions)}[/bold]",
        f"[bold]{format_currency(totals.total_net_wages)}[/bold]",
    )
    console.print(employees)

    findings = tax_return.validation_errors
    if findings:
        console.print()
        console.print("[header]Validatie:[/header]")
        for finding in findings:
            print_finding(finding)
    else:
        print_info("Geen validatiebevindingen")

    blocking = has_blocking_errors(findings)
    if blocking and not force:
        print_error("Aangifte bevat fouten; er is geen XML geschreven")
        raise typer.Exit(1)

    if output is None:
        output = input_file.with_suffix(".xml")

    try:
        write_loonaangifte_xml(tax_return, company, output)
    except PayrollError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Loonaangifte opgeslagen in {output}")
    if blocking:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
