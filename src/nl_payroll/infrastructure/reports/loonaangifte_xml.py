"""Loonaangifte XML serializer.

The receiving schema is fixed: tag names, nesting, order and indentation
below must not change.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape

from nl_payroll.core.models.company import Company
from nl_payroll.core.models.enums import PeriodType
from nl_payroll.core.models.tax_return import EmployeeTaxData, TaxReturn
from nl_payroll.shared.exceptions import ReportGenerationError
from nl_payroll.shared.formatters import format_amount
from nl_payroll.shared.logging_config import get_logger

logger = get_logger(__name__)

NAMESPACE = "http://www.nltaxonomie.nl/2023/loonaangifte"
SCHEMA_VERSION = "2023.01"

# Employment relation codes reported for every employee
CODE_AARD_ARBEIDSVERHOUDING = "10"
CODE_SOORT_INKOMSTENVERHOUDING = "11"

PERIOD_TYPE_LABELS = {
    PeriodType.MONTHLY: "maand",
    PeriodType.QUARTERLY: "kwartaal",
    PeriodType.ANNUAL: "jaar",
}


@dataclass(frozen=True)
class XMLHeader:
    submitter_kvk: str
    submitter_tax_number: str
    contact_person: str
    contact_email: str
    contact_phone: str


@dataclass(frozen=True)
class XMLPeriod:
    year: int
    period_number: int
    period_type: str


@dataclass(frozen=True)
class XMLEmployee:
    bsn: str
    voorletters: str
    achternaam: str
    geboortedatum: str
    datum_aanvang: str
    datum_einde: Optional[str]
    loon_tijdvak: str
    loon_over_tijdvak: Decimal
    loonheffing: Decimal
    aow: Decimal
    wlz: Decimal
    ww: Decimal


@dataclass(frozen=True)
class XMLTotals:
    totaal_loon: Decimal
    totaal_ingehouden: Decimal
    totaal_premies: Decimal


def split_name(full_name: str) -> tuple[str, str]:
    """Split a full name into initials and surname.

    The initial is the uppercased first letter of the first word and the
    surname is the last word; prefixes such as "van der" are not recognised.
    """
    parts = full_name.split(" ")
    return parts[0][:1].upper(), parts[-1]


def _map_employee(employee: EmployeeTaxData, message_date: date) -> XMLEmployee:
    voorletters, achternaam = split_name(employee.full_name)
    birth_date = employee.date_of_birth or message_date
    period = employee.period_data

    return XMLEmployee(
        bsn=employee.bsn,
        voorletters=voorletters,
        achternaam=achternaam,
        geboortedatum=birth_date.isoformat(),
        datum_aanvang=period.start_date.isoformat(),
        datum_einde=period.end_date.isoformat() if period.end_date else None,
        loon_tijdvak=period.start_date.strftime("%Y-%m"),
        loon_over_tijdvak=employee.wages.total,
        loonheffing=employee.tax.tax_withheld,
        aow=employee.social_security.aow,
        wlz=employee.social_security.wlz,
        ww=employee.social_security.ww,
    )


def _employee_xml(emp: XMLEmployee) -> str:
    datum_einde = (
        f"<DatumEinde>{emp.datum_einde}</DatumEinde>" if emp.datum_einde else ""
    )
    return (
        "    <Werknemer>\n"
        f"      <BSN>{escape(emp.bsn)}</BSN>\n"
        f"      <Voorletters>{escape(emp.voorletters)}</Voorletters>\n"
        f"      <Achternaam>{escape(emp.achternaam)}</Achternaam>\n"
        f"      <Geboortedatum>{emp.geboortedatum}</Geboortedatum>\n"
        "      <Inkomstenverhouding>\n"
        f"        <DatumAanvang>{emp.datum_aanvang}</DatumAanvang>\n"
        f"        {datum_einde}\n"
        f"        <CodeAardArbeidsverhouding>{CODE_AARD_ARBEIDSVERHOUDING}</CodeAardArbeidsverhouding>\n"
        f"        <CodeSoortInkomstenverhouding>{CODE_SOORT_INKOMSTENVERHOUDING}</CodeSoortInkomstenverhouding>\n"
        "      </Inkomstenverhouding>\n"
        "      <Loongegevens>\n"
        f"        <LoonTijdvak>{emp.loon_tijdvak}</LoonTijdvak>\n"
        f"        <LoonOverTijdvak>{format_amount(emp.loon_over_tijdvak)}</LoonOverTijdvak>\n"
        f"        <Loonheffing>{format_amount(emp.loonheffing)}</Loonheffing>\n"
        "        <PremieVolksverzekeringen>\n"
        f"          <AOW>{format_amount(emp.aow)}</AOW>\n"
        f"          <WLZ>{format_amount(emp.wlz)}</WLZ>\n"
        "        </PremieVolksverzekeringen>\n"
        "        <PremieWerknemersverzekeringen>\n"
        f"          <WW>{format_amount(emp.ww)}</WW>\n"
        "        </PremieWerknemersverzekeringen>\n"
        "      </Loongegevens>\n"
        "    </Werknemer>"
    )


def _document_xml(
    header: XMLHeader,
    period: XMLPeriod,
    employees: list[XMLEmployee],
    totals: XMLTotals,
    message_date: date,
) -> str:
    werknemers = "\n".join(_employee_xml(emp) for emp in employees)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<Loonaangifte xmlns="{NAMESPACE}" version="{SCHEMA_VERSION}">\n'
        "  <Bericht>\n"
        f"    <BerichtVersie>{SCHEMA_VERSION}</BerichtVersie>\n"
        "    <BerichtType>Loonaangifte</BerichtType>\n"
        f"    <BerichtDatum>{message_date.isoformat()}</BerichtDatum>\n"
        "  </Bericht>\n"
        "  <Administratie>\n"
        f"    <Administratienummer>{escape(header.submitter_kvk)}</Administratienummer>\n"
        "    <LoonheffingsnummerInhoudingsplichtige>"
        f"{escape(header.submitter_tax_number)}"
        "</LoonheffingsnummerInhoudingsplichtige>\n"
        "    <Contactpersoon>\n"
        f"      <Naam>{escape(header.contact_person)}</Naam>\n"
        f"      <Email>{escape(header.contact_email)}</Email>\n"
        f"      <Telefoon>{escape(header.contact_phone)}</Telefoon>\n"
        "    </Contactpersoon>\n"
        "  </Administratie>\n"
        "  <Tijdvak>\n"
        f"    <Jaar>{period.year}</Jaar>\n"
        f"    <Periode>{period.period_number}</Periode>\n"
        f"    <PeriodeType>{period.period_type}</PeriodeType>\n"
        "  </Tijdvak>\n"
        "  <Werknemers>\n"
        f"{werknemers}\n"
        "  </Werknemers>\n"
        "  <Totalen>\n"
        f"    <TotaalLoon>{format_amount(totals.totaal_loon)}</TotaalLoon>\n"
        f"    <TotaalIngehouden>{format_amount(totals.totaal_ingehouden)}</TotaalIngehouden>\n"
        f"    <TotaalPremies>{format_amount(totals.totaal_premies)}</TotaalPremies>\n"
        "  </Totalen>\n"
        "</Loonaangifte>"
    )


def generate_loonaangifte_xml(
    tax_return: TaxReturn,
    company: Company,
    message_date: Optional[date] = None,
) -> str:
    """
    Render a tax return as loonaangifte XML.

    Args:
        tax_return: Aggregated tax return
        company: Submitting employer
        message_date: BerichtDatum, defaults to today. Also used as birth
            date for employees whose birth date is unknown.

    Returns:
        XML document as string
    """
    if message_date is None:
        message_date = date.today()

    email = company.contact_info.email
    header = XMLHeader(
        submitter_kvk=company.kvk,
        submitter_tax_number=company.tax_number,
        contact_person=email.split("@")[0],
        contact_email=email,
        contact_phone=company.contact_info.phone,
    )
    period = XMLPeriod(
        year=tax_return.period.year,
        period_number=tax_return.period.period_number,
        period_type=PERIOD_TYPE_LABELS.get(tax_return.period.type, "jaar"),
    )
    employees = [_map_employee(e, message_date) for e in tax_return.employee_data]
    totals = XMLTotals(
        totaal_loon=tax_return.totals.total_gross_wages,
        totaal_ingehouden=tax_return.totals.total_tax_withheld,
        totaal_premies=tax_return.totals.total_social_contributions,
    )

    return _document_xml(header, period, employees, totals, message_date)


def attach_xml(
    tax_return: TaxReturn,
    company: Company,
    message_date: Optional[date] = None,
) -> TaxReturn:
    """Return a copy of the tax return with its XML rendition attached."""
    xml = generate_loonaangifte_xml(tax_return, company, message_date)
    return tax_return.model_copy(update={"xml_data": xml})


def write_loonaangifte_xml(
    tax_return: TaxReturn,
    company: Company,
    output_path: Path,
    message_date: Optional[date] = None,
) -> Path:
    """
    Render and save the loonaangifte XML.

    Args:
        tax_return: Aggregated tax return
        company: Submitting employer
        output_path: Target file; parent directories are created
        message_date: BerichtDatum, defaults to today

    Returns:
        Path of the written file

    Raises:
        ReportGenerationError: If the file cannot be written
    """
    xml = generate_loonaangifte_xml(tax_return, company, message_date)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise ReportGenerationError(
            f"Kan loonaangifte niet opslaan in {output_path}: {e}"
        ) from e

    logger.info(
        "Loonaangifte XML written",
        extra={"path": str(output_path), "employees": len(tax_return.employee_data)},
    )
    return output_path
