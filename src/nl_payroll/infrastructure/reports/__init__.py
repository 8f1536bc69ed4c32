"""Report generators for nl-payroll."""

from nl_payroll.infrastructure.reports.loonaangifte_xml import (
    attach_xml,
    generate_loonaangifte_xml,
    split_name,
    write_loonaangifte_xml,
)

__all__ = [
    "attach_xml",
    "generate_loonaangifte_xml",
    "split_name",
    "write_loonaangifte_xml",
]
