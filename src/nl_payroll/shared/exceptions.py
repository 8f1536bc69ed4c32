"""Custom exceptions for nl-payroll."""


class PayrollError(Exception):
    """Base exception for all nl-payroll errors."""

    pass


class ParseError(PayrollError):
    """Error reading a payroll input file."""

    pass


class UnsupportedFileError(ParseError):
    """File format not supported."""

    pass


class CorruptedFileError(ParseError):
    """File is corrupted or does not match the expected structure."""

    pass


class UnsupportedTaxYearError(PayrollError):
    """No rate table registered for the requested tax year."""

    def __init__(self, year: int, available: list[int]):
        self.year = year
        self.available = available
        jaren = ", ".join(str(y) for y in available)
        super().__init__(
            f"Geen tarieven bekend voor belastingjaar {year} (beschikbaar: {jaren})"
        )


class ReportGenerationError(PayrollError):
    """Error writing a generated report."""

    pass
