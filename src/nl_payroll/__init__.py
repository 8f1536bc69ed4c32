"""nl-payroll: Dutch payroll tax, loonaangifte and leave calendar rules."""

__version__ = "0.1.0"
