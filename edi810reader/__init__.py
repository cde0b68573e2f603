"""Reader and renderer for ANSI X12 EDI 810 invoices."""

__version__ = "0.1.0"