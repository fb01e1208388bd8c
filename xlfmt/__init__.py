"""Spreadsheet number-format parsing, cell value formatting and HSL colour conversion."""

__version__ = "0.1.0"
__all__ = ["hsl", "numfmt", "timefmt", "valuefmt"]