"""Formatting of cell values according to spreadsheet number format codes."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

from xlfmt.numfmt import ParsedNumberFormat, parse_number_format
from xlfmt.timefmt import format_time

# General format switches to scientific notation outside [1e-9, 1e11).
_MIN_NON_SCIENTIFIC = 1e-9
_MAX_NON_SCIENTIFIC = 1e11
_SMALLEST_NONZERO = 5e-324

_EPOCH_1900 = datetime(1899, 12, 30, tzinfo=timezone.utc)
_EPOCH_1904 = datetime(1904, 1, 1, tzinfo=timezone.utc)

_FIXED_PRECISION = {
    "0": 0,
    "#,##0": 0,
    "0.0": 1,
    "#,##0.0": 1,
    "0.00": 2,
    "#,##0.00": 2,
    "0.000": 3,
    "#,##0.000": 3,
    "0.0000": 4,
    "#,##0.0000": 4,
}
_SCIENTIFIC = frozenset({"0.00e+00", "##0.0e+0"})
_INFINITY_WORDS = frozenset(
    {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"}
)


class CellType(Enum):
    """The kinds of value a spreadsheet cell can hold."""

    STRING = "s"
    STRING_FORMULA = "str"
    NUMERIC = "n"
    BOOL = "b"
    INLINE = "inlineStr"
    ERROR = "e"
    DATE = "d"


class ValueFormatError(ValueError):
    """Raised when a value cannot be formatted; ``value`` holds the fallback text."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value


def _parse_float(text: str) -> float:
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise ValueFormatError(f"invalid number syntax: {text!r}", text)
    lowered = text.lower()
    try:
        if lowered.lstrip("+-").startswith("0x"):
            number = float.fromhex(text)
        else:
            number = float(text)
    except (ValueError, OverflowError):
        raise ValueFormatError(f"invalid number syntax: {text!r}", text) from None
    if math.isinf(number) and lowered not in _INFINITY_WORDS:
        raise ValueFormatError(f"number out of range: {text!r}", text)
    return number


def _non_finite(number: float) -> str | None:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return None


def _shortest_fixed(number: float) -> str:
    special = _non_finite(number)
    if special is not None:
        return special
    return format(Decimal(repr(number)).normalize(), "f")


def _shortest_scientific(number: float) -> str:
    special = _non_finite(number)
    if special is not None:
        return special
    sign, digits, exponent = Decimal(repr(number)).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    power = exponent + len(digits) - 1
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exp_sign = "+" if power >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}E{exp_sign}{abs(power):02d}"


def _fixed(number: float, precision: int) -> str:
    special = _non_finite(number)
    return special if special is not None else f"{number:.{precision}f}"


def _exponential(number: float) -> str:
    special = _non_finite(number)
    return special if special is not None else f"{number:e}"


def general_numeric(value: str, allow_scientific: bool = True) -> str:
    """Render a number the way the General format shows it."""
    if value.strip() == "":
        return ""
    number = _parse_float(value)
    if allow_scientific:
        magnitude = abs(number)
        if (
            _SMALLEST_NONZERO <= magnitude < _MIN_NON_SCIENTIFIC
            or magnitude >= _MAX_NON_SCIENTIFIC
        ):
            return _shortest_scientific(number)
    return _shortest_fixed(number)


def _excel_to_datetime(serial: float, date1904: bool) -> datetime:
    epoch = _EPOCH_1904 if date1904 else _EPOCH_1900
    return epoch + timedelta(days=serial)


def format_numeric(parsed: ParsedNumberFormat, value: str, date1904: bool = False) -> str:
    """Format the text of a numeric cell with an already parsed number format."""
    raw = value.strip()
    if raw == "":
        return ""

    if parsed.is_time_format:
        serial = _parse_float(raw)
        try:
            moment = _excel_to_datetime(serial, date1904)
        except (OverflowError, ValueError):
            raise ValueFormatError(f"date out of range: {raw!r}", raw) from None
        return format_time(parsed.num_fmt, moment)

    number = _parse_float(raw)
    if number > 0:
        section = parsed.positive_format
    elif number < 0:
        # A separate negative section carries its own sign or parentheses.
        if parsed.negative_format_expects_positive:
            number = abs(number)
        section = parsed.negative_format
    else:
        section = parsed.zero_format

    if section.show_percent:
        number *= 100

    reduced = section.reduced_format_string
    if reduced == "general":
        try:
            return general_numeric(value, True)
        except ValueFormatError:
            return raw
    if reduced == "@":
        formatted = value
    elif reduced in _FIXED_PRECISION:
        formatted = _fixed(number, _FIXED_PRECISION[reduced])
    elif reduced in _SCIENTIFIC:
        formatted = _exponential(number)
    elif reduced == "":
        formatted = ""
    else:
        return raw
    return section.prefix + formatted + section.suffix


def _format_text(parsed: ParsedNumberFormat, value: str) -> str:
    text_format = parsed.text_format
    reduced = text_format.reduced_format_string
    if reduced == "general":
        return value
    if reduced == "@":
        return text_format.prefix + value + text_format.suffix
    if reduced == "":
        # Without "@" the cell's own text is not shown at all.
        return text_format.prefix + text_format.suffix
    raise ValueFormatError("invalid or unsupported format, unsupported string format", value)


def format_value(
    num_fmt: str, value: str, cell_type: CellType, date1904: bool = False
) -> str:
    """Format a cell's raw text for display according to its type and format code."""
    if cell_type in (CellType.ERROR, CellType.DATE):
        return value
    if cell_type is CellType.BOOL:
        if value == "0":
            return "FALSE"
        if value == "1":
            return "TRUE"
        raise ValueFormatError("invalid value in bool cell", value)
    parsed = parse_number_format(num_fmt)
    if cell_type in (CellType.STRING, CellType.INLINE, CellType.STRING_FORMULA):
        return _format_text(parsed, value)
    if cell_type is CellType.NUMERIC:
        return format_numeric(parsed, value, date1904)
    raise ValueFormatError("unknown cell type", value)