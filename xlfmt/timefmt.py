"""Rendering of spreadsheet date and time format codes."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from xlfmt.numfmt import is_12_hour_time

# Applied in order, each to its first occurrence only. Full month and day names go
# through placeholders so that their letters are not rewritten by later entries.
_REPLACEMENTS = (
    ("YYYY", "2006"),
    ("yyyy", "2006"),
    ("YY", "06"),
    ("yy", "06"),
    ("MMMM", "%%%%"),
    ("mmmm", "%%%%"),
    ("DDDD", "&&&&"),
    ("dddd", "&&&&"),
    ("DD", "02"),
    ("dd", "02"),
    ("D", "2"),
    ("d", "2"),
    ("MMM", "Jan"),
    ("mmm", "Jan"),
    ("MMSS", "0405"),
    ("mmss", "0405"),
    ("SS", "05"),
    ("ss", "05"),
    ("MM:", "04:"),
    ("mm:", "04:"),
    (":MM", ":04"),
    (":mm", ":04"),
    ("MM", "01"),
    ("mm", "01"),
    ("AM/PM", "pm"),
    ("am/pm", "pm"),
    ("M/", "1/"),
    ("m/", "1/"),
    ("%%%%", "January"),
    ("&&&&", "Monday"),
)

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_ZERO_CODES = {
    "1": "zero_month",
    "2": "zero_day",
    "3": "zero_hour12",
    "4": "zero_minute",
    "5": "zero_second",
    "6": "year",
}

# Offset layouts after the leading "-" or "Z": (colon, minutes, seconds).
_OFFSET_CODES = (
    ("070000", (False, True, True)),
    ("07:00:00", (True, True, True)),
    ("0700", (False, True, False)),
    ("07:00", (True, True, False)),
    ("07", (False, False, False)),
)

_DIGITS = "0123456789"

Token = tuple


def excel_to_layout(num_fmt: str, hour: int) -> str:
    """Turn a spreadsheet time format into a reference-time layout for the given hour."""
    layout = num_fmt
    # The AM/PM marker, not the number of 'h' characters, decides 12 or 24 hours.
    if is_12_hour_time(layout):
        layout = layout.replace("hh", "03", 1).replace("h", "3", 1)
    else:
        layout = layout.replace("hh", "15", 1).replace("h", "15", 1)
    for old, new in _REPLACEMENTS:
        layout = layout.replace(old, new, 1)
    if hour < 1:
        # An optional hour that is zero is dropped along with its dangling colon.
        fixes = (("]:", "]"), ("[03]", ""), ("[3]", ""), ("[15]", ""))
    else:
        fixes = (("[3]", "3"), ("[15]", "15"))
    for old, new in fixes:
        layout = layout.replace(old, new, 1)
    return layout


def _match_token(layout: str, i: int) -> Optional[tuple[Token, int]]:
    rest = layout[i:]
    ch = rest[0]
    if ch == "J":
        if rest.startswith("January"):
            return ("long_month",), 7
        if rest.startswith("Jan"):
            return ("month",), 3
    elif ch == "M":
        if rest.startswith("Monday"):
            return ("long_weekday",), 6
        if rest.startswith("Mon"):
            return ("weekday",), 3
        if rest.startswith("MST"):
            return ("zone_name",), 3
    elif ch == "0":
        if len(rest) >= 2 and rest[1] in _ZERO_CODES:
            return (_ZERO_CODES[rest[1]],), 2
    elif ch == "1":
        if rest.startswith("15"):
            return ("hour",), 2
        return ("num_month",), 1
    elif ch == "2":
        if rest.startswith("2006"):
            return ("long_year",), 4
        return ("day",), 1
    elif ch == "_":
        # "_2006" is a literal underscore followed by the year.
        if rest.startswith("_2") and not rest.startswith("_2006"):
            return ("under_day",), 2
    elif ch == "3":
        return ("hour12",), 1
    elif ch == "4":
        return ("minute",), 1
    elif ch == "5":
        return ("second",), 1
    elif ch == "P":
        if rest.startswith("PM"):
            return ("upper_ampm",), 2
    elif ch == "p":
        if rest.startswith("pm"):
            return ("lower_ampm",), 2
    elif ch in "-Z":
        for code, (colon, minutes, seconds) in _OFFSET_CODES:
            if rest.startswith(ch + code):
                return ("offset", ch == "Z", colon, minutes, seconds), len(code) + 1
    elif ch == ".":
        if len(rest) > 1 and rest[1] in "09":
            digit = rest[1]
            j = 1
            while j < len(rest) and rest[j] == digit:
                j += 1
            if not (j < len(rest) and rest[j] in _DIGITS):
                return ("fraction", digit, j - 1), j
    return None


def _offset_seconds(moment: datetime) -> int:
    offset = moment.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def _render_offset(moment: datetime, iso: bool, colon: bool, minutes: bool, seconds: bool) -> str:
    total = _offset_seconds(moment)
    if iso and total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    absolute = abs(total)
    zone = absolute // 60
    parts = [sign, f"{zone // 60:02d}"]
    separator = ":" if colon else ""
    if minutes:
        parts.append(f"{separator}{zone % 60:02d}")
    if seconds:
        parts.append(f"{separator}{absolute % 60:02d}")
    return "".join(parts)


def _render_zone_name(moment: datetime) -> str:
    if moment.tzinfo is None:
        return "UTC"
    name = moment.tzname()
    if name:
        return name
    total = _offset_seconds(moment)
    zone = abs(total) // 60
    sign = "-" if total < 0 else "+"
    return f"{sign}{zone // 60:02d}{zone % 60:02d}"


def _render_fraction(moment: datetime, digit: str, count: int) -> str:
    nanos = f"{moment.microsecond * 1000:09d}"[: min(count, 9)]
    if digit == "9":
        nanos = nanos.rstrip("0")
        return "." + nanos if nanos else ""
    return "." + nanos


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _render_token(token: Token, moment: datetime) -> str:
    kind = token[0]
    match kind:
        case "long_month":
            return _MONTHS[moment.month - 1]
        case "month":
            return _MONTHS[moment.month - 1][:3]
        case "long_weekday":
            return _WEEKDAYS[moment.weekday()]
        case "weekday":
            return _WEEKDAYS[moment.weekday()][:3]
        case "zone_name":
            return _render_zone_name(moment)
        case "zero_month":
            return f"{moment.month:02d}"
        case "zero_day":
            return f"{moment.day:02d}"
        case "zero_hour12":
            return f"{_hour12(moment):02d}"
        case "zero_minute":
            return f"{moment.minute:02d}"
        case "zero_second":
            return f"{moment.second:02d}"
        case "year":
            return f"{moment.year % 100:02d}"
        case "long_year":
            return f"{moment.year:04d}"
        case "hour":
            return f"{moment.hour:02d}"
        case "num_month":
            return str(moment.month)
        case "day":
            return str(moment.day)
        case "under_day":
            return f"{moment.day:>2d}"
        case "hour12":
            return str(_hour12(moment))
        case "minute":
            return str(moment.minute)
        case "second":
            return str(moment.second)
        case "upper_ampm":
            return "PM" if moment.hour >= 12 else "AM"
        case "lower_ampm":
            return "pm" if moment.hour >= 12 else "am"
        case "offset":
            return _render_offset(moment, *token[1:])
        case "fraction":
            return _render_fraction(moment, token[1], token[2])
    raise ValueError(f"unknown layout token {kind!r}")


def render_layout(layout: str, moment: datetime) -> str:
    """Render a moment using a reference-time layout; unknown text passes through."""
    pieces: list[str] = []
    i = 0
    while i < len(layout):
        matched = _match_token(layout, i)
        if matched is None:
            pieces.append(layout[i])
            i += 1
            continue
        token, length = matched
        pieces.append(_render_token(token, moment))
        i += length
    return "".join(pieces)


def format_time(num_fmt: str, moment: datetime) -> str:
    """Render a moment with a spreadsheet date or time format code."""
    return render_layout(excel_to_layout(num_fmt, moment.hour), moment)