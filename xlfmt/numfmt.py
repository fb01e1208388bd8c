"""Parsing of spreadsheet number format codes into their sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class NumberFormatError(ValueError):
    """Raised when a number format code cannot be parsed."""


@dataclass(frozen=True)
class FormatOptions:
    """One section of a number format, split into literals and the number pattern."""

    full_format_string: str
    reduced_format_string: str
    prefix: str = ""
    suffix: str = ""
    show_percent: bool = False
    is_time_format: bool = False


@dataclass(frozen=True)
class ParsedNumberFormat:
    """A full number format code resolved into per-sign and text sections."""

    num_fmt: str
    is_time_format: bool = False
    negative_format_expects_positive: bool = False
    positive_format: Optional[FormatOptions] = None
    negative_format: Optional[FormatOptions] = None
    zero_format: Optional[FormatOptions] = None
    text_format: Optional[FormatOptions] = None
    parse_error: Optional[NumberFormatError] = None


_GENERAL = FormatOptions(full_format_string="general", reduced_format_string="general")

# Order matters: the two-character codes must be tried before their single-character prefixes.
_FORMATTING_CHARACTERS = (
    "0/", "#/", "?/", "E-", "E+", "e-", "e+", "0", "#", "?", ".", ",", "@", "*",
)

_TIME_FORMAT_CHARACTERS = (
    "M", "D", "Y", "YY", "YYYY", "MM", "yyyy", "m", "d", "yy", "h", "m",
    "AM/PM", "A/P", "am/pm", "a/p", "r", "g", "e", "b1", "b2",
    "[hh]", "[h]", "[mm]", "[m]",
    "s.0000", "s.000", "s.00", "s.0", "s",
    "[ss].0000", "[ss].000", "[ss].00", "[ss].0", "[ss]",
    "[s].0000", "[s].000", "[s].00", "[s].0", "[s]",
    "上", "午", "下",
)

_UNESCAPED_LITERALS = frozenset("$-+/()!^&'~{}<>=: ")


def compare_format_strings(fmt1: str, fmt2: str) -> bool:
    """Compare format codes, treating "" and any casing of "general" as equal."""
    if fmt1 == fmt2:
        return True

    def normalise(code: str) -> str:
        return "general" if code == "" or code.casefold() == "general" else code

    return normalise(fmt1) == normalise(fmt2)


def split_format_on_semicolon(format_string: str) -> list[str]:
    """Split a format code into sections, ignoring escaped and quoted semicolons."""
    sections: list[str] = []
    start = 0
    i = 0
    while i < len(format_string):
        ch = format_string[i]
        if ch == ";":
            sections.append(format_string[start:i])
            start = i + 1
        elif ch == "\\":
            i += 1
        elif ch == '"':
            end = format_string.find('"', i + 1)
            if end == -1:
                raise NumberFormatError("invalid format string, unmatched double quote")
            i = end
        i += 1
    sections.append(format_string[start:])
    return sections


def _starts_with_formatting(text: str) -> bool:
    return any(text.startswith(special) for special in _FORMATTING_CHARACTERS)


def parse_literals(format_string: str) -> tuple[str, str, bool]:
    """Consume leading literals; return (literal text, remaining code, shows percent)."""
    prefix: list[str] = []
    show_percent = False
    i = 0
    while i < len(format_string):
        rest = format_string[i:]
        ch = rest[0]
        if ch == "\\":
            if len(rest) > 1:
                i += 1
                prefix.append(rest[1])
        elif ch == "_":
            if len(rest) > 1:
                i += 1
        elif ch == "*":
            # Fill repetition has no meaning without a cell width.
            pass
        elif ch == '"':
            end = rest.find('"', 1)
            if end == -1:
                raise NumberFormatError("invalid formatting code, unmatched double quote")
            prefix.append(rest[1:end])
            i += end
        elif ch == "%":
            show_percent = True
            prefix.append("%")
        elif ch == "[":
            bracket = rest.find("]")
            if bracket == -1:
                raise NumberFormatError("invalid formatting code, invalid brackets")
            if len(rest) > 2 and rest[1] == "$":
                dash = rest.find("-")
                if dash == -1 or dash >= bracket:
                    raise NumberFormatError(
                        "invalid formatting code, invalid currency annotation"
                    )
                prefix.append(rest[2:dash])
            i += bracket
        elif ch in _UNESCAPED_LITERALS:
            prefix.append(ch)
        elif _starts_with_formatting(rest):
            return "".join(prefix), rest, show_percent
        else:
            raise NumberFormatError(
                "invalid formatting code: unsupported or unescaped characters"
            )
        i += 1
    return "".join(prefix), "", show_percent


def split_format_and_suffix(format_string: str) -> tuple[str, str]:
    """Split off the leading run of number formatting characters from the rest."""
    i = 0
    while i < len(format_string):
        rest = format_string[i:]
        special = next((s for s in _FORMATTING_CHARACTERS if rest.startswith(s)), None)
        if special is None:
            break
        i += len(special)
    return format_string[:i], format_string[i:]


def parse_format_section(full_format: str) -> FormatOptions:
    """Parse one semicolon-separated section of a number format code."""
    reduced = full_format.strip()
    if compare_format_strings(reduced, "general"):
        return _GENERAL

    prefix, reduced, percent_before = parse_literals(reduced)
    reduced, suffix_format = split_format_and_suffix(reduced)
    suffix, remaining, percent_after = parse_literals(suffix_format)
    if remaining:
        raise NumberFormatError("invalid or unsupported format string")

    return FormatOptions(
        full_format_string=full_format,
        reduced_format_string=reduced,
        prefix=prefix,
        suffix=suffix,
        show_percent=percent_before or percent_after,
    )


def parse_number_format(num_fmt: str) -> ParsedNumberFormat:
    """Parse a full number format code; unparsable sections fall back to general."""
    if is_time_format(num_fmt):
        return ParsedNumberFormat(num_fmt=num_fmt, is_time_format=True, text_format=_GENERAL)

    error: Optional[NumberFormatError] = None
    options: list[FormatOptions] = []
    try:
        sections = split_format_on_semicolon(num_fmt)
    except NumberFormatError as exc:
        options.append(_GENERAL)
        error = exc
    else:
        for section in sections:
            try:
                options.append(parse_format_section(section))
            except NumberFormatError as exc:
                options.append(_GENERAL)
                error = exc

    if len(options) > 4:
        options = [_GENERAL]
        error = NumberFormatError("invalid number format, too many format sections")

    if len(options) == 1:
        only = options[0]
        return ParsedNumberFormat(
            num_fmt=num_fmt,
            positive_format=only,
            negative_format=only,
            zero_format=only,
            text_format=only if "@" in only.full_format_string else _GENERAL,
            parse_error=error,
        )
    if len(options) == 2:
        positive, negative = options
        zero, text = positive, _GENERAL
    elif len(options) == 3:
        positive, negative, zero = options
        text = _GENERAL
    else:
        positive, negative, zero, text = options
    return ParsedNumberFormat(
        num_fmt=num_fmt,
        negative_format_expects_positive=True,
        positive_format=positive,
        negative_format=negative,
        zero_format=zero,
        text_format=text,
        parse_error=error,
    )


def is_time_format(format_string: str) -> bool:
    """Report whether a format code contains date or time placeholders."""
    found = False
    i = 0
    while i < len(format_string):
        rest = format_string[i:]
        ch = rest[0]
        if ch in "\\_":
            if len(rest) > 1:
                i += 1
        elif ch == "*" or ch == "," or ch in _UNESCAPED_LITERALS:
            pass
        elif ch == '"':
            end = rest.find('"', 1)
            if end == -1:
                return False
            i += end + 1
        else:
            special = next(
                (s for s in _TIME_FORMAT_CHARACTERS if rest.startswith(s)), None
            )
            if special is not None:
                found = True
                i += len(special)
                continue
            if ch == "[":
                end = rest.find("]", 1)
                if end == -1:
                    return False
                i += end + 1
                continue
            return False
        i += 1
    return found


def is_12_hour_time(format_string: str) -> bool:
    """Report whether a time format uses an AM/PM marker."""
    return any(marker in format_string for marker in ("am/pm", "AM/PM", "a/p", "A/P"))