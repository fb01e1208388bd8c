# xlfmt

Render spreadsheet cell values the way a spreadsheet application displays
them, using the cell's number-format code. The package also converts colours
between RGB and HSL.

## Installation

```
pip install xlfmt
```

To run the tests, install the test extra and run `pytest`:

```
pip install "xlfmt[test]"
pytest
```

## Formatting cell values

`xlfmt.valuefmt.format_value(num_fmt, value, cell_type, date1904=False)`
takes four arguments:

- a number-format code
- the raw stored text of the cell
- a `CellType`
- whether the workbook uses the 1904 date system

```python
from xlfmt.valuefmt import CellType, format_value

format_value("[$$-409]0", "18.989999999999998", CellType.NUMERIC)   # "$19"
format_value("0;(0)", "-1", CellType.NUMERIC)                       # "(1)"
format_value('0;(0);"zero";"Behold: "@', "asdf", CellType.STRING)   # "Behold: asdf"
```

Each cell type is handled as follows:

- **Error and date cells** (`CellType.ERROR`, `CellType.DATE`) are returned unchanged.
- **Bool cells** show `"0"` as `FALSE` and `"1"` as `TRUE`.
- **Text cells** (`STRING`, `INLINE`, `STRING_FORMULA`) use the text section of the format.
- **Numeric cells** use the positive, negative or zero section, depending on the value.

`ValueFormatError` is raised in these cases:

- a bool cell holds another value
- the value of a numeric cell is not a number
- a text section is not supported

The exception is a `ValueError`. Its `value` attribute holds the raw text, so
the caller can still show that text.

Numeric formatting supports:

- **Sections:** up to four (positive; negative; zero; text). With two or more
  sections, a negative value is made positive before its section is applied.
- **Literals:** quoted and backslash-escaped literals, `_` skips, and the usual
  unescaped punctuation.
- **Brackets:** currency annotations such as `[$€-409]`. Colour names and
  conditions in brackets are dropped, and conditions are not evaluated.
- **Percent:** a `%` multiplies the value by 100.
- **General:** plain notation, with scientific notation below `1e-9` and from
  `1e11` upwards.
- **Fixed point:** `0`, `0.0`, `0.00`, `0.000` and `0.0000`, and their `#,##0`
  forms. No thousands separators are inserted.
- **Scientific:** `0.00e+00` and `##0.0e+0`.
- **Dates and times:** codes such as `mm-dd-yy`, `d-mmm-yy` and `h:mm AM/PM`.
  The serial number is read against the 1900 or 1904 epoch, in UTC.

A format code that cannot be parsed falls back to General. The numeric value
is then shown unformatted.

`format_numeric(parsed, value, date1904=False)` does the numeric part for an
already parsed format. `general_numeric(value, allow_scientific=True)` shows a
number the way the General format does.

### Parsing format codes

`xlfmt.numfmt` holds the parser.

- **`parse_number_format(num_fmt)`** returns a frozen `ParsedNumberFormat`.
  - It holds one `FormatOptions` for each of positive, negative, zero and text.
  - It records in `parse_error` any `NumberFormatError` met on the way.
  - It does not raise that error.
- **`split_format_on_semicolon`** splits a code into its sections.
- **`parse_format_section`** parses one section.
- **`parse_literals`** and **`split_format_and_suffix`** split a section into
  literals and the number pattern.
- **These helpers raise `NumberFormatError`** on malformed input.
- **`is_time_format`** and **`is_12_hour_time`** classify a code.
- **`compare_format_strings`** compares two codes. It treats an empty code and
  any casing of "general" as equal.

### Dates and times

`xlfmt.timefmt.format_time(num_fmt, moment)` renders a `datetime` with a
spreadsheet date or time code. This is done in two steps:

1. `excel_to_layout` turns the code into a reference-time layout.
2. `render_layout` renders that layout for the moment.

A bracketed hour such as `[h]` is dropped when the hour is zero.

## Colours

```python
from xlfmt.hsl import HSL, hsl_to_rgb, rgb_to_hsl

rgb_to_hsl(255, 0, 0)       # (0.0, 1.0, 0.5)
hsl_to_rgb(0.0, 1.0, 0.5)   # (255, 0, 0)
HSL.from_rgb(0, 0, 255).rgba()
```

RGB channels must be in `0..255`, otherwise `ValueError` is raised.
`HSL.rgba()` returns 16-bit channels and an opaque alpha of `0xFFFF`.

## What the package does not do

xlfmt only formats values that the caller supplies. It does not:

- open, read or write workbook files
- hold sheets, rows or cells
- keep style tables
- insert thousands separators
- evaluate conditional sections
- support number patterns beyond those listed above