from datetime import datetime, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xlfmt.timefmt import excel_to_layout, format_time, render_layout


@pytest.mark.parametrize(
    "code, layout",
    [("yyyy", "2006"), ("YYYY", "2006"), ("dddd", "Monday"), ("mmmm", "January"), ("mmm", "Jan")],
)
def test_single_placeholders_map_to_reference_layout(code, layout):
    assert excel_to_layout(code, 5) == layout


def test_date_format_matches_strftime():
    moment = datetime(2013, 11, 27, 14, 8, 9, tzinfo=timezone.utc)
    assert format_time("yyyy-mm-dd", moment) == moment.strftime("%Y-%m-%d")


def test_long_names_match_strftime():
    moment = datetime(2021, 10, 17, 9, 0, 0)
    assert format_time("dddd, mmmm dd yyyy", moment) == moment.strftime("%A, %B %d %Y")


def test_twelve_hour_clock_uses_lower_case_marker():
    moment = datetime(2020, 3, 14, 15, 30, 0)
    assert format_time("hh:mm AM/PM", moment) == moment.strftime("%I:%M %p").lower()


def test_twenty_four_hour_clock():
    moment = datetime(2020, 3, 14, 15, 7, 9)
    assert format_time("hh:mm:ss", moment) == moment.strftime("%H:%M:%S")


def test_optional_hour_dropped_when_zero():
    moment = datetime(2000, 1, 1, 0, 7, 9)
    assert format_time("[h]:mm:ss", moment) == moment.strftime("%M:%S")


def test_optional_hour_kept_when_present():
    moment = datetime(2000, 1, 1, 5, 7, 9)
    assert format_time("[h]:mm:ss", moment) == moment.strftime("%H:%M:%S")


def test_unknown_letters_pass_through():
    moment = datetime(2000, 1, 1)
    assert render_layout("xyz", moment) == "xyz"


def test_under_day_pads_with_space():
    assert render_layout("_2", datetime(2020, 1, 5)) == " 5"


def test_trimmed_fraction_disappears_when_zero():
    moment = datetime(2020, 1, 5, 1, 2, 3)
    assert render_layout("05.999", moment) == moment.strftime("%S")
    assert render_layout("05.000", moment) == moment.strftime("%S") + ".000"


def test_zone_name_and_iso_offset_for_utc():
    moment = datetime(2020, 1, 5, tzinfo=timezone.utc)
    assert render_layout("MST", moment) == "UTC"
    assert render_layout("Z07:00", moment) == "Z"


def test_am_pm_marker_matches_strftime():
    morning = datetime(2020, 1, 5, 0, 0)
    evening = datetime(2020, 1, 5, 23, 0)
    assert render_layout("PM", morning) == morning.strftime("%p")
    assert render_layout("PM", evening) == evening.strftime("%p")


@given(st.datetimes(min_value=datetime(1000, 1, 1), max_value=datetime(9999, 12, 31)))
def test_reference_layout_matches_strftime(moment):
    assert render_layout("2006-01-02 15:04:05", moment) == moment.strftime("%Y-%m-%d %H:%M:%S")