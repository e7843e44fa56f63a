from datetime import date, datetime, timedelta, timezone

import pytest

from school_admin.core.exceptions import InvalidDateRangeError, ValidationError
from school_admin.utils.date_utils import (
    add_months,
    expand_month_range,
    generate_schedule_dates,
    month_name,
    parse_input_date,
    rollover_date,
)


def test_parse_input_date_reads_day_month_year():
    assert parse_input_date("05/06/2023") == date(2023, 6, 5)


@pytest.mark.parametrize("raw", ["2023-06-05", "31/02/2023", "", None])
def test_parse_input_date_rejects_malformed_input(raw):
    with pytest.raises(ValidationError) as exc_info:
        parse_input_date(raw, "startDate")
    assert exc_info.value.status_code == 422


def test_rollover_date_carries_day_overflow_into_next_month():
    assert rollover_date(2023, 2, 31) == date(2023, 3, 3)
    assert rollover_date(2024, 2, 31) == date(2024, 3, 2)


def test_rollover_date_carries_month_overflow_into_next_year():
    assert rollover_date(2023, 13, 1) == date(2024, 1, 1)


def test_add_months_rolls_over_instead_of_clamping():
    assert add_months(date(2023, 1, 31), 1) == date(2023, 3, 3)
    assert add_months(date(2023, 11, 15), 3) == date(2024, 2, 15)


def test_expand_month_range_lists_months_of_academic_year():
    months = expand_month_range(date(2023, 6, 1), date(2024, 3, 31))
    assert months == [6, 7, 8, 9, 10, 11, 12, 1, 2, 3]


def test_expand_month_range_single_month():
    assert expand_month_range(date(2024, 4, 1), date(2024, 4, 30)) == [4]


def test_expand_month_range_repeats_months_past_a_year():
    months = expand_month_range(date(2023, 1, 1), date(2024, 2, 1))
    assert months[:2] == [1, 2]
    assert months[-2:] == [1, 2]
    assert len(months) == 14


def test_expand_month_range_with_fixed_offset_zone_is_unchanged():
    ist = timezone(timedelta(hours=5, minutes=30))
    reference = datetime(2024, 3, 15, tzinfo=ist)
    months = expand_month_range(date(2023, 6, 1), date(2023, 9, 30), ist, reference)
    assert months == [6, 7, 8, 9]


def test_expand_month_range_rejects_reversed_range():
    with pytest.raises(InvalidDateRangeError) as exc_info:
        expand_month_range(date(2024, 3, 31), date(2023, 6, 1))
    assert exc_info.value.message == "Start Date Should Be Less Than End Date"


def test_generate_schedule_dates_picks_year_from_first_academic_month():
    today = date(2024, 3, 15)
    dates = generate_schedule_dates([7, 6, 1], 5, [6, 7, 8], today)
    assert dates == [date(2024, 7, 5), date(2025, 6, 5), date(2025, 1, 5)]


def test_generate_schedule_dates_rolls_day_overflow():
    dates = generate_schedule_dates([2], 31, [6], date(2024, 3, 15))
    assert dates == [date(2025, 3, 3)]


def test_generate_schedule_dates_requires_academic_months():
    with pytest.raises(ValidationError):
        generate_schedule_dates([6], 5, [], date(2024, 3, 15))


def test_month_name():
    assert month_name(date(2024, 3, 1)) == "March"
    assert month_name(date(2024, 12, 31)) == "December"
