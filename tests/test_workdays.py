import calendar
from datetime import date

import pytest

from attendance_tracker.workdays import (
	DayKind,
	days_in_month,
	month_days,
	working_days,
	working_days_for_label,
)


@pytest.mark.parametrize(
	'month, year, expected',
	[
		(3, 2025, 25),  # 31 days, 5 Sundays, second Saturday on the 8th
		(2, 2025, 23),  # 28 days, 4 Sundays, second Saturday on the 8th
		(2, 2024, 24),  # leap year: 29 days, 4 Sundays
		(6, 2025, 24),  # 30 days, 5 Sundays
	],
)
def test_working_days_known_months(month, year, expected):
	assert working_days(month, year) == expected


def _independent_count(month: int, year: int) -> int:
	total = calendar.monthrange(year, month)[1]
	sundays = sum(1 for d in range(1, total + 1) if date(year, month, d).weekday() == 6)
	saturdays = sum(1 for d in range(1, total + 1) if date(year, month, d).weekday() == 5)
	return total - sundays - (1 if saturdays >= 2 else 0)


def test_working_days_matches_policy_for_every_month():
	for year in range(1900, 2101):
		for month in range(1, 13):
			assert working_days(month, year) == _independent_count(month, year)


def test_extra_holidays_subtract_and_floor_at_zero():
	base = working_days(3, 2025)
	previous = base
	for extra in range(0, 40):
		result = working_days(3, 2025, extra)
		assert result == max(base - extra, 0)
		assert result <= previous
		previous = result
	assert working_days(3, 2025, 100) == 0


def test_negative_extra_holidays_rejected():
	with pytest.raises(ValueError):
		working_days(3, 2025, -1)


def test_invalid_month_rejected():
	with pytest.raises(ValueError):
		working_days(13, 2025)


def test_days_in_month_handles_leap_years():
	assert days_in_month(2, 2024) == 29
	assert days_in_month(2, 1900) == 28
	assert days_in_month(2, 2000) == 29


def test_month_days_marks_only_the_second_saturday():
	days = month_days(3, 2025)
	saturdays = [d for d in days if d.date.weekday() == 5]

	assert [d.date.day for d in saturdays] == [1, 8, 15, 22, 29]
	assert [d.kind for d in saturdays] == [
		DayKind.WORKING,
		DayKind.SECOND_SATURDAY,
		DayKind.WORKING,
		DayKind.WORKING,
		DayKind.WORKING,
	]
	assert all(d.kind == DayKind.SUNDAY for d in days if d.date.weekday() == 6)
	assert len(days) == 31


def test_working_days_for_label():
	assert working_days_for_label('March 2025') == 25
	assert working_days_for_label('mar 2025', extra_holidays=2) == 23
	assert working_days_for_label('mar', current_year=2025) == 25
	assert working_days_for_label('Marchy 2025') == 0
	assert working_days_for_label('March 1899') == 0
