"""Working-day calculation for a calendar month.

Work-week policy: every Sunday is off, and so is the second Saturday of the
month. All other Saturdays are working days. Declared extra holidays are
subtracted from the result, which never goes below zero.
"""

from __future__ import annotations

import calendar as cal
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .period import parse_period
from .vocabulary import Weekdays

OFF_SATURDAY_OCCURRENCE = 2


class DayKind(str, Enum):
	"""Classification of a single calendar day."""

	WORKING = 'working'
	SUNDAY = 'sunday'
	SECOND_SATURDAY = 'second_saturday'

	@property
	def label(self) -> str:
		"""Human-readable label (e.g., 'Second Saturday')."""
		return self.value.replace('_', ' ').title()


@dataclass(frozen=True, slots=True)
class CalendarDay:
	"""One day of a month with its working-day classification."""

	date: date
	kind: DayKind

	@property
	def weekday(self) -> Weekdays:
		day = Weekdays.from_number(self.date.weekday())
		assert day is not None, f'Invalid weekday for {self.date}'
		return day

	@property
	def is_working(self) -> bool:
		return self.kind == DayKind.WORKING


def days_in_month(month: int, year: int) -> int:
	"""Number of days in the month (proleptic Gregorian, leap years included)."""
	_, max_day = cal.monthrange(year, month)
	return max_day


def month_days(month: int, year: int) -> list[CalendarDay]:
	"""Classify every day of the month.

	Raises:
		ValueError: If month is not 1-12.
	"""
	if not 1 <= month <= 12:
		raise ValueError(f'Month must be 1-12, got {month}')

	days = []
	saturday_count = 0
	for day in range(1, days_in_month(month, year) + 1):
		current = date(year, month, day)
		weekday = current.weekday()

		if weekday == Weekdays.SUNDAY.number:
			kind = DayKind.SUNDAY
		elif weekday == Weekdays.SATURDAY.number:
			saturday_count += 1
			if saturday_count == OFF_SATURDAY_OCCURRENCE:
				kind = DayKind.SECOND_SATURDAY
			else:
				kind = DayKind.WORKING
		else:
			kind = DayKind.WORKING

		days.append(CalendarDay(date=current, kind=kind))

	return days


def working_days(month: int, year: int, extra_holidays: int = 0) -> int:
	"""Total working days in the month after removing extra holidays.

	Args:
		month: Month (1-12).
		year: Year.
		extra_holidays: Additional non-working days to subtract (>= 0).

	Returns:
		Working day count, floored at 0.
	"""
	if extra_holidays < 0:
		raise ValueError(f'extra_holidays must be non-negative, got {extra_holidays}')

	base = sum(1 for day in month_days(month, year) if day.is_working)
	return max(base - extra_holidays, 0)


def working_days_for_label(
	label: str, extra_holidays: int = 0, current_year: Optional[int] = None
) -> int:
	"""Working days for a period label, or 0 when the label does not parse."""
	period = parse_period(label, current_year)
	if period is None:
		return 0
	return working_days(period.month, period.year, max(extra_holidays, 0))
