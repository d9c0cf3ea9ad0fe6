"""Yearly roll-up of attendance records."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from .arithmetic import percentage_of
from .models import AttendanceRecord, YearSummary


def summarize(records: Iterable[AttendanceRecord]) -> list[YearSummary]:
	"""Group records by the calendar year of their timestamp.

	Returns:
		One YearSummary per year, most recent year first.
	"""
	by_year: dict[int, list[AttendanceRecord]] = defaultdict(list)
	for record in records:
		by_year[record.year].append(record)

	summaries = []
	for year in sorted(by_year, reverse=True):
		group = by_year[year]
		total = sum(r.total_working_days for r in group)
		attended = sum(r.days_attended for r in group)
		summaries.append(
			YearSummary(
				year=year,
				total_working_days=total,
				total_days_attended=attended,
				percentage=percentage_of(attended, total) if total > 0 else 0.0,
			)
		)
	return summaries
