"""Period label parsing.

A period label is free text, conventionally '<Month> <Year>' ('March 2025',
'mar 2025', 'March'). Parsing never raises: unrecognised text yields None.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from .models import Period
from .vocabulary import Months

MIN_YEAR = 1900
MAX_YEAR = 2100

# Oldest possible position in the history ordering
UNPARSEABLE_SORT_KEY = (0, 0)

_PERIOD_RE = re.compile(
	r'^(' + '|'.join(Months.all_tokens()) + r')\s*(\d{4})?$',
	re.IGNORECASE,
)
_LEADING_DIGITS_RE = re.compile(r'^[+-]?\d+')


def parse_period(label: str, current_year: Optional[int] = None) -> Optional[Period]:
	"""Parse a period label into a Period.

	Args:
		label: Text such as 'March 2025', 'mar', 'SEPTEMBER2024'.
		current_year: Year used when the label has none. Default: this year.

	Returns:
		The Period, or None when the month is unknown or the year falls
		outside 1900-2100.
	"""
	if not isinstance(label, str):
		return None

	match = _PERIOD_RE.match(label.strip())
	if match is None:
		return None

	month = Months.from_token(match.group(1))
	if month is None:
		return None

	if match.group(2):
		year = int(match.group(2))
	else:
		year = current_year if current_year is not None else date.today().year

	if not MIN_YEAR <= year <= MAX_YEAR:
		return None

	return Period(month=month.number, year=year)


def period_sort_key(label: str) -> tuple[int, int]:
	"""Sortable (year, month) key for a stored period name.

	Looser than parse_period: the first space-separated token must be a month
	name or abbreviation and the second must start with digits; trailing text
	is ignored. Anything else maps to UNPARSEABLE_SORT_KEY.
	"""
	parts = label.split(' ')
	if len(parts) < 2:
		return UNPARSEABLE_SORT_KEY

	month = Months.from_token(parts[0])
	year_match = _LEADING_DIGITS_RE.match(parts[1])
	if month is None or year_match is None:
		return UNPARSEABLE_SORT_KEY

	return int(year_match.group()), month.number
