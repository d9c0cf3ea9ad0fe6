"""Attendance percentage arithmetic and input validation."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from .errors import AttendanceValidationError, ErrorReason

Number = Union[int, float]


def round2(value: float) -> float:
	"""Round to two decimal places, halves away from zero.

	Quantizes the exact binary value of the float, so 3.125 becomes 3.13.
	"""
	return float(Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def percentage_of(attended: Number, total: Number) -> float:
	"""Share of `total` covered by `attended`, in percent (2 decimals).

	Callers must ensure `total` is positive.
	"""
	return round2(attended / total * 100)


def parse_attended(value: Union[str, Number, None]) -> Optional[Number]:
	"""Interpret a days-attended input.

	Accepts numbers and numeric text ('18', ' 17.5 '). Integral values come back
	as int. Returns None for anything that is not a finite, non-negative number.
	"""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, str):
		text = value.strip()
		if not text:
			return None
		try:
			number: float = float(text)
		except ValueError:
			return None
	elif isinstance(value, (int, float)):
		number = value
	else:
		return None

	if math.isnan(number) or math.isinf(number) or number < 0:
		return None
	if isinstance(number, float) and number.is_integer():
		return int(number)
	return number


def compute_percentage(total: Number, attended: Union[str, Number, None]) -> float:
	"""Validate inputs and return the attendance percentage.

	Rules are checked in order; the first failure raises:
		1. total must be positive
		2. attended must be a non-negative number
		3. attended must not exceed total

	Raises:
		AttendanceValidationError: With the failing ErrorReason.
	"""
	if not isinstance(total, (int, float)) or isinstance(total, bool) or not total > 0:
		raise AttendanceValidationError(ErrorReason.INVALID_TOTAL)

	attended_value = parse_attended(attended)
	if attended_value is None:
		raise AttendanceValidationError(ErrorReason.INVALID_ATTENDED)

	if attended_value > total:
		raise AttendanceValidationError(ErrorReason.EXCEEDS_TOTAL)

	return percentage_of(attended_value, total)
