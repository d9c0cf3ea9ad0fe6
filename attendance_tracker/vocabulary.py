"""Vocabulary for the tracker - month and weekday names, user-facing messages.

Centralizes the strings the parser matches against and every message shown to the user.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional


class Months(StrEnum):
	"""English month names (lowercase, full form)."""

	JANUARY = 'january'
	FEBRUARY = 'february'
	MARCH = 'march'
	APRIL = 'april'
	MAY = 'may'
	JUNE = 'june'
	JULY = 'july'
	AUGUST = 'august'
	SEPTEMBER = 'september'
	OCTOBER = 'october'
	NOVEMBER = 'november'
	DECEMBER = 'december'

	@classmethod
	def _members(cls) -> list[Months]:
		"""Get all members as a list."""
		return list(cls.__members__.values())

	@property
	def number(self) -> int:
		"""Month number (January=1)."""
		return self._members().index(self) + 1

	@property
	def short(self) -> str:
		"""Standard 3-letter abbreviation, lowercase ('jan', 'feb', ...)."""
		return self.value[:3]

	@property
	def display(self) -> str:
		"""Display form ('March')."""
		return self.value.title()

	@classmethod
	def from_number(cls, month: int) -> Optional[Months]:
		"""Get month from number (1-12)."""
		members = cls._members()
		if 1 <= month <= len(members):
			return members[month - 1]
		return None

	@classmethod
	def from_token(cls, token: str) -> Optional[Months]:
		"""Get month from a full name or 3-letter abbreviation (case-insensitive, exact)."""
		token_lower = token.lower()
		for month in cls._members():
			if token_lower in (month.value, month.short):
				return month
		return None

	@classmethod
	def all_tokens(cls) -> list[str]:
		"""Get all full names followed by all abbreviations."""
		return [m.value for m in cls._members()] + [m.short for m in cls._members()]

	@classmethod
	def all_display(cls) -> list[str]:
		"""Get all display names ('January', ...)."""
		return [m.display for m in cls._members()]


class Weekdays(StrEnum):
	"""Weekday names (matching Python's datetime.weekday() where Monday=0)."""

	MONDAY = 'monday'
	TUESDAY = 'tuesday'
	WEDNESDAY = 'wednesday'
	THURSDAY = 'thursday'
	FRIDAY = 'friday'
	SATURDAY = 'saturday'
	SUNDAY = 'sunday'

	@classmethod
	def _members(cls) -> list[Weekdays]:
		"""Get all members as a list."""
		return list(cls.__members__.values())

	@property
	def short(self) -> str:
		"""Get 3-letter abbreviation (Mon, Tue, etc.)."""
		return self.value[:3].title()

	@property
	def number(self) -> int:
		"""Get Python weekday number (Monday=0, Sunday=6)."""
		return self._members().index(self)

	@classmethod
	def from_number(cls, num: int) -> Optional[Weekdays]:
		"""Get weekday from Python weekday number (Monday=0, Sunday=6)."""
		members = cls._members()
		if 0 <= num < len(members):
			return members[num]
		return None


class Messages(StrEnum):
	"""User-facing notification texts."""

	RECORD_SAVED = 'Record saved successfully!'
	RECORD_UPDATED = 'Record updated successfully!'
	ATTENDANCE_SAVED = 'Attendance saved successfully!'
	ATTENDANCE_UPDATED = 'Attendance updated successfully!'
	RECORD_DELETED = 'Record deleted successfully!'
	RECORD_NOT_FOUND = 'Record not found.'
	INVALID_TOTAL = (
		'Total working days must be greater than zero. Please ensure the period name is '
		'valid and there are no excessive extra holidays.'
	)
	INVALID_ATTENDED = 'Please enter a non-negative number for days attended.'
	EXCEEDS_TOTAL = 'Days attended cannot exceed total working days.'
	EMPTY_PERIOD = 'Please enter a period name.'
	INCREMENT_BLOCKED = 'Cannot add attendance: Days attended would exceed total working days.'
	LOAD_FAILED = 'Failed to load records from your storage. They might be corrupted.'
	SAVE_FAILED = 'Failed to save records. Your previous data is unchanged.'
