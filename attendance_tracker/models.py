"""Pydantic models for configuration and attendance data."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .arithmetic import percentage_of
from .vocabulary import Months

STORAGE_KEY = 'attendanceRecords'
DEFAULT_DATA_FILE = Path.home() / '.local' / 'share' / 'attendance-tracker' / f'{STORAGE_KEY}.json'

Number = Union[int, float]


def new_record_id() -> str:
	return str(uuid4())


def utc_now() -> datetime:
	return datetime.now(timezone.utc)


class NoticeKind(str, Enum):
	"""Severity of a user-facing notice."""

	SUCCESS = 'success'
	ERROR = 'error'


@dataclass(frozen=True, slots=True)
class Notice:
	"""Outcome of a tracker operation, ready to be shown to the user."""

	message: str
	kind: NoticeKind

	@property
	def ok(self) -> bool:
		return self.kind == NoticeKind.SUCCESS

	@classmethod
	def success(cls, message: str) -> Notice:
		return cls(message, NoticeKind.SUCCESS)

	@classmethod
	def error(cls, message: str) -> Notice:
		return cls(message, NoticeKind.ERROR)


@dataclass(frozen=True, slots=True)
class Period:
	"""A calendar month a record refers to."""

	month: int
	year: int

	@property
	def label(self) -> str:
		"""Canonical label, e.g. 'March 2025'."""
		month = Months.from_number(self.month)
		assert month is not None, f'Invalid month {self.month}'
		return f'{month.display} {self.year}'

	@classmethod
	def current(cls, today: Optional[date] = None) -> Period:
		"""Period containing today's local date."""
		now = today or date.today()
		return cls(month=now.month, year=now.year)


@dataclass(frozen=True, slots=True)
class RecordDraft:
	"""Raw form input, as typed by the user.

	`days_attended` is kept as entered (text or number); it is only interpreted
	when a percentage is computed.
	"""

	period_label: str
	days_attended: Union[str, Number, None] = None
	extra_holidays: int = 0


class AttendanceRecord(BaseModel):
	"""A saved attendance record for one period.

	Serialized with camelCase keys (`periodName`, `daysAttended`, ...).
	"""

	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		extra='ignore',
	)

	id: str = Field(default_factory=new_record_id, min_length=1)
	period_name: str = Field(min_length=1)
	total_working_days: int = Field(ge=0)
	days_attended: Number
	extra_holidays: int = Field(default=0, ge=0)
	attendance_percentage: Optional[float] = None
	timestamp: datetime = Field(default_factory=utc_now)

	@field_validator('period_name')
	@classmethod
	def strip_period_name(cls, value: str) -> str:
		"""Period names are stored trimmed and must not be blank."""
		value = value.strip()
		if not value:
			raise ValueError('periodName must not be blank')
		return value

	@field_validator('extra_holidays', mode='before')
	@classmethod
	def default_extra_holidays(cls, value: object) -> object:
		"""Older records may carry null instead of a count."""
		return 0 if value is None else value

	@model_validator(mode='after')
	def validate_attendance(self) -> AttendanceRecord:
		"""Ensure days attended fit the total and fill a missing percentage."""
		if self.days_attended < 0:
			raise ValueError('daysAttended must be non-negative')
		if self.days_attended > self.total_working_days:
			raise ValueError('daysAttended must not exceed totalWorkingDays')
		if self.attendance_percentage is None and self.total_working_days > 0:
			self.attendance_percentage = percentage_of(self.days_attended, self.total_working_days)
		return self

	@property
	def year(self) -> int:
		"""Local calendar year of the record's timestamp."""
		if self.timestamp.tzinfo is None:
			return self.timestamp.year
		return self.timestamp.astimezone().year


class YearSummary(BaseModel):
	"""Totals for all records saved within one calendar year."""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	year: int
	total_working_days: int = 0
	total_days_attended: Number = 0
	percentage: float = 0.0


class Config(BaseModel):
	"""Main configuration."""

	data_file: Path = Field(default=DEFAULT_DATA_FILE)
	indent: int = Field(default=2, ge=0)

	@field_validator('data_file')
	@classmethod
	def expand_data_file(cls, value: Path) -> Path:
		"""Allow '~' in configured paths."""
		return value.expanduser()
