"""Attendance tracking flow: the editable form, the active record and user notices."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from . import logger
from .arithmetic import Number, compute_percentage, parse_attended
from .errors import AttendanceError, AttendanceValidationError, ErrorReason, IncrementBlocked
from .models import AttendanceRecord, Notice, Period, RecordDraft, YearSummary
from .store import RecordStore
from .summary import summarize
from .vocabulary import Messages
from .workdays import working_days_for_label


class AttendanceTracker:
	"""Drives a RecordStore from form-style input.

	Holds the form state (period label, days attended, extra holidays) and the
	id of the active record, if the form is editing one. Derived values are
	recomputed from the inputs on every access. Each operation returns a
	Notice instead of raising.

	Example:
		with RecordStore(path) as store:
			tracker = AttendanceTracker(store)
			tracker.open()
			tracker.set_inputs(period_label='March 2025', days_attended=18)
			notice = tracker.save()
	"""

	def __init__(self, store: RecordStore, today: Optional[date] = None) -> None:
		self.store = store
		self._today = today
		self.active_id: Optional[str] = None
		self.period_label = ''
		self.days_attended: Union[str, Number, None] = None
		self.extra_holidays = 0
		self.notice: Optional[Notice] = None
		self.reset()

	# =========================================================================
	# Form state
	# =========================================================================

	@property
	def today(self) -> date:
		return self._today or date.today()

	@property
	def is_editing(self) -> bool:
		"""Whether the form is bound to a saved record."""
		return self.active_id is not None

	@property
	def active_record(self) -> Optional[AttendanceRecord]:
		if self.active_id is None:
			return None
		return self.store.get(self.active_id)

	@property
	def draft(self) -> RecordDraft:
		return RecordDraft(
			period_label=self.period_label,
			days_attended=self.days_attended,
			extra_holidays=self.extra_holidays,
		)

	@property
	def total_working_days(self) -> int:
		"""Working days for the current period label and extra holidays (0 if unparseable)."""
		return working_days_for_label(self.period_label, self.extra_holidays, self.today.year)

	def evaluate(self) -> Union[float, ErrorReason]:
		"""Percentage for the current inputs, or why it cannot be computed."""
		try:
			return compute_percentage(self.total_working_days, self.days_attended)
		except AttendanceValidationError as e:
			return e.reason

	def set_inputs(
		self,
		period_label: Optional[str] = None,
		days_attended: Union[str, Number, None] = None,
		extra_holidays: Union[str, int, None] = None,
	) -> None:
		"""Apply edited form fields. Omitted fields keep their value."""
		if period_label is not None:
			self.period_label = period_label
		if days_attended is not None:
			self.days_attended = days_attended
		if extra_holidays is not None:
			self.extra_holidays = _parse_extra_holidays(extra_holidays)

	def reset(self) -> None:
		"""Return to a fresh draft for the current month."""
		self.active_id = None
		self.period_label = Period.current(self.today).label
		self.days_attended = None
		self.extra_holidays = 0

	def edit(self, record_id: str) -> Optional[Notice]:
		"""Load a saved record into the form and make it the active record."""
		record = self.store.get(record_id)
		if record is None:
			return self._notify(Notice.error(Messages.RECORD_NOT_FOUND.value))

		self.active_id = record.id
		self.period_label = record.period_name
		self.days_attended = record.days_attended
		self.extra_holidays = record.extra_holidays
		self.notice = None
		return None

	# =========================================================================
	# Operations
	# =========================================================================

	def open(self) -> Optional[Notice]:
		"""Load the store and activate the most recent record.

		Returns an error notice when stored data could not be read.
		"""
		self.store.load()
		records = self.store.list()
		if records:
			self.edit(records[0].id)
		else:
			self.reset()

		if self.store.load_error is not None:
			return self._notify(Notice.error(self.store.load_error.message))
		return None

	def calculate(self) -> Notice:
		"""Compute the percentage for the current inputs without saving."""
		try:
			percentage = compute_percentage(self.total_working_days, self.days_attended)
		except AttendanceValidationError as e:
			return self._notify(Notice.error(e.message))
		return self._notify(Notice.success(f'Attendance: {percentage:.2f}%'))

	def save(self) -> Notice:
		"""Create a record from the form, or update the active record.

		After creating a new record the form resets to a fresh draft.
		"""
		try:
			if self.active_id is not None:
				self.store.update(self.active_id, self.draft)
				return self._notify(Notice.success(Messages.RECORD_UPDATED.value))

			self.store.create(self.draft)
		except KeyError:
			return self._notify(Notice.error(Messages.RECORD_NOT_FOUND.value))
		except AttendanceError as e:
			return self._notify(Notice.error(e.message))

		self.reset()
		return self._notify(Notice.success(Messages.RECORD_SAVED.value))

	def increment(self) -> Notice:
		"""Add one attended day and save immediately.

		Rejected without any change when the result would exceed the total.
		The form stays on the saved record so repeated increments update it.
		"""
		current = parse_attended(self.days_attended) or 0
		incremented = current + 1
		total = self.total_working_days

		try:
			if incremented > total:
				raise IncrementBlocked(incremented, total)

			draft = RecordDraft(
				period_label=self.period_label,
				days_attended=incremented,
				extra_holidays=self.extra_holidays,
			)
			if self.active_id is not None:
				record = self.store.update(self.active_id, draft)
				message = Messages.ATTENDANCE_UPDATED
			else:
				record = self.store.create(draft)
				message = Messages.ATTENDANCE_SAVED
		except KeyError:
			return self._notify(Notice.error(Messages.RECORD_NOT_FOUND.value))
		except AttendanceError as e:
			return self._notify(Notice.error(e.message))

		self.active_id = record.id
		self.days_attended = record.days_attended
		return self._notify(Notice.success(message.value))

	def delete(self, record_id: str) -> Notice:
		"""Delete a record. Deleting the active record resets the form."""
		try:
			removed = self.store.delete(record_id)
		except AttendanceError as e:
			return self._notify(Notice.error(e.message))

		if not removed:
			return self._notify(Notice.error(Messages.RECORD_NOT_FOUND.value))

		if record_id == self.active_id:
			self.reset()
		return self._notify(Notice.success(Messages.RECORD_DELETED.value))

	def history(self) -> list[AttendanceRecord]:
		"""Saved records, latest period first."""
		return self.store.list()

	def yearly_summary(self) -> list[YearSummary]:
		return summarize(self.store.list())

	def _notify(self, notice: Notice) -> Notice:
		self.notice = notice
		if notice.ok:
			logger.debug('✓ %s', notice.message)
		else:
			logger.debug('✗ %s', notice.message)
		return notice


def _parse_extra_holidays(value: Union[str, int]) -> int:
	"""Extra holidays as typed; anything that is not a non-negative integer counts as 0."""
	if isinstance(value, bool):
		return 0
	if isinstance(value, int):
		return max(value, 0)
	try:
		return max(int(str(value).strip()), 0)
	except ValueError:
		return 0
