"""Durable storage of attendance records."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional

from pydantic import TypeAdapter, ValidationError

from . import logger
from .arithmetic import compute_percentage, parse_attended
from .errors import AttendanceValidationError, ErrorReason, StorageError
from .models import AttendanceRecord, RecordDraft, new_record_id, utc_now
from .period import period_sort_key
from .vocabulary import Messages
from .workdays import working_days_for_label

_records_adapter = TypeAdapter(list[AttendanceRecord])


def sort_records(records: list[AttendanceRecord]) -> list[AttendanceRecord]:
	"""Order records latest period first.

	Unparseable period names go last; ties keep their current order.
	"""
	return sorted(records, key=lambda r: period_sort_key(r.period_name), reverse=True)


class RecordStore:
	"""Ordered collection of attendance records mirrored to a JSON file.

	The whole collection is rewritten after every mutation. A failed write
	leaves both the file and the in-memory collection as they were. A file
	that could not be loaded is moved aside to `<name>.corrupt` before the
	first write replaces it. Leaving the `with` block drops the in-memory
	collection.

	Example:
		with RecordStore(path) as store:
			record = store.create(RecordDraft('March 2025', 18))
			store.delete(record.id)
	"""

	def __init__(
		self,
		path: Path,
		indent: int = 2,
		clock: Callable[[], datetime] = utc_now,
		current_year: Optional[int] = None,
	) -> None:
		"""Initialize the store.

		Args:
			path: JSON file holding the records (the durable slot).
			indent: JSON indentation used when saving.
			clock: Source of record timestamps.
			current_year: Year assumed for period labels without one.
		"""
		self.path = Path(path)
		self.indent = indent
		self._clock = clock
		self._current_year = current_year
		self._records: list[AttendanceRecord] = []
		self.load_error: Optional[StorageError] = None

	def __enter__(self) -> RecordStore:
		"""Load the collection from disk."""
		self.load()
		return self

	def __exit__(self, *exc) -> None:
		"""Release the in-memory collection; the file already holds every mutation."""
		self._records = []
		self.load_error = None

	def __len__(self) -> int:
		return len(self._records)

	def __iter__(self) -> Iterator[AttendanceRecord]:
		return iter(list(self._records))

	# =========================================================================
	# Persistence
	# =========================================================================

	def load(self) -> list[AttendanceRecord]:
		"""Read the collection from disk.

		A missing file gives an empty collection. Unreadable or invalid content
		also gives an empty collection, with the problem kept in `load_error`.
		"""
		self.load_error = None
		self._records = []

		if not self.path.exists():
			logger.debug('No records file at %s', self.path)
			return self.list()

		try:
			raw = self.path.read_text(encoding='utf-8')
			records = _records_adapter.validate_json(raw) if raw.strip() else []
		except (OSError, UnicodeDecodeError, ValidationError) as e:
			logger.warning('Could not load records from %s: %s', self.path, e)
			self.load_error = StorageError(Messages.LOAD_FAILED.value)
			self.load_error.__cause__ = e
			return self.list()

		self._records = sort_records(records)
		logger.debug('Loaded %d records from %s', len(self._records), self.path)
		return self.list()

	def save(self) -> None:
		"""Write the full collection to disk atomically.

		Raises:
			StorageError: If the file could not be written.
		"""
		payload = _records_adapter.dump_python(self._records, mode='json', by_alias=True)
		try:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			fd, tmp_name = tempfile.mkstemp(
				prefix=f'.{self.path.name}.', suffix='.tmp', dir=self.path.parent
			)
			try:
				with os.fdopen(fd, 'w', encoding='utf-8') as f:
					json.dump(payload, f, indent=self.indent or None, ensure_ascii=False)
				if self.load_error is not None and self.path.is_file():
					self._set_aside_unreadable()
				os.replace(tmp_name, self.path)
			except BaseException:
				Path(tmp_name).unlink(missing_ok=True)
				raise
		except OSError as e:
			raise StorageError(f'{Messages.SAVE_FAILED.value} ({e})') from e
		self.load_error = None
		logger.debug('Saved %d records to %s', len(self._records), self.path)

	@property
	def corrupt_path(self) -> Path:
		"""Where an unreadable records file is kept once it gets replaced."""
		return self.path.with_name(f'{self.path.name}.corrupt')

	def _set_aside_unreadable(self) -> None:
		os.replace(self.path, self.corrupt_path)
		logger.warning('Moved unreadable records file to %s', self.corrupt_path)

	def _commit(self, records: list[AttendanceRecord]) -> None:
		"""Replace the collection and persist it, rolling back on failure."""
		previous = self._records
		self._records = sort_records(records)
		try:
			self.save()
		except StorageError:
			self._records = previous
			raise

	# =========================================================================
	# Queries
	# =========================================================================

	def list(self) -> list[AttendanceRecord]:
		"""All records in display order (latest period first)."""
		return list(self._records)

	def get(self, record_id: str) -> Optional[AttendanceRecord]:
		"""Record with the given id, if any."""
		return next((r for r in self._records if r.id == record_id), None)

	def find(self, id_prefix: str) -> Optional[AttendanceRecord]:
		"""Record whose id is, or uniquely starts with, `id_prefix`."""
		exact = self.get(id_prefix)
		if exact is not None:
			return exact
		matches = [r for r in self._records if id_prefix and r.id.startswith(id_prefix)]
		return matches[0] if len(matches) == 1 else None

	# =========================================================================
	# Mutations
	# =========================================================================

	def build_record(self, draft: RecordDraft, record_id: Optional[str] = None) -> AttendanceRecord:
		"""Validate a draft and turn it into a record stamped now.

		Raises:
			AttendanceValidationError: If the draft cannot be saved.
		"""
		extra_holidays = max(draft.extra_holidays, 0)
		total = working_days_for_label(draft.period_label, extra_holidays, self._current_year)
		percentage = compute_percentage(total, draft.days_attended)

		period_name = draft.period_label.strip()
		if not period_name:
			raise AttendanceValidationError(ErrorReason.EMPTY_PERIOD)

		attended = parse_attended(draft.days_attended)
		assert attended is not None

		return AttendanceRecord(
			id=record_id or new_record_id(),
			period_name=period_name,
			total_working_days=total,
			days_attended=attended,
			extra_holidays=extra_holidays,
			attendance_percentage=percentage,
			timestamp=self._clock(),
		)

	def create(self, draft: RecordDraft) -> AttendanceRecord:
		"""Validate the draft, mint a new record and persist the collection."""
		record = self.build_record(draft)
		self._commit([record, *self._records])
		logger.debug('Created record %s (%s)', record.id, record.period_name)
		return record

	def update(self, record_id: str, draft: RecordDraft) -> AttendanceRecord:
		"""Replace the record with `record_id` by the validated draft.

		Raises:
			KeyError: If no record has that id.
			AttendanceValidationError: If the draft cannot be saved.
		"""
		if self.get(record_id) is None:
			raise KeyError(record_id)

		record = self.build_record(draft, record_id=record_id)
		self._commit([record if r.id == record_id else r for r in self._records])
		logger.debug('Updated record %s (%s)', record.id, record.period_name)
		return record

	def delete(self, record_id: str) -> bool:
		"""Remove the record with `record_id`.

		Returns:
			True if a record was removed. Unknown ids are ignored.
		"""
		remaining = [r for r in self._records if r.id != record_id]
		if len(remaining) == len(self._records):
			logger.debug('Delete ignored, no record %s', record_id)
			return False

		self._commit(remaining)
		logger.debug('Deleted record %s', record_id)
		return True
