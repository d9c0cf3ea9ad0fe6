"""Exceptions raised by the tracker core.

Every one of them is recoverable: the tracker layer turns them into an error notice.
"""

from __future__ import annotations

from enum import Enum

from .vocabulary import Messages


class ErrorReason(str, Enum):
	"""Why a percentage could not be computed or a record could not be saved."""

	INVALID_TOTAL = 'invalid_total'
	INVALID_ATTENDED = 'invalid_attended'
	EXCEEDS_TOTAL = 'exceeds_total'
	EMPTY_PERIOD = 'empty_period'

	@property
	def message(self) -> str:
		"""User-facing explanation."""
		return {
			ErrorReason.INVALID_TOTAL: Messages.INVALID_TOTAL,
			ErrorReason.INVALID_ATTENDED: Messages.INVALID_ATTENDED,
			ErrorReason.EXCEEDS_TOTAL: Messages.EXCEEDS_TOTAL,
			ErrorReason.EMPTY_PERIOD: Messages.EMPTY_PERIOD,
		}[self].value


class AttendanceError(Exception):
	"""Base class for all tracker errors."""

	@property
	def message(self) -> str:
		return str(self)


class AttendanceValidationError(AttendanceError, ValueError):
	"""Inputs rejected before a percentage is computed or a record saved."""

	def __init__(self, reason: ErrorReason) -> None:
		super().__init__(reason.message)
		self.reason = reason


class IncrementBlocked(AttendanceError):
	"""Incrementing would push days attended above the total."""

	def __init__(self, attended: float, total: int) -> None:
		super().__init__(Messages.INCREMENT_BLOCKED.value)
		self.attended = attended
		self.total = total


class StorageError(AttendanceError):
	"""The durable slot could not be read or written."""
