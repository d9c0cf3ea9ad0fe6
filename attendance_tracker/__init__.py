"""Personal attendance tracker: working days, attendance records, yearly roll-ups."""

import logging
import os
import sys
from typing import Any

from rich.console import Console

__version__ = '1.0.0'
__all__ = ['__version__', 'logger', 'console', 'enable_debug_logging']


class CustomLogger(logging.Logger):
	"""Tracker logger with an extra SUCCESS level for completed operations."""

	SUCCESS = 25  # Between INFO (20) and WARNING (30)

	class _ColoredFormatter(logging.Formatter):
		"""Prefix each message with the ANSI colour of its level."""

		COLORS = {
			logging.DEBUG: '\033[90m',  # Gray
			logging.INFO: '\033[0m',
			25: '\033[32m',  # Green (SUCCESS)
			logging.WARNING: '\033[33m',  # Yellow
			logging.ERROR: '\033[31m',  # Red
			logging.CRITICAL: '\033[1;31m',  # Bold Red
		}
		RESET = '\033[0m'

		def __init__(self, fmt: str, use_color: bool = True) -> None:
			super().__init__(fmt)
			self.use_color = use_color

		def format(self, record: logging.LogRecord) -> str:
			message = super().format(record)
			if not self.use_color:
				return message
			color = self.COLORS.get(record.levelno, self.RESET)
			return f'{color}{message}{self.RESET}'

	def __init__(self, name: str, level: int = logging.NOTSET) -> None:
		super().__init__(name, level)
		logging.addLevelName(self.SUCCESS, 'SUCCESS')

	def success(self, message: str, *args: Any, **kwargs: Any) -> None:
		"""Log a message at SUCCESS level."""
		if self.isEnabledFor(self.SUCCESS):
			self._log(self.SUCCESS, message, args, **kwargs)

	@classmethod
	def setup_logger(cls, name: str, level: int = logging.INFO) -> 'CustomLogger':
		"""Return the named tracker logger, attaching a stderr handler once."""
		previous = logging.getLoggerClass()
		logging.setLoggerClass(cls)
		try:
			logger = logging.getLogger(name)
		finally:
			logging.setLoggerClass(previous)
		if not isinstance(logger, cls):
			raise TypeError(f'Expected {cls.__name__}, got {type(logger).__name__}')

		if not logger.handlers:
			# https://no-color.org
			use_color = 'NO_COLOR' not in os.environ
			handler = logging.StreamHandler(sys.stderr)
			handler.setFormatter(cls._ColoredFormatter('%(message)s', use_color=use_color))
			logger.addHandler(handler)
		logger.setLevel(level)

		return logger


logger = CustomLogger.setup_logger('attendance_tracker')

# Console for rich output (history and yearly summary tables)
console = Console()


def enable_debug_logging() -> None:
	"""Enable DEBUG level logging for verbose output."""
	logger.setLevel(logging.DEBUG)
