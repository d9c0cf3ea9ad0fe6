"""Configuration management for the attendance tracker CLI."""

import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.prompt import IntPrompt, Prompt

from . import logger
from .models import DEFAULT_DATA_FILE, Config

DEFAULT_CONFIG_PATH = Path.home() / '.config' / 'attendance-tracker.json'
CONFIG_ENV_VAR = 'ATTENDANCE_TRACKER_CONFIG'


def get_config_path() -> Path:
	"""Get the configuration file path ($ATTENDANCE_TRACKER_CONFIG overrides the default)."""
	override = os.environ.get(CONFIG_ENV_VAR)
	return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def config_exists(path: Optional[Path] = None) -> bool:
	"""Check if the configuration file exists."""
	return (path or get_config_path()).exists()


def load_config(path: Optional[Path] = None) -> Config:
	"""Load configuration from JSON file, or defaults when there is none."""
	config_path = path or get_config_path()

	if not config_path.exists():
		logger.debug('No config at %s, using defaults', config_path)
		return Config()

	try:
		return Config.model_validate_json(config_path.read_text(encoding='utf-8'))
	except ValidationError as e:
		raise ValueError(f'Invalid config: {e}') from e


def save_config(config: Config, path: Optional[Path] = None) -> None:
	"""Save configuration to JSON file."""
	config_path = path or get_config_path()
	config_path.parent.mkdir(parents=True, exist_ok=True)

	try:
		config_path.write_text(config.model_dump_json(indent=2), encoding='utf-8')
	except OSError as e:
		raise OSError(f'Failed to save config to {config_path}: {e}') from e


def create_config_interactive() -> Config:
	"""Create a new configuration interactively."""
	logger.info('🔧 Attendance Tracker Setup\n')

	data_file = Prompt.ask('[yellow]Records file[/yellow]', default=str(DEFAULT_DATA_FILE))

	indent = IntPrompt.ask('[yellow]JSON indentation (0 for compact)[/yellow]', default=2)
	if indent < 0:
		logger.warning('Invalid indentation, using default (2)')
		indent = 2

	return Config(data_file=Path(data_file), indent=indent)
