from pathlib import Path

import pytest

from attendance_tracker.config import get_config_path, load_config, save_config
from attendance_tracker.models import DEFAULT_DATA_FILE, Config


def test_missing_config_gives_defaults(tmp_path):
	config = load_config(tmp_path / 'missing.json')
	assert config.data_file == DEFAULT_DATA_FILE
	assert config.indent == 2


def test_save_and_load(tmp_path):
	path = tmp_path / 'nested' / 'config.json'
	save_config(Config(data_file=tmp_path / 'records.json', indent=0), path)

	loaded = load_config(path)

	assert loaded.data_file == tmp_path / 'records.json'
	assert loaded.indent == 0


def test_invalid_config_raises(tmp_path):
	path = tmp_path / 'config.json'
	path.write_text('{"indent": "wide"}', encoding='utf-8')

	with pytest.raises(ValueError, match='Invalid config'):
		load_config(path)


def test_config_path_from_environment(tmp_path, monkeypatch):
	monkeypatch.setenv('ATTENDANCE_TRACKER_CONFIG', str(tmp_path / 'custom.json'))
	assert get_config_path() == tmp_path / 'custom.json'


def test_data_file_expands_user():
	config = Config(data_file=Path('~/records.json'))
	assert config.data_file == Path.home() / 'records.json'
