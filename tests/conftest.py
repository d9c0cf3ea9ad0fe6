from datetime import date, datetime, timedelta, timezone
from itertools import count

import pytest

from attendance_tracker.store import RecordStore
from attendance_tracker.tracker import AttendanceTracker

TODAY = date(2025, 3, 10)


@pytest.fixture
def clock():
	"""Timestamps one minute apart, starting mid-June 2025 (UTC)."""
	start = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
	ticks = count()
	return lambda: start + timedelta(minutes=next(ticks))


@pytest.fixture
def records_path(tmp_path):
	return tmp_path / 'attendanceRecords.json'


@pytest.fixture
def store(records_path, clock):
	return RecordStore(records_path, clock=clock, current_year=TODAY.year)


@pytest.fixture
def tracker(store):
	tracker = AttendanceTracker(store, today=TODAY)
	tracker.open()
	return tracker


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
	"""Never read the user's real configuration file."""
	monkeypatch.setenv('ATTENDANCE_TRACKER_CONFIG', str(tmp_path / 'config.json'))
