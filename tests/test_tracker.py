from attendance_tracker.errors import ErrorReason
from attendance_tracker.models import NoticeKind, RecordDraft
from attendance_tracker.store import RecordStore
from attendance_tracker.tracker import AttendanceTracker
from attendance_tracker.vocabulary import Messages

from .conftest import TODAY


def test_fresh_tracker_starts_on_current_month(tracker):
	assert not tracker.is_editing
	assert tracker.period_label == 'March 2025'
	assert tracker.total_working_days == 25
	assert tracker.days_attended is None


def test_total_recomputes_when_inputs_change(tracker):
	tracker.set_inputs(extra_holidays=2)
	assert tracker.total_working_days == 23

	tracker.set_inputs(period_label='February 2025')
	assert tracker.total_working_days == 21

	tracker.set_inputs(period_label='Marchy 2025')
	assert tracker.total_working_days == 0

	tracker.set_inputs(period_label='feb', extra_holidays='abc')
	assert tracker.total_working_days == 23


def test_evaluate(tracker):
	tracker.set_inputs(days_attended='18')
	assert tracker.evaluate() == 72.0

	tracker.set_inputs(days_attended=30)
	assert tracker.evaluate() == ErrorReason.EXCEEDS_TOTAL

	tracker.set_inputs(days_attended='abc')
	assert tracker.evaluate() == ErrorReason.INVALID_ATTENDED

	tracker.set_inputs(period_label='nonsense', days_attended=5)
	assert tracker.evaluate() == ErrorReason.INVALID_TOTAL


def test_calculate_does_not_save(tracker, store):
	tracker.set_inputs(days_attended=18)

	notice = tracker.calculate()

	assert notice.kind == NoticeKind.SUCCESS
	assert '72.00%' in notice.message
	assert store.list() == []


def test_save_new_record_resets_form(tracker, store):
	tracker.set_inputs(period_label='January 2025', days_attended=20, extra_holidays=1)

	notice = tracker.save()

	assert notice.ok
	assert notice.message == Messages.RECORD_SAVED.value
	[record] = store.list()
	assert record.period_name == 'January 2025'
	assert record.extra_holidays == 1
	assert not tracker.is_editing
	assert tracker.period_label == 'March 2025'
	assert tracker.days_attended is None


def test_save_active_record_updates_it(tracker, store):
	record = store.create(RecordDraft('March 2025', 10))
	tracker.edit(record.id)
	tracker.set_inputs(days_attended=12)

	notice = tracker.save()

	assert notice.message == Messages.RECORD_UPDATED.value
	[updated] = store.list()
	assert updated.id == record.id
	assert updated.days_attended == 12
	assert tracker.active_id == record.id


def test_save_invalid_input_reports_error(tracker, store):
	tracker.set_inputs(days_attended=40)

	notice = tracker.save()

	assert notice.kind == NoticeKind.ERROR
	assert notice.message == Messages.EXCEEDS_TOTAL.value
	assert tracker.notice == notice
	assert store.list() == []


def test_increment_creates_then_updates(tracker, store):
	first = tracker.increment()
	assert first.message == Messages.ATTENDANCE_SAVED.value
	assert tracker.is_editing
	assert tracker.days_attended == 1

	second = tracker.increment()
	assert second.message == Messages.ATTENDANCE_UPDATED.value
	assert tracker.days_attended == 2

	[record] = store.list()
	assert record.id == tracker.active_id
	assert record.days_attended == 2
	assert record.attendance_percentage == 8.0


def test_increment_blocked_at_total_changes_nothing(tracker, store, records_path):
	record = store.create(RecordDraft('March 2025', 25))
	tracker.edit(record.id)
	before = records_path.read_text(encoding='utf-8')

	notice = tracker.increment()

	assert notice.kind == NoticeKind.ERROR
	assert notice.message == Messages.INCREMENT_BLOCKED.value
	assert tracker.days_attended == 25
	assert store.get(record.id) == record
	assert records_path.read_text(encoding='utf-8') == before


def test_increment_blocked_for_invalid_period(tracker, store):
	tracker.set_inputs(period_label='Someday')

	notice = tracker.increment()

	assert notice.message == Messages.INCREMENT_BLOCKED.value
	assert tracker.days_attended is None
	assert store.list() == []


def test_delete_active_record_resets_form(tracker, store):
	record = store.create(RecordDraft('January 2025', 10))
	tracker.edit(record.id)

	notice = tracker.delete(record.id)

	assert notice.message == Messages.RECORD_DELETED.value
	assert store.list() == []
	assert not tracker.is_editing
	assert tracker.period_label == 'March 2025'


def test_delete_other_record_keeps_form(tracker, store):
	active = store.create(RecordDraft('January 2025', 10))
	other = store.create(RecordDraft('February 2025', 10))
	tracker.edit(active.id)

	tracker.delete(other.id)

	assert tracker.active_id == active.id
	assert store.list() == [active]


def test_delete_unknown_record(tracker, store):
	record = store.create(RecordDraft('January 2025', 10))

	notice = tracker.delete('missing')

	assert notice.kind == NoticeKind.ERROR
	assert store.list() == [record]


def test_open_activates_latest_period(store, records_path, clock):
	store.create(RecordDraft('January 2025', 10))
	latest = store.create(RecordDraft('February 2025', 12, extra_holidays=1))

	tracker = AttendanceTracker(RecordStore(records_path, clock=clock), today=TODAY)
	assert tracker.open() is None

	assert tracker.active_id == latest.id
	assert tracker.period_label == 'February 2025'
	assert tracker.days_attended == 12
	assert tracker.extra_holidays == 1


def test_open_reports_corrupted_storage(records_path):
	records_path.write_text('not json at all', encoding='utf-8')
	tracker = AttendanceTracker(RecordStore(records_path), today=TODAY)

	notice = tracker.open()

	assert notice is not None
	assert notice.kind == NoticeKind.ERROR
	assert notice.message == Messages.LOAD_FAILED.value
	assert tracker.history() == []
	assert tracker.period_label == 'March 2025'


def test_yearly_summary(tracker):
	tracker.set_inputs(period_label='January 2025', days_attended=18)
	tracker.save()
	tracker.set_inputs(period_label='February 2025', days_attended=20)
	tracker.save()

	[summary] = tracker.yearly_summary()

	assert summary.year == 2025
	assert summary.total_working_days == 26 + 23
	assert summary.total_days_attended == 38
