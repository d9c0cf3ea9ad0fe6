"""Display and formatting utilities for attendance data."""

from typing import Optional

from rich.table import Table

from . import console, logger
from .models import AttendanceRecord, Notice, Period, YearSummary
from .workdays import CalendarDay, DayKind

ID_DISPLAY_LENGTH = 8


def format_number(value: float) -> str:
	"""Render 18 as '18' and 17.5 as '17.5'."""
	return f'{value:g}'


def format_percentage(value: Optional[float]) -> str:
	"""Colour a percentage by how healthy it is."""
	if value is None:
		return '[dim]-[/dim]'
	if value >= 75:
		color = 'green'
	elif value >= 60:
		color = 'yellow'
	else:
		color = 'red'
	return f'[{color}]{value:.2f}%[/{color}]'


def show_notice(notice: Optional[Notice]) -> None:
	"""Log a tracker notice with its severity."""
	if notice is None:
		return
	if notice.ok:
		logger.success('✓ %s', notice.message)
	else:
		logger.error('✗ %s', notice.message)


def display_history(records: list[AttendanceRecord], active_id: Optional[str] = None) -> None:
	"""Display saved records as a Rich table, in the given order."""
	if not records:
		logger.warning('No records found.')
		return

	table = Table(title='📅 Attendance History', show_header=True, header_style='bold cyan')

	table.add_column('ID', style='dim')
	table.add_column('Period')
	table.add_column('Days', justify='right')
	table.add_column('Extra', justify='right')
	table.add_column('Attendance', justify='right')
	table.add_column('Saved', style='dim')

	for record in records:
		table.add_row(
			record.id[:ID_DISPLAY_LENGTH],
			record.period_name,
			f'{format_number(record.days_attended)}/{record.total_working_days}',
			str(record.extra_holidays),
			format_percentage(record.attendance_percentage),
			record.timestamp.astimezone().strftime('%d/%m/%Y'),
			style='bold' if record.id == active_id else None,
		)

	console.print(table)


def display_yearly_summary(summaries: list[YearSummary]) -> None:
	"""Display yearly totals as a Rich table."""
	if not summaries:
		logger.warning('No records found.')
		return

	table = Table(title='📊 Yearly Summary', show_header=True, header_style='bold cyan')

	table.add_column('Year')
	table.add_column('Working Days', justify='right')
	table.add_column('Attended', justify='right')
	table.add_column('Attendance', justify='right')

	for summary in summaries:
		table.add_row(
			str(summary.year),
			str(summary.total_working_days),
			format_number(summary.total_days_attended),
			format_percentage(summary.percentage),
		)

	console.print(table)


def display_month_breakdown(period: Period, days: list[CalendarDay]) -> None:
	"""Display each day of the month with its working-day status."""
	table = Table(title=f'🗓 {period.label}', show_header=True, header_style='bold cyan')

	table.add_column('Date', style='dim')
	table.add_column('Day', style='dim')
	table.add_column('Status', justify='center')

	for day in days:
		if day.kind == DayKind.WORKING:
			status = '[green]Working[/green]'
		else:
			status = f'[dim]{day.kind.label}[/dim]'
		table.add_row(
			day.date.strftime('%d/%m'),
			day.weekday.short,
			status,
			style=None if day.is_working else 'dim',
		)

	console.print(table)
