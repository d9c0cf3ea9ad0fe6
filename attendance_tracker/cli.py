"""Command-line interface for the attendance tracker."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import click
from click.shell_completion import CompletionItem
from rich.panel import Panel
from rich.prompt import Confirm

from . import __version__, console, enable_debug_logging, logger
from .arithmetic import compute_percentage, parse_attended
from .config import config_exists, create_config_interactive, get_config_path, load_config, save_config
from .display import (
	display_history,
	display_month_breakdown,
	display_yearly_summary,
	format_number,
	show_notice,
)
from .errors import AttendanceValidationError
from .models import AttendanceRecord
from .period import parse_period
from .store import RecordStore
from .tracker import AttendanceTracker
from .vocabulary import Months
from .workdays import month_days, working_days

CONTEXT_SETTINGS = {'help_option_names': ['-h', '--help']}


class PeriodType(click.ParamType):
	"""Period label such as 'March 2025', 'mar 2025' or 'march' (current year)."""

	name = 'period'

	def convert(
		self,
		value: str,
		param: Optional[click.Parameter],
		ctx: Optional[click.Context],
	) -> str:
		"""Validate the label and return it trimmed."""
		if parse_period(value) is None:
			self.fail(
				f"Unknown period '{value}' - use a month name or abbreviation and an "
				'optional year between 1900 and 2100 (e.g. "March 2025")',
				param,
				ctx,
			)
		return value.strip()

	def shell_complete(
		self,
		ctx: click.Context,
		param: click.Parameter,
		incomplete: str,
	) -> list[CompletionItem]:
		"""Complete month names for the current year."""
		year = date.today().year
		incomplete_lower = incomplete.lower()
		return [
			CompletionItem(f'{name} {year}')
			for name in Months.all_display()
			if name.lower().startswith(incomplete_lower) or incomplete == ''
		]


PERIOD = PeriodType()


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option('--version', '-v', is_flag=True, help='Show version and exit.')
@click.option('--config', '-c', type=click.Path(exists=True), help='Config file path.')
@click.option('--data', '-D', type=click.Path(dir_okay=False), help='Records file (overrides config).')
@click.option('--verbose', is_flag=True, help='Enable verbose/debug logging.')
@click.pass_context
def main(
	ctx: click.Context,
	version: bool,
	config: Optional[str],
	data: Optional[str],
	verbose: bool,
) -> None:
	"""📅 Attendance Tracker

	Track monthly attendance against working days (Sundays and the second
	Saturday of each month are off).

	\b
	Quick start:
		1. Run 'attendance workdays "March 2025"' to see the working days
		2. Run 'attendance save "March 2025" 18' to record attendance
		3. Run 'attendance plus-one' each day you attend
		4. Run 'attendance summary' for yearly totals

	\b
	Config file: ~/.config/attendance-tracker.json
	"""
	if verbose:
		enable_debug_logging()
	ctx.ensure_object(dict)
	ctx.obj['config_path'] = Path(config) if config else None
	ctx.obj['data_path'] = Path(data) if data else None

	if version:
		logger.info('attendance-tracker version %s', __version__)
		return

	if ctx.invoked_subcommand is None:
		click.echo(ctx.get_help())


def _open_tracker(ctx: click.Context) -> AttendanceTracker:
	"""Load config and records, and activate the most recent record."""
	try:
		cfg = load_config(ctx.obj.get('config_path'))
	except ValueError as e:
		logger.error('%s', e)
		ctx.exit(1)

	data_path = ctx.obj.get('data_path') or cfg.data_file
	store = RecordStore(data_path, indent=cfg.indent)
	tracker = AttendanceTracker(store)
	show_notice(tracker.open())
	return tracker


def _find_record(ctx: click.Context, tracker: AttendanceTracker, record_id: str) -> AttendanceRecord:
	record = tracker.store.find(record_id)
	if record is None:
		logger.error("No record matches id '%s'", record_id)
		ctx.exit(1)
	return record


@main.command(context_settings=CONTEXT_SETTINGS)
@click.option('--force', '-f', is_flag=True, help='Overwrite existing config.')
def init(force: bool) -> None:
	"""Create the configuration file interactively."""
	config_path = get_config_path()

	if config_exists() and not force:
		logger.warning('Configuration already exists at %s', config_path)
		logger.info('Use --force to overwrite.')
		return

	config = create_config_interactive()
	save_config(config)

	console.print(
		Panel(
			f'[green]✓ Setup complete![/green]\n\n'
			f'Config: [cyan]{config_path}[/cyan]\n'
			f'Records: [cyan]{config.data_file}[/cyan]\n\n'
			f"[dim]Run 'attendance save \"<Month> <Year>\" <days>' to add a record.[/dim]",
			title='🎉 Ready',
			border_style='green',
		)
	)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument('period', type=PERIOD)
@click.option('--extra', '-e', type=click.IntRange(min=0), default=0, help='Extra holidays.')
@click.option('--breakdown', '-b', is_flag=True, help='Show every day of the month.')
def workdays(period: str, extra: int, breakdown: bool) -> None:
	"""Show the working days in a month.

	\b
	Examples:
		attendance workdays "March 2025"
		attendance workdays feb --extra 2 --breakdown
	"""
	parsed = parse_period(period)
	assert parsed is not None

	total = working_days(parsed.month, parsed.year, extra)
	if breakdown:
		display_month_breakdown(parsed, month_days(parsed.month, parsed.year))
	console.print(f'{parsed.label}: [bold]{total}[/bold] working days')


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument('period', type=PERIOD)
@click.argument('attended')
@click.option('--extra', '-e', type=click.IntRange(min=0), default=0, help='Extra holidays.')
@click.pass_context
def calc(ctx: click.Context, period: str, attended: str, extra: int) -> None:
	"""Calculate an attendance percentage without saving it."""
	parsed = parse_period(period)
	assert parsed is not None

	total = working_days(parsed.month, parsed.year, extra)
	try:
		percentage = compute_percentage(total, attended)
	except AttendanceValidationError as e:
		logger.error('✗ %s', e.message)
		ctx.exit(1)

	attended_value = parse_attended(attended)
	assert attended_value is not None
	console.print(
		f'{parsed.label}: {format_number(attended_value)}/{total} days = '
		f'[bold]{percentage:.2f}%[/bold]'
	)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument('period', type=PERIOD)
@click.argument('attended')
@click.option('--extra', '-e', type=click.IntRange(min=0), default=0, help='Extra holidays.')
@click.option('--id', 'record_id', help='Update this record (id or unique prefix).')
@click.pass_context
def save(
	ctx: click.Context,
	period: str,
	attended: str,
	extra: int,
	record_id: Optional[str],
) -> None:
	"""Save attendance for a period.

	\b
	Examples:
		attendance save "March 2025" 18
		attendance save "March 2025" 19 --id 3f2a    # Update a record
	"""
	tracker = _open_tracker(ctx)
	if record_id:
		tracker.edit(_find_record(ctx, tracker, record_id).id)
	else:
		tracker.reset()

	tracker.set_inputs(period_label=period, days_attended=attended, extra_holidays=extra)
	notice = tracker.save()
	show_notice(notice)
	if not notice.ok:
		ctx.exit(1)


@main.command('plus-one', context_settings=CONTEXT_SETTINGS)
@click.argument('period', type=PERIOD, required=False)
@click.option('--extra', '-e', type=click.IntRange(min=0), help='Extra holidays.')
@click.option('--id', 'record_id', help='Record to increment (id or unique prefix).')
@click.pass_context
def plus_one(
	ctx: click.Context,
	period: Optional[str],
	extra: Optional[int],
	record_id: Optional[str],
) -> None:
	"""Add one attended day and save.

	Increments the most recent record by default. With PERIOD, increments the
	latest record with that period name, or starts a new one.
	"""
	tracker = _open_tracker(ctx)
	if record_id:
		tracker.edit(_find_record(ctx, tracker, record_id).id)
	elif period:
		match = next(
			(r for r in tracker.history() if r.period_name.lower() == period.lower()), None
		)
		if match is not None:
			tracker.edit(match.id)
		else:
			tracker.reset()
			tracker.set_inputs(period_label=period)
	tracker.set_inputs(extra_holidays=extra)

	notice = tracker.increment()
	show_notice(notice)
	if not notice.ok:
		ctx.exit(1)

	record = tracker.active_record
	if record is not None:
		console.print(
			f'{record.period_name}: {format_number(record.days_attended)}/'
			f'{record.total_working_days} days = [bold]{record.attendance_percentage:.2f}%[/bold]'
		)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument('record_id')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation.')
@click.pass_context
def delete(ctx: click.Context, record_id: str, yes: bool) -> None:
	"""Delete a record (id or unique prefix)."""
	tracker = _open_tracker(ctx)
	record = _find_record(ctx, tracker, record_id)

	if not yes and not Confirm.ask(
		f'[yellow]Delete {record.period_name} ({record.id[:8]})?[/yellow]', default=False
	):
		logger.info('Cancelled.')
		return

	notice = tracker.delete(record.id)
	show_notice(notice)
	if not notice.ok:
		ctx.exit(1)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.pass_context
def history(ctx: click.Context) -> None:
	"""List saved records, latest period first."""
	tracker = _open_tracker(ctx)
	display_history(tracker.history(), active_id=tracker.active_id)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.pass_context
def summary(ctx: click.Context) -> None:
	"""Show yearly attendance totals."""
	tracker = _open_tracker(ctx)
	display_yearly_summary(tracker.yearly_summary())


if __name__ == '__main__':
	main()
