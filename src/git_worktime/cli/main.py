"""Main CLI interface for Git Worktime."""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_worktime import __version__
from git_worktime.core.analyzer import CommitAnalysis, analyze_commits
from git_worktime.core.report import DEFAULT_REPORT_PATH, build_report, write_report
from git_worktime.core.repository import DEFAULT_LIMIT, DEFAULT_TIMEOUT, CommitLog
from git_worktime.core.worktime import (
    DEFAULT_END_HOUR,
    DEFAULT_START_HOUR,
    WEEKDAY_NAMES,
    WorkHours,
    weekday_name,
)
from git_worktime.log import configure_logging

console = Console()
err_console = Console(stderr=True)

MESSAGE_WIDTH = 80


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(__version__)
@click.argument("limit", type=int, default=DEFAULT_LIMIT, required=False)
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    help="Path to the git repository",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_REPORT_PATH,
    help="Where to write the JSON report",
)
@click.option(
    "--start-hour",
    type=int,
    default=DEFAULT_START_HOUR,
    envvar="GIT_WORKTIME_START_HOUR",
    help="First work hour (inclusive)",
)
@click.option(
    "--end-hour",
    type=int,
    default=DEFAULT_END_HOUR,
    envvar="GIT_WORKTIME_END_HOUR",
    help="End of work hours (exclusive)",
)
@click.option(
    "--recent", default=10, help="Number of recent non-work-time commits to show"
)
@click.option(
    "--timeout", default=DEFAULT_TIMEOUT, help="Seconds to wait for git log"
)
@click.option(
    "--local-time",
    is_flag=True,
    help="Classify in this machine's timezone instead of each commit's own",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def main(
    limit: int,
    repo_path: Path,
    output: Path,
    start_hour: int,
    end_hour: int,
    recent: int,
    timeout: int,
    local_time: bool,
    verbose: bool,
):
    """Git Worktime - find commits made outside work hours.

    Analyzes the last LIMIT commits (default 1000) of the repository.
    """
    configure_logging(verbose)

    if limit <= 0:
        err_console.print("[red]Error: commit limit must be greater than 0[/red]")
        return

    try:
        work_hours = WorkHours(start=start_hour, end=end_hour)
    except ValidationError as e:
        err_console.print(f"[red]Error: invalid work hours: {escape(str(e))}[/red]")
        return

    console.print("[bold]Git commit time analysis[/bold]")
    console.print(f"Work time: {work_hours.describe()}")

    commits = CommitLog(repo_path, timeout=timeout).fetch(limit, local_time=local_time)
    if not commits:
        err_console.print("[red]No commits to analyze[/red]")
        return

    analysis = analyze_commits(commits, work_hours)

    _print_summary(analysis)
    _print_recent_non_work_time(analysis, recent)

    report = build_report(analysis)
    if write_report(report, output):
        console.print(f"[green]✅ Report saved to {output}[/green]")
    else:
        err_console.print(f"[red]Failed to save report to {output}[/red]")

    _print_hourly_distribution(analysis)
    _print_weekday_distribution(analysis)

    console.print("[green]✅ Analysis complete[/green]")


def _print_summary(analysis: CommitAnalysis) -> None:
    table = Table(title="Non-work-time commits")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta", justify="right")

    table.add_row("Total commits", str(analysis.total))
    table.add_row("Non-work-time commits", str(len(analysis.non_work_time)))
    table.add_row("Non-work-time days", str(len(analysis.non_work_time_days)))
    table.add_row("Work-time commits", str(len(analysis.work_time)))
    table.add_row("Non-work-time share", f"{analysis.non_work_time_percentage:.2f}%")

    console.print(table)


def _print_recent_non_work_time(analysis: CommitAnalysis, recent: int) -> None:
    if not analysis.non_work_time or recent <= 0:
        return

    table = Table(title="Recent non-work-time commits")
    table.add_column("#", justify="right")
    table.add_column("Hash", style="cyan", no_wrap=True)
    table.add_column("Time", style="magenta")
    table.add_column("Day", style="blue")
    table.add_column("Message")

    for index, commit in enumerate(analysis.non_work_time[:recent], start=1):
        message = commit.message
        if len(message) > MESSAGE_WIDTH:
            message = message[:MESSAGE_WIDTH] + "..."
        table.add_row(
            str(index),
            commit.short_hash,
            commit.timestamp.strftime("%Y-%m-%d %H:%M"),
            weekday_name(commit.timestamp),
            escape(message),
        )

    console.print(table)

    remaining = len(analysis.non_work_time) - recent
    if remaining > 0:
        console.print(f"... {remaining} more non-work-time commits")


def _indicator(in_work_time: bool) -> str:
    return "[green]work[/green]" if in_work_time else "[red]off[/red]"


def _print_hourly_distribution(analysis: CommitAnalysis) -> None:
    table = Table(title="Commits by hour")
    table.add_column("Hour", style="cyan")
    table.add_column("", no_wrap=True)
    table.add_column("Commits", justify="right")
    table.add_column("Share", justify="right")

    for hour, count in enumerate(analysis.hourly):
        if count:
            table.add_row(
                f"{hour:02d}:00",
                _indicator(analysis.work_hours.is_work_hour(hour)),
                str(count),
                f"{analysis.share(count):.1f}%",
            )

    console.print(table)


def _print_weekday_distribution(analysis: CommitAnalysis) -> None:
    table = Table(title="Commits by weekday")
    table.add_column("Day", style="cyan")
    table.add_column("", no_wrap=True)
    table.add_column("Commits", justify="right")
    table.add_column("Share", justify="right")

    for day, count in enumerate(analysis.weekday):
        if count:
            table.add_row(
                WEEKDAY_NAMES[day],
                _indicator(analysis.work_hours.is_work_day(day)),
                str(count),
                f"{analysis.share(count):.1f}%",
            )

    console.print(table)


if __name__ == "__main__":
    main()
