from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from flask import Flask

from .container import Container
from .core.exceptions import DomainError
from .reporting.exporter import export_report_xlsx, report_frame
from .reporting.formatting import format_duration, format_stats
from .stats.service import time_diff_between_shifts

DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]


def register(app: Flask, container: Container) -> None:
    @app.cli.command("stats")
    @click.argument("employee_id")
    def stats_command(employee_id: str):
        """Print total, night and holiday time of EMPLOYEE_ID."""
        try:
            stats = container.stats_service.employee_stats(container.schedule, employee_id)
        except DomainError as e:
            raise click.ClickException(str(e)) from e
        click.echo(format_stats(employee_id, stats))

    @app.cli.command("worktime")
    @click.argument("employee_id")
    @click.argument("from_instant", metavar="FROM", type=click.DateTime(DATETIME_FORMATS))
    @click.argument("to_instant", metavar="TO", type=click.DateTime(DATETIME_FORMATS))
    def worktime_command(employee_id: str, from_instant: datetime, to_instant: datetime):
        """Print time worked by EMPLOYEE_ID between FROM and TO."""
        try:
            worked = container.stats_service.work_time_in_range(
                container.schedule, from_instant, to_instant, employee_id
            )
        except DomainError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"Work time of employee {employee_id} in range: {format_duration(worked)}")

    @app.cli.command("span")
    @click.argument("employee_id")
    @click.argument("first", type=int)
    @click.argument("second", type=int)
    def span_command(employee_id: str, first: int, second: int):
        """Print the span from the start of shift FIRST to the end of shift SECOND.

        Shift positions are 0-based within EMPLOYEE_ID's shifts.
        """
        shifts = list(container.schedule.for_employee(employee_id))

        def _pick(index: int):
            return shifts[index] if 0 <= index < len(shifts) else None

        try:
            span = time_diff_between_shifts(_pick(first), _pick(second))
        except DomainError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"Time between shifts: {format_duration(span)}")

    @app.cli.command("report")
    @click.option("--xlsx", "xlsx_path", type=click.Path(dir_okay=False, path_type=Path), default=None)
    def report_command(xlsx_path: Optional[Path]):
        """Print the per-employee report, or write it to an Excel file."""
        try:
            report = container.report_service.build_report(container.schedule)
        except DomainError as e:
            raise click.ClickException(str(e)) from e

        if xlsx_path is not None:
            xlsx_path.write_bytes(export_report_xlsx(report))
            click.echo(f"Report written to {xlsx_path}")
            return

        if report.rows:
            click.echo(report_frame(report).to_string(index=False))
        else:
            click.echo("No shifts in schedule.")
