from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request

from ..common.datetime_utils import parse_iso_datetime
from ..container import Container
from ..core.exceptions import NoMatchingShiftsError, ValidationError
from ..reporting.exporter import export_report_xlsx

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.get("/api/employees", endpoint="api_employees")
    def api_employees():
        return jsonify({"employees": container.schedule.employee_ids()})

    @app.get("/api/employees/<employee_id>/stats", endpoint="api_employee_stats")
    def api_employee_stats(employee_id: str):
        try:
            stats = container.stats_service.employee_stats(container.schedule, employee_id)
        except ValidationError as e:
            return _error(str(e), 400)
        except NoMatchingShiftsError as e:
            return _error(str(e), 404)

        return jsonify({"employee_id": employee_id, **stats.to_dict()})

    @app.get("/api/employees/<employee_id>/worktime", endpoint="api_employee_worktime")
    def api_employee_worktime(employee_id: str):
        from_s = request.args.get("from")
        to_s = request.args.get("to")
        if not from_s or not to_s:
            return _error("query parameters 'from' and 'to' are required", 400)

        try:
            from_instant = parse_iso_datetime(from_s)
            to_instant = parse_iso_datetime(to_s)
        except ValueError:
            return _error("'from' and 'to' must be ISO 8601 local timestamps without offset", 400)

        try:
            worked = container.stats_service.work_time_in_range(
                container.schedule, from_instant, to_instant, employee_id
            )
        except ValidationError as e:
            return _error(str(e), 400)

        return jsonify({"employee_id": employee_id, "seconds": int(worked.total_seconds())})

    @app.get("/api/report", endpoint="api_report")
    def api_report():
        report = container.report_service.build_report(container.schedule)
        return jsonify({"rows": report.rows, "skipped": report.skipped})

    @app.get("/api/report.xlsx", endpoint="api_report_xlsx")
    def api_report_xlsx():
        report = container.report_service.build_report(container.schedule)
        logger.info("Exporting report with %d rows", len(report.rows))
        return Response(
            export_report_xlsx(report),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": "attachment; filename=work_time_report.xlsx"},
        )
