from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_day
from ..common.http import csv_response, day_arg, file_response
from ..container import Container
from ..reports.exports import PERFORMANCE_HEADERS, performance_rows, write_csv, write_excel

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    performance = container.performance_service
    employees = container.employee_service

    @app.route("/api/performance", methods=["GET"], endpoint="performance_report")
    def performance_report():
        report = performance.get_daily_performance_report(day_arg())
        return jsonify(
            {
                "report": [
                    {
                        **p.to_dict(),
                        "employeeName": employees.employee_name(p.employee_id),
                        "completionRate": p.completion_rate,
                    }
                    for p in report
                ],
                "summary": performance.summarize(report).to_dict(),
            }
        )

    @app.route("/api/performance/export.csv", methods=["GET"], endpoint="performance_export_csv")
    def performance_export_csv():
        work_date = day_arg()
        rows = performance_rows(performance.get_daily_performance_report(work_date), employees.employee_name)
        text = write_csv(PERFORMANCE_HEADERS, rows)
        return csv_response(app, text, filename=f"employee-performance-{format_day(work_date)}.csv")

    @app.route("/api/performance/export.xlsx", methods=["GET"], endpoint="performance_export_xlsx")
    def performance_export_xlsx():
        work_date = day_arg()
        rows = performance_rows(performance.get_daily_performance_report(work_date), employees.employee_name)
        payload = write_excel(PERFORMANCE_HEADERS, rows, sheet_name="Performance")
        return file_response(
            app, payload, filename=f"employee-performance-{format_day(work_date)}.xlsx", mimetype=XLSX_MIMETYPE
        )

    @app.route("/api/performance/<employee_id>", methods=["GET"], endpoint="performance_employee")
    def performance_employee(employee_id: str):
        employees.get_employee(employee_id)
        p = performance.calculate_daily_performance(employee_id, day_arg())
        return jsonify({**p.to_dict(), "completionRate": p.completion_rate})
