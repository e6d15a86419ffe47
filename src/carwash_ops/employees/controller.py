from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_day, today_local
from ..common.http import csv_response, json_body
from ..container import Container
from ..core.exceptions import NotFoundError
from ..reports.exports import EMPLOYEE_HEADERS, employee_rows, write_csv
from .model import EmployeeFormData


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service

    def _filtered():
        q = request.args.get("q", "").strip()
        if q:
            return employees.search_employees(q)
        if request.args.get("active") in {"1", "true"}:
            return employees.get_active_employees()
        return employees.list_employees()

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return jsonify([e.to_dict() for e in _filtered()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        employee = employees.register_employee(EmployeeFormData.from_mapping(json_body()))
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_detail")
    def employees_detail(employee_id: str):
        return jsonify(employees.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>/toggle-active", methods=["POST"], endpoint="employees_toggle_active")
    def employees_toggle_active(employee_id: str):
        return jsonify(employees.toggle_active(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        if not employees.delete_employee(employee_id):
            raise NotFoundError("Employee not found")
        return jsonify({"success": True})

    @app.route("/api/employees/export.csv", methods=["GET"], endpoint="employees_export_csv")
    def employees_export_csv():
        text = write_csv(EMPLOYEE_HEADERS, employee_rows(_filtered()))
        return csv_response(app, text, filename=f"carwash-employees-{format_day(today_local())}.csv")
