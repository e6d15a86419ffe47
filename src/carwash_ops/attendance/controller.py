from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import day_arg, json_body
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        data = json_body()
        employee_id = str(data.get("employeeId") or "").strip()
        if not employee_id:
            raise ValidationError("Employee is required", {"employeeId": "Employee is required"})
        # Unknown ids are accepted; references are never checked.
        record = attendance.mark_attendance(employee_id, bool(data.get("isPresent")), data.get("notes") or None)
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_for_date")
    def attendance_for_date():
        return jsonify([r.to_dict() for r in attendance.get_attendance_for_date(day_arg())])

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        return jsonify([r.to_dict() for r in attendance.get_today_attendance()])

    @app.route("/api/attendance/present", methods=["GET"], endpoint="attendance_present")
    def attendance_present():
        return jsonify([e.to_dict() for e in attendance.get_present_employees_today()])
