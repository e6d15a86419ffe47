from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import day_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    assignments = container.assignment_service

    @app.route("/api/assignments", methods=["GET"], endpoint="assignments_list")
    def assignments_list():
        employee_id = request.args.get("employeeId", "").strip()
        day = day_arg()
        if employee_id:
            rows = assignments.get_employee_assignments(employee_id, day)
        else:
            rows = assignments.get_assignments_for_date(day)
        return jsonify([a.to_dict() for a in rows])

    @app.route("/api/assignments/<assignment_id>/complete", methods=["POST"], endpoint="assignments_complete")
    def assignments_complete(assignment_id: str):
        return jsonify(assignments.complete_assignment(assignment_id).to_dict())

    @app.route("/api/assignments/<assignment_id>/cancel", methods=["POST"], endpoint="assignments_cancel")
    def assignments_cancel(assignment_id: str):
        return jsonify(assignments.cancel_assignment(assignment_id).to_dict())
