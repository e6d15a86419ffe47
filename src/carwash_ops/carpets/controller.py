from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_day, today_local
from ..common.http import csv_response, json_body
from ..container import Container
from ..core.constants import COMMON_STAINS
from ..core.enums import CarpetStatus, CleaningService, DryingService, ProtectionService, SizeUnit
from ..core.exceptions import NotFoundError, ValidationError
from ..reports.exports import CARPET_HEADERS, carpet_rows, write_csv
from . import pricing
from .model import CarpetFormData, CarpetServices, CarpetSize
from .service import validate_carpet_form


def _status_arg(value) -> CarpetStatus:
    try:
        return CarpetStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in CarpetStatus)
        raise ValidationError("Invalid status", {"status": f"Must be one of: {allowed}"})


def _form(data: dict) -> CarpetFormData:
    try:
        return CarpetFormData.from_mapping(data)
    except (TypeError, ValueError):
        raise ValidationError("Carpet form is invalid", {"deposit": "Deposit must be a number"})


def register(app: Flask, container: Container) -> None:
    carpets = container.carpet_service
    customers = container.customer_service
    employees = container.employee_service

    def _filtered():
        args = request.args
        if args.get("q", "").strip():
            return carpets.search_carpets(args["q"].strip())
        if args.get("status"):
            return carpets.get_carpets_by_status(_status_arg(args["status"]))
        if args.get("customerId"):
            return carpets.get_carpets_by_customer(args["customerId"])
        if args.get("employeeId"):
            return carpets.get_carpets_by_employee(args["employeeId"])
        return carpets.list_carpets()

    @app.route("/api/carpets", methods=["GET"], endpoint="carpets_list")
    def carpets_list():
        return jsonify([c.to_dict() for c in _filtered()])

    @app.route("/api/carpets", methods=["POST"], endpoint="carpets_create")
    def carpets_create():
        carpet = carpets.create_carpet_job(_form(json_body()))
        return jsonify(carpet.to_dict()), 201

    @app.route("/api/carpets/quote", methods=["POST"], endpoint="carpets_quote")
    def carpets_quote():
        """Live price preview for the intake form; nothing is stored."""
        form = _form(json_body())
        errors = {
            k: v
            for k, v in validate_carpet_form(form).items()
            if k in {"length", "width", "unit", "cleaningService", "dryingService", "protectionService", "deposit"}
        }
        if errors:
            raise ValidationError("Cannot price this carpet", errors)
        quote = pricing.quote(
            CarpetServices(
                cleaning=CleaningService(form.cleaning_service),
                drying=DryingService(form.drying_service),
                protection=ProtectionService(form.protection_service),
            ),
            CarpetSize(length=float(form.length), width=float(form.width), unit=SizeUnit(form.unit)),
            deposit=form.deposit,
        )
        return jsonify(
            {
                "basePrice": quote.base_price,
                "additionalServices": quote.additional_services,
                "totalPrice": quote.total_price,
                "deposit": quote.deposit,
                "balance": quote.balance,
            }
        )

    @app.route("/api/carpets/options", methods=["GET"], endpoint="carpets_options")
    def carpets_options():
        def _priced(prices):
            return [
                {"value": svc.value, "label": pricing.SERVICE_LABELS[svc], "price": price} for svc, price in prices.items()
            ]

        return jsonify(
            {
                "cleaning": _priced(pricing.CLEANING_PRICES),
                "drying": _priced(pricing.DRYING_PRICES),
                "protection": _priced(pricing.PROTECTION_PRICES),
                "stains": list(COMMON_STAINS),
            }
        )

    @app.route("/api/carpets/stats", methods=["GET"], endpoint="carpets_stats")
    def carpets_stats():
        return jsonify(carpets.get_carpet_stats().to_dict())

    @app.route("/api/carpets/today", methods=["GET"], endpoint="carpets_today")
    def carpets_today():
        return jsonify([c.to_dict() for c in carpets.get_today_carpets()])

    @app.route("/api/carpets/tracking", methods=["GET"], endpoint="carpets_tracking")
    def carpets_tracking():
        employee_id = request.args.get("employeeId", "").strip() or None
        board = carpets.get_tracking_board(employee_id)
        return jsonify(
            [
                {
                    **c.to_dict(),
                    "customerName": customers.customer_name(c.customer_id),
                    "employeeName": employees.employee_name(c.employee_id),
                }
                for c in board
            ]
        )

    @app.route("/api/employees/<employee_id>/workload", methods=["GET"], endpoint="carpets_workload")
    def carpets_workload(employee_id: str):
        return jsonify([c.to_dict() for c in carpets.get_employee_carpet_workload(employee_id)])

    @app.route("/api/carpets/<carpet_id>", methods=["GET"], endpoint="carpets_detail")
    def carpets_detail(carpet_id: str):
        carpet = carpets.get_carpet(carpet_id)
        if not carpet:
            raise NotFoundError("Carpet job not found")
        return jsonify(carpet.to_dict())

    @app.route("/api/carpets/<carpet_id>/status", methods=["POST"], endpoint="carpets_status")
    def carpets_status(carpet_id: str):
        updated = carpets.update_carpet_status(carpet_id, _status_arg(json_body().get("status")))
        if not updated:
            raise NotFoundError("Carpet job not found")
        return jsonify(updated.to_dict())

    @app.route("/api/carpets/<carpet_id>", methods=["DELETE"], endpoint="carpets_delete")
    def carpets_delete(carpet_id: str):
        if not carpets.delete_carpet(carpet_id):
            raise NotFoundError("Carpet job not found")
        return jsonify({"success": True})

    @app.route("/api/carpets/export.csv", methods=["GET"], endpoint="carpets_export_csv")
    def carpets_export_csv():
        text = write_csv(CARPET_HEADERS, carpet_rows(_filtered(), customers.customer_name, employees.employee_name))
        return csv_response(app, text, filename=f"carpet-jobs-{format_day(today_local())}.csv")
