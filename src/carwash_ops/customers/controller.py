from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_day, today_local
from ..common.http import csv_response, json_body
from ..container import Container
from ..core.constants import AVAILABLE_CAR_SERVICES
from ..core.exceptions import NotFoundError
from ..reports.exports import CUSTOMER_HEADERS, customer_rows, write_csv
from .model import CustomerFormData


def register(app: Flask, container: Container) -> None:
    customers = container.customer_service
    employees = container.employee_service

    def _filtered():
        q = request.args.get("q", "").strip()
        return customers.search_customers(q) if q else customers.list_customers()

    @app.route("/api/customers", methods=["GET"], endpoint="customers_list")
    def customers_list():
        return jsonify([c.to_dict() for c in _filtered()])

    @app.route("/api/customers", methods=["POST"], endpoint="customers_create")
    def customers_create():
        customer = customers.register_customer(CustomerFormData.from_mapping(json_body()))
        return jsonify(customer.to_dict()), 201

    @app.route("/api/customers/services", methods=["GET"], endpoint="customers_services")
    def customers_services():
        return jsonify(list(AVAILABLE_CAR_SERVICES))

    @app.route("/api/customers/<customer_id>", methods=["GET"], endpoint="customers_detail")
    def customers_detail(customer_id: str):
        return jsonify(customers.get_customer(customer_id).to_dict())

    @app.route("/api/customers/<customer_id>", methods=["DELETE"], endpoint="customers_delete")
    def customers_delete(customer_id: str):
        if not customers.delete_customer(customer_id):
            raise NotFoundError("Customer not found")
        return jsonify({"success": True})

    @app.route("/api/customers/export.csv", methods=["GET"], endpoint="customers_export_csv")
    def customers_export_csv():
        text = write_csv(CUSTOMER_HEADERS, customer_rows(_filtered(), employees.employee_name))
        return csv_response(app, text, filename=f"carwash-customers-{format_day(today_local())}.csv")
