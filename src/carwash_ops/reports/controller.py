from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import DEFAULT_RECENT_CUSTOMERS
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    dashboard = container.dashboard_service

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard_stats():
        try:
            limit = int(request.args.get("recent", DEFAULT_RECENT_CUSTOMERS))
        except ValueError:
            raise ValidationError("recent must be an integer", {"recent": "Invalid number"})
        return jsonify(dashboard.build(recent_limit=max(limit, 0)).to_dict())

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
