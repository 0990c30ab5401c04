from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        try:
            return jsonify(container.dashboard_service.build_summary().to_dict())
        except Exception:
            logger.exception("dashboard summary failed")
            return jsonify({"success": False, "message": "Internal error while loading dashboard"}), 500
