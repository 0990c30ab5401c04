from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.validators import require_collection
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet():
        try:
            sheet = container.attendance_service.get_sheet(request.args.get("date"))
            return jsonify(asdict(sheet))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("attendance sheet failed")
            return jsonify({"success": False, "message": "Internal error while loading attendance"}), 500

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        """Mark one person present/absent; an unknown id is accepted and ignored."""
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")

            collection = require_collection(data.get("collection"))
            record_id = str(data.get("id") or "")
            present = data.get("present")
            if not isinstance(present, bool):
                raise ValidationError("present must be true or false")

            updated = container.attendance_service.mark(collection, record_id, data.get("date"), present)
            return jsonify({"success": True, "updated": updated})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("mark attendance failed")
            return jsonify({"success": False, "message": "Internal error while marking attendance"}), 500
