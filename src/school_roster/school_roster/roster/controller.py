from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import optional_text, require_positions
from ..core.enums import Collection
from ..core.exceptions import ValidationError
from ..container import Container
from .codec import record_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    store = container.roster_store

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _list(collection: Collection):
        return jsonify([record_to_dict(r) for r in store.records(collection)])

    def _delete(collection: Collection):
        try:
            positions = require_positions(_json_body().get("positions"))
            store.delete_at(collection, positions)
            return _list(collection)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("delete from %s failed", collection.value)
            return jsonify({"success": False, "message": "Internal error while deleting"}), 500

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return _list(Collection.STUDENTS)

    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    def list_teachers():
        return _list(Collection.TEACHERS)

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        try:
            data = _json_body()
            student = store.add_student(optional_text(data, "name"), optional_text(data, "grade"))
            return jsonify(record_to_dict(student)), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("add student failed")
            return jsonify({"success": False, "message": "Internal error while adding student"}), 500

    @app.route("/api/teachers", methods=["POST"], endpoint="add_teacher")
    def add_teacher():
        try:
            data = _json_body()
            teacher = store.add_teacher(optional_text(data, "name"), optional_text(data, "subject"))
            return jsonify(record_to_dict(teacher)), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("add teacher failed")
            return jsonify({"success": False, "message": "Internal error while adding teacher"}), 500

    @app.route("/api/students/delete", methods=["POST"], endpoint="delete_students")
    def delete_students():
        return _delete(Collection.STUDENTS)

    @app.route("/api/teachers/delete", methods=["POST"], endpoint="delete_teachers")
    def delete_teachers():
        return _delete(Collection.TEACHERS)
