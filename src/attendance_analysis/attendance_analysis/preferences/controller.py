from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.preferences_service

    @app.route("/api/preferences", methods=["GET"], endpoint="api_preferences")
    def api_preferences():
        return jsonify({"success": True, "preferences": service.get_config().to_dict()})

    @app.route("/api/preferences", methods=["PUT"], endpoint="api_preferences_update")
    def api_preferences_update():
        try:
            config = service.update_config(request.get_json(silent=True) or {})
            return jsonify({"success": True, "preferences": config.to_dict()})
        except ValidationError as e:
            logger.warning("Rejected preferences update: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Saving preferences failed")
            return jsonify({"success": False, "message": "Internal error while saving preferences"}), 500

    @app.route("/api/preferences", methods=["DELETE"], endpoint="api_preferences_reset")
    def api_preferences_reset():
        try:
            config = service.reset()
            return jsonify({"success": True, "preferences": config.to_dict()})
        except Exception:
            logger.exception("Resetting preferences failed")
            return jsonify({"success": False, "message": "Internal error while resetting preferences"}), 500

    @app.route("/api/preferences/columns", methods=["GET"], endpoint="api_columns")
    def api_columns():
        return jsonify({"success": True, "columns": [c.to_dict() for c in service.get_columns()]})

    @app.route("/api/preferences/columns", methods=["PUT"], endpoint="api_columns_update")
    def api_columns_update():
        try:
            columns = service.update_columns(request.get_json(silent=True) or {})
            return jsonify({"success": True, "columns": [c.to_dict() for c in columns]})
        except ValidationError as e:
            logger.warning("Rejected column update: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Saving columns failed")
            return jsonify({"success": False, "message": "Internal error while saving columns"}), 500
