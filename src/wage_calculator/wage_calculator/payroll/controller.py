from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import DomainError
from ..timesheets.reader import decode_upload
from .service import group_by_month

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/salaries", methods=["POST"], endpoint="salaries")
    def salaries():
        """Compute monthly salaries from an uploaded timesheet CSV (multipart field 'file')."""
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"error": "No timesheet uploaded"}), 400

        try:
            lines = decode_upload(upload.read(), upload.mimetype_params.get("charset"))
            result = container.payroll_service.calculate(lines)
        except DomainError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Salary calculation failed", extra={"upload": upload.filename, "action": "upload_failed"})
            return jsonify({"error": "Internal error while calculating salaries"}), 500

        return jsonify({"months": group_by_month(result)}), 200
