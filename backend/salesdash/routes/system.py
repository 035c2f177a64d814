# Overview: Liveness endpoint with a database round trip.

import time

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text

from ..extensions import db

system_bp = Blueprint("system", __name__)


@system_bp.get("/api/health")
def health():
    start_time = time.time()
    try:
        db.session.execute(text("SELECT 1"))
        database = {"status": "healthy"}
    except Exception:
        current_app.logger.exception("Database health check failed")
        database = {"status": "unhealthy", "error": "Database error"}
    database["latency_ms"] = round((time.time() - start_time) * 1000, 2)

    status = 200 if database["status"] == "healthy" else 503
    return jsonify({"status": database["status"], "database": database}), status
