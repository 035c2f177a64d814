# Overview: Flask API routes for sales reports; parses filters and returns JSON rows.

from flask import Blueprint, jsonify, request

from ..services import reporting_service


reports_bp = Blueprint("reports", __name__, url_prefix="/api/reports")


@reports_bp.get("")
def list_reports():
    return jsonify({"data": reporting_service.list_reports()}), 200


@reports_bp.get("/<string:name>")
def run_report(name: str):
    """
    Query params:
    - from_date, to_date: required, YYYY-MM-DD, inclusive
    - branch_id, concept_id: optional id, or ALL
    - group: optional rollup (daily-sales supports "daily")
    """
    reporting_service.get_definition(name)
    filters = reporting_service.parse_filters(request.args)
    rows = reporting_service.run_report(name, filters, group=request.args.get("group") or None)
    return jsonify({"status": "success", "data": rows}), 200
