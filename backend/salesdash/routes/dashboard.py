# Overview: Flask API routes for the month dashboard cards and charts.

from flask import Blueprint, jsonify, request

from ..services import dashboard_service


dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


def _ok(data):
    return jsonify({"status": "success", "data": data}), 200


@dashboard_bp.get("/total-sales-per-day")
def total_sales_per_day():
    """
    Query params (all dashboard endpoints):
    - month: required, YYYY-MM
    - branch_id, concept_id: optional id, or ALL
    """
    filters = dashboard_service.parse_month_filters(request.args)
    return _ok(dashboard_service.total_sales_per_day(filters))


@dashboard_bp.get("/stats")
def stats():
    filters = dashboard_service.parse_month_filters(request.args)
    return _ok(dashboard_service.stats(filters))


@dashboard_bp.get("/average-sales-per-day")
def average_sales_per_day():
    filters = dashboard_service.parse_month_filters(request.args)
    return _ok(dashboard_service.average_sales_per_day(filters))


@dashboard_bp.get("/average-sales-per-customer")
def average_sales_per_customer():
    filters = dashboard_service.parse_month_filters(request.args)
    return _ok(dashboard_service.average_sales_per_customer(filters))


@dashboard_bp.get("/average-tx-per-day")
def average_tx_per_day():
    filters = dashboard_service.parse_month_filters(request.args)
    return _ok(dashboard_service.average_tx_per_day(filters))


@dashboard_bp.get("/payment-chart")
def payment_chart():
    filters = dashboard_service.parse_month_filters(request.args)
    return _ok(dashboard_service.payment_chart(filters))
