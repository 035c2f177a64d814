# Overview: Flask API routes for the product catalog.

from flask import Blueprint, jsonify, request

from ..services import product_service


products_bp = Blueprint("products", __name__, url_prefix="/api/products")


@products_bp.get("")
def list_products():
    include_inactive = request.args.get("include_inactive", "false").lower() == "true"
    products = product_service.list_products(include_inactive=include_inactive)
    return jsonify({"data": [p.to_dict() for p in products]}), 200
