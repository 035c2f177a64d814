# Overview: Flask API routes for category operations and file import.

from flask import Blueprint, jsonify, request

from ..errors import ValidationError
from ..services import category_service, import_service


categories_bp = Blueprint("categories", __name__, url_prefix="/api/categories")


@categories_bp.get("")
def list_categories():
    categories = category_service.list_categories()
    return jsonify({"data": [c.to_dict() for c in categories]}), 200


@categories_bp.post("")
def create_category():
    category = category_service.create_category(request.get_json(silent=True))
    return jsonify({"data": category.to_dict()}), 201


@categories_bp.put("/<int(max=9223372036854775807):category_id>")
def update_category(category_id: int):
    category = category_service.update_category(category_id, request.get_json(silent=True))
    return jsonify({"data": category.to_dict()}), 200


@categories_bp.delete("/<int(max=9223372036854775807):category_id>")
def delete_category(category_id: int):
    category_service.delete_category(category_id)
    return "", 204


@categories_bp.post("/import")
def import_categories():
    """
    Bulk import from a CSV/XLSX upload (multipart field `file` or `csv_file`).

    200 when every row imported; 422 with per-row errors otherwise.
    """
    upload = request.files.get("file") or request.files.get("csv_file")
    if upload is None or not upload.filename:
        raise ValidationError("Validation failed", fields={"file": ["file is required"]})

    imported = import_service.import_categories(filename=upload.filename, stream=upload.stream)
    return jsonify({
        "data": {"imported": imported},
        "message": f"{imported} categories imported successfully",
    }), 200
