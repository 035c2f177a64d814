# Overview: Flask API routes for branch operations; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request

from ..services import branch_service


branches_bp = Blueprint("branches", __name__, url_prefix="/api/branches")


@branches_bp.get("")
def list_branches():
    branches = branch_service.list_branches()
    return jsonify({"data": [b.to_dict(include_concept=True) for b in branches]}), 200


@branches_bp.post("")
def create_branch():
    branch = branch_service.create_branch(request.get_json(silent=True))
    return jsonify({"data": branch.to_dict(include_concept=True)}), 201


@branches_bp.put("/<int(max=9223372036854775807):branch_id>")
def update_branch(branch_id: int):
    branch = branch_service.update_branch(branch_id, request.get_json(silent=True))
    return jsonify({"data": branch.to_dict(include_concept=True)}), 200


@branches_bp.delete("/<int(max=9223372036854775807):branch_id>")
def delete_branch(branch_id: int):
    branch_service.delete_branch(branch_id)
    return "", 204
