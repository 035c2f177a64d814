# Overview: Flask API routes for concept operations; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request

from ..services import concept_service


concepts_bp = Blueprint("concepts", __name__, url_prefix="/api/concepts")


@concepts_bp.get("")
def list_concepts():
    concepts = concept_service.list_concepts()
    return jsonify({"data": [c.to_dict(include_branches=True) for c in concepts]}), 200


@concepts_bp.post("")
def create_concept():
    concept = concept_service.create_concept(request.get_json(silent=True))
    return jsonify({"data": concept.to_dict(include_branches=True)}), 201


@concepts_bp.put("/<int(max=9223372036854775807):concept_id>")
def update_concept(concept_id: int):
    concept = concept_service.update_concept(concept_id, request.get_json(silent=True))
    return jsonify({"data": concept.to_dict(include_branches=True)}), 200


@concepts_bp.delete("/<int(max=9223372036854775807):concept_id>")
def delete_concept(concept_id: int):
    concept_service.delete_concept(concept_id)
    return "", 204
