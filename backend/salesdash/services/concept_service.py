# Overview: Service-layer operations for concepts; encapsulates business logic and database work.

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError
from ..extensions import db
from ..models import Concept
from ..validation import ModelValidationPolicy, validate_payload

CONCEPT_POLICY = ModelValidationPolicy(
    writable_fields=frozenset({"concept_name", "concept_description"}),
    required_on_create=frozenset({"concept_name", "concept_description"}),
)


def list_concepts() -> list[Concept]:
    return db.session.query(Concept).order_by(Concept.concept_name.asc(), Concept.id.asc()).all()


def get_concept(concept_id: int) -> Concept:
    concept = db.session.get(Concept, concept_id)
    if not concept:
        raise NotFoundError("Concept not found")
    return concept


def create_concept(payload: dict) -> Concept:
    values = validate_payload(model=Concept, payload=payload, policy=CONCEPT_POLICY)
    concept = Concept(**values)
    db.session.add(concept)
    db.session.commit()
    return concept


def update_concept(concept_id: int, payload: dict) -> Concept:
    concept = get_concept(concept_id)
    values = validate_payload(model=Concept, payload=payload, policy=CONCEPT_POLICY)
    for key, value in values.items():
        setattr(concept, key, value)
    db.session.commit()
    return concept


def delete_concept(concept_id: int) -> None:
    concept = get_concept(concept_id)
    if concept.branches:
        raise ConflictError("Concept still has branches")

    db.session.delete(concept)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Concept is referenced by sales data")
