# Overview: Service-layer operations for branches; encapsulates business logic and database work.

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError, ValidationError
from ..extensions import db
from ..models import Branch, Concept
from ..validation import ModelValidationPolicy, validate_payload

BRANCH_POLICY = ModelValidationPolicy(
    writable_fields=frozenset({
        "branch_name", "branch_description", "branch_address", "concept_id", "is_active",
    }),
    required_on_create=frozenset({
        "branch_name", "branch_description", "branch_address", "concept_id",
    }),
)


def _ensure_concept_exists(concept_id: int) -> None:
    if db.session.get(Concept, concept_id) is None:
        raise ValidationError(
            "Validation failed",
            fields={"concept_id": ["concept_id does not reference an existing concept"]},
        )


def list_branches() -> list[Branch]:
    return db.session.query(Branch).order_by(Branch.branch_name.asc(), Branch.id.asc()).all()


def get_branch(branch_id: int) -> Branch:
    branch = db.session.get(Branch, branch_id)
    if not branch:
        raise NotFoundError("Branch not found")
    return branch


def create_branch(payload: dict) -> Branch:
    values = validate_payload(model=Branch, payload=payload, policy=BRANCH_POLICY)
    _ensure_concept_exists(values["concept_id"])

    branch = Branch(**values)
    db.session.add(branch)
    db.session.commit()
    return branch


def update_branch(branch_id: int, payload: dict) -> Branch:
    branch = get_branch(branch_id)
    values = validate_payload(model=Branch, payload=payload, policy=BRANCH_POLICY)
    _ensure_concept_exists(values["concept_id"])

    for key, value in values.items():
        setattr(branch, key, value)
    db.session.commit()
    return branch


def delete_branch(branch_id: int) -> None:
    branch = get_branch(branch_id)
    db.session.delete(branch)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Branch is referenced by sales data")
