# Overview: Service-layer operations for categories; encapsulates business logic and database work.

from __future__ import annotations

from ..errors import ConflictError, NotFoundError
from ..extensions import db
from ..models import Category
from ..validation import ModelValidationPolicy, validate_payload

CATEGORY_POLICY = ModelValidationPolicy(
    writable_fields=frozenset({"category_code", "category_desc"}),
    required_on_create=frozenset({"category_code", "category_desc"}),
)


def code_taken(code: str, *, exclude_id: int | None = None) -> bool:
    query = db.session.query(Category.id).filter(Category.category_code == code)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return query.first() is not None


def list_categories() -> list[Category]:
    return db.session.query(Category).order_by(Category.category_code.asc()).all()


def get_category(category_id: int) -> Category:
    category = db.session.get(Category, category_id)
    if not category:
        raise NotFoundError("Category not found")
    return category


def create_category(payload: dict) -> Category:
    values = validate_payload(model=Category, payload=payload, policy=CATEGORY_POLICY)
    if code_taken(values["category_code"]):
        raise ConflictError("Category code already exists")

    category = Category(**values)
    db.session.add(category)
    db.session.commit()
    return category


def update_category(category_id: int, payload: dict) -> Category:
    category = get_category(category_id)
    values = validate_payload(model=Category, payload=payload, policy=CATEGORY_POLICY)
    if code_taken(values["category_code"], exclude_id=category.id):
        raise ConflictError("Category code already exists")

    category.category_code = values["category_code"]
    category.category_desc = values["category_desc"]
    db.session.commit()
    return category


def delete_category(category_id: int) -> None:
    category = get_category(category_id)
    db.session.delete(category)
    db.session.commit()
