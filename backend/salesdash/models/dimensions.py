from __future__ import annotations

from ..extensions import db
from salesdash.time_utils import to_utc_z


class Concept(db.Model):
    """
    A brand/restaurant concept. Owns many branches.

    Concepts are referenced by every fact table, so a concept cannot be
    removed while branches or fact rows still point at it.
    """
    __tablename__ = "concepts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    concept_name = db.Column(db.String(255), nullable=False, index=True)
    concept_description = db.Column(db.Text, nullable=False)

    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    branches = db.relationship(
        "Branch",
        back_populates="concept",
        order_by="Branch.branch_name",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Concept id={self.id} name={self.concept_name!r}>"

    def to_dict(self, include_branches: bool = False) -> dict:
        data = {
            "id": self.id,
            "concept_name": self.concept_name,
            "concept_description": self.concept_description,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }
        if include_branches:
            data["branches"] = [branch.to_dict() for branch in self.branches]
        return data


class Branch(db.Model):
    """Physical location belonging to exactly one concept."""
    __tablename__ = "branches"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    branch_name = db.Column(db.String(255), nullable=False, index=True)
    branch_description = db.Column(db.Text, nullable=False)
    branch_address = db.Column(db.Text, nullable=False)
    concept_id = db.Column(db.Integer, db.ForeignKey("concepts.id"), nullable=False, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    concept = db.relationship("Concept", back_populates="branches", lazy="joined")

    def __repr__(self) -> str:
        return f"<Branch id={self.id} name={self.branch_name!r} concept_id={self.concept_id}>"

    def to_dict(self, include_concept: bool = False) -> dict:
        data = {
            "id": self.id,
            "branch_name": self.branch_name,
            "branch_description": self.branch_description,
            "branch_address": self.branch_address,
            "concept_id": self.concept_id,
            "is_active": self.is_active,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }
        if include_concept:
            data["concept"] = self.concept.to_dict() if self.concept else None
        return data


class Category(db.Model):
    """Item category. category_code is unique across the table."""
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    category_code = db.Column(db.String(50), nullable=False, unique=True, index=True)
    category_desc = db.Column(db.String(255), nullable=False)

    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    def __repr__(self) -> str:
        return f"<Category id={self.id} code={self.category_code!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category_code": self.category_code,
            "category_desc": self.category_desc,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }


class Product(db.Model):
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    product_code = db.Column(db.String(25), nullable=False, unique=True, index=True)
    product_desc = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Product id={self.id} code={self.product_code!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "product_code": self.product_code,
            "product_desc": self.product_desc,
            "is_active": self.is_active,
        }
