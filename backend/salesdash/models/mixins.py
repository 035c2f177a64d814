from __future__ import annotations

from sqlalchemy.orm import declared_attr

from ..extensions import db


class BranchConceptFact:
    """
    Columns shared by every POS fact table: the owning branch and concept,
    the business date, and row timestamps.

    Fact rows are append-only here; they are written by seed/ingest tooling
    and only read by the report engine.
    """

    id = db.Column(db.Integer, primary_key=True)

    @declared_attr
    def branch_id(cls):
        return db.Column(db.Integer, db.ForeignKey("branches.id"), nullable=False, index=True)

    @declared_attr
    def concept_id(cls):
        return db.Column(db.Integer, db.ForeignKey("concepts.id"), nullable=False, index=True)

    @declared_attr
    def date(cls):
        return db.Column(db.Date, nullable=False, index=True)

    @declared_attr
    def created_at(cls):
        return db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} branch_id={self.branch_id} date={self.date}>"

