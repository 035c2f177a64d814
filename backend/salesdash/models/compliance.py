from __future__ import annotations

from ..extensions import db
from .mixins import BranchConceptFact


class BirDetailed(BranchConceptFact, db.Model):
    """
    BIR detailed sales row: one sales invoice (SI) with its VAT breakdown.

    Unique per (branch, SI number, date).
    """
    __tablename__ = "bir_detailed"
    __table_args__ = (
        db.UniqueConstraint("branch_id", "si_number", "date", name="uq_bir_detailed_invoice"),
        db.Index("ix_bir_detailed_date_branch_concept", "date", "branch_id", "concept_id"),
        {"sqlite_autoincrement": True},
    )

    si_number = db.Column(db.Integer, nullable=False, index=True)
    tx_number = db.Column(db.Integer, nullable=False, index=True)
    vat_exempt = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vat_zero_rate = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vatable_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vat_12 = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    less_vat = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    gross_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    discount_type = db.Column(db.String(50), nullable=True)
    discount_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    service_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    takeout_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    delivery_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    net_total = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    cash = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    other_payment = db.Column(db.Numeric(12, 2), nullable=False, default=0)


class BirSummary(BranchConceptFact, db.Model):
    """
    BIR daily summary per Z-reading.

    Unique per (branch, date, z_counter).
    """
    __tablename__ = "bir_summary"
    __table_args__ = (
        db.UniqueConstraint("branch_id", "date", "z_counter", name="uq_bir_summary_z"),
        db.Index("ix_bir_summary_date_branch_concept", "date", "branch_id", "concept_id"),
        {"sqlite_autoincrement": True},
    )

    si_first = db.Column(db.Integer, nullable=True)
    si_last = db.Column(db.Integer, nullable=True)
    z_counter = db.Column(db.Integer, nullable=True, index=True)
    beg_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    end_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    net_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    sc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    pwd = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    others = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    returns = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    voids = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    gross_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vatable = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vat_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vat_exempt = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    zero_rated = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    less_vat = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    ewt = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    service_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)


class GovernmentDiscount(BranchConceptFact, db.Model):
    """Senior Citizen / PWD discount ledger entry."""
    __tablename__ = "government_discounts"
    __table_args__ = (
        db.Index("ix_government_discounts_date_branch", "date", "branch_id"),
        {"sqlite_autoincrement": True},
    )

    terminal = db.Column(db.String(25), nullable=True)
    id_no = db.Column(db.String(50), nullable=True)
    id_type = db.Column(db.String(20), nullable=False)  # Senior / PWD
    name = db.Column(db.String(100), nullable=True)
    ref_number = db.Column(db.String(50), nullable=True)
    gross_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    discount_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)


class VoidTx(BranchConceptFact, db.Model):
    """Voided transaction audit entry: who approved it and why."""
    __tablename__ = "void_tx"
    __table_args__ = (
        db.Index("ix_void_tx_date_time", "date", "time"),
        {"sqlite_autoincrement": True},
    )

    time = db.Column(db.Time, nullable=False)
    tx_number = db.Column(db.Integer, nullable=False)
    terminal = db.Column(db.String(25), nullable=True)
    salesinvoice_number = db.Column(db.Integer, nullable=True, unique=True)
    cashier_name = db.Column(db.String(25), nullable=True)
    amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    approved_by = db.Column(db.String(25), nullable=False)
    remarks = db.Column(db.String(100), nullable=False, default="")
