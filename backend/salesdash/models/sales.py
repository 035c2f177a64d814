from __future__ import annotations

from ..extensions import db
from .mixins import BranchConceptFact


class Hourly(BranchConceptFact, db.Model):
    """
    Hourly sales summary from a POS terminal.

    One row per branch/concept/date/hour/register. Amounts keep 5 fractional
    digits as delivered by the terminals; reports round at the boundary.
    """
    __tablename__ = "hourly"
    __table_args__ = (
        db.UniqueConstraint("branch_id", "concept_id", "date", "hour", "reg", name="uq_hourly_slot"),
        db.CheckConstraint("hour >= 0 AND hour <= 23", name="ck_hourly_hour_range"),
        db.Index("ix_hourly_date_hour", "date", "hour"),
        {"sqlite_autoincrement": True},
    )

    hour = db.Column(db.Integer, nullable=False)
    reg = db.Column(db.String(25), nullable=False, default="")
    total_trans = db.Column(db.Integer, nullable=False, default=0)
    total_void = db.Column(db.Integer, nullable=False, default=0)
    total_sales = db.Column(db.Numeric(12, 5), nullable=False, default=0)
    total_discount = db.Column(db.Numeric(12, 5), nullable=False, default=0)


class Header(BranchConceptFact, db.Model):
    """Per-register daily header (Z-reading): OR range, balances, counters, discount buckets."""
    __tablename__ = "header"
    __table_args__ = (
        db.Index("ix_header_date_branch_concept", "date", "branch_id", "concept_id"),
        {"sqlite_autoincrement": True},
    )

    reg = db.Column(db.String(25), nullable=False, default="")
    or_from = db.Column(db.String(30), nullable=True)
    or_to = db.Column(db.String(30), nullable=True)
    beg_balance = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    end_balance = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    no_transaction = db.Column(db.Integer, nullable=False, default=0)
    no_guest = db.Column(db.Integer, nullable=False, default=0)
    reg_guest = db.Column(db.Integer, nullable=False, default=0)
    ftime_guest = db.Column(db.Integer, nullable=False, default=0)
    no_void = db.Column(db.Integer, nullable=False, default=0)
    no_disc = db.Column(db.Integer, nullable=False, default=0)
    other_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    senior_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    pwd_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    open_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vip_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    employee_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    promo_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    free_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    no_cancel = db.Column(db.Integer, nullable=False, default=0)
    room_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    z_count = db.Column(db.String(20), nullable=True)


class ItemSales(BranchConceptFact, db.Model):
    """Item-level sales lines, including the per-type discount buckets."""
    __tablename__ = "item_sales"
    __table_args__ = (
        db.Index("ix_item_sales_date_branch_concept", "date", "branch_id", "concept_id"),
        db.Index("ix_item_sales_product_category", "product_code", "category_code"),
        {"sqlite_autoincrement": True},
    )

    reg = db.Column(db.String(25), nullable=False, default="")
    category_code = db.Column(db.String(15), nullable=False)
    product_code = db.Column(db.String(25), nullable=False)
    description = db.Column(db.String(255), nullable=False)
    quantity = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    total_gross = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    net_sales = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vatable_sales = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vat_exempt_sales = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    senior_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    pwd_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    other_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    open_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    employee_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    vip_disc = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    promo = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    free = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    service_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    transaction_time = db.Column(db.Time, nullable=True)
    receipt_no = db.Column(db.String(50), nullable=True)
    cashier_name = db.Column(db.String(50), nullable=True)


class PaymentDetail(BranchConceptFact, db.Model):
    """
    One payment line (tender) on a receipt.

    Single mapping for the payment_details table: amount is a Decimal with 2
    fractional digits, date and transaction_time are kept as separate columns.
    """
    __tablename__ = "payment_details"
    __table_args__ = (
        db.Index("ix_payment_details_date_branch_concept", "date", "branch_id", "concept_id"),
        {"sqlite_autoincrement": True},
    )

    reg = db.Column(db.String(25), nullable=False, default="")
    pay_type = db.Column(db.String(15), nullable=True, index=True)
    description = db.Column(db.String(50), nullable=False)
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    transaction_time = db.Column(db.Time, nullable=True)
    receipt_no = db.Column(db.String(50), nullable=True, index=True)
    cashier_name = db.Column(db.String(50), nullable=True)


class Cashier(BranchConceptFact, db.Model):
    """Per-cashier daily totals."""
    __tablename__ = "cashier"
    __table_args__ = (
        db.UniqueConstraint("branch_id", "date", "cashier", name="uq_cashier_day"),
        {"sqlite_autoincrement": True},
    )

    cashier = db.Column(db.String(100), nullable=False)
    gross_sales = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    net_sales = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    cash = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    card = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    less_vat = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    discount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    delivery_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    service_charge = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    void_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    void_count = db.Column(db.Integer, nullable=False, default=0)
    tx_count = db.Column(db.Integer, nullable=False, default=0)
