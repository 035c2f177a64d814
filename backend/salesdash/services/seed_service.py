# Overview: Demo data seeding for local development and report walkthroughs.

from __future__ import annotations

import random
from datetime import date, time, timedelta
from decimal import Decimal

from ..extensions import db
from ..money import CENT
from ..models import (
    BirDetailed,
    BirSummary,
    Branch,
    Cashier,
    Category,
    Concept,
    GovernmentDiscount,
    Header,
    Hourly,
    ItemSales,
    PaymentDetail,
    Product,
    VoidTx,
)

DEMO_CONCEPTS = [
    ("Kusina Grill", "Filipino grill and rice meals", ["Makati", "BGC"]),
    ("Brew Corner", "Coffee and pastries", ["Ortigas"]),
]

DEMO_CATEGORIES = [
    ("BEV", "Beverages"),
    ("MAIN", "Main Dishes"),
    ("DSRT", "Desserts"),
]

DEMO_PRODUCTS = [
    ("BEV-001", "Iced Tea", "BEV", Decimal("65.00")),
    ("MAIN-001", "Chicken Inasal", "MAIN", Decimal("189.00")),
    ("MAIN-002", "Pork BBQ", "MAIN", Decimal("149.00")),
    ("DSRT-001", "Halo-Halo", "DSRT", Decimal("120.00")),
]

PAY_TYPES = [("CASH", "Cash"), ("CARD", "Credit Card"), ("EWALLET", "GCash")]


def _money(rng: random.Random, low: int, high: int) -> Decimal:
    return (Decimal(rng.randint(low * 100, high * 100)) / 100).quantize(CENT)


def ensure_dimensions() -> list[Branch]:
    """Create the demo concepts, branches, categories and products if missing."""
    branches: list[Branch] = []
    for concept_name, description, branch_names in DEMO_CONCEPTS:
        concept = db.session.query(Concept).filter_by(concept_name=concept_name).first()
        if not concept:
            concept = Concept(concept_name=concept_name, concept_description=description)
            db.session.add(concept)
            db.session.flush()
        for branch_name in branch_names:
            branch = db.session.query(Branch).filter_by(branch_name=branch_name, concept_id=concept.id).first()
            if not branch:
                branch = Branch(
                    branch_name=branch_name,
                    branch_description=f"{concept_name} {branch_name}",
                    branch_address=f"{branch_name}, Metro Manila",
                    concept_id=concept.id,
                )
                db.session.add(branch)
                db.session.flush()
            branches.append(branch)

    for code, desc in DEMO_CATEGORIES:
        if not db.session.query(Category).filter_by(category_code=code).first():
            db.session.add(Category(category_code=code, category_desc=desc))

    for code, desc, _category, _price in DEMO_PRODUCTS:
        if not db.session.query(Product).filter_by(product_code=code).first():
            db.session.add(Product(product_code=code, product_desc=desc))

    db.session.commit()
    return branches


def _seed_day(rng: random.Random, branch: Branch, day: date, si_start: int, void_si_start: int) -> tuple[int, int]:
    concept_id = branch.concept_id
    net_total = Decimal("0")
    trans_total = 0
    si_number = si_start

    for hour in range(10, 22):
        trans = rng.randint(3, 25)
        voids = rng.randint(0, 1)
        sales = _money(rng, 500, 6000)
        discount = _money(rng, 0, 300)
        db.session.add(Hourly(
            branch_id=branch.id, concept_id=concept_id, date=day, hour=hour, reg="01",
            total_trans=trans, total_void=voids, total_sales=sales, total_discount=discount,
        ))
        trans_total += trans
        net_total += sales - discount

    for code, desc, category, price in DEMO_PRODUCTS:
        qty = Decimal(rng.randint(5, 40))
        gross = (price * qty).quantize(CENT)
        senior = _money(rng, 0, 150)
        pwd = _money(rng, 0, 80)
        db.session.add(ItemSales(
            branch_id=branch.id, concept_id=concept_id, date=day, reg="01",
            category_code=category, product_code=code, description=desc,
            quantity=qty, total_gross=gross, net_sales=gross - senior - pwd,
            vatable_sales=(gross / Decimal("1.12")).quantize(CENT),
            senior_disc=senior, pwd_disc=pwd,
        ))

    for pay_type, description in PAY_TYPES:
        for receipt in range(rng.randint(2, 6)):
            db.session.add(PaymentDetail(
                branch_id=branch.id, concept_id=concept_id, date=day, reg="01",
                pay_type=pay_type, description=description, amount=_money(rng, 100, 2500),
                transaction_time=time(rng.randint(10, 21), rng.randint(0, 59)),
                receipt_no=f"{day:%Y%m%d}-{branch.id}-{pay_type}-{receipt}",
            ))

    for _ in range(rng.randint(3, 8)):
        gross = _money(rng, 150, 1500)
        vatable = (gross / Decimal("1.12")).quantize(CENT)
        db.session.add(BirDetailed(
            branch_id=branch.id, concept_id=concept_id, date=day,
            si_number=si_number, tx_number=si_number,
            vatable_amount=vatable, vat_12=gross - vatable, gross_amount=gross,
            net_total=gross, cash=gross,
        ))
        si_number += 1

    gross = net_total.quantize(CENT)
    vatable = (gross / Decimal("1.12")).quantize(CENT)
    db.session.add(BirSummary(
        branch_id=branch.id, concept_id=concept_id, date=day,
        si_first=si_start, si_last=si_number - 1, z_counter=int(day.strftime("%j")),
        net_amount=gross, gross_amount=gross, vatable=vatable, vat_amount=gross - vatable,
    ))

    for id_type in ("Senior", "PWD"):
        gross_amount = _money(rng, 200, 900)
        db.session.add(GovernmentDiscount(
            branch_id=branch.id, concept_id=concept_id, date=day, terminal="01",
            id_no=f"{id_type[:3].upper()}-{rng.randint(1000, 9999)}", id_type=id_type,
            name="Demo Customer", ref_number=f"{day:%Y%m%d}-{branch.id}-{id_type}",
            gross_amount=gross_amount, discount_amount=(gross_amount * Decimal("0.20")).quantize(CENT),
        ))

    db.session.add(VoidTx(
        branch_id=branch.id, concept_id=concept_id, date=day, time=time(rng.randint(10, 21), 15),
        tx_number=rng.randint(1000, 9999), terminal="01", salesinvoice_number=void_si_start,
        cashier_name="Cashier A", amount=_money(rng, 50, 600), approved_by="Supervisor",
        remarks="Wrong order",
    ))

    db.session.add(Cashier(
        branch_id=branch.id, concept_id=concept_id, date=day, cashier="Cashier A",
        gross_sales=gross, net_sales=gross, cash=gross, tx_count=trans_total,
    ))

    db.session.add(Header(
        branch_id=branch.id, concept_id=concept_id, date=day, reg="01",
        or_from=str(si_start), or_to=str(si_number - 1),
        end_balance=gross, no_transaction=trans_total, no_guest=trans_total,
        z_count=str(int(day.strftime("%j"))),
    ))
    return si_number, void_si_start + 1


def seed_demo(*, start: date, days: int, seed: int = 7) -> dict:
    """
    Fill every fact table for `days` consecutive days starting at `start`.

    Deterministic for a given seed. Returns the number of fact days written.
    """
    rng = random.Random(seed)
    branches = ensure_dimensions()

    next_void_si = (db.session.query(db.func.max(VoidTx.salesinvoice_number)).scalar() or 0) + 1
    written = 0
    for branch in branches:
        si_number = (
            db.session.query(db.func.max(BirDetailed.si_number))
            .filter(BirDetailed.branch_id == branch.id)
            .scalar() or 0
        ) + 1
        for offset in range(days):
            day = start + timedelta(days=offset)
            exists = db.session.query(Hourly.id).filter_by(branch_id=branch.id, date=day).first()
            if exists:
                continue
            si_number, next_void_si = _seed_day(rng, branch, day, si_number, next_void_si)
            written += 1
        db.session.commit()

    return {"branches": len(branches), "days_written": written}
