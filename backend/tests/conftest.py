"""
Pytest fixtures for salesdash backend tests.

Provides an in-memory database, a test client, and dimension/fact fixtures.
"""

from datetime import date
from decimal import Decimal

import pytest
from salesdash import create_app
from salesdash.extensions import db
from salesdash.models import Branch, Category, Concept, Header, Hourly, ItemSales, PaymentDetail


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create fresh database for each test."""
    with app.app_context():
        # Clear all data but keep schema
        meta = db.metadata
        for table in reversed(meta.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        # Cleanup after test
        db.session.rollback()


@pytest.fixture(scope='function')
def concept(db_session):
    concept = Concept(concept_name="Kusina Grill", concept_description="Grill and rice meals")
    db_session.add(concept)
    db_session.commit()
    return concept


@pytest.fixture(scope='function')
def other_concept(db_session):
    concept = Concept(concept_name="Brew Corner", concept_description="Coffee")
    db_session.add(concept)
    db_session.commit()
    return concept


@pytest.fixture(scope='function')
def branch(db_session, concept):
    branch = Branch(
        branch_name="Makati",
        branch_description="Kusina Grill Makati",
        branch_address="Ayala Ave, Makati",
        concept_id=concept.id,
    )
    db_session.add(branch)
    db_session.commit()
    return branch


@pytest.fixture(scope='function')
def other_branch(db_session, other_concept):
    branch = Branch(
        branch_name="Ortigas",
        branch_description="Brew Corner Ortigas",
        branch_address="Ortigas Center",
        concept_id=other_concept.id,
    )
    db_session.add(branch)
    db_session.commit()
    return branch


@pytest.fixture(scope='function')
def category(db_session):
    category = Category(category_code="BEV", category_desc="Beverages")
    db_session.add(category)
    db_session.commit()
    return category


def add_hourly(session, branch, day, hour, *, trans=1, void=0, sales="0", discount="0", reg="01"):
    """Insert one Hourly fact row for a branch."""
    row = Hourly(
        branch_id=branch.id,
        concept_id=branch.concept_id,
        date=day,
        hour=hour,
        reg=reg,
        total_trans=trans,
        total_void=void,
        total_sales=Decimal(sales),
        total_discount=Decimal(discount),
    )
    session.add(row)
    session.commit()
    return row


def add_payment(session, branch, day, amount, *, description="Cash"):
    """Insert one PaymentDetail fact row for a branch."""
    row = PaymentDetail(
        branch_id=branch.id,
        concept_id=branch.concept_id,
        date=day,
        description=description,
        amount=Decimal(amount),
    )
    session.add(row)
    session.commit()
    return row


def add_item_sale(session, branch, day, product_code, description, quantity, net_sales, *, category_code="MAIN", **extra):
    """Insert one ItemSales fact row for a branch."""
    row = ItemSales(
        branch_id=branch.id,
        concept_id=branch.concept_id,
        date=day,
        category_code=category_code,
        product_code=product_code,
        description=description,
        quantity=Decimal(quantity),
        net_sales=Decimal(net_sales),
        **{key: Decimal(value) for key, value in extra.items()},
    )
    session.add(row)
    session.commit()
    return row


def add_header(session, branch, day, *, reg="01", **counts):
    """Insert one Header (Z-reading) fact row for a branch."""
    row = Header(branch_id=branch.id, concept_id=branch.concept_id, date=day, reg=reg, **counts)
    session.add(row)
    session.commit()
    return row


JAN_1 = date(2024, 1, 1)
JAN_2 = date(2024, 1, 2)
