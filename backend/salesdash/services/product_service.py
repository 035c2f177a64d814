# Overview: Service-layer operations for the product catalog.

from __future__ import annotations

from ..extensions import db
from ..models import Product


def list_products(*, include_inactive: bool = False) -> list[Product]:
    query = db.session.query(Product)
    if not include_inactive:
        query = query.filter(Product.is_active.is_(True))
    return query.order_by(Product.product_code.asc()).all()
