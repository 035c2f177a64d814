# Overview: Month-level dashboard figures built on the report engine.

"""
Dashboard aggregates for one calendar month.

Each figure runs an internal ReportDefinition through collect_rows(), so it
shares the joins, branch/concept filters and Decimal folding of the named
reports. Averages are derived from the folded totals; a zero divisor gives
"0.00".
"""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from flask import current_app

from ..errors import ValidationError
from ..models import Header, ItemSales, PaymentDetail
from ..money import ZERO, format_money
from ..time_utils import format_date, parse_month
from .reporting_service import (
    Measure,
    ReportDefinition,
    ReportFilters,
    collect_rows,
    parse_id_filter,
)

# Settlement lines that are not money received.
NON_TENDER_PAYMENTS = frozenset({"Discount", "MEM CREDIT"})
TOP_PRODUCTS = 5

DAILY_ITEM_SALES = ReportDefinition(
    name="dashboard-daily-item-sales",
    model=ItemSales,
    group_by=("date",),
    measures=(
        Measure("net_sales", "net_sales"),
        Measure("service_charge", "service_charge"),
        Measure("lines", None, "rows"),
    ),
    order_by=("date",),
)

PRODUCT_TOTALS = ReportDefinition(
    name="dashboard-product-totals",
    model=ItemSales,
    group_by=("product_code", "description"),
    measures=(
        Measure("quantity", "quantity"),
        Measure("revenue", "net_sales"),
    ),
    order_by=("-quantity", "product_code", "description"),
)

DAILY_HEADERS = ReportDefinition(
    name="dashboard-daily-headers",
    model=Header,
    group_by=("date",),
    measures=(
        Measure("no_transaction", "no_transaction", "count"),
        Measure("no_guest", "no_guest", "count"),
    ),
    order_by=("date",),
)

PAYMENT_TOTALS = ReportDefinition(
    name="dashboard-payment-totals",
    model=PaymentDetail,
    group_by=("description",),
    measures=(Measure("amount", "amount"),),
    order_by=("description",),
)


def _ratio(numerator, denominator) -> str:
    if not denominator:
        return format_money(ZERO)
    return format_money(Decimal(numerator) / Decimal(denominator))


def parse_month_filters(args: Mapping[str, str]) -> ReportFilters:
    """month (YYYY-MM) is required; branch_id/concept_id accept an id, ALL or empty."""
    errors: dict[str, list[str]] = {}
    first = last = None
    raw = (args.get("month") or "").strip()
    if not raw:
        errors["month"] = ["month is required"]
    else:
        try:
            first, last = parse_month(raw)
        except ValueError:
            errors["month"] = ["month must be YYYY-MM"]

    branch_id = parse_id_filter(args.get("branch_id"), "branch_id", errors)
    concept_id = parse_id_filter(args.get("concept_id"), "concept_id", errors)

    if errors:
        raise ValidationError("Validation failed", fields=errors)
    return ReportFilters(from_date=first, to_date=last, branch_id=branch_id, concept_id=concept_id)


def total_sales_per_day(filters: ReportFilters) -> list[dict]:
    return [
        {
            "date": format_date(row["date"]),
            "date_formatted": row["date"].strftime("%b %d"),
            "total_sales": format_money(row["net_sales"]),
        }
        for row in collect_rows(DAILY_ITEM_SALES, filters)
    ]


def average_sales_per_day(filters: ReportFilters) -> dict:
    days = collect_rows(DAILY_ITEM_SALES, filters)
    total_sales = sum((row["net_sales"] for row in days), ZERO)
    return {
        "average_sales": _ratio(total_sales, len(days)),
        "total_sales": format_money(total_sales),
        "total_days": len(days),
    }


def stats(filters: ReportFilters) -> dict:
    days = collect_rows(DAILY_ITEM_SALES, filters)
    total_sales = sum((row["net_sales"] for row in days), ZERO)
    total_lines = sum(row["lines"] for row in days)
    products = collect_rows(PRODUCT_TOTALS, filters)[:TOP_PRODUCTS]
    return {
        "statistics": {
            "total_days": len(days),
            "total_sales": format_money(total_sales),
            "average_sales_per_day": _ratio(total_sales, len(days)),
            "total_transactions": total_lines,
            "average_sales_per_transaction": _ratio(total_sales, total_lines),
        },
        "top_products": [
            {
                "product_code": row["product_code"],
                "name": row["description"],
                "quantity": format_money(row["quantity"]),
                "revenue": format_money(row["revenue"]),
            }
            for row in products
        ],
    }


def average_sales_per_customer(filters: ReportFilters) -> dict:
    """Net sales plus service charge over the guests recorded on the Z-reading headers."""
    days = collect_rows(DAILY_ITEM_SALES, filters)
    total_sales = sum((row["net_sales"] + row["service_charge"] for row in days), ZERO)
    total_guests = sum(row["no_guest"] for row in collect_rows(DAILY_HEADERS, filters))
    return {
        "average_sales_per_customer": _ratio(total_sales, total_guests),
        "total_sales": format_money(total_sales),
        "total_guests": total_guests,
    }


def average_tx_per_day(filters: ReportFilters) -> dict:
    days = collect_rows(DAILY_HEADERS, filters)
    total_transactions = sum(row["no_transaction"] for row in days)
    return {
        "average_transaction_per_day": _ratio(total_transactions, len(days)),
        "total_transactions": total_transactions,
        "total_days": len(days),
        "date_range": {
            "start": format_date(days[0]["date"]) if days else None,
            "end": format_date(days[-1]["date"]) if days else None,
        },
    }


def payment_chart(filters: ReportFilters) -> list[dict]:
    rows = [
        row for row in collect_rows(PAYMENT_TOTALS, filters)
        if row["description"] not in NON_TENDER_PAYMENTS
    ]
    current_app.logger.debug("Payment chart produced %d tenders", len(rows))
    return [{"description": row["description"], "amount": format_money(row["amount"])} for row in rows]
