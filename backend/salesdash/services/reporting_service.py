# Overview: Service-layer operations for reporting; encapsulates business logic and database work.

"""
Sales report engine.

Every report follows the same recipe: take one fact table, join it to
Branch and Concept (plus any lookup table the report names), keep the rows
inside an inclusive date range (and the optional branch/concept), group by
the report's natural key, sum the measure columns, then order and format
the groups.

Sums are done on Decimal values read from Numeric columns. Money leaves the
engine as a string with exactly two decimals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Mapping

from flask import current_app

from ..errors import NotFoundError, ValidationError
from ..extensions import db
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
from ..money import format_money
from ..time_utils import format_date, parse_iso_date
from ..validation import FieldError, parse_int
from .rollup_service import fold, rollup_daily

ID_FIELDS = ("branch_id", "concept_id")


@dataclass(frozen=True)
class Measure:
    name: str                 # output key
    column: str | None        # fact column; None with kind="rows" counts source rows
    kind: str = "money"       # "money" | "count" | "rows"


@dataclass(frozen=True)
class Join:
    target: Any
    on: Callable[[], Any]
    outer: bool = False


@dataclass(frozen=True)
class ReportDefinition:
    name: str
    model: Any
    group_by: tuple[str, ...]
    measures: tuple[Measure, ...]
    order_by: tuple[str, ...]            # "-field" sorts descending
    carry: tuple[str, ...] = ()
    expose_ids: bool = False
    decorate: Callable[[dict], None] | None = None
    rollups: Mapping[str, Callable] = field(default_factory=dict)
    joins: tuple[Join, ...] = ()
    columns: Mapping[str, Any] = field(default_factory=dict)   # output name -> joined column
    product_filter: bool = False


@dataclass(frozen=True)
class ReportFilters:
    from_date: date
    to_date: date
    branch_id: int | None = None
    concept_id: int | None = None
    product_code: str | None = None


def _money(*names: str) -> tuple[Measure, ...]:
    return tuple(Measure(name, name) for name in names)


def hour_range_label(hour: int) -> str:
    """0 -> '12:00 AM - 1:00 AM', 13 -> '1:00 PM - 2:00 PM'."""
    def clock(h: int) -> str:
        h %= 24
        suffix = "AM" if h < 12 else "PM"
        return f"{(h % 12) or 12}:00 {suffix}"
    return f"{clock(hour)} - {clock(hour + 1)}"


def _add_hour_range(row: dict) -> None:
    row["hour_range"] = hour_range_label(row["hour"])


def _catalog_description(row: dict) -> None:
    # Prefer the catalog name; fall back to the POS line text.
    row["description"] = row.pop("product_desc", None) or row.get("description")


HOURLY_MEASURES = (
    Measure("total_trans", "total_trans", "count"),
    Measure("total_void", "total_void", "count"),
    Measure("total_sales", "total_sales"),
    Measure("total_discount", "total_discount"),
)

BRANCH_CONCEPT = ("branch_id", "branch_name", "concept_id", "concept_name")

REPORTS: dict[str, ReportDefinition] = {
    defn.name: defn
    for defn in (
        ReportDefinition(
            name="hourly",
            model=Hourly,
            group_by=("date", "hour"),
            measures=(
                Measure("no_trans", "total_trans", "count"),
                Measure("no_void", "total_void", "count"),
                Measure("sales_value", "total_sales"),
                Measure("discount_amount", "total_discount"),
            ),
            order_by=("date", "hour"),
            decorate=_add_hour_range,
        ),
        ReportDefinition(
            name="daily-sales",
            model=Hourly,
            group_by=("date",) + BRANCH_CONCEPT + ("hour",),
            measures=HOURLY_MEASURES,
            order_by=("date", "branch_name", "hour"),
            expose_ids=True,
            rollups={"daily": rollup_daily},
        ),
        ReportDefinition(
            name="payments",
            model=PaymentDetail,
            group_by=("date",) + BRANCH_CONCEPT + ("description",),
            measures=_money("amount"),
            order_by=("date", "concept_name", "branch_name", "description"),
        ),
        ReportDefinition(
            name="bir-summary",
            model=BirSummary,
            group_by=("date",) + BRANCH_CONCEPT,
            measures=_money(
                "beg_amount", "end_amount", "net_amount", "sc", "pwd", "others",
                "returns", "voids", "gross_amount", "vatable", "vat_amount",
                "vat_exempt", "zero_rated", "less_vat", "ewt", "service_charge",
            ) + (Measure("z_readings", None, "rows"),),
            order_by=("date", "branch_name", "concept_name"),
        ),
        ReportDefinition(
            name="bir-detailed",
            model=BirDetailed,
            group_by=("date",) + BRANCH_CONCEPT + ("si_number",),
            carry=("tx_number", "discount_type"),
            measures=_money(
                "vat_exempt", "vat_zero_rate", "vatable_amount", "vat_12", "less_vat",
                "gross_amount", "discount_amount", "service_charge", "takeout_charge",
                "delivery_charge", "net_total", "cash", "other_payment",
            ),
            order_by=("date", "branch_name", "si_number"),
        ),
        ReportDefinition(
            name="government-discounts",
            model=GovernmentDiscount,
            group_by=("date",) + BRANCH_CONCEPT + ("id_type",),
            measures=_money("gross_amount", "discount_amount") + (Measure("transactions", None, "rows"),),
            order_by=("date", "branch_name", "id_type"),
        ),
        ReportDefinition(
            name="discounts",
            model=ItemSales,
            group_by=("date",) + BRANCH_CONCEPT,
            measures=_money(
                "senior_disc", "pwd_disc", "other_disc", "open_disc",
                "employee_disc", "vip_disc", "promo", "free",
            ),
            order_by=("date", "branch_name", "concept_name"),
        ),
        ReportDefinition(
            name="void-tx",
            model=VoidTx,
            group_by=("date",) + BRANCH_CONCEPT + ("approved_by",),
            measures=_money("amount") + (Measure("void_count", None, "rows"),),
            order_by=("date", "branch_name", "approved_by"),
        ),
        ReportDefinition(
            name="cashier",
            model=Cashier,
            group_by=("date",) + BRANCH_CONCEPT + ("cashier",),
            measures=_money(
                "gross_sales", "net_sales", "cash", "card", "less_vat", "discount",
                "delivery_charge", "service_charge", "void_amount",
            ) + (
                Measure("void_count", "void_count", "count"),
                Measure("tx_count", "tx_count", "count"),
            ),
            order_by=("date", "branch_name", "cashier"),
        ),
        ReportDefinition(
            name="sales-per-day",
            model=ItemSales,
            group_by=("date",),
            measures=_money("net_sales", "quantity"),
            order_by=("date",),
        ),
        ReportDefinition(
            name="fast-moving",
            model=ItemSales,
            group_by=("description",),
            measures=(
                Measure("total_quantity", "quantity"),
                Measure("net_sales", "net_sales"),
            ),
            order_by=("-total_quantity", "description"),
        ),
        ReportDefinition(
            name="product-mix",
            model=ItemSales,
            group_by=("product_code",),
            carry=("product_desc", "description"),
            measures=(
                Measure("total_quantity", "quantity"),
                Measure("total_net_sales", "net_sales"),
            ),
            order_by=("-total_quantity", "product_code"),
            joins=(Join(Product, lambda: Product.product_code == ItemSales.product_code, outer=True),),
            columns={"product_desc": Product.product_desc},
            decorate=_catalog_description,
            product_filter=True,
        ),
        ReportDefinition(
            name="product-mix-category",
            model=ItemSales,
            group_by=("category_code", "category_desc", "product_code", "description"),
            measures=(
                Measure("quantity", "quantity"),
                Measure("net_sales", "net_sales"),
            ),
            order_by=("category_code", "product_code", "description"),
            joins=(Join(Category, lambda: Category.category_code == ItemSales.category_code),),
            columns={"category_desc": Category.category_desc},
            product_filter=True,
        ),
        ReportDefinition(
            name="header",
            model=Header,
            group_by=("date",) + BRANCH_CONCEPT + ("reg",),
            carry=("or_from", "or_to", "z_count"),
            measures=_money("beg_balance", "end_balance") + tuple(
                Measure(name, name, "count")
                for name in (
                    "no_transaction", "no_guest", "reg_guest", "ftime_guest",
                    "no_void", "no_disc", "no_cancel",
                )
            ) + _money(
                "senior_disc", "pwd_disc", "other_disc", "open_disc", "vip_disc",
                "employee_disc", "promo_disc", "free_disc", "room_charge",
            ),
            order_by=("date", "branch_name", "reg"),
        ),
    )
}


def list_reports() -> list[str]:
    return sorted(REPORTS)


def get_definition(name: str) -> ReportDefinition:
    defn = REPORTS.get(name)
    if not defn:
        raise NotFoundError(f"Unknown report: {name}")
    return defn


def _is_all(value: str) -> bool:
    return not value or value.upper() == current_app.config.get("REPORT_ALL_SENTINEL", "ALL").upper()


def parse_id_filter(raw: str | None, field_name: str, errors: dict) -> int | None:
    if raw is None or _is_all(raw.strip()):
        return None
    try:
        return parse_int(raw, allow_negative=False)
    except FieldError as exc:
        message = "must be an integer or ALL" if str(exc) == "must be an integer" else str(exc)
        errors[field_name] = [f"{field_name} {message}"]
        return None


def parse_filters(args: Mapping[str, str]) -> ReportFilters:
    """
    Validate report query parameters.

    from_date/to_date are required ISO dates; branch_id/concept_id are
    optional ids where an empty value or the ALL sentinel means no filter.
    product_code narrows the product mix reports the same way.
    """
    errors: dict[str, list[str]] = {}
    dates: dict[str, date] = {}
    for name in ("from_date", "to_date"):
        raw = args.get(name)
        if raw is None or not str(raw).strip():
            errors[name] = [f"{name} is required"]
            continue
        try:
            dates[name] = parse_iso_date(raw)
        except ValueError:
            errors[name] = [f"{name} must be a date (YYYY-MM-DD)"]

    branch_id = parse_id_filter(args.get("branch_id"), "branch_id", errors)
    concept_id = parse_id_filter(args.get("concept_id"), "concept_id", errors)
    product_code = (args.get("product_code") or "").strip()

    if errors:
        raise ValidationError("Validation failed", fields=errors)
    return ReportFilters(
        from_date=dates["from_date"],
        to_date=dates["to_date"],
        branch_id=branch_id,
        concept_id=concept_id,
        product_code=None if _is_all(product_code) else product_code,
    )


def _column(defn: ReportDefinition, name: str):
    if name in defn.columns:
        return defn.columns[name]
    if name == "branch_name":
        return Branch.branch_name
    if name == "concept_name":
        return Concept.concept_name
    return getattr(defn.model, name)


def build_query(defn: ReportDefinition, filters: ReportFilters):
    """Joined, filtered row query for a report; grouping happens in fold()."""
    fact = defn.model
    names = list(dict.fromkeys(
        defn.group_by
        + defn.carry
        + tuple(m.column for m in defn.measures if m.column)
    ))
    query = (
        db.session.query(*[_column(defn, name).label(name) for name in names])
        .select_from(fact)
        .join(Branch, Branch.id == fact.branch_id)
        .join(Concept, Concept.id == fact.concept_id)
    )
    for extra in defn.joins:
        if extra.outer:
            query = query.outerjoin(extra.target, extra.on())
        else:
            query = query.join(extra.target, extra.on())

    query = query.filter(fact.date >= filters.from_date, fact.date <= filters.to_date)
    if filters.branch_id is not None:
        query = query.filter(fact.branch_id == filters.branch_id)
    if filters.concept_id is not None:
        query = query.filter(fact.concept_id == filters.concept_id)
    if defn.product_filter and filters.product_code:
        query = query.filter(fact.product_code == filters.product_code)
    return query.order_by(fact.date.asc(), fact.id.asc())


def _sort(rows: list[dict], order_by: tuple[str, ...]) -> list[dict]:
    for key in reversed(order_by):
        desc = key.startswith("-")
        name = key.lstrip("-")
        rows.sort(key=lambda r: (r.get(name) is None, r.get(name)), reverse=desc)
    return rows


def collect_rows(defn: ReportDefinition, filters: ReportFilters) -> list[dict]:
    """Grouped, summed, ordered rows with raw Decimal/date values."""
    if filters.from_date > filters.to_date:
        return []

    source = (row._asdict() for row in build_query(defn, filters))

    # Measures may rename their column (no_trans <- total_trans); fold on the
    # output names so every measure is summed exactly once.
    def renamed(rows):
        for row in rows:
            for m in defn.measures:
                if m.column:
                    row[m.name] = row.get(m.column)
            yield row

    sums = {m.name: ("count" if m.kind == "count" else "money") for m in defn.measures if m.kind != "rows"}
    row_count = next((m.name for m in defn.measures if m.kind == "rows"), None)
    grouped = fold(renamed(source), defn.group_by, sums, carry=defn.carry, row_count=row_count)
    return _sort(grouped, defn.order_by)


def format_row(row: Mapping[str, Any], money_fields: set[str], *, expose_ids: bool) -> dict:
    out = {}
    for key, value in row.items():
        if key in ID_FIELDS and not expose_ids:
            continue
        if key in money_fields:
            out[key] = format_money(value)
        elif isinstance(value, date):
            out[key] = format_date(value)
        else:
            out[key] = value
    return out


def run_report(name: str, filters: ReportFilters, *, group: str | None = None) -> list[dict]:
    """
    Produce the display rows for a named report.

    `group` selects an optional rollup registered on the report (for
    daily-sales: "daily"). An empty range or no matching rows yields [].
    """
    defn = get_definition(name)
    if group and group not in defn.rollups:
        raise ValidationError("Validation failed", fields={"group": [f"group must be one of: {', '.join(sorted(defn.rollups)) or 'none'}"]})

    rows = collect_rows(defn, filters)
    if group:
        rows = defn.rollups[group](rows)

    money_fields = {m.name for m in defn.measures if m.kind == "money"}
    result = []
    for row in rows:
        if defn.decorate:
            defn.decorate(row)
        result.append(format_row(row, money_fields, expose_ids=defn.expose_ids))

    current_app.logger.debug("Report %s produced %d rows", name, len(result))
    return result
