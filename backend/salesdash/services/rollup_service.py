# Overview: Pure folds that regroup report rows and sum their measures.

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping

from ..money import to_decimal

DAILY_KEY = ("date", "branch_id", "concept_id")
DAILY_CARRY = ("branch_name", "concept_name")
DAILY_SUMS = {
    "total_trans": "count",
    "total_void": "count",
    "total_sales": "money",
    "total_discount": "money",
}


def _zero(kind: str):
    return 0 if kind == "count" else Decimal("0")


def _add(total, value, kind: str):
    if kind == "count":
        return total + int(value or 0)
    return total + to_decimal(value)


def fold(
    rows: Iterable[Mapping[str, Any]],
    key: tuple[str, ...],
    sums: Mapping[str, str],
    *,
    carry: tuple[str, ...] = (),
    row_count: str | None = None,
) -> list[dict]:
    """
    Group rows by the `key` fields and add up the `sums` fields.

    `sums` maps field name -> "count" (int addition) or "money" (Decimal
    addition). `carry` fields are copied from the first row of each group and
    must be functionally dependent on the key (e.g. branch_name for
    branch_id). When `row_count` is given, each group gets that field set to
    the number of input rows it absorbed.

    The result lists groups in first-seen order; sums do not depend on the
    order of the input.
    """
    groups: dict[tuple, dict] = {}
    for row in rows:
        group_key = tuple(row[field] for field in key)
        acc = groups.get(group_key)
        if acc is None:
            acc = {field: row[field] for field in key}
            for field in carry:
                acc[field] = row.get(field)
            for field, kind in sums.items():
                acc[field] = _zero(kind)
            if row_count:
                acc[row_count] = 0
            groups[group_key] = acc

        for field, kind in sums.items():
            acc[field] = _add(acc[field], row.get(field), kind)
        if row_count:
            acc[row_count] += 1

    return list(groups.values())


def rollup_daily(rows: Iterable[Mapping[str, Any]]) -> list[dict]:
    """
    Collapse hourly rows into one row per date/branch/concept.

    Sums trans/void counts and sales/discount amounts. Output is sorted by
    (date, branch_id, concept_id) so any permutation of the same input gives
    the same result.
    """
    daily = fold(rows, DAILY_KEY, DAILY_SUMS, carry=DAILY_CARRY)
    daily.sort(key=lambda r: tuple(r[field] for field in DAILY_KEY))
    return daily
