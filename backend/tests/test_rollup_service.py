import itertools
from datetime import date
from decimal import Decimal

from salesdash.services.rollup_service import fold, rollup_daily


def _hour_row(day, branch_id, hour, trans, sales, discount="0", void=0):
    return {
        "date": day,
        "branch_id": branch_id,
        "branch_name": f"Branch {branch_id}",
        "concept_id": 1,
        "concept_name": "Kusina Grill",
        "hour": hour,
        "total_trans": trans,
        "total_void": void,
        "total_sales": Decimal(sales),
        "total_discount": Decimal(discount),
    }


def test_rollup_daily_sums_rows_sharing_a_key():
    rows = [
        _hour_row(date(2024, 1, 1), 1, 10, 2, "10.10", "0.50", void=1),
        _hour_row(date(2024, 1, 1), 1, 11, 3, "10.10"),
        _hour_row(date(2024, 1, 1), 1, 12, 4, "10.10", "0.25"),
    ]

    result = rollup_daily(rows)

    assert result == [{
        "date": date(2024, 1, 1),
        "branch_id": 1,
        "concept_id": 1,
        "branch_name": "Branch 1",
        "concept_name": "Kusina Grill",
        "total_trans": 9,
        "total_void": 1,
        "total_sales": Decimal("30.30"),
        "total_discount": Decimal("0.75"),
    }]


def test_rollup_daily_is_order_independent():
    rows = [
        _hour_row(date(2024, 1, 2), 1, 9, 1, "1.01"),
        _hour_row(date(2024, 1, 1), 2, 9, 2, "2.02"),
        _hour_row(date(2024, 1, 1), 1, 9, 3, "3.03"),
        _hour_row(date(2024, 1, 1), 1, 10, 4, "4.04"),
    ]
    expected = rollup_daily(rows)

    for perm in itertools.permutations(rows):
        assert rollup_daily(list(perm)) == expected

    assert [(r["date"].day, r["branch_id"]) for r in expected] == [(1, 1), (1, 2), (2, 1)]
    assert expected[0]["total_sales"] == Decimal("7.07")


def test_rollup_daily_empty():
    assert rollup_daily([]) == []


def test_fold_counts_rows_and_treats_missing_as_zero():
    rows = [
        {"id_type": "Senior", "amount": Decimal("1.10"), "qty": 2},
        {"id_type": "PWD", "amount": None, "qty": None},
        {"id_type": "Senior", "amount": 2.2, "qty": 1},
    ]

    result = fold(rows, ("id_type",), {"amount": "money", "qty": "count"}, row_count="transactions")

    assert result == [
        {"id_type": "Senior", "amount": Decimal("3.30"), "qty": 3, "transactions": 2},
        {"id_type": "PWD", "amount": Decimal("0"), "qty": 0, "transactions": 1},
    ]
