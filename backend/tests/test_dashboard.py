"""
Dashboard endpoint tests: month filter, averages and payment chart.
"""

from datetime import date

from conftest import JAN_1, JAN_2, add_header, add_item_sale, add_payment


def _dashboard(client, name, **params):
    params.setdefault('month', '2024-01')
    return client.get(f'/api/dashboard/{name}', query_string=params)


def _seed_item_sales(session, branch, other_branch):
    add_item_sale(session, branch, JAN_1, "P1", "Pork BBQ", "3", "300.00", service_charge="30.00")
    add_item_sale(session, branch, JAN_1, "P2", "Iced Tea", "7", "455.00", category_code="BEV")
    add_item_sale(session, branch, JAN_2, "P1", "Pork BBQ", "2", "200.00", service_charge="20.00")
    add_item_sale(session, other_branch, JAN_2, "P3", "Latte", "1", "99.99", category_code="BEV")
    add_item_sale(session, branch, date(2024, 2, 1), "P1", "Pork BBQ", "50", "5000.00")


def test_month_is_required(client, db_session):
    response = client.get('/api/dashboard/stats')
    assert response.status_code == 422
    assert response.json['errors'] == {'month': ['month is required']}


def test_malformed_month_and_branch_rejected(client, db_session):
    for month in ('2024-13', '2024-1', '01/2024'):
        response = _dashboard(client, 'stats', month=month)
        assert response.status_code == 422
        assert response.json['errors'] == {'month': ['month must be YYYY-MM']}

    response = _dashboard(client, 'stats', branch_id='²')
    assert response.status_code == 422
    assert response.json['errors'] == {'branch_id': ['branch_id must be an integer or ALL']}


def test_total_sales_per_day(client, db_session, branch, other_branch):
    _seed_item_sales(db_session, branch, other_branch)

    response = _dashboard(client, 'total-sales-per-day')
    assert response.status_code == 200
    assert response.json == {'status': 'success', 'data': [
        {'date': '2024-01-01', 'date_formatted': 'Jan 01', 'total_sales': '755.00'},
        {'date': '2024-01-02', 'date_formatted': 'Jan 02', 'total_sales': '299.99'},
    ]}

    response = _dashboard(client, 'total-sales-per-day', branch_id=other_branch.id)
    assert response.json['data'] == [
        {'date': '2024-01-02', 'date_formatted': 'Jan 02', 'total_sales': '99.99'},
    ]


def test_stats_and_top_products(client, db_session, branch, other_branch):
    _seed_item_sales(db_session, branch, other_branch)

    response = _dashboard(client, 'stats')
    assert response.status_code == 200
    assert response.json['data'] == {
        'statistics': {
            'total_days': 2,
            'total_sales': '1054.99',
            'average_sales_per_day': '527.50',
            'total_transactions': 4,
            'average_sales_per_transaction': '263.75',
        },
        'top_products': [
            {'product_code': 'P2', 'name': 'Iced Tea', 'quantity': '7.00', 'revenue': '455.00'},
            {'product_code': 'P1', 'name': 'Pork BBQ', 'quantity': '5.00', 'revenue': '500.00'},
            {'product_code': 'P3', 'name': 'Latte', 'quantity': '1.00', 'revenue': '99.99'},
        ],
    }


def test_average_sales_per_day_filters_by_concept(client, db_session, branch, other_branch):
    _seed_item_sales(db_session, branch, other_branch)

    response = _dashboard(client, 'average-sales-per-day')
    assert response.json['data'] == {'average_sales': '527.50', 'total_sales': '1054.99', 'total_days': 2}

    response = _dashboard(client, 'average-sales-per-day', concept_id=branch.concept_id)
    assert response.json['data'] == {'average_sales': '477.50', 'total_sales': '955.00', 'total_days': 2}


def test_average_sales_per_customer(client, db_session, branch, other_branch):
    _seed_item_sales(db_session, branch, other_branch)
    add_header(db_session, branch, JAN_1, no_transaction=40, no_guest=50)
    add_header(db_session, branch, JAN_2, no_transaction=25, no_guest=30)
    add_header(db_session, other_branch, JAN_2, no_transaction=10, no_guest=0)

    response = _dashboard(client, 'average-sales-per-customer')
    assert response.json['data'] == {
        'average_sales_per_customer': '13.81',
        'total_sales': '1104.99',
        'total_guests': 80,
    }


def test_average_tx_per_day(client, db_session, branch, other_branch):
    add_header(db_session, branch, JAN_1, no_transaction=40, no_guest=50)
    add_header(db_session, branch, JAN_2, no_transaction=25, no_guest=30)
    add_header(db_session, other_branch, JAN_2, no_transaction=10, no_guest=0)

    response = _dashboard(client, 'average-tx-per-day')
    assert response.json['data'] == {
        'average_transaction_per_day': '37.50',
        'total_transactions': 75,
        'total_days': 2,
        'date_range': {'start': '2024-01-01', 'end': '2024-01-02'},
    }


def test_empty_month_gives_zero_averages(client, db_session, branch):
    response = _dashboard(client, 'average-tx-per-day', month='2023-05')
    assert response.json['data'] == {
        'average_transaction_per_day': '0.00',
        'total_transactions': 0,
        'total_days': 0,
        'date_range': {'start': None, 'end': None},
    }

    response = _dashboard(client, 'average-sales-per-customer', month='2023-05')
    assert response.json['data']['average_sales_per_customer'] == '0.00'

    response = _dashboard(client, 'stats', month='2023-05')
    assert response.json['data']['statistics']['average_sales_per_transaction'] == '0.00'
    assert response.json['data']['top_products'] == []


def test_payment_chart_excludes_non_tender_lines(client, db_session, branch):
    add_payment(db_session, branch, JAN_1, "500.00")
    add_payment(db_session, branch, JAN_2, "250.50")
    add_payment(db_session, branch, JAN_1, "300.00", description="Card")
    add_payment(db_session, branch, JAN_1, "20.00", description="Discount")
    add_payment(db_session, branch, JAN_1, "15.00", description="MEM CREDIT")

    response = _dashboard(client, 'payment-chart', branch_id='ALL')
    assert response.status_code == 200
    assert response.json['data'] == [
        {'description': 'Card', 'amount': '300.00'},
        {'description': 'Cash', 'amount': '750.50'},
    ]
