from salesdash.models import Product


def test_health(client, db_session):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.json['status'] == 'healthy'
    assert response.json['database']['status'] == 'healthy'


def test_products_hide_inactive_by_default(client, db_session):
    db_session.add_all([
        Product(product_code="MAIN-001", product_desc="Chicken Inasal"),
        Product(product_code="BEV-001", product_desc="Iced Tea"),
        Product(product_code="OLD-001", product_desc="Retired", is_active=False),
    ])
    db_session.commit()

    response = client.get('/api/products')
    assert response.status_code == 200
    assert [p['product_code'] for p in response.json['data']] == ["BEV-001", "MAIN-001"]

    response = client.get('/api/products?include_inactive=true')
    assert len(response.json['data']) == 3


def test_unknown_route_returns_json_error(client, db_session):
    response = client.get('/api/nope')
    assert response.status_code == 404
    assert 'error' in response.json


def test_cors_header_for_dev_frontend(client, db_session):
    response = client.get('/api/health', headers={'Origin': 'http://localhost:5173'})
    assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:5173'
