"""
CLI command tests (run through Flask's CLI runner).
"""

from salesdash.models import BirSummary, Branch, Category, Concept, Hourly, PaymentDetail


def test_seed_demo_populates_facts(app, db_session):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed', 'demo', '--days', '2', '--start', '2024-01-01'])

    assert result.exit_code == 0, result.output
    assert 'PASS Branch-days written: 6' in result.output
    assert db_session.query(Concept).count() == 2
    assert db_session.query(Branch).count() == 3
    assert db_session.query(Hourly).count() == 3 * 2 * 12
    assert db_session.query(BirSummary).count() == 6
    assert db_session.query(PaymentDetail).count() > 0


def test_seed_demo_is_idempotent_per_day(app, db_session):
    runner = app.test_cli_runner()
    runner.invoke(args=['seed', 'demo', '--days', '1', '--start', '2024-01-01'])
    result = runner.invoke(args=['seed', 'demo', '--days', '1', '--start', '2024-01-01'])

    assert result.exit_code == 0, result.output
    assert 'PASS Branch-days written: 0' in result.output
    assert db_session.query(Branch).count() == 3


def test_seeded_data_feeds_reports(app, client, db_session):
    app.test_cli_runner().invoke(args=['seed', 'demo', '--days', '1', '--start', '2024-01-01'])

    response = client.get('/api/reports/daily-sales', query_string={
        'from_date': '2024-01-01', 'to_date': '2024-01-01', 'group': 'daily',
    })
    assert response.status_code == 200
    assert len(response.json['data']) == 3


def test_categories_import_command(app, db_session, tmp_path):
    path = tmp_path / 'categories.csv'
    path.write_text("category_code,category_desc\nBEV,Beverages\nMAIN,Main Dishes\n", encoding="utf-8")

    result = app.test_cli_runner().invoke(args=['categories', 'import', str(path)])

    assert result.exit_code == 0, result.output
    assert 'PASS 2 categories imported successfully' in result.output
    assert db_session.query(Category).count() == 2


def test_categories_import_command_reports_row_errors(app, db_session, tmp_path):
    path = tmp_path / 'categories.csv'
    path.write_text("category_code,category_desc\nBEV,Beverages\n,Missing\n", encoding="utf-8")

    result = app.test_cli_runner().invoke(args=['categories', 'import', str(path)])

    assert result.exit_code == 1
    assert 'Row 3: Both category_code and category_desc are required' in result.output
    assert db_session.query(Category).count() == 1


def test_reset_requires_confirmation(app, db_session):
    db_session.add(Category(category_code="BEV", category_desc="Beverages"))
    db_session.commit()

    result = app.test_cli_runner().invoke(args=['db-admin', 'reset'], input='n\n')

    assert result.exit_code != 0
    assert db_session.query(Category).count() == 1
