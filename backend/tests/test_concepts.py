"""
Concept CRUD endpoint tests.
"""

from salesdash.models import Concept

from conftest import JAN_1, add_hourly


def test_list_concepts_includes_branches(client, branch):
    response = client.get('/api/concepts')
    assert response.status_code == 200
    data = response.json['data']
    assert len(data) == 1
    assert data[0]['concept_name'] == "Kusina Grill"
    assert [b['branch_name'] for b in data[0]['branches']] == ["Makati"]


def test_create_concept(client, db_session):
    response = client.post('/api/concepts', json={
        'concept_name': '  Noodle Bar ',
        'concept_description': 'Ramen and dumplings',
    })
    assert response.status_code == 201
    body = response.json['data']
    assert body['concept_name'] == 'Noodle Bar'
    assert body['branches'] == []
    assert db_session.query(Concept).count() == 1


def test_create_concept_missing_field_persists_nothing(client, db_session):
    response = client.post('/api/concepts', json={'concept_name': 'Noodle Bar'})
    assert response.status_code == 422
    assert response.json['errors']['concept_description'] == ['concept_description is required']
    assert db_session.query(Concept).count() == 0


def test_create_concept_rejects_unknown_field(client, db_session):
    response = client.post('/api/concepts', json={
        'concept_name': 'Noodle Bar',
        'concept_description': 'Ramen',
        'id': 99,
    })
    assert response.status_code == 422
    assert 'id' in response.json['errors']


def test_update_concept(client, db_session, concept):
    response = client.put(f'/api/concepts/{concept.id}', json={
        'concept_name': 'Kusina Grill Express',
        'concept_description': 'Smaller format',
    })
    assert response.status_code == 200
    assert response.json['data']['concept_name'] == 'Kusina Grill Express'

    db_session.expire_all()
    assert db_session.get(Concept, concept.id).concept_description == 'Smaller format'


def test_update_missing_concept_returns_404(client, db_session):
    response = client.put('/api/concepts/999', json={
        'concept_name': 'X',
        'concept_description': 'Y',
    })
    assert response.status_code == 404
    assert response.json['error'] == 'Concept not found'


def test_delete_concept(client, db_session, concept):
    response = client.delete(f'/api/concepts/{concept.id}')
    assert response.status_code == 204
    assert response.data == b''
    assert db_session.query(Concept).count() == 0


def test_delete_missing_concept_leaves_table_unchanged(client, db_session, concept):
    response = client.delete('/api/concepts/999')
    assert response.status_code == 404
    assert db_session.query(Concept).count() == 1


def test_delete_concept_with_branches_is_conflict(client, db_session, branch):
    response = client.delete(f'/api/concepts/{branch.concept_id}')
    assert response.status_code == 422
    assert response.json['error'] == 'Concept still has branches'
    assert db_session.query(Concept).count() == 1


def test_delete_branch_with_sales_is_conflict(client, db_session, branch):
    add_hourly(db_session, branch, JAN_1, 9, sales="100.00")

    response = client.delete(f'/api/branches/{branch.id}')
    assert response.status_code == 422
    assert response.json['error'] == 'Branch is referenced by sales data'
