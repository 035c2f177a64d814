"""
Branch CRUD endpoint tests.
"""

from salesdash.models import Branch


def _payload(concept_id, **overrides):
    payload = {
        'branch_name': 'BGC',
        'branch_description': 'Kusina Grill BGC',
        'branch_address': '5th Ave, Taguig',
        'concept_id': concept_id,
    }
    payload.update(overrides)
    return payload


def test_list_branches_includes_concept(client, branch):
    response = client.get('/api/branches')
    assert response.status_code == 200
    data = response.json['data']
    assert data[0]['branch_name'] == 'Makati'
    assert data[0]['concept']['concept_name'] == 'Kusina Grill'


def test_create_branch(client, db_session, concept):
    response = client.post('/api/branches', json=_payload(concept.id))
    assert response.status_code == 201
    body = response.json['data']
    assert body['branch_name'] == 'BGC'
    assert body['concept_id'] == concept.id
    assert body['is_active'] is True
    assert db_session.query(Branch).count() == 1


def test_create_branch_accepts_numeric_string_concept_id(client, db_session, concept):
    response = client.post('/api/branches', json=_payload(str(concept.id)))
    assert response.status_code == 201
    assert response.json['data']['concept_id'] == concept.id


def test_create_branch_unknown_concept(client, db_session, concept):
    response = client.post('/api/branches', json=_payload(concept.id + 100))
    assert response.status_code == 422
    assert 'concept_id' in response.json['errors']
    assert db_session.query(Branch).count() == 0


def test_create_branch_collects_every_field_error(client, db_session):
    response = client.post('/api/branches', json={
        'branch_name': '',
        'concept_id': 'abc',
    })
    assert response.status_code == 422
    errors = response.json['errors']
    assert errors['branch_name'] == ['branch_name cannot be blank']
    assert errors['concept_id'] == ['concept_id must be an integer']
    assert errors['branch_address'] == ['branch_address is required']
    assert errors['branch_description'] == ['branch_description is required']


def test_update_branch_moves_concept(client, db_session, branch, other_concept):
    response = client.put(f'/api/branches/{branch.id}', json=_payload(
        other_concept.id, branch_name='Makati 2', is_active=False,
    ))
    assert response.status_code == 200
    body = response.json['data']
    assert body['concept_id'] == other_concept.id
    assert body['is_active'] is False

    db_session.expire_all()
    assert db_session.get(Branch, branch.id).branch_name == 'Makati 2'


def test_update_branch_missing_field_leaves_row(client, db_session, branch):
    response = client.put(f'/api/branches/{branch.id}', json={'branch_name': 'Renamed'})
    assert response.status_code == 422

    db_session.expire_all()
    assert db_session.get(Branch, branch.id).branch_name == 'Makati'


def test_delete_branch(client, db_session, branch):
    response = client.delete(f'/api/branches/{branch.id}')
    assert response.status_code == 204
    assert db_session.query(Branch).count() == 0


def test_delete_missing_branch(client, db_session, branch):
    response = client.delete('/api/branches/999')
    assert response.status_code == 404
    assert response.json['error'] == 'Branch not found'
    assert db_session.query(Branch).count() == 1


def test_create_branch_out_of_range_concept_id(client, db_session, concept):
    response = client.post('/api/branches', json=_payload(10 ** 25))
    assert response.status_code == 422
    assert response.json['errors'] == {'concept_id': ['concept_id is out of range']}
    assert db_session.query(Branch).count() == 0


def test_create_branch_rejects_unicode_digit_concept_id(client, db_session, concept):
    response = client.post('/api/branches', json=_payload('²'))
    assert response.status_code == 422
    assert response.json['errors'] == {'concept_id': ['concept_id must be an integer']}


def test_update_branch_with_oversized_path_id_is_404(client, db_session, branch):
    response = client.put(f'/api/branches/{10 ** 25}', json=_payload(branch.concept_id))
    assert response.status_code == 404
