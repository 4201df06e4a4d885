from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from models import ContactMessage


def test_submit_contact_message(client, contact_payload):
    r = client.post('/api/contact', json=contact_payload)
    assert r.status_code == 201
    data = r.get_json()
    assert isinstance(data['id'], int)
    assert data['read'] is False
    assert data['name'] == 'Jane Doe'
    assert data['subject'] == 'Hello'
    datetime.fromisoformat(data['createdAt'])
    assert ContactMessage.query.count() == 1


def test_server_owned_fields_are_ignored(client, contact_payload):
    payload = dict(contact_payload, id=999, read=True, createdAt='2001-01-01T00:00:00')
    r = client.post('/api/contact', json=payload)
    assert r.status_code == 201
    data = r.get_json()
    assert data['id'] != 999
    assert data['read'] is False
    assert not data['createdAt'].startswith('2001')


def test_values_are_trimmed(client, contact_payload):
    payload = dict(contact_payload, name='  Jane Doe  ')
    r = client.post('/api/contact', json=payload)
    assert r.get_json()['name'] == 'Jane Doe'


def test_empty_email_is_rejected(client, contact_payload):
    r = client.post('/api/contact', json=dict(contact_payload, email=''))
    assert r.status_code == 400
    data = r.get_json()
    assert data['error'] == 'validation_error'
    assert [f['field'] for f in data['fields']] == ['email']
    assert ContactMessage.query.count() == 0


@pytest.mark.parametrize('field', ['name', 'email', 'subject', 'message'])
def test_missing_field_is_rejected(client, contact_payload, field):
    payload = dict(contact_payload)
    del payload[field]
    r = client.post('/api/contact', json=payload)
    assert r.status_code == 400
    assert field in [f['field'] for f in r.get_json()['fields']]
    assert ContactMessage.query.count() == 0


def test_whitespace_only_subject_is_rejected(client, contact_payload):
    r = client.post('/api/contact', json=dict(contact_payload, subject='   '))
    assert r.status_code == 400
    assert r.get_json()['fields'][0]['field'] == 'subject'


def test_malformed_email_is_rejected(client, contact_payload):
    r = client.post('/api/contact', json=dict(contact_payload, email='not-an-address'))
    assert r.status_code == 400
    assert r.get_json()['fields'][0]['field'] == 'email'


def test_non_json_body_reports_every_field(client):
    r = client.post('/api/contact', data='hello', content_type='text/plain')
    assert r.status_code == 400
    fields = {f['field'] for f in r.get_json()['fields']}
    assert fields == {'name', 'email', 'subject', 'message'}


def test_storage_failure_is_retryable(client, db, monkeypatch, contact_payload):
    def boom():
        raise OperationalError('INSERT INTO contact_messages', {}, Exception('database is locked'))

    monkeypatch.setattr(db.session, 'commit', boom)
    r = client.post('/api/contact', json=contact_payload)
    assert r.status_code == 503
    data = r.get_json()
    assert data['error'] == 'unavailable'
    assert data['retryable'] is True

    monkeypatch.undo()
    assert ContactMessage.query.count() == 0


# ---- Inbox ----

def _submit(client, payload, subject):
    return client.post('/api/contact', json=dict(payload, subject=subject)).get_json()


def test_inbox_lists_newest_first(client, contact_payload):
    first = _submit(client, contact_payload, 'One')
    second = _submit(client, contact_payload, 'Two')

    r = client.get('/api/contact-messages')
    assert r.status_code == 200
    assert [m['id'] for m in r.get_json()] == [second['id'], first['id']]
    assert r.headers['X-Unread-Count'] == '2'


def test_toggle_read_flag(client, contact_payload):
    msg = _submit(client, contact_payload, 'One')
    _submit(client, contact_payload, 'Two')

    r = client.patch(f"/api/contact-messages/{msg['id']}", json={'read': True})
    assert r.status_code == 200
    assert r.get_json()['read'] is True

    r = client.get('/api/contact-messages?unread=true')
    assert [m['subject'] for m in r.get_json()] == ['Two']
    assert r.headers['X-Unread-Count'] == '1'

    r = client.patch(f"/api/contact-messages/{msg['id']}", json={'read': False})
    assert r.get_json()['read'] is False


def test_toggle_read_requires_boolean(client, contact_payload):
    msg = _submit(client, contact_payload, 'One')
    r = client.patch(f"/api/contact-messages/{msg['id']}", json={'read': 'yes'})
    assert r.status_code == 400
    assert r.get_json()['fields'][0]['field'] == 'read'


def test_unknown_message_is_404(client):
    assert client.get('/api/contact-messages/42').status_code == 404
    r = client.patch('/api/contact-messages/42', json={'read': True})
    assert r.status_code == 404
    assert r.get_json()['error'] == 'not_found'


def test_inbox_hidden_when_admin_api_disabled(app, client, contact_payload):
    app.config['ADMIN_API_ENABLED'] = False
    assert client.get('/api/contact-messages').status_code == 404
    # public submission stays available
    assert client.post('/api/contact', json=contact_payload).status_code == 201


def test_wrong_method_keeps_allow_header(client):
    r = client.get('/api/contact')
    assert r.status_code == 405
    assert 'POST' in r.headers['Allow']
    data = r.get_json()
    assert data['error'] == 'method_not_allowed'
    assert data['retryable'] is False
