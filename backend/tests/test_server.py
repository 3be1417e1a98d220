import logging

from fastapi.testclient import TestClient

from career_explorer.main import app, settings

client = TestClient(app)


def test_health():
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json() == {'status': 'ok', 'message': 'Server is running'}


def test_api_info():
    r = client.get('/api')
    assert r.status_code == 200
    data = r.json()
    assert data['message'] == 'Career Path Explorer API'
    assert data['version'] == '1.0.0'
    assert data['endpoints']['roles'] == '/api/roles'
    assert data['endpoints']['health'] == '/health'


def test_unknown_api_route_returns_json_404():
    r = client.get('/api/nope')
    assert r.status_code == 404
    assert r.json() == {'error': 'Not Found', 'details': 'Route GET /api/nope does not exist'}


def test_unknown_route_without_html_accept_is_json():
    r = client.post('/does-not-exist', headers={'Accept': 'application/json'})
    assert r.status_code == 404
    assert r.json()['details'] == 'Route POST /does-not-exist does not exist'


def test_cors_headers_present():
    r = client.get('/api/roles', headers={'Origin': 'http://localhost:5173'})
    assert r.status_code == 200
    assert 'access-control-allow-origin' in r.headers


def test_cors_preflight():
    r = client.options('/api/roles', headers={
        'Origin': 'http://localhost:5173',
        'Access-Control-Request-Method': 'POST',
        'Access-Control-Request-Headers': 'content-type',
    })
    assert r.status_code == 200
    assert 'POST' in r.headers['access-control-allow-methods']


def test_request_id_is_echoed_or_generated():
    r = client.get('/health', headers={'X-Request-ID': 'abc123'})
    assert r.headers['X-Request-ID'] == 'abc123'
    r2 = client.get('/health')
    assert len(r2.headers['X-Request-ID']) == 32


def test_requests_are_logged(caplog):
    caplog.set_level(logging.INFO, logger='career_explorer.api')
    client.get('/api/roles', headers={'X-Request-ID': 'log-me'})
    done = [rec for rec in caplog.records if rec.getMessage().startswith('request_done')]
    assert done
    assert '"request_id": "log-me"' in done[-1].getMessage()
    assert '"status_code": 200' in done[-1].getMessage()


def test_unhandled_error_is_logged_with_traceback(monkeypatch, caplog):
    def _boom(self):
        raise RuntimeError('boom')
    monkeypatch.setattr('career_explorer.services.CatalogService.list_roles', _boom)
    caplog.set_level(logging.ERROR, logger='career_explorer.api')
    safe_client = TestClient(app, raise_server_exceptions=False)
    r = safe_client.get('/api/roles', params={'q': '1'})
    assert r.status_code == 500
    assert r.json() == {'error': 'Internal server error', 'details': 'boom'}
    records = [rec for rec in caplog.records if rec.getMessage().startswith('Error occurred: boom')]
    assert records
    assert 'path=/api/roles' in records[0].getMessage()
    assert records[0].exc_info is not None


def test_database_errors_are_logged(monkeypatch, caplog):
    from sqlalchemy.exc import OperationalError

    def _boom(self, payload):
        raise OperationalError('INSERT', {}, Exception('disk I/O error'))
    monkeypatch.setattr('career_explorer.services.CatalogService.create_role', _boom)
    caplog.set_level(logging.ERROR, logger='career_explorer.api')
    r = client.post('/api/roles', json={'name': 'A', 'short_description': 'B'})
    assert r.status_code == 500
    assert r.json()['error'] == 'Failed to create role'
    assert any(rec.exc_info and 'Error creating role' in rec.getMessage() for rec in caplog.records)


def test_unhandled_error_details_hidden_outside_dev(monkeypatch):
    def _boom(self):
        raise RuntimeError('secret internals')
    monkeypatch.setattr('career_explorer.services.CatalogService.list_roles', _boom)
    monkeypatch.setattr(settings, 'ENV', 'production')
    safe_client = TestClient(app, raise_server_exceptions=False)
    r = safe_client.get('/api/roles')
    assert r.status_code == 500
    assert r.json() == {'error': 'Internal server error', 'details': None}
