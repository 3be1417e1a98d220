import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from career_explorer.main import app

client = TestClient(app)
HTML = {'Accept': 'text/html'}


@pytest.fixture
def role():
    r = client.post('/api/roles', json={
        'name': 'UX/UI Designer',
        'short_description': 'Designs <interfaces> & experiences.',
        'long_description': 'Researches users and designs interfaces.',
        'responsibilities': ['Run usability tests'],
        'skills': [],
    })
    assert r.status_code == 201
    role = r.json()['role']
    for title, difficulty, kind in (
        ('Laws of UX', 'Beginner', 'Article'),
        ('Figma Tutorial', 'Beginner', 'Video'),
        ('Design Systems', 'Advanced', 'Course'),
    ):
        r = client.post('/api/resources', json={
            'role_id': role['id'],
            'title': title,
            'url': 'https://example.com/?a=1&b=2',
            'resource_type': kind,
            'difficulty': difficulty,
        })
        assert r.status_code == 201
    return role


def test_landing_page_lists_role_cards(role):
    r = client.get('/', headers=HTML)
    assert r.status_code == 200
    assert r.headers['content-type'].startswith('text/html')
    page = r.text
    assert '<h1>Career Path Explorer</h1>' in page
    assert f'href="/roles/{role["id"]}"' in page
    assert 'UX/UI Designer' in page
    # stored text is escaped
    assert 'Designs &lt;interfaces&gt; &amp; experiences.' in page
    assert '<interfaces>' not in page


def test_landing_page_without_roles():
    r = client.get('/')
    assert r.status_code == 200
    assert 'No roles available yet' in r.text


def test_landing_page_database_error(monkeypatch):
    def _boom(self):
        raise OperationalError('SELECT', {}, Exception('down'))
    monkeypatch.setattr('career_explorer.repositories.RoleRepository.list_all', _boom)
    r = client.get('/')
    assert r.status_code == 500
    assert 'Error: Failed to load roles. Please try again later.' in r.text


def test_role_detail_page(role):
    r = client.get(f'/roles/{role["id"]}')
    assert r.status_code == 200
    page = r.text
    assert '<h1>UX/UI Designer</h1>' in page
    assert 'About this Role' in page
    assert 'Researches users and designs interfaces.' in page
    assert '<li>Run usability tests</li>' in page
    assert 'No skills listed' in page
    assert page.count('class="resource-item"') == 3
    assert 'target="_blank" rel="noopener noreferrer"' in page
    assert 'href="https://example.com/?a=1&amp;b=2"' in page
    assert 'difficulty-badge difficulty-advanced' in page
    assert '<option value="All" selected>All</option>' in page
    assert 'href="/"' in page


def test_role_detail_page_filters_by_difficulty(role):
    r = client.get(f'/roles/{role["id"]}', params={'difficulty': 'Beginner'})
    assert r.status_code == 200
    assert r.text.count('class="resource-item"') == 2
    assert 'Design Systems' not in r.text
    assert '<option value="Beginner" selected>Beginner</option>' in r.text


def test_role_detail_page_empty_filter_result(role):
    r = client.get(f'/roles/{role["id"]}', params={'difficulty': 'Intermediate'})
    assert 'No resources available' in r.text


def test_role_detail_page_unknown_filter_shows_all(role):
    r = client.get(f'/roles/{role["id"]}', params={'difficulty': 'Expert'})
    assert r.status_code == 200
    assert r.text.count('class="resource-item"') == 3


def test_role_detail_page_invalid_id():
    r = client.get('/roles/abc')
    assert r.status_code == 400
    assert 'Error: Invalid role ID' in r.text
    assert 'Back to Roles' in r.text


def test_role_detail_page_unknown_role():
    r = client.get('/roles/123')
    assert r.status_code == 404
    assert 'Error: Role not found' in r.text


def test_unknown_page_renders_not_found():
    r = client.get('/some/unknown/page', headers=HTML)
    assert r.status_code == 404
    assert '404 - Page Not Found' in r.text
    assert 'Go to Home' in r.text


def test_unsupported_method_on_page_renders_not_found(role):
    r = client.post(f'/roles/{role["id"]}', headers=HTML)
    assert r.status_code == 404
    assert '404 - Page Not Found' in r.text


def test_stylesheet_is_served():
    r = client.get('/static/styles.css')
    assert r.status_code == 200
    assert '.role-card' in r.text
