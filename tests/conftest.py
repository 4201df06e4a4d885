import pytest

from app import create_app
from extensions import db as _db


@pytest.fixture
def app():
    """Fresh app per test, backed by its own in-memory SQLite database."""
    app = create_app('testing')
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def post_payload():
    def _make(slug='first-post', **overrides):
        payload = {
            'title': 'First Post',
            'slug': slug,
            'excerpt': 'A short summary.',
            'content': 'The full body of the post.',
            'category': 'Python',
            'tags': ['a', 'b'],
            'imageUrl': None,
            'published': True,
            'readTime': 4,
        }
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def contact_payload():
    return {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'subject': 'Hello',
        'message': 'Interested in working together.',
    }
