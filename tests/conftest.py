"""
Pytest configuration and fixtures for testing the Translation API.
"""

import os
import sys
from datetime import datetime, timedelta

import jwt
import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tribalbridge import create_app, db
from tribalbridge.services.dictionary import DictionaryEngine, DictionaryTable
from tribalbridge.services.providers import AdapterResult

fake = Faker()

TEST_SECRET = 'test-secret-key-for-testing'


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    os.environ['FLASK_ENV'] = 'testing'

    app = create_app('testing', overrides={'JWT_SECRET_KEY': TEST_SECRET})

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        yield db.session
        db.session.rollback()


def make_token(user_id, secret=TEST_SECRET, expires_in=timedelta(hours=1)):
    """Issue a token the way the external auth service does."""
    payload = {
        'user_id': user_id,
        'exp': datetime.utcnow() + expires_in
    }
    return jwt.encode(payload, secret, algorithm='HS256')


@pytest.fixture
def test_user_id():
    return fake.uuid4()


@pytest.fixture
def second_user_id():
    return fake.uuid4()


@pytest.fixture
def auth_headers(test_user_id):
    """Get authentication headers for test user."""
    return {'Authorization': f'Bearer {make_token(test_user_id)}'}


@pytest.fixture
def second_auth_headers(second_user_id):
    """Get authentication headers for second user."""
    return {'Authorization': f'Bearer {make_token(second_user_id)}'}


# ---------------------------------------------------------------------------
# Translation pipeline doubles
# ---------------------------------------------------------------------------

FIXTURE_DICTIONARY = {
    'en': {
        'gon': {
            'hello': 'नमस्कार',
            'how': 'कैसे',
            'are': 'हो',
            'you': 'तुम',
            'good': 'अच्छा',
            'morning': 'सुबह',
            'good morning': 'सुप्रभात',
            'water': 'पानी',
        },
    },
}


@pytest.fixture
def dictionary_engine():
    return DictionaryEngine(DictionaryTable(FIXTURE_DICTIONARY))


class FakeAdapter:
    """Adapter double that returns a canned result and records calls."""

    def __init__(self, name, result=None, status='success'):
        self.name = name
        self.result = result
        self.status = status
        self.calls = []

    def attempt(self, request):
        self.calls.append(request)
        if self.status == 'success':
            return AdapterResult.success(self.name, self.result)
        if self.status == 'unavailable':
            return AdapterResult.unavailable(self.name)
        return AdapterResult.failed(self.name, 'boom')


class FakeStore:
    """In-memory stand-in for the persistence gateway."""

    def __init__(self, fail=False):
        self.fail = fail
        self.saved = []

    def save(self, request, result):
        if self.fail:
            from tribalbridge.services.errors import PersistenceError
            raise PersistenceError('database is down')
        self.saved.append((request, result))
        return len(self.saved)
