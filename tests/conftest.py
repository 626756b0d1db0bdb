import pytest

from app import create_app
from models import db
from utils import auth
from utils.auth import AuthError

USER_ID = 'user1'
VALID_TOKEN = 'valid-token'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app, monkeypatch):
    """Test client whose token check accepts only VALID_TOKEN."""
    def fake_verify_token(token):
        if token == VALID_TOKEN:
            return USER_ID
        raise AuthError('unknown token')

    monkeypatch.setattr(auth, 'verify_token', fake_verify_token)
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'Authorization': f'Bearer {VALID_TOKEN}'}
