"""
Test configuration and fixtures for Messagely tests.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from messagely.core import accounts
from messagely.core.config import Settings
from messagely.core.db.engine import build_engine, create_tables
from messagely.core.db.tables.base import Base
from messagely.core.errors import NotificationError
from messagely.core.security import hash_password
from messagely.core.tokens import TokenIssuer

TEST_SECRET = "test-secret-key"
TEST_ROUNDS = 4


class RecordingNotifier:
    """Notifier that keeps every message instead of sending it."""

    def __init__(self):
        self.sent = []
        self.closed = False

    def send(self, to_phone, body):
        self.sent.append((to_phone, body))
        return f"SM{len(self.sent):04d}"

    def close(self):
        self.closed = True


class FailingNotifier:
    def send(self, to_phone, body):
        raise NotificationError("provider unavailable")

    def close(self):
        pass


@pytest.fixture
def settings():
    return Settings(
        secret_key=TEST_SECRET,
        database_url="sqlite://",
        bcrypt_work_factor=TEST_ROUNDS,
        expose_recovery_code=True,
        log_to_file=False,
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def token_issuer():
    return TokenIssuer(TEST_SECRET)


@pytest.fixture(scope="function")
def db_session():
    """Create an isolated test database session for each test."""
    engine = build_engine("sqlite://")
    create_tables(engine)

    Session = sessionmaker(bind=engine)
    session = Session()

    yield session

    session.close()
    Base.metadata.drop_all(engine)


@pytest.fixture
def client_factory(settings, notifier):
    """Factory to create test clients with a specific db session."""
    from messagely.app import create_app
    from messagely.core.db.session import get_db

    apps = []

    def create_client(session, token=None, app_settings=None, app_notifier=None):
        app = create_app(app_settings or settings, notifier=app_notifier or notifier)

        def override_get_db():
            yield session

        app.dependency_overrides[get_db] = override_get_db
        apps.append(app)

        client = TestClient(app)
        if token:
            client.headers["Authorization"] = f"Bearer {token}"
        return client

    yield create_client

    for app in apps:
        app.dependency_overrides.clear()


def make_user(session, username, password="password", phone="+15551234567"):
    accounts.register(
        session,
        username,
        hash_password(password, rounds=TEST_ROUNDS),
        username.capitalize(),
        "Tester",
        phone,
    )


@pytest.fixture
def test_user_data(db_session, token_issuer):
    """Create a test user and return their credentials."""
    make_user(db_session, "testuser", password="secret-pw", phone="+15550000001")
    return {
        "username": "testuser",
        "password": "secret-pw",
        "phone": "+15550000001",
        "token": token_issuer.issue("testuser"),
    }


@pytest.fixture
def other_user_data(db_session, token_issuer):
    make_user(db_session, "otheruser", password="other-pw", phone="+15550000002")
    return {
        "username": "otheruser",
        "password": "other-pw",
        "phone": "+15550000002",
        "token": token_issuer.issue("otheruser"),
    }


@pytest.fixture
def failing_notifier():
    return FailingNotifier()


@pytest.fixture
def user_factory(db_session, token_issuer):
    """Create extra users on demand; returns their token."""

    def create(username, password="password", phone="+15551234567"):
        make_user(db_session, username, password=password, phone=phone)
        return token_issuer.issue(username)

    return create
