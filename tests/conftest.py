import os
import tempfile

# Settings and the engine are created at import time, so the environment
# must point at a throwaway database before anything from xconfess is imported.
_db_dir = tempfile.mkdtemp(prefix="xconfess-tests-")
os.environ["DB_DRIVER_NAME"] = "sqlite"
os.environ["DB_DATABASE_NAME"] = os.path.join(_db_dir, "test.db")
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ALGORITHM"] = "HS256"
os.environ["INIT_MODE"] = "test"
os.environ.pop("MAIL_HOST", None)

import time

import pytest
from jose import jwt

from xconfess.database.config.config import settings
from xconfess.database.config.connection_engine import connection_engine, metadata
from xconfess.database.entities import AnonymousConfession, Reaction, User
from xconfess.database.helpers.transactionManagement import SessionFactory
from xconfess.notifications.base import ReactionNotifier
from xconfess.notifications.email_service import EmailDeliveryError


class RecordingNotifier(ReactionNotifier):
    def __init__(self):
        self.calls = []

    def send_reaction_notification(self, to_email, username, reactor_name, content_preview, emoji):
        self.calls.append((to_email, username, reactor_name, content_preview, emoji))


class FailingNotifier(ReactionNotifier):
    def __init__(self):
        self.attempts = 0

    def send_reaction_notification(self, to_email, username, reactor_name, content_preview, emoji):
        self.attempts += 1
        raise EmailDeliveryError("Failed to send email: connection refused")


@pytest.fixture(autouse=True)
def database():
    metadata.create_all(connection_engine)
    yield connection_engine
    metadata.drop_all(connection_engine)


@pytest.fixture
def session():
    with SessionFactory() as session:
        yield session


@pytest.fixture
def make_user():
    def _make_user(username, email=None):
        with SessionFactory(expire_on_commit=False) as session:
            user = User(username=username, password="not-a-real-hash", email=email)
            session.add(user)
            session.commit()
            return user

    return _make_user


@pytest.fixture
def make_confession():
    def _make_confession(message, author=None):
        with SessionFactory(expire_on_commit=False) as session:
            confession = AnonymousConfession(message=message, user_id=author.id if author else None)
            session.add(confession)
            session.commit()
            return confession

    return _make_confession


@pytest.fixture
def stored_reactions():
    def _stored_reactions():
        with SessionFactory() as session:
            rows = session.query(Reaction).order_by(Reaction.created_at).all()
            return [(r.id, r.emoji, r.confession_id, r.user_id) for r in rows]

    return _stored_reactions


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    return FailingNotifier()


@pytest.fixture
def issue_token():
    """Sign a token the way the identity service does."""
    def _issue_token(subject, expires_in=3600):
        claims = {"sub": subject, "exp": int(time.time()) + expires_in}
        return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    return _issue_token
