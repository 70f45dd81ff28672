import os

# precisa vir antes de qualquer import do pacote (settings é lido no import)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_URL", "http://localhost:3000")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskapi.api.deps import get_db
from taskapi.db.base import Base
from taskapi.main import api


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    api.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(api)
    finally:
        api.dependency_overrides.clear()


@pytest.fixture
def sent_mail(monkeypatch):
    """Capture outgoing mail instead of talking to an SMTP server."""
    outbox = []

    def _fake_send(to, subject, text, html=None):
        outbox.append({"to": to, "subject": subject, "text": text, "html": html})
        return True

    monkeypatch.setattr("taskapi.services.mailer.send_mail", _fake_send)
    return outbox


def register_user(client, email="alice@mailbox.org", password="secret123", first_name="Alice", last_name="Smith"):
    resp = client.post(
        "/auth/register",
        json={"firstName": first_name, "lastName": last_name, "email": email, "password": password},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
