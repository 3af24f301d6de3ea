import os

# Must be set before checkout_service.database is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_checkout.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("EMAIL_USER", "shop@example.com")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from checkout_service.main import app as fastapi_app
from checkout_service.database import Base
from checkout_service import config
import checkout_service.auth
import checkout_service.routes

SQLALCHEMY_DATABASE_URL = "sqlite:///./test_temp.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={
                       "check_same_thread": False})
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine)


class FakeGateway:
    """Records create_session calls and returns a canned session."""

    def __init__(self, session_id="cs_test_123", url="https://checkout.stripe.test/c/pay/cs_test_123"):
        self.session_id = session_id
        self.url = url
        self.calls = []
        self.error = None

    def create_session(self, line_items, success_url, cancel_url, customer_email):
        self.calls.append({
            "line_items": line_items,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "customer_email": customer_email,
        })
        if self.error:
            raise self.error
        return {"id": self.session_id, "url": self.url}


class FakeMailer:
    """
    Records sent emails. ``attempts`` lists every recipient tried.
    Set ``error`` to make sends fail, only for the addresses in ``fail_for`` when it is non-empty.
    """

    def __init__(self):
        self.sent = []
        self.attempts = []
        self.error = None
        self.fail_for = set()

    def send(self, from_addr, to, subject, body):
        self.attempts.append(to)
        if self.error and (not self.fail_for or to in self.fail_for):
            raise self.error
        self.sent.append({"from": from_addr, "to": to, "subject": subject, "body": body})
        return {"to": to, "subject": subject, "refused": {}}


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(autouse=True)
def shop_mailbox(monkeypatch):
    monkeypatch.setattr(config, "EMAIL_USER", "shop@example.com")
    monkeypatch.setattr(config, "SHOP_NAME", "Test Boutique")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(monkeypatch, gateway, mailer):
    monkeypatch.setattr("checkout_service.database.SessionLocal", TestingSessionLocal)

    fastapi_app.dependency_overrides[checkout_service.auth.verify_token] = lambda: "user-42"
    fastapi_app.dependency_overrides[checkout_service.routes.get_gateway] = lambda: gateway
    fastapi_app.dependency_overrides[checkout_service.routes.get_mailer] = lambda: mailer

    with TestClient(fastapi_app) as c:
        yield c

    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def checkout_payload():
    return {
        "items": [{"name": "Dress", "variant": "Red", "price": 49.99, "quantity": 2}],
        "customerInfo": {
            "name": "Jane",
            "email": "jane@example.com",
            "phone": "555-1234",
            "address": "1 Main St",
        },
    }
