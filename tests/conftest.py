import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("PAYMENT_SECRET_KEY", "sk_test_123")

from types import SimpleNamespace
from urllib.parse import parse_qs

import httpx
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from aircnc_api.app.api.deps import get_database, get_notification_service, get_payment_service
from aircnc_api.app.core.security import create_access_token
from aircnc_api.app.main import app
from aircnc_api.app.services.payment_service import PaymentService


def _lookup(document, dotted_key):
    value = document
    for part in dotted_key.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value


def _matches(document, query):
    return all(_lookup(document, key) == expected for key, expected in query.items())


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length=None):
        return list(self.documents)


class FakeCollection:
    """In‑memory stand‑in for the handful of collection methods the repositories use."""

    def __init__(self):
        self.documents = []
        self.calls = []

    async def find_one(self, query):
        self.calls.append(("find_one", query))
        for document in self.documents:
            if _matches(document, query):
                return dict(document)
        return None

    def find(self, query):
        self.calls.append(("find", query))
        return FakeCursor(dict(d) for d in self.documents if _matches(d, query))

    async def insert_one(self, document):
        self.calls.append(("insert_one", document))
        stored = dict(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(acknowledged=True, inserted_id=stored["_id"])

    async def update_one(self, query, update, upsert=False):
        self.calls.append(("update_one", query, update))
        fields = update["$set"]
        for document in self.documents:
            if _matches(document, query):
                modified = any(document.get(k) != v for k, v in fields.items())
                document.update(fields)
                return SimpleNamespace(acknowledged=True, matched_count=1, modified_count=int(modified), upserted_id=None)
        if not upsert:
            return SimpleNamespace(acknowledged=True, matched_count=0, modified_count=0, upserted_id=None)
        created = {k: v for k, v in query.items() if "." not in k}
        created.update(fields)
        created.setdefault("_id", ObjectId())
        self.documents.append(created)
        return SimpleNamespace(acknowledged=True, matched_count=0, modified_count=0, upserted_id=created["_id"])

    async def delete_one(self, query):
        self.calls.append(("delete_one", query))
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(acknowledged=True, deleted_count=1)
        return SimpleNamespace(acknowledged=True, deleted_count=0)


class FakeDatabase(dict):
    def __missing__(self, name):
        collection = self[name] = FakeCollection()
        return collection

    @property
    def calls(self):
        return [call for collection in self.values() for call in collection.calls]


class RecordingNotifier:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    async def send(self, subject, html_body, recipient):
        self.sent.append((subject, html_body, recipient))
        if self.fail:
            raise RuntimeError("smtp down")
        return True


class StripeStub:
    """Records payment‑intent requests and answers like Stripe."""

    def __init__(self):
        self.requests = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        self.requests.append((request, form))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "declined"}})
        return httpx.Response(200, json={"id": "pi_1", "client_secret": f"pi_1_secret_{form['amount']}"})


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def stripe_stub():
    return StripeStub()


@pytest.fixture
def payments(stripe_stub):
    return PaymentService(
        secret_key="sk_test_123",
        api_base="https://stripe.test",
        currency="usd",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(stripe_stub)),
    )


@pytest.fixture
def client(database, notifier, payments):
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_notification_service] = lambda: notifier
    app.dependency_overrides[get_payment_service] = lambda: payments
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def auth_header(email="host@example.com", **claims):
    token = create_access_token({"email": email, **claims})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth():
    return auth_header
