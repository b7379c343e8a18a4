"""Shared pytest fixtures for asset tracker tests."""

from json import dumps, loads

import pytest

from django.conf import settings

from assets.client.api import AssetApiClient
from assets.client.controller import AssetController
from assets.factories import AssetFactory, UserFactory

# Plain static storage for tests (no collectstatic manifest)
settings.STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}

SHARED_USERNAME = "tracker"
SHARED_PASSWORD = "s3cret-pass"


class DjangoClientResponse:
    """Enough of ``requests.Response`` for the API client."""

    def __init__(self, response):
        self.status_code = response.status_code
        self.ok = response.status_code < 400
        self.headers = response.headers
        self.text = response.content.decode()

    def json(self):
        return loads(self.text)


class DjangoClientSession:
    """Routes ``requests``-style calls through the Django test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, headers=None, json=None, timeout=None):
        self.calls.append((method, url, json))
        response = self.client.generic(
            method,
            url,
            data=dumps(json) if json is not None else "",
            content_type="application/json",
            headers=headers or {},
        )
        return DjangoClientResponse(response)


# --- User fixtures ---


@pytest.fixture
def password():
    return "testpass123!"


@pytest.fixture
def admin_user(db, password):
    return UserFactory(
        username="admin",
        email="admin@example.com",
        password=password,
        is_staff=True,
        is_superuser=True,
    )


@pytest.fixture
def admin_client(client, admin_user, password):
    client.login(username=admin_user.username, password=password)
    return client


@pytest.fixture
def shared_credentials(settings, db):
    settings.ASSET_TRACKER_USERNAME = SHARED_USERNAME
    settings.ASSET_TRACKER_PASSWORD = SHARED_PASSWORD
    return SHARED_USERNAME, SHARED_PASSWORD


@pytest.fixture
def require_login(settings, shared_credentials):
    settings.ASSETS_API_REQUIRE_LOGIN = True
    return shared_credentials


# --- Asset fixtures ---


@pytest.fixture
def asset(db):
    return AssetFactory(
        name="Laptop A",
        category="Electronics",
        serial_number="SN-001",
        location="HQ",
    )


@pytest.fixture
def assigned_asset(db):
    return AssetFactory(
        name="Projector",
        category="AV",
        serial_number="PJ-7",
        status="assigned",
        assigned_to="Bo",
        location="Room 2",
    )


@pytest.fixture
def maintenance_asset(db):
    return AssetFactory(
        name="Printer",
        category="Electronics",
        status="maintenance",
    )


# --- Client fixtures ---


@pytest.fixture
def client_session(client, db):
    return DjangoClientSession(client)


@pytest.fixture
def api(client_session):
    return AssetApiClient("/api/assets/", session=client_session)


@pytest.fixture
def controller(api):
    return AssetController(api)


@pytest.fixture
def make_controller(client, db):
    """Build controllers that each hold their own snapshot."""

    def make():
        session = DjangoClientSession(client)
        return AssetController(AssetApiClient("/api/assets/", session))

    return make
