from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from genie.auth.service import AuthService
from genie.models.user import GoogleIdentity
from genie.services.user_store import UserStore
from genie.utils.config import AuthSettings, LoggingSettings, Settings, StorageSettings
from genie.utils.exceptions import GoogleExchangeError

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeGoogleClient:
    """Maps access tokens to identities instead of calling Google."""

    def __init__(self, identities: Dict[str, GoogleIdentity] = None):
        self.identities = dict(identities or {})

    def fetch_identity(self, access_token: str) -> GoogleIdentity:
        if access_token not in self.identities:
            raise GoogleExchangeError()
        return self.identities[access_token]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        auth=AuthSettings(jwt_secret=TEST_JWT_SECRET, bcrypt_rounds=4),
        storage=StorageSettings(data_dir=str(tmp_path)),
        logging=LoggingSettings(level="WARNING"),
    )


@pytest.fixture
def google_client() -> FakeGoogleClient:
    return FakeGoogleClient(
        {
            "new-gmail": GoogleIdentity(email="jane.doe@gmail.com", name="Jane Doe", picture="https://pics/jane"),
            "short-gmail": GoogleIdentity(email="ab@gmail.com", name="AB"),
            "yahoo": GoogleIdentity(email="someone@yahoo.com", name="Someone"),
            "no-email": GoogleIdentity(name="Nobody"),
        }
    )


@pytest.fixture
def user_store(settings: Settings) -> UserStore:
    return UserStore(settings.data_dir)


@pytest.fixture
def auth_service(settings: Settings, user_store: UserStore, google_client) -> AuthService:
    return AuthService(settings.auth, user_store, google_client)


@pytest.fixture
def client(settings: Settings, google_client) -> TestClient:
    from genie_web.main import create_app

    return TestClient(create_app(settings, google_client=google_client))


def signup_and_login(client: TestClient, email: str, password: str = "password123") -> dict:
    res = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert res.status_code == 201, res.text
    res = client.post("/api/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
