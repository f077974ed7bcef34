"""Integration test fixtures.

Provides a FastAPI test client wired to the real application, with the
Argon2 hasher swapped for one using minimal cost parameters.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from phc_codec.infrastructure.config.settings import get_settings
from phc_codec.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from phc_codec.main import app
from phc_codec.presentation.dependencies import get_password_hasher


@pytest.fixture
def client(argon2_hasher: Argon2PasswordHasher) -> Generator[TestClient]:
    """
    Create a FastAPI test client.

    This client uses the real application and the real Argon2 hasher, only
    cheaper to run.
    """
    app.dependency_overrides[get_password_hasher] = lambda: argon2_hasher

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def production_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the request handlers with production error reporting."""
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.delenv("EXPOSE_ERROR_DETAILS", raising=False)
    get_settings.cache_clear()
