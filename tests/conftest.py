"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakePasswordHasher) for service tests
- Use a real Argon2 hasher with minimal cost where the integration matters
- Tests are isolated (each test gets fresh objects)
"""

import pytest

from phc_codec.application.services.password_hash_service import PasswordHashService
from phc_codec.domain.entities.params import ParamList
from phc_codec.domain.entities.password_hash import PasswordHash
from phc_codec.infrastructure.config.settings import get_settings
from phc_codec.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.vectors import EXAMPLE_HASH, EXAMPLE_SALT


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """
    Provide a FakePasswordHasher for tests.

    This fake hasher is fast and predictable, making tests easier to write.
    """
    return FakePasswordHasher()


@pytest.fixture
def argon2_hasher() -> Argon2PasswordHasher:
    """Real Argon2id hasher with the lowest costs argon2 accepts."""
    return Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def example_params() -> ParamList:
    return ParamList([("a", 1), ("b", 2), ("c", 3)])


@pytest.fixture
def example_hash(example_params: ParamList) -> PasswordHash:
    """Fully populated argon2d hash: "$argon2d$a=1,b=2,c=3$<salt>$<hash>"."""
    return PasswordHash(
        ident="argon2d",
        params=example_params,
        salt=EXAMPLE_SALT,
        hash=EXAMPLE_HASH,
    )


@pytest.fixture
def password_hash_service(fake_password_hasher: FakePasswordHasher) -> PasswordHashService:
    """Service wired with the fake hasher only."""
    return PasswordHashService(hashers=[fake_password_hasher])
