"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

This is where we decide:
- Use Argon2PasswordHasher for new hashes (not bcrypt or scrypt)
- Which alphabet the codec falls back to when a request names none
- Use Settings from environment (not hardcoded config)

All these decisions are isolated here. The application layer doesn't know
or care about these choices - it only knows about interfaces.
"""

from fastapi import Depends

from phc_codec.application.services.password_hash_service import PasswordHashService
from phc_codec.domain.services.password_hasher import IPasswordHasher
from phc_codec.infrastructure.config.settings import Settings, get_settings
from phc_codec.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher

# Module-level singleton (created once, reused throughout app lifecycle)
_password_hasher: IPasswordHasher | None = None


def get_password_hasher(settings: Settings = Depends(get_settings)) -> IPasswordHasher:
    """
    Dependency that provides the password hasher.

    This is a SINGLETON - we create one instance and reuse it.
    Password hashers are stateless and thread-safe, so this is safe.

    Note:
        In tests, this dependency can be overridden with FakePasswordHasher:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = Argon2PasswordHasher(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
            salt_length=settings.salt_length,
        )
    return _password_hasher


def get_password_hash_service(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> PasswordHashService:
    """
    Dependency that provides PasswordHashService.

    Dependency Graph:
        FastAPI endpoint
            → get_password_hash_service()
                → get_password_hasher() → Argon2PasswordHasher → Settings
                → get_settings() (default encoding)
    """
    return PasswordHashService(
        hashers=[password_hasher],
        default_encoding=settings.encoding_preference,
    )
