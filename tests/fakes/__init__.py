"""Fake implementations for testing."""

from tests.fakes.password_hasher_fake import FakePasswordHasher

__all__ = ["FakePasswordHasher"]
