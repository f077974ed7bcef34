"""Unit tests for password hashers.

These tests verify both the fake and real password hasher implementations.
The Argon2 hasher runs with the lowest costs argon2 accepts.
"""

import dataclasses

import pytest

from phc_codec.domain.codec.parser import parse_password_hash
from phc_codec.domain.entities.params import ParamList
from phc_codec.domain.entities.password_hash import PasswordHash
from phc_codec.domain.exceptions import InvalidParamException, UnsupportedAlgorithmException
from phc_codec.domain.services.password_hasher import generate_salt
from phc_codec.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from tests.fakes.password_hasher_fake import FakePasswordHasher

pytestmark = pytest.mark.unit


def _low_cost_argon2() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


def test_generate_salt():
    # Act
    first, second = generate_salt(), generate_salt()

    # Assert
    assert len(first) == 16
    assert first != second
    assert len(generate_salt(32)) == 32


class TestFakePasswordHasher:
    """Test the fake password hasher implementation."""

    def test_hash_is_predictable(self):
        # Arrange
        hasher = FakePasswordHasher()

        # Act
        ph = hasher.hash_password_with_salt("mypassword", b"saltsalt")

        # Assert
        assert ph.ident == "fake-sha256"
        assert ph.params.get_decimal("r") == 1
        assert ph.salt == b"saltsalt"
        assert ph.hash == FakePasswordHasher.compute("mypassword", b"saltsalt")
        assert hasher.hashed_passwords == ["mypassword"]

    def test_verify_correct_password(self):
        # Arrange
        hasher = FakePasswordHasher()
        ph = hasher.hash_password("correct_password")

        # Act
        result = hasher.verify_password("correct_password", ph)

        # Assert
        assert result is True

    def test_verify_wrong_password(self):
        hasher = FakePasswordHasher()
        ph = hasher.hash_password("correct_password")

        assert hasher.verify_password("wrong_password", ph) is False

    def test_verify_other_algorithm(self):
        hasher = FakePasswordHasher()

        assert hasher.verify_password("password", PasswordHash(ident="argon2id")) is False

    def test_needs_rehash_on_changed_parameters(self):
        # Arrange
        hasher = FakePasswordHasher()
        ph = hasher.hash_password("password")

        # Act
        old = dataclasses.replace(ph, params=[("r", "2")])

        # Assert
        assert hasher.needs_rehash(ph) is False
        assert hasher.needs_rehash(old) is True

    def test_hash_with_custom_rounds(self):
        # Arrange
        hasher = FakePasswordHasher()

        # Act
        ph = hasher.hash_password_with_params("password", b"saltsalt", ParamList([("r", 3)]))

        # Assert
        assert ph.params.get_decimal("r") == 3
        assert ph.hash == FakePasswordHasher.compute("password", b"saltsalt", 3)
        assert ph.hash != FakePasswordHasher.compute("password", b"saltsalt")
        assert hasher.verify_password("password", ph)
        assert hasher.needs_rehash(ph) is True

    @pytest.mark.parametrize(
        "kwargs,error",
        [
            ({"algorithm": "argon2id"}, UnsupportedAlgorithmException),
            ({"version": 1}, UnsupportedAlgorithmException),
            ({"params": ParamList([("x", 1)])}, InvalidParamException),
            ({"params": ParamList([("r", 0)])}, InvalidParamException),
        ],
        ids=["algorithm", "version", "unknown-param", "zero-rounds"],
    )
    def test_customized_rejects(self, kwargs, error):
        with pytest.raises(error):
            FakePasswordHasher().hash_password_customized("password", b"saltsalt", **kwargs)


class TestArgon2PasswordHasher:
    """Test the real Argon2 password hasher implementation."""

    def test_hash_produces_parsed_argon2id(self):
        # Arrange
        hasher = _low_cost_argon2()

        # Act
        ph = hasher.hash_password("mypassword")

        # Assert
        assert ph.ident == "argon2id"
        assert ph.version == 19  # Argon2 version 1.3
        assert ph.params.get_decimal("m") == 8
        assert ph.params.get_decimal("t") == 1
        assert ph.params.get_decimal("p") == 1
        assert ph.salt is not None and len(ph.salt) == 16
        assert ph.hash is not None and len(ph.hash) == 32
        assert str(ph).startswith("$argon2id$v=19$m=8,t=1,p=1$")

    def test_hash_with_given_salt_is_deterministic(self):
        hasher = _low_cost_argon2()

        first = hasher.hash_password_with_salt("password", b"somesalt")
        second = hasher.hash_password_with_salt("password", b"somesalt")

        assert first == second
        assert first.salt == b"somesalt"

    def test_hash_generates_unique_salts(self):
        # Arrange
        hasher = _low_cost_argon2()

        # Act
        hash1 = hasher.hash_password("same_password")
        hash2 = hasher.hash_password("same_password")

        # Assert
        assert hash1 != hash2
        assert hasher.verify_password("same_password", hash1)
        assert hasher.verify_password("same_password", hash2)

    def test_salt_length_setting(self):
        hasher = Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1, salt_length=32)

        assert len(hasher.hash_password("password").salt) == 32

    def test_verify_wrong_password(self):
        hasher = _low_cost_argon2()
        ph = hasher.hash_password("correct_password")

        assert hasher.verify_password("wrong_password", ph) is False

    def test_verify_after_string_round_trip(self):
        # Arrange
        hasher = _low_cost_argon2()
        stored = str(hasher.hash_password("パスワード🔒"))

        # Act
        ph = parse_password_hash(stored)

        # Assert
        assert hasher.verify_password("パスワード🔒", ph)
        assert not hasher.verify_password("パスワード", ph)

    def test_verify_hash_without_costs_returns_false(self):
        """Parses as PHC, but argon2 needs m, t and p."""
        hasher = _low_cost_argon2()
        ph = parse_password_hash("$argon2id$v=19$c29tZXNhbHQ$RdescudvJCsgt3ub+b+dWRWJTmaaJObG")

        assert hasher.verify_password("password", ph) is False

    def test_verify_other_algorithm_returns_false(self):
        hasher = _low_cost_argon2()
        ph = parse_password_hash("$scrypt$epIxT/h6HbbwHaehFnh/bw$7H0vsXlY8UxxyW/BWx/9GuY7jEvGjT71GFd6O4SZND0")

        assert hasher.verify_password("password", ph) is False
        assert hasher.supports(ph) is False

    def test_supports_every_argon2_variant(self):
        hasher = _low_cost_argon2()

        for ident in ("argon2d", "argon2i", "argon2id"):
            assert hasher.supports(PasswordHash(ident=ident))

    def test_needs_rehash(self):
        # Arrange
        hasher = _low_cost_argon2()
        stronger = Argon2PasswordHasher(time_cost=2, memory_cost=8, parallelism=1)
        ph = hasher.hash_password("password")

        # Assert
        assert hasher.needs_rehash(ph) is False
        assert stronger.needs_rehash(ph) is True
        assert hasher.needs_rehash(PasswordHash(ident="scrypt")) is True

    def test_hash_with_params_overrides_costs(self):
        # Arrange
        hasher = _low_cost_argon2()

        # Act
        ph = hasher.hash_password_with_params("password", b"somesalt", ParamList([("t", 2)]))

        # Assert
        assert str(ph).startswith("$argon2id$v=19$m=8,t=2,p=1$c29tZXNhbHQ$")
        assert hasher.verify_password("password", ph)
        assert hasher.needs_rehash(ph) is True

    def test_hash_customized_variant(self):
        # Arrange
        hasher = _low_cost_argon2()

        # Act
        ph = hasher.hash_password_customized(
            "password", b"somesalt", algorithm="argon2i", version=19
        )

        # Assert
        assert ph.ident == "argon2i"
        assert ph.version == 19
        assert hasher.verify_password("password", ph)
        assert not hasher.verify_password("wrong", ph)

    def test_hash_customized_leaves_configured_costs(self):
        hasher = _low_cost_argon2()

        hasher.hash_password_with_params("password", b"somesalt", ParamList([("t", 2)]))

        assert hasher.hash_password("password").params.get_decimal("t") == 1

    @pytest.mark.parametrize(
        "kwargs,error",
        [
            ({"algorithm": "scrypt"}, UnsupportedAlgorithmException),
            ({"version": 16}, UnsupportedAlgorithmException),
            ({"params": ParamList([("keyid", "abc")])}, InvalidParamException),
            ({"params": ParamList([("t", 0)])}, InvalidParamException),
            ({"params": ParamList([("m", 4294967295)])}, InvalidParamException),
            # argon2 needs at least 8 KiB of memory per lane
            ({"params": ParamList([("p", 2)])}, InvalidParamException),
        ],
        ids=["algorithm", "version", "unknown-param", "zero-time", "huge-memory", "argon2-rejects"],
    )
    def test_hash_customized_rejects(self, kwargs, error):
        with pytest.raises(error):
            _low_cost_argon2().hash_password_customized("password", b"somesalt", **kwargs)


class TestPasswordHasherInterface:
    """Test that both implementations follow the same interface."""

    @pytest.mark.parametrize(
        "hasher_factory",
        [FakePasswordHasher, _low_cost_argon2],
        ids=["Fake", "Argon2"],
    )
    def test_round_trip(self, hasher_factory):
        """Test hash → serialize → parse → verify round trip works."""
        # Arrange
        hasher = hasher_factory()
        passwords = ["simple", "Complex123!", "with spaces", "🚀emoji", b"raw-bytes"]

        for password in passwords:
            # Act
            ph = parse_password_hash(str(hasher.hash_password(password)))
            is_valid = hasher.verify_password(password, ph)

            # Assert
            assert is_valid, f"Failed to verify {password!r} with {type(hasher).__name__}"
