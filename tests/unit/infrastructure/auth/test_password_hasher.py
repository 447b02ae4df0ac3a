"""Unit tests for password hashing utilities."""

from vrishti.infrastructure.auth.password_hasher import hash_password, verify_password


class TestHashPassword:
    """Tests for hash_password function."""

    def test_hash_password_returns_argon2_hash(self):
        hashed = hash_password("rice-husk-2024")

        assert hashed.startswith("$argon2id$")
        assert "rice-husk-2024" not in hashed

    def test_hash_password_different_for_same_input(self):
        """Hashing the same password twice produces different hashes (salt)."""
        assert hash_password("same") != hash_password("same")


class TestVerifyPassword:
    """Tests for verify_password function."""

    def test_verify_password_correct(self):
        hashed = hash_password("P@ssw0rd!#$%")

        assert verify_password("P@ssw0rd!#$%", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("correct")

        assert verify_password("wrong", hashed) is False

    def test_verify_password_against_non_argon2_value(self):
        """A digest from another scheme never verifies."""
        bcrypt_digest = "$2b$10$N9qo8uLOickgx2ZMRZoMyeIjZAgcfl7p92ldGxad68LJZdL17lhWy"

        assert verify_password("anything", bcrypt_digest) is False
