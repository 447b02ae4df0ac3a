"""Credential hashing for farmer and company accounts.

Passwords are stored as Argon2id digests. The plaintext never reaches the
store and is only ever checked against the stored digest.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Return the Argon2id digest of a password.

    Each call uses a fresh salt, so hashing the same password twice gives
    two different digests.

    Example:
        >>> digest = hash_password("rice-husk-2024")
        >>> digest.startswith("$argon2id$")
        True
    """
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a login password against a stored digest.

    A stored value that is not an Argon2 digest never matches.

    Returns:
        True on a match, False otherwise.
    """
    try:
        return _hasher.verify(hashed, password)
    except (VerifyMismatchError, InvalidHashError):
        return False
