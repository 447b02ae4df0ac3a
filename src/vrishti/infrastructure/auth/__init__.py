"""Authentication infrastructure components.

This module provides password hashing for account registration and login.
"""

from vrishti.infrastructure.auth.password_hasher import (
    hash_password,
    verify_password,
)

__all__ = [
    "hash_password",
    "verify_password",
]
