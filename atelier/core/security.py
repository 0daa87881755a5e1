"""Password hashing and session token primitives.

Passwords are stored as ``base64(salt || sha256(salt || password))`` with a
fresh 16-byte salt per hash. This is a single fast SHA-256 pass, kept for
compatibility with existing stored hashes; it is NOT resistant to offline
brute force at commodity hash rates. A memory-hard KDF (scrypt, argon2)
would be the upgrade path.

Session tokens are 32 random bytes handed to the client once. Only their
SHA-256 digest is persisted, so reading the sessions table never yields a
usable credential.
"""

import base64
import binascii
import hashlib
import secrets

SALT_BYTES = 16
TOKEN_BYTES = 32


def _digest(salt: bytes, password: str) -> bytes:
    return hashlib.sha256(salt + password.encode("utf-8")).digest()


def _constant_time_equals(left: bytes, right: bytes) -> bool:
    """Compare two digests without short-circuiting on the first difference."""
    if len(left) != len(right):
        return False
    result = 0
    for x, y in zip(left, right):
        result |= x ^ y
    return result == 0


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: Plain text password

    Returns:
        Base64 of salt followed by the SHA-256 digest
    """
    salt = secrets.token_bytes(SALT_BYTES)
    return base64.b64encode(salt + _digest(salt, password)).decode("ascii")


def verify_password(password: str, encoded_hash: str) -> bool:
    """Verify a candidate password against a stored hash.

    Malformed stored values (bad base64, wrong length) fail closed and never
    raise.

    Args:
        password: Candidate password from the user
        encoded_hash: Value produced by ``hash_password``

    Returns:
        True only when the recomputed digest matches exactly
    """
    try:
        stored = base64.b64decode(encoded_hash, validate=True)
    except (binascii.Error, ValueError, TypeError):
        return False

    if len(stored) <= SALT_BYTES:
        return False

    salt, expected = stored[:SALT_BYTES], stored[SALT_BYTES:]
    return _constant_time_equals(_digest(salt, password), expected)


def generate_session_token() -> str:
    """Generate an unguessable bearer token for a new session."""
    return base64.b64encode(secrets.token_bytes(TOKEN_BYTES)).decode("ascii")


def hash_token(token: str) -> str:
    """Deterministic one-way lookup key for a session token."""
    return base64.b64encode(hashlib.sha256(token.encode("utf-8")).digest()).decode("ascii")
