"""
Password hashing helpers built on bcrypt.
"""

import bcrypt

BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of the secret
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def get_password_hash(password: str) -> str:
    """Hash a plain text password."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain text password against a stored hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in the store
        return False
