# Standard library imports
import base64
import hashlib
import hmac
import secrets

# External package imports
import bcrypt


def generate_salt() -> str:
    """
    Generate a random bcrypt salt

    Returns:
        Salt string, stored next to the password hash
    """
    return bcrypt.gensalt(rounds=12).decode("utf-8")


def _prehash(plain_password: str) -> bytes:
    # bcrypt accepts at most 72 bytes; the encoded digest is 44
    return base64.b64encode(hashlib.sha256(plain_password.encode("utf-8")).digest())


def hash_password(plain_password: str, salt: str) -> str:
    """
    Hash a plain password with the given salt using bcrypt

    The password is reduced to a base64 SHA-256 digest first, so passwords
    longer than 72 bytes are hashed over their full length

    Args:
        plain_password: The plain text password to hash
        salt: Salt produced by generate_salt()

    Returns:
        Hashed password string
    """
    hashed = bcrypt.hashpw(_prehash(plain_password), salt.encode("utf-8"))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, salt: str, password_hash: str) -> bool:
    """
    Recompute the hash with the stored salt and compare it to the stored hash

    Args:
        plain_password: The plain text password to verify
        salt: The salt stored for the user
        password_hash: The hash stored for the user

    Returns:
        True if passwords match, False otherwise
    """
    try:
        candidate = hash_password(plain_password, salt)
    except ValueError:
        # Corrupt salt in storage
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), password_hash.encode("utf-8"))


def generate_session_token() -> str:
    """
    Mint an opaque session token

    Returns:
        URL-safe random token (256 bits)
    """
    return secrets.token_urlsafe(32)
