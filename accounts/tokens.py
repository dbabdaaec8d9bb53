"""One-time tokens (password reset, email verification) and JWT issuing."""

import hashlib
import secrets

from rest_framework_simplejwt.tokens import AccessToken


def generate_token() -> str:
    """Random token sent to the user; only its hash is persisted."""
    return secrets.token_hex(32)


def hash_token(token: str) -> str:
    # Deterministic so a stored token can be looked up by its hash.
    return hashlib.sha256(str(token).encode('utf-8')).hexdigest()


def issue_access_token(user) -> str:
    """Sign a bearer token carrying the user's id, email and role."""
    token = AccessToken.for_user(user)
    token['email'] = user.email
    token['role'] = user.role
    return str(token)
