from __future__ import annotations

from typing import Optional

from django.contrib.auth.hashers import check_password, make_password
from rest_framework_simplejwt.tokens import AccessToken

from apps.common import get_logger

logger = get_logger(__name__).bind(component="auth", service="CredentialService")


class CredentialService:
    """Password hashing and JWT issuance for the users app.

    Hashing goes through Django's configured ``PASSWORD_HASHERS`` and tokens are
    simplejwt access tokens signed with ``SIMPLE_JWT["SIGNING_KEY"]``, so the
    tokens issued here are accepted by ``JWTAuthentication`` on every endpoint.
    """

    def __init__(self, hasher: Optional[str] = None):
        self.hasher = hasher
        self.logger = logger

    def hash_password(self, plaintext: str) -> str:
        if plaintext is None:
            raise ValueError("password must not be None")
        return make_password(plaintext, hasher=self.hasher or "default")

    def verify_password(self, plaintext: str, hashed: str) -> bool:
        if not plaintext or not hashed:
            return False
        return check_password(plaintext, hashed)

    def generate_jwt(self, user) -> str:
        token = AccessToken.for_user(user)
        self.logger.debug("Issued access token", user_id=user.id)
        return str(token)
