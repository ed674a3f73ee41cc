from __future__ import annotations

from .services import CredentialService


def build_credential_service() -> CredentialService:
    return CredentialService()
