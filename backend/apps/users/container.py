from __future__ import annotations

from apps.auth.container import build_credential_service
from .repositories import UserRepository, AddressRepository
from .services import UserService


def build_user_service() -> UserService:
    return UserService(
        users=UserRepository(),
        addresses=AddressRepository(),
        credentials=build_credential_service(),
    )
