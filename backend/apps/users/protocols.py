from __future__ import annotations

from typing import List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.dtos import UpdateResult
    from apps.users.models import User, Address


class AddressRepositoryProtocol(Protocol):
    def create(self, **data) -> "Address": ...

    def delete_by_id(self, pk) -> int: ...


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: int) -> Optional["User"]: ...

    def find_by_email(self, email: str) -> Optional["User"]: ...

    def list(self, **filters) -> List["User"]: ...

    def create(self, **data) -> "User": ...

    def update(self, user_id: int, **fields) -> "UpdateResult": ...

    def delete_by_id(self, pk) -> int: ...


class CredentialServiceProtocol(Protocol):
    def hash_password(self, plaintext: str) -> str: ...

    def verify_password(self, plaintext: str, hashed: str) -> bool: ...

    def generate_jwt(self, user: "User") -> str: ...
