from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from django.db import IntegrityError, transaction

from apps.api.exceptions import ConflictError, NotFoundError, UnauthorizedError
from apps.common import get_logger
from .dtos import LoginResult, UpdateResult, UserDTO, user_to_dto
from .models import User
from .protocols import (
    AddressRepositoryProtocol,
    CredentialServiceProtocol,
    UserRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="users", layer="service")

ADDRESS_FIELDS = ("country", "city", "street", "zip_code")
USER_FIELDS = ("email", "name", "age")
INVALID_CREDENTIALS = "Invalid email or password"
# SQLite reports "users.email", PostgreSQL the "users_email_key" constraint.
EMAIL_UNIQUE_MARKERS = ("users.email", "users_email")


class UserService:
    def __init__(
        self,
        users: UserRepositoryProtocol,
        addresses: AddressRepositoryProtocol,
        credentials: CredentialServiceProtocol,
    ):
        self.users = users
        self.addresses = addresses
        self.credentials = credentials
        self.logger = logger.bind(service="UserService")

    # Creation

    def _insert_user(self, data: Mapping[str, Any]) -> User:
        """Hash, then insert the address before the user that references it."""
        password = self.credentials.hash_password(data["password"])
        address = self.addresses.create(**{k: data[k] for k in ADDRESS_FIELDS})
        return self.users.create(
            **{k: data[k] for k in USER_FIELDS},
            password=password,
            address=address,
        )

    @staticmethod
    def _is_email_taken(exc: IntegrityError) -> bool:
        message = str(exc).lower()
        return any(marker in message for marker in EMAIL_UNIQUE_MARKERS)

    @staticmethod
    def _duplicate_email(email: str) -> ConflictError:
        return ConflictError(
            f"{email} is already created user. Create another user.",
            details={"email": email},
        )

    def create_user(self, data: Dict[str, Any]) -> UserDTO:
        email = data["email"]
        self.logger.info("Creating user", email=email)
        try:
            with transaction.atomic():
                user = self._insert_user(data)
        except IntegrityError as exc:
            if not self._is_email_taken(exc):
                self.logger.exception("User creation failed", email=email)
                raise
            self.logger.warning("User creation rejected: email taken", email=email)
            raise self._duplicate_email(email) from exc
        self.logger.info("User created", user_id=user.id, address_id=user.address.id)
        return user_to_dto(user)

    def create_many_users(self, users: Iterable[Dict[str, Any]]) -> List[UserDTO]:
        batch = list(users)
        self.logger.info("Creating users in batch", count=len(batch))
        created: List[User] = []
        current = None
        try:
            with transaction.atomic():
                for current in batch:
                    created.append(self._insert_user(current))
        except IntegrityError as exc:
            if not self._is_email_taken(exc):
                self.logger.exception(
                    "Batch creation rolled back", position=len(created), count=len(batch)
                )
                raise
            email = current.get("email") if current else None
            self.logger.warning(
                "Batch creation rolled back: email taken",
                email=email,
                position=len(created),
            )
            raise self._duplicate_email(email) from exc
        except Exception:
            self.logger.exception(
                "Batch creation rolled back", position=len(created), count=len(batch)
            )
            raise
        self.logger.info("Batch creation committed", count=len(created))
        return [user_to_dto(u) for u in created]

    # Authentication

    def authenticate(self, email: str, password: str) -> User:
        user = self.users.find_by_email(email)
        if user is None or not self.credentials.verify_password(password, user.password):
            self.logger.warning("Login rejected", email=email)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return user

    def login(self, user: User) -> LoginResult:
        """Issue a token for an already verified user."""
        access_token = self.credentials.generate_jwt(user)
        self.logger.info("User logged in", user_id=user.id)
        return LoginResult(access_token=access_token)

    # Lookup

    def find_all(self) -> List[UserDTO]:
        self.logger.debug("Listing users")
        return [user_to_dto(u) for u in self.users.list()]

    def _get_user(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            self.logger.info("User not found", user_id=user_id)
            raise NotFoundError(
                f"there is no user with ID {user_id}", details={"id": str(user_id)}
            )
        return user

    def find_user_by_id(self, user_id: int) -> UserDTO:
        self.logger.debug("Fetching user", user_id=user_id)
        return user_to_dto(self._get_user(user_id))

    def find_user_by_email(self, email: str) -> UserDTO:
        self.logger.debug("Fetching user by email", email=email)
        user = self.users.find_by_email(email)
        if user is None:
            self.logger.info("User not found", email=email)
            raise NotFoundError(
                f"there is no user with email->({email})", details={"email": email}
            )
        return user_to_dto(user)

    # Update / delete

    def update_user_by_id(self, user_id: int, fields: Dict[str, Any]) -> UpdateResult:
        changes = dict(fields)
        self.logger.info("Updating user", user_id=user_id, fields=sorted(changes))
        if changes.get("password") is not None:
            changes["password"] = self.credentials.hash_password(changes["password"])
        try:
            with transaction.atomic():
                result = self.users.update(user_id, **changes)
        except IntegrityError as exc:
            email = changes.get("email")
            if email is None or not self._is_email_taken(exc):
                self.logger.exception("User update failed", user_id=user_id)
                raise
            self.logger.warning("User update rejected: email taken", user_id=user_id, email=email)
            raise self._duplicate_email(email) from exc
        self.logger.info("User updated", user_id=user_id, affected=result.affected)
        return result

    def remove_user_by_id(self, user_id: int) -> None:
        user = self._get_user(user_id)
        address_id = user.address.id
        self.logger.info("Deleting user", user_id=user_id, address_id=address_id)
        # The user row holds the foreign key, so it goes first.
        with transaction.atomic():
            self.users.delete_by_id(user_id)
            removed = self.addresses.delete_by_id(address_id)
        if not removed:
            self.logger.warning(
                "Owned address was already gone", user_id=user_id, address_id=address_id
            )
        self.logger.info("User deleted", user_id=user_id)
