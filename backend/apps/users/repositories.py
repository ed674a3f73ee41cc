from typing import Optional

from apps.common.repository import GenericRepository
from .dtos import UpdateResult
from .models import User, Address


class AddressRepository(GenericRepository[Address]):
    def __init__(self):
        super().__init__(Address)


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def _base_queryset(self):
        return self.model.objects.select_related("address")

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.get(id=user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.get(email=email)

    def update(self, user_id: int, **fields) -> UpdateResult:
        return UpdateResult(affected=self.update_by_id(user_id, **fields))
