from typing import Any, Generic, List, Optional, Type, TypeVar

from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM gateway; subclasses narrow ``_base_queryset`` for eager loading."""

    def __init__(self, model: Type[T]):
        self.model = model

    def _base_queryset(self) -> models.QuerySet:
        return self.model.objects.all()

    def get(self, **filters) -> Optional[T]:
        return self._base_queryset().filter(**filters).first()

    def list(self, **filters) -> List[T]:
        return list(self._base_queryset().filter(**filters).order_by('pk'))

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def update_by_id(self, pk: Any, **data) -> int:
        # Single UPDATE statement; no model signals, no existence check.
        return self.model.objects.filter(pk=pk).update(**data)

    def delete_by_id(self, pk: Any) -> int:
        deleted, _ = self.model.objects.filter(pk=pk).delete()
        return deleted
