"""
Category — сущность категории

Пример самовалидирующейся сущности:
- create()               — дефолты + валидация
- Category(...)          — дефолты без валидации (гидрация)
- change_name / change_description — изменение + валидация
- activate / deactivate  — без валидации
"""

from datetime import datetime, timezone
from typing import Any

from src.category.domain.category_validator import CategoryValidator
from src.shared.domain.entity import Entity
from src.shared.domain.value_objects import Uuid


class Category(Entity):
    """
    Категория.

    Дефолты: category_id — новый Uuid, description — None,
    is_active — True, created_at — текущее время (UTC).
    """

    def __init__(
        self,
        name: Any,
        category_id: Uuid | None = None,
        description: Any = None,
        is_active: Any = None,
        created_at: datetime | None = None,
    ):
        super().__init__()
        self.category_id = category_id if category_id is not None else Uuid()
        self.name = name
        self.description = description
        self.is_active = is_active if is_active is not None else True
        self.created_at = created_at if created_at is not None else datetime.now(timezone.utc)

    @classmethod
    def create(
        cls,
        name: Any,
        category_id: Uuid | None = None,
        description: Any = None,
        is_active: Any = None,
        created_at: datetime | None = None,
    ) -> "Category":
        """
        Фабрика категории с валидацией.

        Raises:
            EntityValidationError: Если поля нарушают правила Category
        """
        category = cls(
            name=name,
            category_id=category_id,
            description=description,
            is_active=is_active,
            created_at=created_at,
        )
        cls.validate(category)
        return category

    @classmethod
    def make_validator(cls) -> CategoryValidator:
        return CategoryValidator()

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    def change_name(self, name: Any) -> None:
        self.name = name
        self.validate(self)

    def change_description(self, description: Any) -> None:
        self.description = description
        self.validate(self)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": str(self.category_id),
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
        }
