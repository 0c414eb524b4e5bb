"""
Entity — базовый паттерн самовалидирующейся сущности

Сущность владеет идентификатором (value object) и набором бизнес-полей,
изменяемых только через именованные команды. Каждая команда, меняющая
содержательные поля, заканчивается вызовом validate(); при нарушениях
поднимается EntityValidationError.

Конструктор НЕ валидирует (гидрация из хранилища), валидирует фабрика create().
Валидация — пост-проверка, а не транзакция: при ошибке поле уже перезаписано.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from src.shared.domain.validators import EntityValidationError, FieldValidator
from src.shared.domain.value_object import ValueObject

logger = logging.getLogger(__name__)


class Entity(ABC):
    """
    Базовая сущность.

    validation_count — число проходов validate() для данного экземпляра
    (create и каждая валидируемая команда дают ровно один проход).
    """

    def __init__(self) -> None:
        self.validation_count = 0

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject:
        """Идентификатор сущности."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Сериализация в примитивы."""

    @classmethod
    @abstractmethod
    def make_validator(cls) -> FieldValidator:
        """Валидатор полей для данного вида сущности."""

    @classmethod
    def validate(cls, entity: "Entity") -> None:
        """
        Проход валидации сущности.

        Args:
            entity: Сущность для проверки

        Raises:
            EntityValidationError: Если нарушено хотя бы одно правило
        """
        entity.validation_count += 1
        validator = cls.make_validator()
        if not validator.validate(entity):
            logger.debug(
                "%s validation failed: %s", cls.__name__, ", ".join(validator.errors or {})
            )
            raise EntityValidationError(validator.errors or {})
