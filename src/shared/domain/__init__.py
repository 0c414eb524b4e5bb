"""
Domain building blocks: value objects, идентификаторы, валидация, Entity.
"""

from src.shared.domain.entity import Entity
from src.shared.domain.validators import EntityValidationError, FieldValidator
from src.shared.domain.value_object import ValueObject
from src.shared.domain.value_objects import InvalidUuidError, Uuid

__all__ = [
    "ValueObject",
    "Uuid",
    "InvalidUuidError",
    "FieldValidator",
    "EntityValidationError",
    "Entity",
]
