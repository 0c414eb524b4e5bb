"""
Валидация полей: декларативные правила, движок и ошибка сущности.
"""

from src.shared.domain.validators.field_validator import FieldsErrors, FieldValidator
from src.shared.domain.validators.rules import (
    FieldRules,
    Rule,
    RuleSet,
    is_boolean,
    is_not_empty,
    is_string,
    max_length,
)
from src.shared.domain.validators.validation_error import EntityValidationError

__all__ = [
    # Rules
    "Rule",
    "FieldRules",
    "RuleSet",
    "is_not_empty",
    "is_string",
    "max_length",
    "is_boolean",
    # Engine
    "FieldValidator",
    "FieldsErrors",
    # Errors
    "EntityValidationError",
]
