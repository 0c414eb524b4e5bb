"""
Правила валидации Category

name        — обязательное, строка, не длиннее NAME_MAX_LENGTH
description — опциональное, строка
is_active   — опциональное, boolean
"""

from dataclasses import dataclass
from typing import Final

from src.shared.domain.validators import (
    FieldRules,
    FieldValidator,
    RuleSet,
    is_boolean,
    is_not_empty,
    is_string,
    max_length,
)

# Максимальная длина имени категории
NAME_MAX_LENGTH: Final[int] = 255


@dataclass(frozen=True)
class CategoryValidatorConfig:
    """Конфигурация правил Category."""

    name_max_length: int = NAME_MAX_LENGTH


def build_category_rules(config: CategoryValidatorConfig) -> RuleSet:
    return {
        "name": FieldRules(
            rules=(is_not_empty(), is_string(), max_length(config.name_max_length)),
        ),
        "description": FieldRules(rules=(is_string(),), optional=True),
        "is_active": FieldRules(rules=(is_boolean(),), optional=True),
    }


_DEFAULT_RULES: Final[RuleSet] = build_category_rules(CategoryValidatorConfig())


class CategoryValidator(FieldValidator):
    """Валидатор полей Category."""

    def __init__(self, config: CategoryValidatorConfig | None = None):
        rules = _DEFAULT_RULES if config is None else build_category_rules(config)
        super().__init__(rules)
