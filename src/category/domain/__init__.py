"""
Доменная модель Category.
"""

from src.category.domain.category import Category
from src.category.domain.category_validator import (
    NAME_MAX_LENGTH,
    CategoryValidator,
    CategoryValidatorConfig,
    build_category_rules,
)

__all__ = [
    "Category",
    "CategoryValidator",
    "CategoryValidatorConfig",
    "build_category_rules",
    "NAME_MAX_LENGTH",
]
