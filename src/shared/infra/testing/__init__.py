"""
Тестовые утилиты для доменных тестов.
"""

from src.shared.infra.testing.expect_helpers import (
    ValidatorCase,
    assert_contains_error_messages,
    contains_error_messages,
)

__all__ = [
    "ValidatorCase",
    "assert_contains_error_messages",
    "contains_error_messages",
]
