"""
Contract Validation Module

Валидация JSON контрактов, которые получают внешние слои
(например, HTTP обработчик, превращающий ошибки валидации в 422).
"""

from .validators import (
    CategoryContractValidator,
    ContractValidator,
    FieldsErrorsValidator,
    SchemaLoader,
    validate_category,
    validate_fields_errors,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FieldsErrorsValidator",
    "CategoryContractValidator",
    # Functions
    "validate_fields_errors",
    "validate_category",
]
