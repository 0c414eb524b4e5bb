"""
EntityValidationError — структурированная ошибка валидации сущности.
"""

from types import MappingProxyType
from typing import Mapping, Sequence


class EntityValidationError(Exception):
    """
    Ошибка валидации сущности.

    Несёт отображение поле → сообщения, полученное от FieldValidator.
    Сообщения поля хранятся кортежем: ошибка неизменяема целиком.
    """

    def __init__(self, errors: Mapping[str, Sequence[str]], message: str = "Validation Error"):
        if not errors:
            raise ValueError("EntityValidationError requires at least one field error")
        super().__init__(message)
        self._errors = {field: tuple(messages) for field, messages in errors.items()}

    @property
    def errors(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only отображение поле → сообщения."""
        return MappingProxyType(self._errors)

    def to_dict(self) -> dict[str, list[str]]:
        """Копия ошибок для сериализации (контракт fields_errors)."""
        return {field: list(messages) for field, messages in self._errors.items()}
