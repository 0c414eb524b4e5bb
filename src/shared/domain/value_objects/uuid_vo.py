"""
Uuid — value object идентификатора

Оборачивает строку в каноническом формате UUID (8-4-4-4-12, hex, version 1-8,
variant 8/9/a/b). Без аргумента генерирует новый uuid4.
Проверка формата выполняется ровно один раз на каждое конструирование.
"""

import logging
import re
import uuid
from typing import Any, Final

from pydantic import Field, model_validator

from src.shared.domain.value_object import ValueObject

logger = logging.getLogger(__name__)


UUID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)",
    re.IGNORECASE,
)


def is_valid_uuid(value: Any) -> bool:
    """Проверка, что value — строка в каноническом формате UUID."""
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


class InvalidUuidError(Exception):
    """Строка не соответствует каноническому формату UUID."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "ID must be a valid UUID")


class Uuid(ValueObject):
    """
    Идентификатор сущности.

    Uuid()        — новый случайный идентификатор
    Uuid("...")   — проверка и обёртка переданной строки
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    def __init__(self, id: str | None = None, **data: Any):
        if id is not None:
            data["id"] = id
        super().__init__(**data)

    @model_validator(mode="after")
    def check_format(self) -> "Uuid":
        self._validate()
        return self

    def _validate(self) -> None:
        if not is_valid_uuid(self.id):
            logger.debug("Rejected identifier %r", self.id)
            raise InvalidUuidError()
