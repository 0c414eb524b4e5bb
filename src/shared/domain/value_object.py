"""
ValueObject — базовый класс для объектов-значений

Immutable Pydantic модель (frozen=True). Два value object равны тогда и только
тогда, когда они одного конкретного типа и все их поля структурно равны.
Любое "изменение" value object создаёт новый экземпляр.
"""

import json
from typing import Any

from pydantic import BaseModel


class ValueObject(BaseModel):
    """
    Базовый value object.

    Равенство делегируется Pydantic (__eq__ сравнивает тип и поля рекурсивно,
    вложенные модели сравниваются через их собственный __eq__).
    """

    model_config = {"frozen": True}  # Immutable

    def equals(self, other: Any) -> bool:
        """
        Структурное сравнение с другим объектом.

        Args:
            other: Объект для сравнения (может быть None)

        Returns:
            True если other того же типа и все поля равны, иначе False
        """
        if other is None or type(other) is not type(self):
            return False
        return self == other

    def __str__(self) -> str:
        values = self.model_dump(mode="json")
        if len(values) == 1:
            return str(next(iter(values.values())))
        return json.dumps(values)
