"""
FieldValidator — генерический движок валидации полей

Интерпретирует таблицу правил (RuleSet) над произвольными данными:
dict (поиск по ключу) или объектом (поиск по атрибуту).
Только сообщает о нарушениях (bool + errors), никогда не бросает исключений
из-за невалидных данных — эскалация является задачей Entity.
"""

import logging
from typing import Any, Generic, Mapping, TypeVar

from src.shared.domain.validators.rules import RuleSet

logger = logging.getLogger(__name__)

PropsT = TypeVar("PropsT")

FieldsErrors = dict[str, list[str]]


def read_field(data: Any, field: str) -> Any:
    """Значение поля из mapping или объекта; отсутствующее поле → None."""
    if isinstance(data, Mapping):
        return data.get(field)
    return getattr(data, field, None)


class FieldValidator(Generic[PropsT]):
    """
    Валидатор полей по декларативной таблице правил.

    Состояние последнего прогона:
    - errors: поле → список сообщений (None если прогон валиден)
    - validated_data: данные валидного прогона (None иначе)
    - data: исходные данные последнего прогона
    """

    def __init__(self, rules: RuleSet):
        self.rules = rules
        self.errors: FieldsErrors | None = None
        self.validated_data: PropsT | None = None
        self.data: PropsT | None = None

    def validate(self, data: PropsT) -> bool:
        """
        Проверка всех правил всех объявленных полей.

        Args:
            data: Данные для проверки (dict или объект)

        Returns:
            True если нарушений нет, иначе False
        """
        self.data = data
        self.errors = None
        self.validated_data = None

        errors: FieldsErrors = {}
        for field, field_rules in self.rules.items():
            messages = field_rules.violations(field, read_field(data, field))
            if messages:
                errors[field] = messages

        if errors:
            logger.debug("Validation failed for fields: %s", ", ".join(errors))
            self.errors = errors
            return False

        self.validated_data = data
        return True
